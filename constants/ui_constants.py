# constants/ui_constants.py
"""
UI 관련 상수 정의
Agenda grid sizes and margins in pixels.
"""

# ============================================================================
# 윈도우 크기 관련 상수
# ============================================================================
class WindowSize:
    MIN_WIDTH = 480
    MIN_HEIGHT = 400

    # 확인 팝오버
    POPOVER_WIDTH = 384


# ============================================================================
# 여백 및 간격 상수
# ============================================================================
class Spacing:
    LARGE = 15

    CONTAINER_MARGIN = 10


# ============================================================================
# 안건 그리드 레이아웃 상수
# ============================================================================
class AgendaLayout:
    # 그리드
    TIME_GUTTER_WIDTH = 56      # 시간 라벨 영역
    COLUMN_LEFT_PADDING = 8     # 날짜 열 왼쪽 여백
    HEADER_HEIGHT = 80          # 요일/날짜 헤더 높이

    # 일정 박스
    APPOINTMENT_RADIUS = 4
    APPOINTMENT_PADDING = 4

    # 현재 시간 표시
    NOW_DOT_DIAMETER = 12
    NOW_LINE_WIDTH = 2

    # 날짜 원
    DAY_BADGE_DIAMETER = 44
