# constants/color_constants.py
"""
색상 관련 상수 정의
"""

# ============================================================================
# 기본 색상 팔레트
# ============================================================================
class BaseColors:
    WHITE = "#FFFFFF"
    BLACK = "#000000"

    GRAY_LIGHT = "#D1D5DB"
    GRAY_DARK = "#4B5563"
    GRAY_DARKEST = "#1F2937"


# ============================================================================
# 안건 전용 색상
# ============================================================================
class AgendaColors:
    APPOINTMENT = "#0284C7"     # sky-600
    APPOINTMENT_BORDER = BaseColors.WHITE
    TODAY = "#2563EB"           # blue-600
    NOW_INDICATOR = "#EF4444"   # red-500
    GRID_LINE = BaseColors.GRAY_LIGHT
    LABEL = BaseColors.GRAY_DARK
    HEADING = BaseColors.GRAY_DARKEST

    # 월간/연간 자리 표시 뷰
    MONTH_PLACEHOLDER = "#67E8F9"
    YEAR_PLACEHOLDER = "#D8B4FE"


def get_text_color_for_background(hex_color):
    hex_color = hex_color.lstrip('#')
    r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    luminance = (0.299 * r + 0.587 * g + 0.114 * b)
    return BaseColors.BLACK if luminance > 149 else BaseColors.WHITE
