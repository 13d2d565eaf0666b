# constants/text_constants.py
"""
UI 텍스트 상수 정의
모든 사용자 인터페이스 문자열을 중앙에서 관리
"""

# ============================================================================
# 일반 UI 텍스트
# ============================================================================
class GeneralText:
    OK = "OK"
    CANCEL = "Cancel"
    SAVE = "Save"


# ============================================================================
# 안건 텍스트
# ============================================================================
class AgendaText:
    APP_TITLE = "Quarter Agenda"
    UNTITLED = "(Untitled)"
    RANGE_SEPARATOR = "to"
    TODAY = "Today"
    PREVIOUS = "-"
    NEXT = "+"
    WEEK_BADGE = "Week {number}"
    NO_BOUND = "No no"

    VIEW_LABELS = {
        "day": "Day",
        "week": "Week",
        "month": "Month",
        "year": "Year",
    }


def format_text(template: str, **kwargs) -> str:
    """텍스트 템플릿 포맷팅"""
    return template.format(**kwargs)
