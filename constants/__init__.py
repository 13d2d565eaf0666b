# constants/__init__.py
"""
상수 패키지 초기화
모든 상수들을 중앙에서 관리하고 쉽게 import할 수 있도록 함
"""

from .ui_constants import WindowSize, Spacing, AgendaLayout
from .color_constants import (
    BaseColors, AgendaColors, get_text_color_for_background
)
from .text_constants import GeneralText, AgendaText, format_text

__all__ = [
    # UI Constants
    'WindowSize', 'Spacing', 'AgendaLayout',

    # Color Constants
    'BaseColors', 'AgendaColors', 'get_text_color_for_background',

    # Text Constants
    'GeneralText', 'AgendaText', 'format_text',
]
