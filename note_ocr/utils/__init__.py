"""
Utility functions package
로깅, 다국어 텍스트, 실행 환경 유틸리티
"""

from .environment import find_tesseract_cmd
from .logging_utils import setup_logging, log_user_action, get_user_data_path
from .locale_utils import get_system_language, get_ui_text, format_ui_text, UI_TEXT

__all__ = [
    'find_tesseract_cmd',
    'setup_logging',
    'log_user_action',
    'get_user_data_path',
    'get_system_language',
    'get_ui_text',
    'format_ui_text',
    'UI_TEXT'
]
