"""
Core business logic package
이미지 탐색, 로드, 설정, OCR 파이프라인
"""

try:
    from .settings_store import SettingsStore
except ImportError as e:
    raise ImportError("Failed to import SettingsStore from settings_store module. Please ensure 'note_ocr/core/settings_store.py' exists and is error-free.") from e

try:
    from .vault import Vault
except ImportError as e:
    raise ImportError("Failed to import Vault from vault module. Please ensure 'note_ocr/core/vault.py' exists and is error-free.") from e

__all__ = ['SettingsStore', 'Vault']
