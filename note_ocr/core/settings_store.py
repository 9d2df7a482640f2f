#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
설정 관리 모듈
기본 이미지 폴더와 OCR 언어 코드를 JSON 파일로 저장/로드합니다.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Union

from note_ocr.core.models import Settings, DEFAULT_IMAGE_FOLDER, DEFAULT_OCR_LANGUAGE


SETTINGS_DIR_NAME = ".note_ocr"
SETTINGS_FILE_NAME = "settings.json"

# 저장 키 → Settings 속성
FIELD_NAMES: Dict[str, str] = {
    'defaultImageFolder': 'default_image_folder',
    'ocrLang': 'ocr_language_code',
}

DEFAULTS: Dict[str, str] = {
    'defaultImageFolder': DEFAULT_IMAGE_FOLDER,
    'ocrLang': DEFAULT_OCR_LANGUAGE,
}

# 빈 값 허용 키 (빈 이미지 폴더 = 볼트 루트)
BLANK_ALLOWED = frozenset({'defaultImageFolder'})


def settings_file_for_vault(vault_root: Path) -> Path:
    return vault_root / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME


def _persisted_key(field: str) -> str:
    """속성 이름 또는 저장 키를 저장 키로 변환"""
    if field in FIELD_NAMES:
        return field
    for key, attr in FIELD_NAMES.items():
        if attr == field:
            return key
    raise KeyError(f"Unknown setting: {field!r}")


class SettingsStore:
    """설정 저장소

    저장된 값이 기본값보다 우선하며, set() 호출마다 즉시 파일에 저장합니다.
    """

    def __init__(self, settings_file: Union[str, Path]) -> None:
        self.settings_file: Path = Path(settings_file)
        self._settings: Settings = Settings()
        self.load()

    @property
    def settings(self) -> Settings:
        return replace(self._settings)

    def _read_persisted(self) -> Dict[str, Any]:
        """설정 파일 읽기 (없거나 손상되면 빈 dict)"""
        if not self.settings_file.exists():
            logging.info("Settings file not found, using defaults: %s", self.settings_file)
            return {}
        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logging.warning("Settings file unreadable (%s): %s", self.settings_file, e)
            return {}
        if not isinstance(data, dict):
            logging.warning("Settings file is not a JSON object: %s", self.settings_file)
            return {}
        return data

    def load(self) -> Settings:
        """기본값 위에 저장된 값을 병합하여 로드"""
        merged: Dict[str, str] = dict(DEFAULTS)
        for key, value in self._read_persisted().items():
            if key not in FIELD_NAMES:
                continue
            if not isinstance(value, str):
                continue
            # 빈 값은 기본값 유지 (BLANK_ALLOWED 제외)
            if value.strip() or key in BLANK_ALLOWED:
                merged[key] = value.strip()

        self._settings = Settings(**{FIELD_NAMES[k]: v for k, v in merged.items()})
        logging.info("Settings loaded: folder=%r, lang=%r",
                     self._settings.default_image_folder, self._settings.ocr_language_code)
        return self.settings

    def save(self) -> None:
        """설정 저장"""
        data = {key: getattr(self._settings, attr) for key, attr in FIELD_NAMES.items()}
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logging.info("Settings saved: %s", self.settings_file)

    def get(self, field: str) -> str:
        return getattr(self._settings, FIELD_NAMES[_persisted_key(field)])

    def set(self, field: str, value: str) -> None:
        """설정 값 변경 후 즉시 저장 (언어 코드 유효성은 검사하지 않음)"""
        key = _persisted_key(field)
        cleaned = (value or '').strip()
        if not cleaned and key not in BLANK_ALLOWED:
            raise ValueError(f"{key} cannot be empty")

        setattr(self._settings, FIELD_NAMES[key], cleaned)
        self.save()
