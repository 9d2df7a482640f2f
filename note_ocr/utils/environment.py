#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
환경 설정 유틸리티
Tesseract 실행 파일 탐색을 담당합니다.
"""

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import List, Optional


TESSERACT_ENV_VAR = 'NOTE_OCR_TESSERACT_CMD'

# Windows 기본 설치 경로
WINDOWS_TESSERACT_PATHS: List[str] = [
    r"C:\Program Files\Tesseract-OCR\tesseract.exe",
    r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe",
]


def _candidate_paths() -> List[Path]:
    """플랫폼별 후보 경로 목록"""
    candidates: List[Path] = []
    if sys.platform.startswith('win'):
        candidates.extend(Path(p) for p in WINDOWS_TESSERACT_PATHS)
        local_app_data = os.environ.get('LOCALAPPDATA')
        if local_app_data:
            candidates.append(Path(local_app_data) / "Programs" / "Tesseract-OCR" / "tesseract.exe")
    return candidates


def find_tesseract_cmd() -> Optional[str]:
    """Tesseract 실행 파일 경로 찾기

    환경 변수, PATH, 플랫폼 기본 설치 경로 순서로 확인합니다.
    찾지 못하면 None 을 반환하고 pytesseract 기본값을 그대로 사용합니다.
    """
    explicit = os.environ.get(TESSERACT_ENV_VAR, '').strip()
    if explicit:
        logging.info("Tesseract path from %s: %s", TESSERACT_ENV_VAR, explicit)
        return explicit

    on_path = shutil.which('tesseract')
    if on_path:
        logging.info("Tesseract found on PATH: %s", on_path)
        return on_path

    for path in _candidate_paths():
        if path.exists():
            logging.info("Tesseract found at default location: %s", path)
            return str(path)

    logging.warning("Tesseract executable not found")
    return None
