#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
로깅 유틸리티
로깅 설정 및 사용자 액션 로깅을 담당합니다.
"""

import datetime
import logging
import os
from pathlib import Path
from typing import Optional


USER_ACTION_LOGGER_NAME = 'user_action'


def get_user_data_path() -> Path:
    """사용자 데이터 폴더 경로 반환"""
    override = os.environ.get('NOTE_OCR_HOME', '').strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".note_ocr"


def setup_logging(user_data_path: Optional[Path] = None,
                  level: Optional[str] = None) -> logging.Logger:
    """로깅 설정"""
    if user_data_path is None:
        user_data_path = get_user_data_path()
    log_dir = user_data_path / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    today = datetime.datetime.now().strftime('%Y%m%d')
    log_file = log_dir / f"note_ocr_{today}.log"

    level_name = (level or os.environ.get('NOTE_OCR_LOG_LEVEL') or 'INFO').upper()
    log_level = getattr(logging, level_name, logging.INFO)

    # 기존 핸들러 제거 (중복 방지)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    # 사용자 액션 전용 로거
    user_action_logger = logging.getLogger(USER_ACTION_LOGGER_NAME)
    user_action_logger.setLevel(logging.INFO)
    for handler in user_action_logger.handlers[:]:
        user_action_logger.removeHandler(handler)

    user_action_file = log_dir / f"user_actions_{today}.log"
    user_action_handler = logging.FileHandler(user_action_file, encoding='utf-8')
    user_action_handler.setLevel(logging.INFO)
    user_action_handler.setFormatter(
        logging.Formatter('%(asctime)s - [USER_ACTION] - %(message)s')
    )

    user_action_logger.addHandler(user_action_handler)
    user_action_logger.propagate = False  # 중복 로그 방지

    logging.info("=" * 50)
    logging.info("note_ocr started")
    logging.info("Log file: %s", log_file)
    logging.info("User action log file: %s", user_action_file)
    logging.info("=" * 50)

    return user_action_logger


def log_user_action(action: str, details: Optional[str] = None, success: bool = True) -> None:
    """사용자 액션 로깅"""
    status = "Success" if success else "Fail"
    message = f"{action} - {status}"
    if details:
        message += f" - {details}"

    logging.getLogger(USER_ACTION_LOGGER_NAME).info(message)
