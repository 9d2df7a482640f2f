#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
다국어 지원 유틸리티
UI 텍스트 및 알림 메시지를 관리합니다.
"""

import locale
from typing import Dict, Any, Optional


DEFAULT_LANGUAGE = 'en'

# 다국어 UI 리소스
UI_TEXT: Dict[str, Dict[str, str]] = {
    'en': {
        'title': 'Note OCR',
        'status_ready': 'Ready - select a note or an image',
        'menu_file': 'File',
        'menu_ocr': 'OCR',
        'menu_open_note': 'Open Note',
        'menu_refresh': 'Refresh Vault',
        'menu_quit': 'Quit',
        'menu_ocr_last_image': 'OCR of the Last Image in the Active Note',
        'menu_ocr_typed_path': 'OCR using Image Path...',
        'menu_ocr_file': 'OCR Image File from Disk...',
        'menu_set_language': 'Set OCR Language Code...',
        'menu_settings': 'Settings...',
        'menu_close_panel': 'Close OCR Panel',
        'context_run_ocr': 'Run OCR and show result in side panel',
        'context_open_note': 'Open note',
        'vault_label': 'Vault',
        'note_label': 'Active note',
        'note_label_named': 'Active note: {name}',
        'panel_header': 'OCR Result',
        'panel_title': 'OCR Result from: {label}',
        'close': 'Close',
        'cancel': 'Cancel',
        'running_ocr': 'Running OCR on {label} ({lang})...',
        'clipboard_copied': 'OCR result copied to clipboard',
        'clipboard_failed': 'Could not copy the OCR result to the clipboard',
        'panel_shown': 'OCR result is shown in the side panel',
        'panel_failed': 'Could not show the OCR result in the side panel',
        'error_no_active_note': 'No active note.',
        'error_no_image': 'No image found in note.',
        'error_not_found': 'Image file not found in vault.',
        'error_not_a_file': 'The path points to a folder, not an image file.',
        'error_unsupported': 'This image source cannot be read.',
        'error_load': 'Could not read the image file.',
        'error_ocr': 'OCR failed.',
        'error_unexpected': 'Something went wrong while running OCR.',
        'invalid_path': 'Please enter a valid image path.',
        'language_set': 'OCR language set to: {lang}',
        'prompt_path_title': 'OCR using Image Path',
        'prompt_path': 'Enter relative image path (e.g., attachments/image.png)',
        'button_run': 'Run OCR',
        'prompt_language_title': 'Set OCR Language Code',
        'prompt_language': 'Enter OCR language code (e.g., eng, ara, fra)',
        'button_set_language': 'Set Language',
        'settings_title': 'OCR Settings',
        'setting_folder': 'Default image folder path',
        'setting_folder_desc': 'Relative to vault (e.g., attachments/); empty means vault root',
        'setting_lang': 'OCR language code',
        'setting_lang_desc': 'e.g., eng, ara, fra',
        'setting_saved': '{name} saved',
        'setting_blank': '{name} cannot be empty',
        'select_image_title': 'Select Image File',
        'ocr_unavailable': 'Tesseract was not found. Install it or set NOTE_OCR_TESSERACT_CMD.',
    },
    'ko': {
        'title': '노트 OCR',
        'status_ready': '준비됨 - 노트 또는 이미지를 선택하세요',
        'menu_file': '파일',
        'menu_ocr': 'OCR',
        'menu_open_note': '노트 열기',
        'menu_refresh': '볼트 새로고침',
        'menu_quit': '종료',
        'menu_ocr_last_image': '현재 노트의 마지막 이미지 OCR',
        'menu_ocr_typed_path': '이미지 경로로 OCR...',
        'menu_ocr_file': '디스크의 이미지 파일 OCR...',
        'menu_set_language': 'OCR 언어 코드 설정...',
        'menu_settings': '설정...',
        'menu_close_panel': 'OCR 패널 닫기',
        'context_run_ocr': 'OCR 실행 후 사이드 패널에 표시',
        'context_open_note': '노트 열기',
        'vault_label': '볼트',
        'note_label': '현재 노트',
        'note_label_named': '현재 노트: {name}',
        'panel_header': 'OCR 결과',
        'panel_title': 'OCR 결과: {label}',
        'close': '닫기',
        'cancel': '취소',
        'running_ocr': '{label} OCR 실행 중 ({lang})...',
        'clipboard_copied': 'OCR 결과가 클립보드에 복사되었습니다',
        'clipboard_failed': 'OCR 결과를 클립보드에 복사하지 못했습니다',
        'panel_shown': 'OCR 결과가 사이드 패널에 표시되었습니다',
        'panel_failed': 'OCR 결과를 사이드 패널에 표시하지 못했습니다',
        'error_no_active_note': '열려 있는 노트가 없습니다.',
        'error_no_image': '노트에서 이미지를 찾을 수 없습니다.',
        'error_not_found': '볼트에서 이미지 파일을 찾을 수 없습니다.',
        'error_not_a_file': '경로가 이미지 파일이 아닌 폴더를 가리킵니다.',
        'error_unsupported': '이 이미지 소스는 읽을 수 없습니다.',
        'error_load': '이미지 파일을 읽을 수 없습니다.',
        'error_ocr': 'OCR 실패.',
        'error_unexpected': 'OCR 실행 중 오류가 발생했습니다.',
        'invalid_path': '올바른 이미지 경로를 입력하세요.',
        'language_set': 'OCR 언어가 {lang}(으)로 설정되었습니다',
        'prompt_path_title': '이미지 경로로 OCR',
        'prompt_path': '상대 이미지 경로를 입력하세요 (예: attachments/image.png)',
        'button_run': 'OCR 실행',
        'prompt_language_title': 'OCR 언어 코드 설정',
        'prompt_language': 'OCR 언어 코드를 입력하세요 (예: eng, ara, fra)',
        'button_set_language': '언어 설정',
        'settings_title': 'OCR 설정',
        'setting_folder': '기본 이미지 폴더 경로',
        'setting_folder_desc': '볼트 기준 상대 경로 (예: attachments/), 비우면 볼트 루트',
        'setting_lang': 'OCR 언어 코드',
        'setting_lang_desc': '예: eng, ara, fra',
        'setting_saved': '{name} 저장됨',
        'setting_blank': '{name} 값은 비워둘 수 없습니다',
        'select_image_title': '이미지 파일 선택',
        'ocr_unavailable': 'Tesseract를 찾을 수 없습니다. 설치하거나 NOTE_OCR_TESSERACT_CMD를 설정하세요.',
    }
}


def get_system_language() -> str:
    """시스템 언어 감지"""
    try:
        lang, _ = locale.getlocale()
    except ValueError:
        return DEFAULT_LANGUAGE
    if lang and lang.lower().startswith(('ko', 'korean')):
        return 'ko'
    return DEFAULT_LANGUAGE


def get_ui_text(lang: Optional[str] = None) -> Dict[str, str]:
    """UI 텍스트 반환"""
    if lang is None:
        lang = get_system_language()

    return UI_TEXT.get(lang, UI_TEXT[DEFAULT_LANGUAGE])


def format_ui_text(key: str, ui_lang: Optional[str] = None, **kwargs: Any) -> str:
    """UI 텍스트 포맷팅"""
    table = get_ui_text(ui_lang)
    text = table.get(key, UI_TEXT[DEFAULT_LANGUAGE].get(key, key))

    try:
        return text.format(**kwargs)
    except (KeyError, ValueError):
        return text
