#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 파이프라인 오류 정의
각 오류는 사용자 알림용 메시지 키와 개발자 로그용 상세 정보를 가집니다.
"""

from typing import Optional


class OcrPipelineError(Exception):
    """OCR 파이프라인 오류 기본 클래스"""

    message_key: str = 'error_unexpected'

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.__class__.__name__)
        self.detail: Optional[str] = detail


class NoActiveNote(OcrPipelineError):
    """열려 있는 노트 없음"""
    message_key = 'error_no_active_note'


class NoImageFound(OcrPipelineError):
    """노트에 이미지 임베드 없음"""
    message_key = 'error_no_image'


class ImageNotFound(OcrPipelineError):
    """경로에 해당하는 파일 없음"""
    message_key = 'error_not_found'


class NotAFile(OcrPipelineError):
    """경로가 파일이 아닌 폴더를 가리킴"""
    message_key = 'error_not_a_file'


class UnsupportedSource(OcrPipelineError):
    """읽기 방법을 알 수 없는 이미지 소스"""
    message_key = 'error_unsupported'


class ImageLoadError(OcrPipelineError):
    """이미지 바이트 읽기 실패"""
    message_key = 'error_load'


class RecognitionError(OcrPipelineError):
    """OCR 엔진 실패"""
    message_key = 'error_ocr'


class ClipboardFailure(OcrPipelineError):
    """클립보드 쓰기 실패"""
    message_key = 'clipboard_failed'


class PanelRenderFailure(OcrPipelineError):
    """결과 패널 표시 실패"""
    message_key = 'panel_failed'
