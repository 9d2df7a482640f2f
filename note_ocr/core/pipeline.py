#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 파이프라인
이미지 탐색 → 로드 → OCR → 결과 전달을 하나의 흐름으로 처리합니다.
세 가지 실행 경로(노트, 입력 경로, 파일 선택)는 ImageReference 만 다릅니다.
"""

import logging
import time
from typing import Any, Callable, Optional

from note_ocr.core.errors import OcrPipelineError
from note_ocr.core.image_loader import ImageLoader
from note_ocr.core.image_locator import ImageLocator
from note_ocr.core.models import ImageReference, OcrResult
from note_ocr.core.settings_store import SettingsStore
from note_ocr.core.sinks import ResultSinkCoordinator
from note_ocr.ocr.recognizer import Recognizer
from note_ocr.utils.locale_utils import format_ui_text
from note_ocr.utils.logging_utils import log_user_action


Dispatch = Callable[..., Any]


def _call_now(fn: Callable[..., Any], *args: Any) -> Any:
    return fn(*args)


class OcrPipeline:
    """OCR 실행 흐름과 오류 경계"""

    def __init__(self,
                 settings_store: SettingsStore,
                 locator: ImageLocator,
                 loader: ImageLoader,
                 recognizer: Recognizer,
                 sinks: ResultSinkCoordinator,
                 notify: Callable[[str], None]) -> None:
        self.settings_store = settings_store
        self.locator = locator
        self.loader = loader
        self.recognizer = recognizer
        self.sinks = sinks
        self._notify = notify

    def extract(self, reference: ImageReference,
                dispatch: Dispatch = _call_now) -> OcrResult:
        """탐색 → 로드 → OCR (오류는 그대로 전파)"""
        settings = self.settings_store.settings
        located = self.locator.locate(reference, settings)
        image_bytes = self.loader.load_bytes(located)

        language_code = settings.ocr_language_code
        dispatch(self._notify, format_ui_text('running_ocr',
                                              label=located.display_label,
                                              lang=language_code))

        started = time.monotonic()
        text = self.recognizer.recognize(image_bytes, language_code)
        logging.info("Recognition of %s took %.2fs",
                     located.display_label, time.monotonic() - started)

        return OcrResult(text=text, source_label=located.display_label,
                         language_code=language_code)

    def run(self, reference: ImageReference,
            dispatch: Optional[Dispatch] = None) -> None:
        """전체 파이프라인 실행

        dispatch 는 결과 전달과 오류 알림을 UI 스레드로 넘기는 함수입니다.
        """
        dispatch = dispatch or _call_now
        log_user_action("OCR triggered", reference.kind)

        try:
            result = self.extract(reference, dispatch)
        except Exception as e:
            dispatch(self.report_failure, e)
            return

        log_user_action("OCR completed", f"{result.source_label}: {len(result.text)} characters")
        dispatch(self.sinks.deliver, result)

    def report_failure(self, error: Exception) -> None:
        """오류를 사용자 알림 한 건으로 변환"""
        if isinstance(error, OcrPipelineError):
            logging.error("OCR pipeline failed: %s: %s", type(error).__name__, error.detail or error)
            message = format_ui_text(error.message_key)
        else:
            logging.error("Unexpected OCR pipeline error", exc_info=error)
            message = format_ui_text('error_unexpected')

        log_user_action("OCR", f"{type(error).__name__}: {error}", False)
        self._notify(message)
