#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 결과 전달 모듈
클립보드 복사와 결과 패널 갱신을 서로 독립적으로 수행합니다.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from note_ocr.core.errors import ClipboardFailure, PanelRenderFailure
from note_ocr.core.models import OcrResult
from note_ocr.utils.locale_utils import format_ui_text
from note_ocr.utils.logging_utils import log_user_action


@dataclass
class SinkReport:
    clipboard_ok: bool = False
    panel_ok: bool = False
    clipboard_error: Optional[str] = None
    panel_error: Optional[str] = None

    @property
    def all_ok(self) -> bool:
        return self.clipboard_ok and self.panel_ok


class ResultSinkCoordinator:
    """클립보드와 패널로 결과 전달

    한쪽이 실패해도 다른 쪽은 그대로 시도합니다.
    """

    def __init__(self,
                 clipboard: Callable[[str], None],
                 panel: Callable[[OcrResult], None],
                 notify: Callable[[str], None]) -> None:
        self._clipboard = clipboard
        self._panel = panel
        self._notify = notify

    def deliver(self, result: OcrResult) -> SinkReport:
        report = SinkReport()

        try:
            self._clipboard(result.text)
        except Exception as e:
            report.clipboard_error = str(e)
            logging.exception("Clipboard write failed for %s", result.source_label)
            log_user_action("Copy OCR result", f"Failed: {e}", False)
            self._notify(format_ui_text(ClipboardFailure.message_key))
        else:
            report.clipboard_ok = True
            log_user_action("Copy OCR result", f"{len(result.text)} characters")
            self._notify(format_ui_text('clipboard_copied'))

        try:
            self._panel(result)
        except Exception as e:
            report.panel_error = str(e)
            logging.exception("Panel update failed for %s", result.source_label)
            log_user_action("Show OCR result", f"Failed: {e}", False)
            self._notify(format_ui_text(PanelRenderFailure.message_key))
        else:
            report.panel_ok = True
            log_user_action("Show OCR result", result.source_label)
            self._notify(format_ui_text('panel_shown'))

        return report
