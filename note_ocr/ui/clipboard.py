#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
클립보드 쓰기
"""

import logging
import tkinter as tk

from note_ocr.core.errors import ClipboardFailure


class TkClipboard:
    """tkinter 루트 창을 통한 시스템 클립보드 쓰기"""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root

    def write_text(self, text: str) -> None:
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
            # 창이 닫힌 뒤에도 클립보드 내용 유지
            self.root.update_idletasks()
        except tk.TclError as e:
            raise ClipboardFailure(str(e)) from e
        logging.info("Clipboard copy completed: %d characters", len(text))

    __call__ = write_text
