#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 결과 사이드 패널
가장 최근 OCR 결과 하나만 표시합니다. 새 결과는 이전 내용을 대체합니다.
"""

import logging
import tkinter as tk
from dataclasses import dataclass
from tkinter import scrolledtext, ttk
from typing import Optional, Tuple

from note_ocr.core.errors import PanelRenderFailure
from note_ocr.core.models import OcrResult
from note_ocr.core.text_direction import is_rtl_language
from note_ocr.utils.locale_utils import format_ui_text, get_ui_text


@dataclass(frozen=True)
class PanelState:
    title: str
    text: str
    language_code: str
    rtl: bool

    @classmethod
    def from_result(cls, result: OcrResult) -> 'PanelState':
        return cls(
            title=format_ui_text('panel_title', label=result.source_label),
            text=result.text,
            language_code=result.language_code,
            rtl=is_rtl_language(result.language_code),
        )


class OcrResultPanel:
    """PanedWindow 오른쪽에 붙는 결과 패널 (앱당 하나)"""

    PANEL_WEIGHT: int = 1
    TEXT_FONT: Tuple[str, int] = ("Consolas", 10)
    RTL_TAG: str = "rtl"

    def __init__(self, container: ttk.PanedWindow) -> None:
        self.container = container
        self.text: dict = get_ui_text()
        self.state: Optional[PanelState] = None
        self.frame: Optional[ttk.Frame] = None
        self.title_var: Optional[tk.StringVar] = None
        self.output: Optional[scrolledtext.ScrolledText] = None

    @property
    def is_open(self) -> bool:
        if self.frame is None:
            return False
        return str(self.frame) in [str(pane) for pane in self.container.panes()]

    def _build(self) -> None:
        """패널 위젯 생성 (최초 1회)"""
        self.frame = ttk.Frame(self.container, padding=8)
        self.frame.columnconfigure(0, weight=1)
        self.frame.rowconfigure(1, weight=1)

        header = ttk.Frame(self.frame)
        header.grid(row=0, column=0, sticky="ew", pady=(0, 6))
        header.columnconfigure(0, weight=1)

        self.title_var = tk.StringVar(value=self.text['panel_header'])
        ttk.Label(header, textvariable=self.title_var, font=("Arial", 11, "bold"),
                  wraplength=320).grid(row=0, column=0, sticky="w")
        ttk.Button(header, text=self.text['close'], command=self.close).grid(row=0, column=1, sticky="e")

        self.output = scrolledtext.ScrolledText(self.frame, wrap=tk.WORD, font=self.TEXT_FONT,
                                                width=40, state=tk.DISABLED)
        self.output.grid(row=1, column=0, sticky="nsew")
        self.output.tag_configure(self.RTL_TAG, justify=tk.RIGHT)
        # 읽기 전용이지만 선택/복사는 가능
        self.output.bind("<1>", lambda e: self.output.focus_set())

    def open(self) -> None:
        if self.frame is None:
            self._build()
        if not self.is_open:
            self.container.add(self.frame, weight=self.PANEL_WEIGHT)
            logging.info("OCR panel opened")

    def replace_content(self, result: OcrResult) -> None:
        """결과 패널 내용을 새 결과로 교체"""
        state = PanelState.from_result(result)
        try:
            self.open()
            self._render(state)
        except tk.TclError as e:
            raise PanelRenderFailure(str(e)) from e
        self.state = state

    __call__ = replace_content

    def _render(self, state: PanelState) -> None:
        self.title_var.set(state.title)
        self.output.configure(state=tk.NORMAL)
        self.output.delete("1.0", tk.END)
        tags = (self.RTL_TAG,) if state.rtl else ()
        self.output.insert("1.0", state.text, tags)
        self.output.configure(state=tk.DISABLED)
        self.output.yview_moveto(0)
        logging.info("OCR panel rendered: %s (rtl=%s)", state.title, state.rtl)

    def displayed_text(self) -> str:
        if self.output is None:
            return ""
        return self.output.get("1.0", "end-1c")

    def close(self) -> None:
        """패널 닫기 및 내용 비우기"""
        if self.is_open:
            self.container.forget(self.frame)
        self.state = None
        if self.output is not None:
            self.output.configure(state=tk.NORMAL)
            self.output.delete("1.0", tk.END)
            self.output.configure(state=tk.DISABLED)
        if self.title_var is not None:
            self.title_var.set(self.text['panel_header'])
        logging.info("OCR panel closed")
