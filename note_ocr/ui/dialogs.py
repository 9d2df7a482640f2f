#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
입력 대화상자
이미지 경로/언어 코드 입력 창과 설정 창
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, List, Optional, Sequence

from note_ocr.core.settings_store import SettingsStore
from note_ocr.utils.locale_utils import format_ui_text, get_ui_text
from note_ocr.utils.logging_utils import log_user_action


def _center(window: tk.Toplevel) -> None:
    """창 중앙 정렬"""
    window.update_idletasks()
    x = (window.winfo_screenwidth() // 2) - (window.winfo_width() // 2)
    y = (window.winfo_screenheight() // 2) - (window.winfo_height() // 2)
    window.geometry(f"+{x}+{y}")


def ask_text(root: tk.Misc, title: str, prompt: str, initial: str = "",
             submit_text: Optional[str] = None,
             suggestions: Optional[Sequence[str]] = None) -> Optional[str]:
    """한 줄 입력 대화상자

    확인 시 앞뒤 공백을 제거한 값을, 취소 시 None 을 반환합니다.
    suggestions 가 있으면 편집 가능한 콤보박스로 표시합니다.
    """
    text = get_ui_text()
    result: Dict[str, Optional[str]] = {'value': None}

    dialog = tk.Toplevel(root)
    dialog.title(title)
    dialog.resizable(False, False)
    dialog.transient(root)

    main_frame = ttk.Frame(dialog, padding="20")
    main_frame.grid(row=0, column=0, sticky="nsew")

    ttk.Label(main_frame, text=prompt, font=("Arial", 11)).grid(
        row=0, column=0, columnspan=2, sticky="w", pady=(0, 15))

    value_var = tk.StringVar(value=initial)
    if suggestions:
        entry: ttk.Entry = ttk.Combobox(main_frame, textvariable=value_var,
                                        values=list(suggestions), font=("Arial", 11), width=40)
    else:
        entry = ttk.Entry(main_frame, textvariable=value_var, font=("Arial", 11), width=40)
    entry.grid(row=1, column=0, columnspan=2, sticky="ew", pady=(0, 20))

    def submit(event=None):
        result['value'] = value_var.get().strip()
        dialog.destroy()

    def cancel(event=None):
        dialog.destroy()

    ttk.Button(main_frame, text=submit_text or "OK", command=submit).grid(row=2, column=0, padx=(0, 5))
    ttk.Button(main_frame, text=text['cancel'], command=cancel).grid(row=2, column=1, padx=(5, 0))

    dialog.columnconfigure(0, weight=1)
    dialog.rowconfigure(0, weight=1)
    main_frame.columnconfigure(0, weight=1)

    entry.focus()
    entry.select_range(0, tk.END)
    entry.bind('<Return>', submit)
    dialog.bind('<Escape>', cancel)
    dialog.protocol("WM_DELETE_WINDOW", cancel)

    _center(dialog)
    dialog.grab_set()
    dialog.wait_window()

    return result['value']


class SettingsDialog:
    """OCR 설정 창 - 값이 바뀔 때마다 바로 저장"""

    FIELDS: List[tuple] = [
        ('defaultImageFolder', 'setting_folder', 'setting_folder_desc'),
        ('ocrLang', 'setting_lang', 'setting_lang_desc'),
    ]

    def __init__(self, root: tk.Misc, settings_store: SettingsStore,
                 notify: Callable[[str], None]) -> None:
        self.root = root
        self.settings_store = settings_store
        self.notify = notify
        self.text: Dict[str, str] = get_ui_text()
        self.vars: Dict[str, tk.StringVar] = {}
        self.hint_var = tk.StringVar(master=root)

        self.window = tk.Toplevel(root)
        self.window.title(self.text['settings_title'])
        self.window.resizable(False, False)
        self.window.transient(root)
        self._build()
        self.window.bind('<Escape>', lambda e: self.close())
        self.window.protocol("WM_DELETE_WINDOW", self.close)
        _center(self.window)

    def _build(self) -> None:
        frame = ttk.Frame(self.window, padding="20")
        frame.grid(row=0, column=0, sticky="nsew")
        frame.columnconfigure(1, weight=1)

        ttk.Label(frame, text=self.text['settings_title'], font=("Arial", 14, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 15))

        row = 1
        for key, label_key, desc_key in self.FIELDS:
            ttk.Label(frame, text=self.text[label_key]).grid(row=row, column=0, sticky="w", padx=(0, 10))
            var = tk.StringVar(master=self.window, value=self.settings_store.get(key))
            ttk.Entry(frame, textvariable=var, width=32).grid(row=row, column=1, sticky="ew")
            ttk.Label(frame, text=self.text[desc_key], foreground="gray").grid(
                row=row + 1, column=1, sticky="w", pady=(0, 10))
            var.trace_add('write', lambda *args, k=key: self._on_change(k))
            self.vars[key] = var
            row += 2

        ttk.Label(frame, textvariable=self.hint_var, foreground="gray").grid(
            row=row, column=0, columnspan=2, sticky="w")
        ttk.Button(frame, text=self.text['close'], command=self.close).grid(
            row=row + 1, column=1, sticky="e", pady=(10, 0))

    def _on_change(self, key: str) -> None:
        value = self.vars[key].get()
        name = self.text['setting_folder'] if key == 'defaultImageFolder' else self.text['setting_lang']
        try:
            self.settings_store.set(key, value)
        except ValueError:
            self.hint_var.set(format_ui_text('setting_blank', name=name))
            return
        except OSError as e:
            logging.error("Settings save failed: %s", e)
            self.notify(format_ui_text('error_unexpected'))
            return
        self.hint_var.set(format_ui_text('setting_saved', name=name))
        log_user_action("Settings changed", f"{key}={value.strip()}")

    def close(self) -> None:
        self.window.destroy()
