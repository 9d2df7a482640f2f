#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
사용자 알림
상태바와 잠시 떠 있다 사라지는 알림 창을 사용합니다.
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List


class Notifier:
    """일시 알림 표시"""

    NOTICE_DURATION_MS: int = 4000
    NOTICE_MARGIN: int = 24
    NOTICE_SPACING: int = 8
    MAX_VISIBLE: int = 4

    def __init__(self, root: tk.Tk, status_var: tk.StringVar) -> None:
        self.root = root
        self.status_var = status_var
        self._toasts: List[tk.Toplevel] = []

    def __call__(self, message: str) -> None:
        self.notify(message)

    def notify(self, message: str) -> None:
        logging.info("Notice: %s", message)
        self.status_var.set(message)
        try:
            self._show_toast(message)
        except tk.TclError as e:
            logging.warning("Notice window failed: %s", e)

    def _show_toast(self, message: str) -> None:
        """화면 오른쪽 아래에 알림 창 표시"""
        while len(self._toasts) >= self.MAX_VISIBLE:
            self._dismiss(self._toasts[0])

        toast = tk.Toplevel(self.root)
        toast.overrideredirect(True)
        toast.attributes('-topmost', True)

        frame = ttk.Frame(toast, padding=10, relief=tk.RIDGE, borderwidth=1)
        frame.pack(fill=tk.BOTH, expand=True)
        ttk.Label(frame, text=message, wraplength=320).pack()
        frame.bind('<Button-1>', lambda e: self._dismiss(toast))

        self._toasts.append(toast)
        self._layout()
        toast.after(self.NOTICE_DURATION_MS, lambda: self._dismiss(toast))

    def _layout(self) -> None:
        """알림 창 세로 정렬"""
        self.root.update_idletasks()
        right = self.root.winfo_rootx() + self.root.winfo_width() - self.NOTICE_MARGIN
        bottom = self.root.winfo_rooty() + self.root.winfo_height() - self.NOTICE_MARGIN

        for toast in reversed(self._toasts):
            toast.update_idletasks()
            width = toast.winfo_reqwidth()
            height = toast.winfo_reqheight()
            toast.geometry(f"+{right - width}+{bottom - height}")
            bottom -= height + self.NOTICE_SPACING

    def _dismiss(self, toast: tk.Toplevel) -> None:
        if toast in self._toasts:
            self._toasts.remove(toast)
        if toast.winfo_exists():
            toast.destroy()
        if self._toasts:
            self._layout()
