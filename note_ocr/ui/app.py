#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Note OCR 메인 애플리케이션 UI
볼트 브라우저, 현재 노트 보기, OCR 결과 패널로 구성됩니다.
"""

import logging
import threading
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import Any, Callable, Dict, Optional, Tuple

from note_ocr.core.image_loader import ImageLoader
from note_ocr.core.image_locator import ImageLocator
from note_ocr.core.models import ExplicitFile, ImageReference, LastImageInNote, TypedPath
from note_ocr.core.pipeline import OcrPipeline
from note_ocr.core.settings_store import SettingsStore
from note_ocr.core.sinks import ResultSinkCoordinator
from note_ocr.core.vault import LocalFile, Vault, VaultFile, is_image_file, is_note_file
from note_ocr.ocr.recognizer import TesseractRecognizer
from note_ocr.ui.clipboard import TkClipboard
from note_ocr.ui.dialogs import SettingsDialog, ask_text
from note_ocr.ui.notifier import Notifier
from note_ocr.ui.panel import OcrResultPanel
from note_ocr.utils.locale_utils import format_ui_text, get_ui_text
from note_ocr.utils.logging_utils import log_user_action


class NoteOcrApp:
    """Note OCR 메인 애플리케이션 클래스"""

    # UI 상수
    WINDOW_WIDTH: int = 1100
    WINDOW_HEIGHT: int = 700
    THREAD_DAEMON: bool = True

    TEXT_FONT: Tuple[str, int] = ("Microsoft YaHei UI", 10)
    MAIN_PADDING: str = "10"
    BROWSER_WIDTH: int = 240

    IMAGE_FILE_TYPES = [
        ("Image Files", "*.png *.jpg *.jpeg *.PNG *.JPG *.JPEG"),
        ("PNG Files", "*.png"),
        ("JPEG Files", "*.jpg *.jpeg"),
        ("All Files", "*.*"),
    ]

    def __init__(self, root: tk.Tk, vault: Vault, settings_store: SettingsStore,
                 recognizer: TesseractRecognizer,
                 user_action_logger: Optional[logging.Logger] = None) -> None:
        """애플리케이션 초기화"""
        logging.info("Application initialization started (vault=%s)", vault.root)

        self.root: tk.Tk = root
        self.vault: Vault = vault
        self.settings_store: SettingsStore = settings_store
        self.recognizer: TesseractRecognizer = recognizer
        self.user_action_logger: Optional[logging.Logger] = user_action_logger
        self.text: Dict[str, str] = get_ui_text()

        self.active_note: Optional[VaultFile] = None
        self._active_jobs: int = 0
        self._jobs_lock: threading.Lock = threading.Lock()
        self._tree_items: Dict[str, VaultFile] = {}

        self._setup_window()
        self._setup_ui()
        self._initialize_modules()
        self._setup_menu()
        self._bind_shortcuts()

        self.refresh_vault()
        logging.info("Application initialization completed")

    def _setup_window(self) -> None:
        """윈도우 기본 설정"""
        self.root.title(f"{self.text['title']} - {self.vault.root.name}")
        self.root.geometry(f"{self.WINDOW_WIDTH}x{self.WINDOW_HEIGHT}")
        self.root.resizable(True, True)

    def _initialize_modules(self) -> None:
        """모듈 초기화"""
        self.notifier: Notifier = Notifier(self.root, self.status_var)
        self.clipboard: TkClipboard = TkClipboard(self.root)
        self.panel: OcrResultPanel = OcrResultPanel(self.paned)

        self.locator: ImageLocator = ImageLocator(self.vault, lambda: self.active_note)
        self.loader: ImageLoader = ImageLoader(self.vault)
        self.sinks: ResultSinkCoordinator = ResultSinkCoordinator(
            clipboard=self.clipboard.write_text,
            panel=self.panel.replace_content,
            notify=self.notifier,
        )
        self.pipeline: OcrPipeline = OcrPipeline(
            settings_store=self.settings_store,
            locator=self.locator,
            loader=self.loader,
            recognizer=self.recognizer,
            sinks=self.sinks,
            notify=self.notifier,
        )

    # ------------------------------------------------------------------ UI

    def _setup_ui(self) -> None:
        """UI 구성"""
        self.main_frame: ttk.Frame = ttk.Frame(self.root, padding=self.MAIN_PADDING)
        self.main_frame.grid(row=0, column=0, sticky="nsew")

        self.paned: ttk.PanedWindow = ttk.PanedWindow(self.main_frame, orient=tk.HORIZONTAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        self._setup_vault_browser()
        self._setup_note_viewer()
        self._setup_statusbar()

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        self.main_frame.columnconfigure(0, weight=1)
        self.main_frame.rowconfigure(0, weight=1)

    def _setup_vault_browser(self) -> None:
        """볼트 파일 브라우저"""
        frame = ttk.LabelFrame(self.paned, text=self.text['vault_label'], padding=5)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)

        self.tree: ttk.Treeview = ttk.Treeview(frame, show="tree", selectmode="browse")
        self.tree.column("#0", width=self.BROWSER_WIDTH)
        scrollbar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        scrollbar.grid(row=0, column=1, sticky="ns")

        self.tree.bind("<Double-1>", self._on_tree_double_click)
        self.tree.bind("<Return>", self._on_tree_double_click)
        # 우클릭 (macOS 는 Button-2)
        self.tree.bind("<Button-3>", self._on_tree_context_menu)
        self.tree.bind("<Button-2>", self._on_tree_context_menu)

        self.paned.add(frame, weight=0)

    def _setup_note_viewer(self) -> None:
        """현재 노트 표시 영역"""
        self.note_label_var: tk.StringVar = tk.StringVar(value=self.text['note_label'])
        frame = ttk.Frame(self.paned, padding=5)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(1, weight=1)

        ttk.Label(frame, textvariable=self.note_label_var, font=("Arial", 11, "bold")).grid(
            row=0, column=0, sticky="w", pady=(0, 5))
        self.note_text: scrolledtext.ScrolledText = scrolledtext.ScrolledText(
            frame, wrap=tk.WORD, font=self.TEXT_FONT, state=tk.DISABLED)
        self.note_text.grid(row=1, column=0, sticky="nsew")

        self.paned.add(frame, weight=2)

    def _setup_statusbar(self) -> None:
        """상태바 설정"""
        self.status_var: tk.StringVar = tk.StringVar(value=self.text['status_ready'])
        self.statusbar: ttk.Label = ttk.Label(self.main_frame, textvariable=self.status_var,
                                              relief=tk.SUNKEN, anchor=tk.W)
        self.statusbar.grid(row=1, column=0, sticky="ew", pady=(8, 0))

    def _setup_menu(self) -> None:
        """메뉴 구성"""
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label=self.text['menu_open_note'], command=self._open_selected_note)
        file_menu.add_command(label=self.text['menu_refresh'], accelerator="F5", command=self.refresh_vault)
        file_menu.add_separator()
        file_menu.add_command(label=self.text['menu_quit'], command=self.on_closing)
        menubar.add_cascade(label=self.text['menu_file'], menu=file_menu)

        ocr_menu = tk.Menu(menubar, tearoff=0)
        ocr_menu.add_command(label=self.text['menu_ocr_last_image'], accelerator="Ctrl+Shift+O",
                             command=self.ocr_last_image_in_note)
        ocr_menu.add_command(label=self.text['menu_ocr_typed_path'], accelerator="Ctrl+Shift+P",
                             command=self.ocr_from_typed_path)
        ocr_menu.add_command(label=self.text['menu_ocr_file'], command=self.ocr_from_file_dialog)
        ocr_menu.add_separator()
        ocr_menu.add_command(label=self.text['menu_set_language'], command=self.set_ocr_language)
        ocr_menu.add_command(label=self.text['menu_settings'], command=self.open_settings)
        ocr_menu.add_separator()
        ocr_menu.add_command(label=self.text['menu_close_panel'], command=self.panel.close)
        menubar.add_cascade(label=self.text['menu_ocr'], menu=ocr_menu)

        self.root.config(menu=menubar)

        self.image_menu: tk.Menu = tk.Menu(self.root, tearoff=0)
        self.image_menu.add_command(label=self.text['context_run_ocr'], command=self._ocr_selected_image)
        self.note_menu: tk.Menu = tk.Menu(self.root, tearoff=0)
        self.note_menu.add_command(label=self.text['context_open_note'], command=self._open_selected_note)

    def _bind_shortcuts(self) -> None:
        self.root.bind('<Control-Shift-O>', lambda e: self.ocr_last_image_in_note())
        self.root.bind('<Control-Shift-P>', lambda e: self.ocr_from_typed_path())
        self.root.bind('<F5>', lambda e: self.refresh_vault())

    # ------------------------------------------------------------------ Vault browser

    def refresh_vault(self) -> None:
        """볼트 파일 목록 다시 읽기"""
        self.tree.delete(*self.tree.get_children())
        self._tree_items.clear()
        folders: Dict[str, str] = {"": ""}

        for file in self.vault.list_files():
            if not (is_note_file(file.name) or is_image_file(file.name)):
                continue
            parent = self._ensure_folder_item(file.path.rpartition('/')[0], folders)
            item = self.tree.insert(parent, tk.END, text=file.name)
            self._tree_items[item] = file

        logging.info("Vault refreshed: %d entries", len(self._tree_items))

    def _ensure_folder_item(self, folder: str, folders: Dict[str, str]) -> str:
        """폴더 노드 생성 (중첩 폴더 포함)"""
        if folder in folders:
            return folders[folder]
        parent_path, _, name = folder.rpartition('/')
        parent = self._ensure_folder_item(parent_path, folders)
        item = self.tree.insert(parent, tk.END, text=name, open=True)
        folders[folder] = item
        return item

    def _selected_file(self) -> Optional[VaultFile]:
        selection = self.tree.selection()
        if not selection:
            return None
        return self._tree_items.get(selection[0])

    def _on_tree_double_click(self, event: Optional[tk.Event] = None) -> None:
        file = self._selected_file()
        if file is None:
            return
        if is_note_file(file.name):
            self.open_note(file)
        elif is_image_file(file.name):
            self.run_ocr(ExplicitFile(file))

    def _on_tree_context_menu(self, event: tk.Event) -> None:
        """이미지/노트 항목 우클릭 메뉴"""
        item = self.tree.identify_row(event.y)
        if not item or item not in self._tree_items:
            return
        self.tree.selection_set(item)
        file = self._tree_items[item]

        menu = self.image_menu if is_image_file(file.name) else self.note_menu
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()

    def _ocr_selected_image(self) -> None:
        file = self._selected_file()
        if file is not None and is_image_file(file.name):
            log_user_action("Context menu OCR", file.path)
            self.run_ocr(ExplicitFile(file))

    def _open_selected_note(self) -> None:
        file = self._selected_file()
        if file is not None and is_note_file(file.name):
            self.open_note(file)

    def open_note(self, note: VaultFile) -> None:
        """노트를 현재 노트로 열기"""
        try:
            content = self.vault.read_text(note)
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Failed to open note %s: %s", note.path, e)
            self.notifier(format_ui_text('error_no_active_note'))
            return

        self.active_note = note
        self.note_label_var.set(format_ui_text('note_label_named', name=note.path))
        self.note_text.configure(state=tk.NORMAL)
        self.note_text.delete("1.0", tk.END)
        self.note_text.insert("1.0", content)
        self.note_text.configure(state=tk.DISABLED)
        log_user_action("Open note", note.path)

    # ------------------------------------------------------------------ OCR triggers

    def ocr_last_image_in_note(self) -> None:
        """현재 노트의 마지막 이미지 OCR"""
        log_user_action("OCR last image in note", self.active_note.path if self.active_note else None)
        self.run_ocr(LastImageInNote())

    def ocr_from_typed_path(self) -> None:
        """경로 입력 후 OCR"""
        path = ask_text(self.root, self.text['prompt_path_title'], self.text['prompt_path'],
                        submit_text=self.text['button_run'])
        if path is None:
            log_user_action("OCR from typed path", "Cancelled", False)
            return
        if not path:
            self.notifier(format_ui_text('invalid_path'))
            return
        log_user_action("OCR from typed path", path)
        self.run_ocr(TypedPath(path))

    def ocr_from_file_dialog(self) -> None:
        """파일 대화상자로 고른 이미지 OCR"""
        file_path = filedialog.askopenfilename(
            title=self.text['select_image_title'],
            initialdir=str(self.vault.root),
            filetypes=self.IMAGE_FILE_TYPES,
        )
        if not file_path:
            log_user_action("OCR from file dialog", "File selection cancelled", False)
            return

        log_user_action("OCR from file dialog", Path(file_path).name)
        if self.vault.contains(file_path):
            rel = Path(file_path).resolve().relative_to(self.vault.root).as_posix()
            self.run_ocr(ExplicitFile(VaultFile(rel)))
        else:
            self.run_ocr(ExplicitFile(LocalFile(Path(file_path))))

    def run_ocr(self, reference: ImageReference) -> None:
        """별도 스레드에서 OCR 파이프라인 실행

        결과 전달과 알림은 root.after 로 UI 스레드에서 처리합니다.
        """
        def ocr_processing():
            try:
                self.pipeline.run(reference, dispatch=self._dispatch)
            finally:
                with self._jobs_lock:
                    self._active_jobs -= 1

        with self._jobs_lock:
            self._active_jobs += 1

        ocr_thread = threading.Thread(target=ocr_processing, daemon=self.THREAD_DAEMON,
                                      name=f"ocr-{reference.kind}")
        ocr_thread.start()

    def _dispatch(self, fn: Callable[..., Any], *args: Any) -> None:
        """UI 스레드에서 실행"""
        try:
            self.root.after(0, fn, *args)
        except (RuntimeError, tk.TclError) as e:
            # 메인 루프 종료 또는 창 파괴 후 도착한 결과
            logging.warning("Dropped UI update after shutdown: %s", e)

    @property
    def processing(self) -> bool:
        with self._jobs_lock:
            return self._active_jobs > 0

    # ------------------------------------------------------------------ Settings

    def set_ocr_language(self) -> None:
        """OCR 언어 코드 설정"""
        current = self.settings_store.get('ocrLang')
        lang = ask_text(self.root, self.text['prompt_language_title'], self.text['prompt_language'],
                        initial=current, submit_text=self.text['button_set_language'],
                        suggestions=self.recognizer.available_languages())
        if not lang:
            log_user_action("Set OCR language", "Cancelled", False)
            return

        try:
            self.settings_store.set('ocrLang', lang)
        except OSError as e:
            logging.error("Failed to save OCR language: %s", e)
            self.notifier(format_ui_text('error_unexpected'))
            return

        log_user_action("Set OCR language", lang)
        self.notifier(format_ui_text('language_set', lang=lang))

    def open_settings(self) -> None:
        log_user_action("Open settings")
        SettingsDialog(self.root, self.settings_store, self.notifier)

    # ------------------------------------------------------------------ Lifecycle

    def on_closing(self) -> None:
        """프로그램 종료"""
        logging.info("Program termination requested")
        if self.processing:
            if messagebox.askokcancel("Terminate", "OCR in progress. Do you want to terminate?"):
                logging.info("User confirmation for program termination")
                self.root.destroy()
        else:
            logging.info("Program terminated normally")
            self.root.destroy()
