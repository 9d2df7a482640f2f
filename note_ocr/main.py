#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Note OCR 메인 진입점
"""

import argparse
import logging
import sys
import tkinter as tk
from pathlib import Path
from typing import List, Optional

from note_ocr.core.settings_store import SettingsStore, settings_file_for_vault
from note_ocr.core.vault import Vault, VaultFile, is_note_file
from note_ocr.ocr.recognizer import TesseractRecognizer
from note_ocr.ui.app import NoteOcrApp
from note_ocr.utils.environment import find_tesseract_cmd
from note_ocr.utils.locale_utils import format_ui_text
from note_ocr.utils.logging_utils import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="note-ocr",
                                     description="Extract text from note images with Tesseract OCR")
    parser.add_argument("vault", nargs="?", default=".",
                        help="vault directory with notes and attachments (default: current directory)")
    parser.add_argument("--note", help="vault-relative path of the note to open on startup")
    parser.add_argument("--log-level", help="logging level (default: NOTE_OCR_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = parse_args(argv)

    user_action_logger = setup_logging(level=args.log_level)

    vault_root = Path(args.vault).expanduser()
    if not vault_root.is_dir():
        logging.error("Vault directory not found: %s", vault_root)
        print(f"Vault directory not found: {vault_root}", file=sys.stderr)
        return 2

    vault = Vault(vault_root)
    settings_store = SettingsStore(settings_file_for_vault(vault.root))
    recognizer = TesseractRecognizer(tesseract_cmd=find_tesseract_cmd())

    try:
        root = tk.Tk()
        app = NoteOcrApp(root, vault, settings_store, recognizer, user_action_logger)
        root.protocol("WM_DELETE_WINDOW", app.on_closing)

        if args.note:
            note = vault.get_abstract_file(args.note)
            if isinstance(note, VaultFile) and is_note_file(note.name):
                app.open_note(note)
            else:
                logging.warning("Startup note not found: %s", args.note)

        if not recognizer.is_available():
            app.notifier(format_ui_text('ocr_unavailable'))

        # 윈도우 중앙 정렬
        root.update_idletasks()
        x = (root.winfo_screenwidth() // 2) - (root.winfo_width() // 2)
        y = (root.winfo_screenheight() // 2) - (root.winfo_height() // 2)
        root.geometry(f"+{x}+{y}")

        root.mainloop()

    except tk.TclError as e:
        error_msg = f"애플리케이션 실행 중 오류 발생: {e}"
        logging.error(error_msg)
        user_action_logger.error(error_msg)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
