"""Locale, logging and environment utility tests."""
from __future__ import annotations

import logging

from note_ocr.utils import environment
from note_ocr.utils.locale_utils import UI_TEXT, format_ui_text, get_ui_text
from note_ocr.utils.logging_utils import get_user_data_path, log_user_action, setup_logging


def test_language_tables_share_keys() -> None:
    assert set(UI_TEXT["en"]) == set(UI_TEXT["ko"])


def test_format_ui_text() -> None:
    assert format_ui_text("language_set", ui_lang="en", lang="ara") == "OCR language set to: ara"
    assert format_ui_text("panel_title", ui_lang="en", label="a.png") == "OCR Result from: a.png"
    assert format_ui_text("unknown_key", ui_lang="en") == "unknown_key"


def test_unknown_language_falls_back_to_english() -> None:
    assert get_ui_text("xx") is UI_TEXT["en"]


def test_user_data_path_override(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("NOTE_OCR_HOME", str(tmp_path))
    assert get_user_data_path() == tmp_path


def test_setup_logging_writes_user_actions(tmp_path) -> None:
    logger = setup_logging(tmp_path, level="DEBUG")
    try:
        log_user_action("OCR triggered", "typed-path")
        for handler in logger.handlers:
            handler.flush()

        action_logs = list((tmp_path / "logs").glob("user_actions_*.log"))
        assert len(action_logs) == 1
        assert "OCR triggered - Success - typed-path" in action_logs[0].read_text(encoding="utf-8")
        assert not logger.propagate
    finally:
        for handler in logger.handlers[:] + logging.root.handlers[:]:
            handler.close()
        logger.handlers.clear()
        logging.root.handlers.clear()


def test_find_tesseract_from_env(monkeypatch) -> None:
    monkeypatch.setenv(environment.TESSERACT_ENV_VAR, "/opt/tess/bin/tesseract")
    assert environment.find_tesseract_cmd() == "/opt/tess/bin/tesseract"


def test_find_tesseract_on_path(monkeypatch) -> None:
    monkeypatch.delenv(environment.TESSERACT_ENV_VAR, raising=False)
    monkeypatch.setattr(environment.shutil, "which", lambda name: "/usr/bin/tesseract")
    assert environment.find_tesseract_cmd() == "/usr/bin/tesseract"


def test_find_tesseract_missing(monkeypatch) -> None:
    monkeypatch.delenv(environment.TESSERACT_ENV_VAR, raising=False)
    monkeypatch.setattr(environment.shutil, "which", lambda name: None)
    monkeypatch.setattr(environment, "_candidate_paths", lambda: [])
    assert environment.find_tesseract_cmd() is None
