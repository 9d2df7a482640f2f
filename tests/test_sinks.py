"""Result sink coordinator tests: independent best-effort delivery."""
from __future__ import annotations

from note_ocr.core.models import OcrResult
from note_ocr.core.sinks import ResultSinkCoordinator
from note_ocr.utils.locale_utils import format_ui_text

from conftest import FakeClipboard, FakePanel

RESULT = OcrResult(text="HELLO", source_label="img2.jpg", language_code="eng")


def test_both_sinks_succeed() -> None:
    clipboard, panel, notices = FakeClipboard(), FakePanel(), []
    report = ResultSinkCoordinator(clipboard, panel, notices.append).deliver(RESULT)

    assert report.all_ok
    assert clipboard.contents == "HELLO"
    assert panel.result == RESULT
    assert notices == [format_ui_text("clipboard_copied"), format_ui_text("panel_shown")]


def test_clipboard_failure_does_not_block_panel() -> None:
    clipboard, panel, notices = FakeClipboard(fail=True), FakePanel(), []
    report = ResultSinkCoordinator(clipboard, panel, notices.append).deliver(RESULT)

    assert not report.clipboard_ok
    assert "clipboard access denied" in report.clipboard_error
    assert report.panel_ok
    assert panel.result == RESULT
    assert notices == [format_ui_text("clipboard_failed"), format_ui_text("panel_shown")]


def test_panel_failure_does_not_undo_clipboard() -> None:
    clipboard, panel, notices = FakeClipboard(), FakePanel(fail=True), []
    report = ResultSinkCoordinator(clipboard, panel, notices.append).deliver(RESULT)

    assert report.clipboard_ok
    assert clipboard.contents == "HELLO"
    assert not report.panel_ok
    assert report.panel_error == "panel unavailable"
    assert notices == [format_ui_text("clipboard_copied"), format_ui_text("panel_failed")]


def test_both_sinks_fail_independently() -> None:
    clipboard, panel, notices = FakeClipboard(fail=True), FakePanel(fail=True), []
    report = ResultSinkCoordinator(clipboard, panel, notices.append).deliver(RESULT)

    assert not report.clipboard_ok and not report.panel_ok
    assert clipboard.writes == 1 and panel.updates == 1
    assert len(notices) == 2
