"""Right-to-left language table tests."""
from __future__ import annotations

import pytest

from note_ocr.core.models import OcrResult
from note_ocr.core.text_direction import RTL_LANGUAGE_CODES, is_rtl_language
from note_ocr.ui.panel import PanelState


@pytest.mark.parametrize("code", ["ara", "ARA", " ara ", "heb", "fas", "urd", "ara+eng"])
def test_rtl_codes(code: str) -> None:
    assert is_rtl_language(code)


@pytest.mark.parametrize("code", ["eng", "fra", "kor", "eng+ara", "", "arab"])
def test_ltr_codes(code: str) -> None:
    assert not is_rtl_language(code)


def test_table_is_used_for_every_entry() -> None:
    for code in RTL_LANGUAGE_CODES:
        assert is_rtl_language(code)


def test_panel_state_direction() -> None:
    arabic = PanelState.from_result(OcrResult("مرحبا", "a.png", "ara"))
    english = PanelState.from_result(OcrResult("hello", "a.png", "eng"))

    assert arabic.rtl
    assert not english.rtl
    assert "a.png" in english.title
    assert english.text == "hello"
