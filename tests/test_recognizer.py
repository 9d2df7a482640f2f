"""Tesseract recognizer tests with pytesseract mocked out."""
from __future__ import annotations

import pytesseract
import pytest

from note_ocr.core.errors import RecognitionError
from note_ocr.ocr.recognizer import Recognizer, TesseractRecognizer

from conftest import png_bytes


def test_base_recognizer_raises_not_implemented() -> None:
    with pytest.raises(NotImplementedError):
        Recognizer().recognize(b"", "eng")


def test_recognize_passes_language_and_strips(monkeypatch) -> None:
    calls = []

    def fake_image_to_string(image, lang=None, config=""):
        calls.append((image.size, lang, config))
        return "  HELLO\n\x0c"

    monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)

    text = TesseractRecognizer(config="--psm 6").recognize(png_bytes((40, 20)), "ara")
    assert text == "HELLO"
    assert calls == [((40, 20), "ara", "--psm 6")]


def test_engine_error_becomes_recognition_error(monkeypatch) -> None:
    def failing(image, lang=None, config=""):
        raise pytesseract.TesseractError(1, "Failed loading language 'xx'")

    monkeypatch.setattr(pytesseract, "image_to_string", failing)

    with pytest.raises(RecognitionError) as excinfo:
        TesseractRecognizer().recognize(png_bytes(), "xx")
    assert "Failed loading language" in excinfo.value.detail


def test_missing_tesseract_becomes_recognition_error(monkeypatch) -> None:
    def missing(image, lang=None, config=""):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "image_to_string", missing)

    with pytest.raises(RecognitionError):
        TesseractRecognizer().recognize(png_bytes(), "eng")


def test_malformed_image_becomes_recognition_error(monkeypatch) -> None:
    called = []
    monkeypatch.setattr(pytesseract, "image_to_string",
                        lambda *args, **kwargs: called.append(True) or "")

    with pytest.raises(RecognitionError):
        TesseractRecognizer().recognize(b"definitely not an image", "eng")
    assert called == []


def test_engine_called_once_without_retry(monkeypatch) -> None:
    calls = []

    def flaky(image, lang=None, config=""):
        calls.append(lang)
        raise RuntimeError("engine crashed")

    monkeypatch.setattr(pytesseract, "image_to_string", flaky)

    with pytest.raises(RecognitionError):
        TesseractRecognizer().recognize(png_bytes(), "eng")
    assert calls == ["eng"]


def test_available_languages_hides_osd(monkeypatch) -> None:
    monkeypatch.setattr(pytesseract, "get_languages", lambda config="": ["osd", "eng", "ara"])
    assert TesseractRecognizer().available_languages() == ["ara", "eng"]


def test_available_languages_empty_without_tesseract(monkeypatch) -> None:
    def missing(config=""):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "get_languages", missing)
    assert TesseractRecognizer().available_languages() == []


def test_is_available(monkeypatch) -> None:
    monkeypatch.setattr(pytesseract, "get_tesseract_version", lambda: "5.3.0")
    assert TesseractRecognizer().is_available()

    def missing():
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, "get_tesseract_version", missing)
    assert not TesseractRecognizer().is_available()


def test_oversized_image_becomes_recognition_error(monkeypatch) -> None:
    from PIL import Image

    called = []
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    monkeypatch.setattr(pytesseract, "image_to_string",
                        lambda *args, **kwargs: called.append(True) or "")

    with pytest.raises(RecognitionError) as excinfo:
        TesseractRecognizer().recognize(png_bytes((40, 20)), "eng")
    assert "DecompressionBombError" in excinfo.value.detail
    assert called == []


def test_unexpected_engine_exception_becomes_recognition_error(monkeypatch) -> None:
    def broken(image, lang=None, config=""):
        raise KeyError("stdout")

    monkeypatch.setattr(pytesseract, "image_to_string", broken)

    with pytest.raises(RecognitionError):
        TesseractRecognizer().recognize(png_bytes(), "eng")
