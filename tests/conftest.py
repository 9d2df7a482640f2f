"""Shared pytest fixtures for note_ocr tests."""
from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional, Tuple

import pytest
from PIL import Image

from note_ocr.core.errors import RecognitionError
from note_ocr.core.image_loader import ImageLoader
from note_ocr.core.image_locator import ImageLocator
from note_ocr.core.models import OcrResult
from note_ocr.core.pipeline import OcrPipeline
from note_ocr.core.settings_store import SettingsStore
from note_ocr.core.sinks import ResultSinkCoordinator
from note_ocr.core.vault import Vault, VaultFile
from note_ocr.ocr.recognizer import Recognizer


def png_bytes(size: Tuple[int, int] = (40, 20)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color="white").save(buffer, format="PNG")
    return buffer.getvalue()


class FakeRecognizer(Recognizer):
    def __init__(self, text: str = "HELLO", error: Optional[str] = None) -> None:
        self.text = text
        self.error = error
        self.calls: List[Tuple[bytes, str]] = []

    def recognize(self, image_bytes: bytes, language_code: str) -> str:
        self.calls.append((image_bytes, language_code))
        if self.error is not None:
            raise RecognitionError(self.error)
        return self.text


class FakeClipboard:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.contents: Optional[str] = None
        self.writes = 0

    def __call__(self, text: str) -> None:
        self.writes += 1
        if self.fail:
            raise RuntimeError("clipboard access denied")
        self.contents = text


class FakePanel:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.result: Optional[OcrResult] = None
        self.updates = 0

    def __call__(self, result: OcrResult) -> None:
        self.updates += 1
        if self.fail:
            raise RuntimeError("panel unavailable")
        self.result = result


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    (root / "attach").mkdir(parents=True)
    (root / "attachments").mkdir()
    (root / "x").mkdir()
    (root / "notes").mkdir()

    (root / "attach" / "img1.png").write_bytes(png_bytes())
    (root / "attach" / "img2.jpg").write_bytes(png_bytes((30, 30)))
    (root / "attachments" / "scan.png").write_bytes(png_bytes())
    (root / "x" / "y.png").write_bytes(png_bytes())
    (root / "notes" / "daily.md").write_text(
        "see ![[img1.png]] and ![[img2.jpg]]", encoding="utf-8")
    (root / "notes" / "plain.md").write_text("no pictures here", encoding="utf-8")
    return root


@pytest.fixture
def vault(vault_dir: Path) -> Vault:
    return Vault(vault_dir)


@pytest.fixture
def settings_store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "config" / "settings.json")


@pytest.fixture
def notices() -> List[str]:
    return []


@pytest.fixture
def active_note():
    """Mutable holder for the active note used by the locator."""
    return {"note": VaultFile("notes/daily.md")}


@pytest.fixture
def locator(vault: Vault, active_note) -> ImageLocator:
    return ImageLocator(vault, lambda: active_note["note"])


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def panel() -> FakePanel:
    return FakePanel()


@pytest.fixture
def recognizer() -> FakeRecognizer:
    return FakeRecognizer()


@pytest.fixture
def pipeline(settings_store, locator, vault, recognizer, clipboard, panel, notices) -> OcrPipeline:
    sinks = ResultSinkCoordinator(clipboard=clipboard, panel=panel, notify=notices.append)
    return OcrPipeline(
        settings_store=settings_store,
        locator=locator,
        loader=ImageLoader(vault),
        recognizer=recognizer,
        sinks=sinks,
        notify=notices.append,
    )
