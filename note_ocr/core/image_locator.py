#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
이미지 위치 탐색 모듈
노트의 이미지 임베드, 입력 경로, 선택한 파일을 실제 이미지 파일로 해석합니다.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Optional

from note_ocr.core.errors import ImageNotFound, NoActiveNote, NoImageFound, NotAFile, UnsupportedSource
from note_ocr.core.models import (
    ExplicitFile, ImageReference, LastImageInNote, LocatedImage, Settings, TypedPath,
)
from note_ocr.core.vault import LocalFile, Vault, VaultFile, VaultFolder


# ![[image.png]] 형식의 임베드 (이름에 대괄호/줄바꿈 없음)
EMBEDDED_IMAGE_PATTERN = re.compile(r'!\[\[([^\[\]\n]+?\.(?:png|jpe?g))\]\]', re.IGNORECASE)

PATH_SEPARATORS = '/\\'


def find_last_embedded_image(text: str) -> Optional[str]:
    """문서 순서상 마지막 이미지 임베드의 파일 이름"""
    last = None
    for match in EMBEDDED_IMAGE_PATTERN.finditer(text):
        last = match
    return last.group(1) if last else None


def join_image_folder(folder: str, file_name: str) -> str:
    """기본 이미지 폴더와 파일 이름 결합 (앞뒤 구분자 제거)"""
    base = folder.strip().strip(PATH_SEPARATORS)
    return f"{base}/{file_name}" if base else file_name


class ImageLocator:
    """ImageReference → LocatedImage"""

    def __init__(self, vault: Vault, active_note: Callable[[], Optional[VaultFile]]) -> None:
        self.vault = vault
        self._active_note = active_note

    def locate(self, reference: ImageReference, settings: Settings) -> LocatedImage:
        if isinstance(reference, LastImageInNote):
            return self._locate_last_in_note(settings)
        if isinstance(reference, TypedPath):
            return self._locate_typed_path(reference.path)
        if isinstance(reference, ExplicitFile):
            return self._locate_explicit_file(reference)
        raise UnsupportedSource(f"Unknown image reference: {reference!r}")

    def _locate_last_in_note(self, settings: Settings) -> LocatedImage:
        note = self._active_note()
        if note is None:
            raise NoActiveNote()

        try:
            content = self.vault.read_text(note)
        except (OSError, UnicodeDecodeError) as e:
            raise NoActiveNote(f"Cannot read active note {note.path}: {e}") from e

        image_name = find_last_embedded_image(content)
        if image_name is None:
            raise NoImageFound(f"No embedded image in {note.path}")

        relative_path = join_image_folder(settings.default_image_folder, image_name)
        logging.info("Last image in %s: %s", note.path, relative_path)
        return LocatedImage(self._resolve_vault_path(relative_path), image_name)

    def _locate_typed_path(self, path: str) -> LocatedImage:
        candidate = Path(path).expanduser()
        if candidate.is_absolute() and not self.vault.contains(candidate):
            # 볼트 밖 절대 경로는 파일 시스템에서 직접 확인
            if candidate.is_dir():
                raise NotAFile(path)
            if not candidate.is_file():
                raise ImageNotFound(path)
            return LocatedImage(LocalFile(candidate), path)

        vault_path = str(candidate) if candidate.is_absolute() else path
        return LocatedImage(self._resolve_vault_path(vault_path), path)

    def _locate_explicit_file(self, reference: ExplicitFile) -> LocatedImage:
        handle = reference.handle
        if isinstance(handle, VaultFile):
            return LocatedImage(self._resolve_vault_path(handle.path), handle.path)
        if isinstance(handle, LocalFile):
            return LocatedImage(handle, str(handle.path))
        raise UnsupportedSource(f"Unsupported file handle: {handle!r}")

    def _resolve_vault_path(self, path: str) -> VaultFile:
        resolved = self.vault.get_abstract_file(path)
        if resolved is None:
            raise ImageNotFound(path)
        if isinstance(resolved, VaultFolder):
            raise NotAFile(path)
        return resolved
