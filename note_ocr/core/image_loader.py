#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
이미지 로드 모듈
해석된 이미지에서 OCR 엔진에 넘길 바이트를 읽습니다.
"""

import logging

from note_ocr.core.errors import ImageLoadError, UnsupportedSource
from note_ocr.core.models import LocatedImage
from note_ocr.core.vault import LocalFile, Vault, VaultFile


class ImageLoader:
    """볼트 내부 파일과 로컬 파일을 같은 방식으로 읽습니다."""

    def __init__(self, vault: Vault) -> None:
        self.vault = vault

    def load_bytes(self, located: LocatedImage) -> bytes:
        handle = located.handle
        try:
            if isinstance(handle, VaultFile):
                data = self.vault.read_binary(handle)
            elif isinstance(handle, LocalFile):
                data = handle.path.read_bytes()
            else:
                raise UnsupportedSource(f"No reader for {type(handle).__name__}")
        except OSError as e:
            raise ImageLoadError(f"{located.display_label}: {e}") from e

        if not data:
            raise ImageLoadError(f"{located.display_label}: file is empty")

        logging.info("Image loaded: %s (%d bytes)", located.display_label, len(data))
        return data
