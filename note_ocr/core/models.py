#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 파이프라인 데이터 모델
"""

from dataclasses import dataclass, field
from typing import Union

from note_ocr.core.vault import FileHandle


@dataclass(frozen=True)
class LastImageInNote:
    """현재 노트의 마지막 이미지"""
    kind: str = field(default="last-in-note", init=False)


@dataclass(frozen=True)
class TypedPath:
    """사용자가 입력한 경로"""
    path: str
    kind: str = field(default="typed-path", init=False)


@dataclass(frozen=True)
class ExplicitFile:
    """파일 브라우저/파일 대화상자에서 선택한 파일"""
    handle: FileHandle
    kind: str = field(default="explicit-file", init=False)


ImageReference = Union[LastImageInNote, TypedPath, ExplicitFile]


@dataclass(frozen=True)
class LocatedImage:
    handle: FileHandle
    display_label: str


@dataclass(frozen=True)
class OcrResult:
    text: str
    source_label: str
    language_code: str


DEFAULT_IMAGE_FOLDER = "attachments/"
DEFAULT_OCR_LANGUAGE = "eng"


@dataclass
class Settings:
    """사용자 설정 (저장 키: defaultImageFolder, ocrLang)"""
    default_image_folder: str = DEFAULT_IMAGE_FOLDER
    ocr_language_code: str = DEFAULT_OCR_LANGUAGE
