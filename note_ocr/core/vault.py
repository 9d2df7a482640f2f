#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
볼트 모듈
노트와 이미지 첨부 파일이 있는 디렉터리를 다룹니다.
경로는 항상 볼트 기준 POSIX 상대 경로로 표현합니다.
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Union


IMAGE_EXTENSIONS = frozenset({'png', 'jpg', 'jpeg'})
NOTE_EXTENSIONS = frozenset({'md'})


def is_image_file(name: str) -> bool:
    """png/jpg/jpeg 확장자 여부 (대소문자 무시)"""
    suffix = PurePosixPath(name).suffix
    return suffix[1:].lower() in IMAGE_EXTENSIONS if suffix else False


def is_note_file(name: str) -> bool:
    """마크다운 노트 여부"""
    suffix = PurePosixPath(name).suffix
    return suffix[1:].lower() in NOTE_EXTENSIONS if suffix else False


@dataclass(frozen=True)
class VaultFile:
    """볼트 내부 파일"""
    path: str

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix[1:].lower()


@dataclass(frozen=True)
class VaultFolder:
    """볼트 내부 폴더"""
    path: str


@dataclass(frozen=True)
class LocalFile:
    """볼트 밖 파일 시스템의 파일"""
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


FileHandle = Union[VaultFile, LocalFile]


class Vault:
    """노트 볼트"""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root: Path = Path(root).expanduser().resolve()

    def __repr__(self) -> str:
        return f"Vault({str(self.root)!r})"

    def _normalize(self, path: str) -> Optional[str]:
        """볼트 기준 상대 경로로 정규화 (볼트 밖이면 None)"""
        raw = path.strip().replace('\\', '/')
        if not raw:
            return None

        candidate = Path(raw)
        if candidate.is_absolute():
            try:
                rel = candidate.resolve().relative_to(self.root)
            except ValueError:
                return None
            return rel.as_posix()

        parts: List[str] = []
        for part in PurePosixPath(raw).parts:
            if part in ('', '.'):
                continue
            if part == '..':
                if not parts:
                    return None
                parts.pop()
                continue
            parts.append(part)
        return '/'.join(parts)

    def contains(self, path: Union[str, Path]) -> bool:
        """절대 경로가 볼트 내부인지 확인"""
        try:
            Path(path).expanduser().resolve().relative_to(self.root)
        except ValueError:
            return False
        return True

    def to_path(self, file: Union[VaultFile, VaultFolder]) -> Path:
        return self.root / file.path if file.path else self.root

    def get_abstract_file(self, path: str) -> Optional[Union[VaultFile, VaultFolder]]:
        """경로를 볼트 파일/폴더로 해석"""
        rel = self._normalize(path)
        if rel is None:
            logging.debug("Path outside vault or empty: %r", path)
            return None

        full = self.root / rel if rel else self.root
        if full.is_file():
            return VaultFile(rel)
        if full.is_dir():
            return VaultFolder(rel)
        return None

    def read_text(self, file: VaultFile) -> str:
        return self.to_path(file).read_text(encoding='utf-8')

    def read_binary(self, file: VaultFile) -> bytes:
        return self.to_path(file).read_bytes()

    def list_files(self, extensions: Optional[Iterable[str]] = None) -> List[VaultFile]:
        """볼트 파일 목록 (숨김 폴더 제외, 경로순 정렬)"""
        wanted = {ext.lower().lstrip('.') for ext in extensions} if extensions else None
        files: List[VaultFile] = []

        for full in self.root.rglob('*'):
            rel = full.relative_to(self.root)
            if any(part.startswith('.') for part in rel.parts):
                continue
            if not full.is_file():
                continue
            if wanted is not None and full.suffix[1:].lower() not in wanted:
                continue
            files.append(VaultFile(rel.as_posix()))

        return sorted(files, key=lambda f: f.path.lower())
