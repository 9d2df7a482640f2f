#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
텍스트 방향 판별
Tesseract 언어 코드로 오른쪽→왼쪽 표시 여부를 결정합니다.
"""

from typing import FrozenSet


# 오른쪽에서 왼쪽으로 쓰는 문자의 Tesseract 언어 코드
RTL_LANGUAGE_CODES: FrozenSet[str] = frozenset({
    'ara',  # Arabic
    'heb',  # Hebrew
    'fas',  # Persian
    'urd',  # Urdu
    'pus',  # Pashto
    'snd',  # Sindhi
    'uig',  # Uyghur
    'yid',  # Yiddish
    'div',  # Dhivehi
    'syr',  # Syriac
})


def primary_language(language_code: str) -> str:
    """'ara+eng' 형식에서 첫 번째 언어 반환"""
    return language_code.strip().split('+', 1)[0].strip().lower()


def is_rtl_language(language_code: str) -> bool:
    return primary_language(language_code or '') in RTL_LANGUAGE_CODES
