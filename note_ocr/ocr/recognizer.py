#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OCR 처리 모듈
이미지 바이트에서 텍스트를 추출합니다.
엔진 호출은 요청마다 한 번만 하며 재시도나 시간 제한은 두지 않습니다.
"""

import io
import logging
from typing import List, Optional

import pytesseract  # type: ignore
from PIL import Image, UnidentifiedImageError  # type: ignore

from note_ocr.core.errors import RecognitionError


class Recognizer:
    """OCR 엔진 인터페이스"""

    def recognize(self, image_bytes: bytes, language_code: str) -> str:
        raise NotImplementedError


class TesseractRecognizer(Recognizer):
    """Tesseract(pytesseract) 기반 OCR"""

    def __init__(self, tesseract_cmd: Optional[str] = None, config: str = "") -> None:
        self.config = config
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
            logging.info("Tesseract command set: %s", tesseract_cmd)

    def is_available(self) -> bool:
        """Tesseract 실행 가능 여부 확인"""
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as e:
            logging.warning("Tesseract unavailable: %s", e)
            return False
        logging.info("Tesseract version: %s", version)
        return True

    def available_languages(self) -> List[str]:
        """설치된 언어 데이터 목록 (언어 설정 대화상자 제안용)"""
        try:
            languages = pytesseract.get_languages(config='')
        except (pytesseract.TesseractNotFoundError, pytesseract.TesseractError, OSError) as e:
            logging.warning("Could not list Tesseract languages: %s", e)
            return []
        return sorted(lang for lang in languages if lang and lang != 'osd')

    def _decode(self, image_bytes: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
        return image

    def recognize(self, image_bytes: bytes, language_code: str) -> str:
        """이미지 바이트 → 텍스트"""
        try:
            image = self._decode(image_bytes)
            logging.info("OCR started: size=%s, mode=%s, lang=%s",
                         image.size, image.mode, language_code)
            text = pytesseract.image_to_string(image, lang=language_code, config=self.config)
        except (UnidentifiedImageError, pytesseract.TesseractNotFoundError,
                pytesseract.TesseractError, OSError, RuntimeError, ValueError) as e:
            logging.error("OCR engine failure (lang=%s): %s: %s",
                          language_code, type(e).__name__, e)
            raise RecognitionError(f"{type(e).__name__}: {e}") from e
        except Exception as e:
            # DecompressionBombError 등 Pillow/엔진의 기타 오류
            logging.exception("Unexpected OCR engine failure (lang=%s)", language_code)
            raise RecognitionError(f"{type(e).__name__}: {e}") from e

        # Tesseract 출력 끝의 줄바꿈과 폼 피드 제거
        result = (text or "").strip()
        logging.info("OCR completed: %d characters", len(result))
        return result
