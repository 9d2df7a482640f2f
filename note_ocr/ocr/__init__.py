"""
OCR (Optical Character Recognition) package
이미지에서 텍스트 추출 기능
"""

from .recognizer import Recognizer, TesseractRecognizer

__all__ = ['Recognizer', 'TesseractRecognizer']
