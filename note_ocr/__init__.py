"""
Note OCR
노트 이미지에서 텍스트를 추출해 클립보드와 사이드 패널로 보내는 데스크톱 도구
"""

__version__ = "1.0.0"
