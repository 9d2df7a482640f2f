"""
User interface package
tkinter 기반 화면, 결과 패널, 대화상자
"""
