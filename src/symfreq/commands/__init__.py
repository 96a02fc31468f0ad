"""분석 커맨드 모듈.

CLI에서 호출되는 커맨드 클래스들을 제공한다.
모든 커맨드는 Command 인터페이스를 구현한다.
"""

from .analyze_command import AnalyzeCommand
from .base import Command

__all__ = [
    "Command",
    "AnalyzeCommand",
]
