"""심볼 빈도 분석 예외 정의.

모든 오류는 실행 전체에 치명적이며, CLI 최상위에서 한 번에 처리된다.
"""

from __future__ import annotations


class SymfreqError(Exception):
    """symfreq 실행 중 발생하는 모든 오류의 기반 클래스."""


class UsageError(SymfreqError):
    """명령줄 인자 개수가 올바르지 않은 경우."""


class InputReadError(SymfreqError):
    """입력 파일을 열거나 읽거나 디코딩하지 못한 경우."""


class OutputWriteError(SymfreqError):
    """차트 파일을 생성하거나 기록하지 못한 경우."""


class EmptyDataError(SymfreqError, ValueError):
    """빈 빈도 테이블로 차트를 그리려 한 경우."""


class RenderError(SymfreqError):
    """차트 시리즈 구성 또는 이미지 인코딩에 실패한 경우."""
