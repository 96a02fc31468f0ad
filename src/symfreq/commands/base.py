"""분석 커맨드 추상 인터페이스.

CLI에서 실행되는 커맨드 클래스들의 공통 인터페이스를 정의한다.
모든 커맨드는 Command 추상 클래스를 상속받아 execute()와 get_name()을 구현해야 한다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any


class Command(ABC):
    """분석 단계 실행 커맨드 인터페이스.

    각 커맨드는 configure_parser(), execute(), get_name()을 구현해야 한다.
    """

    @staticmethod
    @abstractmethod
    def configure_parser(parser: argparse.ArgumentParser) -> None:
        """커맨드 인자를 파서에 등록한다.

        Args:
            parser: 인자를 추가할 파서
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드 실행 로직.

        Returns:
            실행 결과 딕셔너리

        Raises:
            NotImplementedError: 서브클래스에서 구현되지 않은 경우
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드의 고유 식별 이름

        Raises:
            NotImplementedError: 서브클래스에서 구현되지 않은 경우
        """
        raise NotImplementedError
