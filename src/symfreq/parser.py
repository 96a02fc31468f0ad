"""CLI 인자 파서 설정 모듈.

argparse 기반 CLI 파서를 정의한다.
인자 오류는 UsageError로 변환되어 CLI 최상위에서 처리된다.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from symfreq.errors import UsageError

if TYPE_CHECKING:
    from symfreq.commands.base import Command

PROG = "symfreq"


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """CLI 도움말 포맷터.

    ArgumentDefaultsHelpFormatter와 RawTextHelpFormatter를 결합하여
    기본값 표시와 원시 텍스트 포맷을 동시에 지원한다.
    """


class CliArgumentParser(argparse.ArgumentParser):
    """인자 오류를 UsageError로 전달하는 argparse 파서.

    기본 동작처럼 즉시 종료하지 않고, 올바른 호출 형식을 담은
    UsageError를 발생시켜 CLI의 공통 오류 패널로 출력되게 한다.
    """

    def error(self, message: str) -> None:
        """인자 파싱 오류를 UsageError로 변환한다.

        Args:
            message: 오류 메시지

        Raises:
            UsageError: 항상
        """
        raise UsageError(f"{message}\nUsage: {self.format_usage().strip().removeprefix('usage: ')}")


def setup_parser(command: type[Command]) -> argparse.ArgumentParser:
    """CLI 파서를 설정한다.

    Command 서브클래스의 configure_parser()를 호출하여 인자를 등록한다.

    Args:
        command: 인자를 등록할 Command 서브클래스

    Returns:
        설정된 ArgumentParser 객체
    """
    parser = CliArgumentParser(
        prog=PROG,
        description="텍스트 파일의 심볼 유니그램/바이그램 빈도를 꺾은선 차트로 저장합니다.",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="콘솔 로깅 레벨",
    )
    parser.add_argument("--log-dir", type=Path, default=None, help="로그 파일 저장 디렉토리 (지정 시에만 저장)")

    command.configure_parser(parser)
    return parser
