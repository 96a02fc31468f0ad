"""symfreq CLI 진입점 모듈.

텍스트 파일 하나를 받아 심볼 유니그램/바이그램 빈도 차트를 생성하는
명령줄 인터페이스를 제공한다. Rich 기반 콘솔 출력 및 로깅을 지원한다.
"""

from __future__ import annotations

import argparse
import logging
from functools import lru_cache
from time import perf_counter
from typing import Any, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from symfreq.commands import AnalyzeCommand, Command
from symfreq.errors import (
    EmptyDataError,
    InputReadError,
    OutputWriteError,
    RenderError,
    UsageError,
)
from symfreq.parser import PROG, setup_parser
from symfreq.utils.logging_config import get_console, get_error_console, get_logger, setup_logging

LOGGER_NAME = "symfreq.cli"
CONSOLE = get_console()
ERROR_CONSOLE = get_error_console()


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """배너 텍스트를 캐싱하여 반환한다.

    pyfiglet을 사용하여 ASCII 아트 배너를 생성하고, LRU 캐시로 재사용한다.

    Returns:
        생성된 배너 텍스트
    """
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText(PROG).rstrip()


def print_banner() -> None:
    """시작 배너를 출력한다."""
    CONSOLE.print(Text(_get_banner(), style="bold cyan"))


def create_command(args: argparse.Namespace) -> Command:
    """파싱된 인자로 분석 커맨드를 생성한다."""
    return AnalyzeCommand(CONSOLE, args.input_path, args.output_dir, args.encoding)


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    1초 미만은 밀리초, 1분 미만은 초, 그 이상은 분:초 형식으로 표시한다.

    Args:
        elapsed: 경과 시간 (초 단위)

    Returns:
        포맷팅된 시간 문자열 (예: "500ms", "3.14초", "2분 30.5초")
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 포맷팅한다.

    정수는 천 단위 구분자를 넣고, 120자를 초과하면 잘라낸다.
    """
    formatted = f"{value:,}" if isinstance(value, int) else str(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다.

    Args:
        command_name: 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        result: 실행 결과 딕셔너리

    Returns:
        생성된 Rich Panel 객체
    """
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", Text(format_value(value)))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2),
    )


# 오류 타입별 (카테고리, 아이콘, 로그 메시지)
_ERROR_CATEGORIES: dict[type[Exception], tuple[str, str, str]] = {
    UsageError: ("사용법 오류", "⚠️", "인자 오류"),
    InputReadError: ("입력 오류", "📁", "입력 파일 읽기 실패"),
    OutputWriteError: ("출력 오류", "💾", "차트 파일 저장 실패"),
    EmptyDataError: ("데이터 없음", "📭", "그래프로 그릴 데이터가 없음"),
    RenderError: ("렌더링 오류", "🖼️", "차트 렌더링 실패"),
}


def handle_error(error: Exception, command: str, elapsed: float, logger: logging.Logger | None) -> None:
    """에러를 처리하고 표준 에러로 출력한다.

    에러 타입별로 적절한 카테고리와 아이콘을 선택한다.

    Args:
        error: 발생한 예외
        command: 실행 중이던 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        logger: 로거 객체 (로깅 설정 전이면 None)
    """
    error_type = type(error).__name__
    category, icon, log_msg = _ERROR_CATEGORIES.get(
        type(error), ("예기치 않은 오류", "❌", "실행 중 예기치 않은 오류 발생")
    )

    if logger is not None:
        if type(error) in _ERROR_CATEGORIES:
            logger.error("[%s] %s: %s", command, log_msg, error)
        else:
            logger.exception("[%s] %s", command, log_msg)

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", error_type)
    error_table.add_row("메시지", Text(str(error)))
    error_table.add_row("경과 시간", format_time(elapsed))

    ERROR_CONSOLE.print()
    ERROR_CONSOLE.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]", border_style="red", padding=(1, 2))
    )

    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"{PROG} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    ERROR_CONSOLE.print(help_text)
    ERROR_CONSOLE.print()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    인자를 파싱하고 분석 커맨드를 실행한다.

    Args:
        argv: 명령줄 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 사용자 중단)
    """
    print_banner()
    start = perf_counter()

    try:
        args = setup_parser(AnalyzeCommand).parse_args(argv)
    except UsageError as e:
        handle_error(e, PROG, perf_counter() - start, None)
        return 1

    logger = get_logger(LOGGER_NAME)

    command_name = PROG
    try:
        setup_logging(getattr(logging, args.log_level), log_dir=args.log_dir)
        command = create_command(args)
        command_name = command.get_name()
        logger.info("[%s] 단계 시작", command_name)
        result = command.execute()
        elapsed = perf_counter() - start

        logger.info("[%s] 단계 완료 (%.2fs)", command_name, elapsed)
        CONSOLE.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, command_name, perf_counter() - start, logger)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
