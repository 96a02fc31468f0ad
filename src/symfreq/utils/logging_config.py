"""중앙화된 로깅/콘솔 설정"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from symfreq.constants import LOG_FILE_PREFIX
from symfreq.errors import OutputWriteError

_CONSOLE = Console(stderr=False)
_ERROR_CONSOLE = Console(stderr=True)


def get_console() -> Console:
    """로깅과 결과 출력에서 공용으로 사용할 Rich 콘솔을 반환한다."""
    return _CONSOLE


def get_error_console() -> Console:
    """오류 패널 출력용 표준 에러 Rich 콘솔을 반환한다."""
    return _ERROR_CONSOLE


def setup_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    log_dir: Path | None = None,
) -> Path | None:
    """전역 로깅을 설정한다.

    Rich 콘솔 핸들러는 중복 없이 한 번만 추가하고, log_dir가 주어지면
    호출마다 새 로그 파일 핸들러를 추가한다.

    Args:
        level: 로깅 레벨
        format_string: 로그 파일 포맷 문자열
        log_dir: 로그 파일 저장 디렉토리 (None이면 파일로 저장하지 않음)

    Returns:
        생성된 로그 파일 경로 (파일 로깅을 하지 않으면 None)

    Raises:
        OutputWriteError: 로그 디렉토리나 로그 파일을 만들 수 없는 경우
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Rich 콘솔 핸들러는 한 번만 추가한다
    if not any(isinstance(handler, RichHandler) for handler in root_logger.handlers):
        console_handler = RichHandler(
            console=get_console(),
            show_path=False,
            show_time=False,
            rich_tracebacks=True,
            markup=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    # 파일 핸들러 설정
    log_file = log_dir / f"{LOG_FILE_PREFIX}_{datetime.now():%Y%m%d_%H%M%S}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"{log_dir}: 로그 파일을 만들 수 없습니다 ({exc.strerror or exc})") from exc
    file_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(file_handler)

    root_logger.info("📝 로그 파일: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거를 반환한다.

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Returns:
        설정된 로거 인스턴스
    """
    return logging.getLogger(name)
