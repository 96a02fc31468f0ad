from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from symfreq.constants import DEFAULT_ENCODING, NON_SKIPPABLE_SPACES, READ_CHUNK_SIZE, SYMBOLS
from symfreq.errors import InputReadError
from symfreq.utils.logging_config import get_logger

logger = get_logger(__name__)


class CharClass(Enum):
    """코드 포인트 분류"""

    SYMBOL = "symbol"
    DIGIT = "digit"
    SKIPPABLE_SPACE = "skippable_space"
    OTHER = "other"


@dataclass
class SymbolStatistics:
    """입력 파일 하나에 대한 유니그램/바이그램 빈도 통계"""

    title: str
    unigrams: Counter[str] = field(default_factory=Counter)
    bigrams: Counter[str] = field(default_factory=Counter)


def is_symbol(ch: str) -> bool:
    """고정 심볼 집합에 속하는 문자인지 확인한다."""
    return ch in SYMBOLS


def classify_char(ch: str) -> CharClass:
    """문자 하나를 분류한다.

    개행(\\n), 캐리지 리턴(\\r), 정보 구분자(U+001C~U+001F)는 건너뛸 공백이
    아니라 OTHER로 분류되어 바이그램 연속성을 끊는다.
    """
    if ch.isspace() and ch not in NON_SKIPPABLE_SPACES:
        return CharClass.SKIPPABLE_SPACE
    if is_symbol(ch):
        return CharClass.SYMBOL
    # 유니코드 Nd 범주만 숫자로 취급
    if ch.isdecimal():
        return CharClass.DIGIT
    return CharClass.OTHER


def count_symbols(chars: Iterable[str]) -> tuple[Counter[str], Counter[str]]:
    """문자 스트림을 한 번 순회하여 유니그램과 바이그램 빈도를 집계한다.

    Args:
        chars: 한 글자씩 생성하는 문자 이터러블

    Returns:
        (유니그램 빈도, 바이그램 빈도) 튜플
    """
    unigrams: Counter[str] = Counter()
    bigrams: Counter[str] = Counter()
    prev: str | None = None

    for ch in chars:
        kind = classify_char(ch)
        if kind is CharClass.SKIPPABLE_SPACE:
            continue
        if kind is CharClass.OTHER:
            prev = None
            continue

        if kind is CharClass.SYMBOL:
            unigrams[ch] += 1

        if prev is not None:
            # 숫자-숫자 쌍은 집계하지 않는다
            if not (kind is CharClass.DIGIT and classify_char(prev) is CharClass.DIGIT):
                bigrams[prev + ch] += 1

        prev = ch

    return unigrams, bigrams


def iter_chars(stream: TextIO, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[str]:
    """텍스트 스트림을 앞에서부터 청크 단위로 읽어 한 글자씩 생성한다."""
    for chunk in iter(partial(stream.read, chunk_size), ""):
        yield from chunk


def rank_frequencies(table: Counter[str] | dict[str, int]) -> list[tuple[str, int]]:
    """빈도 내림차순으로 정렬된 (키, 빈도) 목록을 반환한다.

    안정 정렬이므로 빈도가 같은 키는 삽입 순서를 유지한다.
    """
    return sorted(table.items(), key=lambda item: item[1], reverse=True)


def title_for(path: Path) -> str:
    """입력 경로에서 디렉토리와 확장자를 제거한 차트 제목 기반 이름을 만든다.

    마지막 "." 뒤를 확장자로 보므로 ".txt" 같은 이름은 빈 문자열이 된다.
    """
    base, dot, _ = path.name.rpartition(".")
    return base if dot else path.name


def calculate_statistics(path: Path, *, encoding: str = DEFAULT_ENCODING) -> SymbolStatistics:
    """입력 파일의 심볼 빈도 통계를 계산한다.

    Args:
        path: 분석할 텍스트 파일 경로
        encoding: 입력 파일 인코딩

    Returns:
        유니그램/바이그램 빈도가 채워진 통계 객체

    Raises:
        InputReadError: 파일을 열거나 읽거나 디코딩할 수 없는 경우
    """
    try:
        # newline=""로 열어 \r을 그대로 보존한다
        with path.open("r", encoding=encoding, newline="") as handle:
            unigrams, bigrams = count_symbols(iter_chars(handle))
    except UnicodeDecodeError as exc:
        raise InputReadError(f"{path}: {encoding} 디코딩 실패 ({exc.reason}, 위치 {exc.start})") from exc
    except LookupError as exc:
        raise InputReadError(f"알 수 없는 인코딩입니다: {encoding}") from exc
    except OSError as exc:
        raise InputReadError(f"{path}: {exc.strerror or exc}") from exc

    stats = SymbolStatistics(title=title_for(path), unigrams=unigrams, bigrams=bigrams)

    logger.debug(
        "📊 %s: 유니그램 %d종(%d회), 바이그램 %d종(%d회)",
        path,
        len(stats.unigrams),
        sum(stats.unigrams.values()),
        len(stats.bigrams),
        sum(stats.bigrams.values()),
    )
    return stats
