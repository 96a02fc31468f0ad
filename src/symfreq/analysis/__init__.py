"""심볼 빈도 집계 모듈.

입력 텍스트를 한 번 순회하여 코드 포인트를 분류하고, 심볼 유니그램과
심볼/숫자 바이그램 빈도를 집계한다.
"""

from __future__ import annotations

from .symbol_frequency import (
    CharClass,
    SymbolStatistics,
    calculate_statistics,
    classify_char,
    count_symbols,
    is_symbol,
    rank_frequencies,
)

__all__ = [
    "CharClass",
    "SymbolStatistics",
    "calculate_statistics",
    "classify_char",
    "count_symbols",
    "is_symbol",
    "rank_frequencies",
]
