"""심볼 빈도 분석 커맨드.

입력 텍스트 파일을 한 번 순회하여 심볼 유니그램/바이그램 빈도를 집계하고,
각 빈도 분포를 꺾은선 차트 PNG로 저장한다.
"""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from symfreq.analysis.symbol_frequency import SymbolStatistics, calculate_statistics, rank_frequencies
from symfreq.chart.line_chart import write_frequency_chart
from symfreq.constants import (
    BIGRAM_SUFFIX,
    CHART_EXTENSION,
    DEFAULT_ENCODING,
    DEFAULT_OUTPUT_DIR,
    SUMMARY_TOP_N,
    UNIGRAM_SUFFIX,
)
from symfreq.errors import OutputWriteError
from symfreq.utils.logging_config import get_logger

from .base import Command

logger = get_logger(__name__)

_GRAM_LABELS = {
    UNIGRAM_SUFFIX: "유니그램",
    BIGRAM_SUFFIX: "바이그램",
}


def chart_path(output_dir: Path, title: str, suffix: str) -> Path:
    """입력 이름과 접미사로 차트 파일 경로를 만든다. (예: notes_unigrams.png)"""
    return output_dir / f"{title}_{suffix}{CHART_EXTENSION}"


class AnalyzeCommand(Command):
    """심볼 빈도 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 분석할 텍스트 파일 경로
        output_dir: 차트 PNG 출력 디렉토리
        encoding: 입력 파일 인코딩
        top_n: 요약 테이블에 표시할 상위 항목 수
    """

    @staticmethod
    def configure_parser(parser: argparse.ArgumentParser) -> None:
        """분석 커맨드 인자를 파서에 등록한다.

        Args:
            parser: 인자를 추가할 파서
        """
        parser.add_argument("input_path", type=Path, metavar="FILE", help="분석할 텍스트 파일")
        parser.add_argument(
            "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR, help="차트 PNG 출력 디렉토리"
        )
        parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="입력 파일 인코딩")

    def __init__(
        self,
        console: Console,
        input_path: Path,
        output_dir: Path = DEFAULT_OUTPUT_DIR,
        encoding: str = DEFAULT_ENCODING,
        top_n: int = SUMMARY_TOP_N,
    ):
        self.console = console
        self.input_path = input_path
        self.output_dir = output_dir
        self.encoding = encoding
        self.top_n = top_n

    def execute(self) -> dict[str, Any]:
        """심볼 빈도 분석을 실행한다.

        통계를 계산한 뒤 유니그램, 바이그램 순서로 차트를 생성한다.
        어느 단계든 실패하면 즉시 예외를 전파한다.

        Returns:
            분석 결과 딕셔너리 (input_path, unigram_chart, bigram_chart, 빈도 합계)
        """
        self._progress(f"🔢 통계 계산 중: {self.input_path}")
        stats = calculate_statistics(self.input_path, encoding=self.encoding)

        self._print_summary(stats)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(f"{self.output_dir}: {exc.strerror or exc}") from exc

        unigram_chart = self._generate_chart(stats, UNIGRAM_SUFFIX, stats.unigrams)
        bigram_chart = self._generate_chart(stats, BIGRAM_SUFFIX, stats.bigrams)

        return {
            "input_path": self.input_path,
            "unigram_chart": unigram_chart,
            "bigram_chart": bigram_chart,
            "unique_unigrams": len(stats.unigrams),
            "total_unigrams": sum(stats.unigrams.values()),
            "unique_bigrams": len(stats.bigrams),
            "total_bigrams": sum(stats.bigrams.values()),
        }

    def _generate_chart(self, stats: SymbolStatistics, suffix: str, table: Counter[str]) -> Path:
        """빈도 테이블 하나를 차트 파일로 저장하고 경로를 출력한다."""
        label = _GRAM_LABELS[suffix]
        self._progress(f"📈 {label} 그래프 생성 중...")

        path = write_frequency_chart(
            chart_path(self.output_dir, stats.title, suffix),
            f"{stats.title} {suffix}",
            table,
        )

        self.console.print(f"{label} 그래프 생성 완료: {path}", markup=False, highlight=False, soft_wrap=True)
        return path

    def _progress(self, message: str) -> None:
        """진행 메시지를 로그 레벨과 무관하게 콘솔에 출력하고 로그에도 남긴다."""
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)
        logger.debug(message)

    def _print_summary(self, stats: SymbolStatistics) -> None:
        """상위 빈도 유니그램/바이그램을 Rich 테이블로 출력한다."""
        for suffix, table in ((UNIGRAM_SUFFIX, stats.unigrams), (BIGRAM_SUFFIX, stats.bigrams)):
            ranked = rank_frequencies(table)[: self.top_n]
            if not ranked:
                continue

            summary = Table(
                title=f"🏆 상위 {len(ranked)}개 {_GRAM_LABELS[suffix]}", show_header=True, border_style="dim"
            )
            summary.add_column("순위", style="dim", width=6, justify="center")
            summary.add_column("키", style="cyan", width=10, justify="center")
            summary.add_column("빈도", style="yellow", width=15, justify="right")

            for idx, (key, freq) in enumerate(ranked, 1):
                rank_style = "bold green" if idx <= 3 else "dim"
                summary.add_row(f"{idx}", Text(repr(key)), f"{freq:,}회", style=rank_style)

            self.console.print()
            self.console.print(summary)

        self.console.print()

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "analyze"
        """
        return "analyze"
