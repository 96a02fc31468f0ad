"""빈도 순위 꺾은선 차트 렌더링 모듈.

빈도 테이블을 빈도 내림차순으로 정렬하고, 순위(x)와 빈도(y)를 잇는
꺾은선 그래프를 PNG 이미지로 렌더링한다.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Mapping

from matplotlib.figure import Figure

from symfreq.analysis.symbol_frequency import rank_frequencies
from symfreq.constants import (
    CHART_DPI,
    CHART_SIZE_INCHES,
    LINE_COLOR,
    LINE_WIDTH_POINTS,
    X_AXIS_LABEL,
    Y_AXIS_LABEL,
    Y_TICK_STEP,
)
from symfreq.errors import EmptyDataError, OutputWriteError, RenderError
from symfreq.utils.logging_config import get_logger

logger = get_logger(__name__)


def _escape_mathtext(text: str) -> str:
    """matplotlib가 '$'를 수식 구분자로 해석하지 않도록 이스케이프한다."""
    return text.replace("$", r"\$")


def y_ticks(max_count: int, step: int = Y_TICK_STEP) -> list[int]:
    """0부터 최대 빈도까지(포함) step 간격의 y축 눈금을 반환한다."""
    return list(range(0, max_count + 1, step))


def x_tick_labels(ranked: list[tuple[str, int]]) -> list[str]:
    """각 키 아래에 빈도를 함께 표시하는 x축 눈금 라벨을 반환한다."""
    return [f"{key}\n{count}" for key, count in ranked]


def build_frequency_chart(title: str, table: Mapping[str, int]) -> Figure:
    """빈도 테이블로 꺾은선 차트 Figure를 생성한다.

    Args:
        title: 차트 제목
        table: 키별 빈도 테이블

    Returns:
        렌더링 준비가 끝난 matplotlib Figure

    Raises:
        EmptyDataError: 테이블이 비어 있는 경우
        RenderError: 꺾은선 시리즈를 구성하지 못한 경우
    """
    if not table:
        raise EmptyDataError("cannot graph as data is empty")

    ranked = rank_frequencies(table)
    ranks = list(range(len(ranked)))
    counts = [count for _, count in ranked]

    fig = Figure(figsize=CHART_SIZE_INCHES, dpi=CHART_DPI, layout="tight")
    ax = fig.add_subplot()

    # 격자를 꺾은선 아래에 그린다
    ax.set_axisbelow(True)
    ax.grid(True)

    try:
        ax.plot(ranks, counts, linewidth=LINE_WIDTH_POINTS, color=LINE_COLOR)
    except ValueError as exc:
        raise RenderError(f"꺾은선 시리즈를 생성할 수 없습니다: {exc}") from exc

    ax.set_title(_escape_mathtext(title))
    ax.set_xlabel(X_AXIS_LABEL)
    ax.set_ylabel(Y_AXIS_LABEL)

    ax.set_xticks(ranks, [_escape_mathtext(label) for label in x_tick_labels(ranked)])
    ax.set_yticks(y_ticks(counts[0]))
    ax.set_ylim(bottom=0)

    return fig


def render_frequency_chart(title: str, table: Mapping[str, int]) -> bytes:
    """빈도 테이블을 PNG 이미지 바이트로 렌더링한다."""
    fig = build_frequency_chart(title, table)

    buffer = io.BytesIO()
    try:
        fig.savefig(buffer, format="png")
    except (ValueError, RuntimeError) as exc:
        raise RenderError(f"{title} 차트를 PNG로 인코딩할 수 없습니다: {exc}") from exc

    return buffer.getvalue()


def write_frequency_chart(path: Path, title: str, table: Mapping[str, int]) -> Path:
    """빈도 차트를 렌더링하여 파일로 저장한다.

    기존 파일이 있으면 덮어쓴다. 테이블이 비어 있으면 파일을 만들지 않는다.

    Args:
        path: 저장할 PNG 파일 경로
        title: 차트 제목
        table: 키별 빈도 테이블

    Returns:
        저장된 파일 경로

    Raises:
        EmptyDataError: 테이블이 비어 있는 경우
        RenderError: 차트 렌더링에 실패한 경우
        OutputWriteError: 파일을 생성하거나 기록할 수 없는 경우
    """
    image = render_frequency_chart(title, table)

    try:
        path.write_bytes(image)
    except OSError as exc:
        raise OutputWriteError(f"{path}: {exc.strerror or exc}") from exc

    logger.debug("🖼️  %s 저장 (%d bytes)", path, len(image))
    return path
