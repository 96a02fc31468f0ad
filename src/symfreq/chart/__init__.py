"""빈도 순위 차트 렌더링 모듈."""

from symfreq.chart.line_chart import (
    build_frequency_chart,
    render_frequency_chart,
    write_frequency_chart,
)

__all__ = [
    "build_frequency_chart",
    "render_frequency_chart",
    "write_frequency_chart",
]
