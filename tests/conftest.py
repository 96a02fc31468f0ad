from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def make_input(tmp_path: Path) -> Callable[..., Path]:
    """tmp_path 아래에 분석용 입력 파일을 만드는 헬퍼."""

    def _make(content: str | bytes, name: str = "notes.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    return _make
