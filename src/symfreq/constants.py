"""중앙화된 분석/차트 설정 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 고정 설정값을 중앙에서 관리한다.
심볼 집합, 차트 스타일, 산출물 이름 규칙은 모두 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 🔣 심볼 분류
# ====================================================================

SYMBOLS = frozenset("^<>$%{()}=~[]_#@&*'`\\+-/\"|!;:?")

# str.isspace()가 참이지만 건너뛰지 않는 문자 (개행, 캐리지 리턴, 정보 구분자 FS/GS/RS/US)
NON_SKIPPABLE_SPACES = frozenset("\n\r\x1c\x1d\x1e\x1f")

# 입력 스트림을 한 번에 읽어들이는 문자 수
READ_CHUNK_SIZE = 64 * 1024

DEFAULT_ENCODING = "utf-8"

# ====================================================================
# 📈 차트 스타일
# ====================================================================

CHART_SIZE_INCHES = (8, 4)
CHART_DPI = 100
LINE_WIDTH_POINTS = 2
LINE_COLOR = (0.0, 0.0, 1.0, 1.0)
Y_TICK_STEP = 50
X_AXIS_LABEL = "Symbol"
Y_AXIS_LABEL = "Frequency"

# ====================================================================
# 📁 산출물 경로
# ====================================================================

DEFAULT_OUTPUT_DIR = Path(".")
UNIGRAM_SUFFIX = "unigrams"
BIGRAM_SUFFIX = "bigrams"
CHART_EXTENSION = ".png"

# ====================================================================
# 📝 로그 / 출력
# ====================================================================

LOG_FILE_PREFIX = "symfreq"
SUMMARY_TOP_N = 10
