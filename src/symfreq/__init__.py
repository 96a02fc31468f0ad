"""symfreq 심볼 빈도 분석 패키지.

텍스트 파일의 심볼 유니그램과 심볼/숫자 바이그램 빈도를 집계하고,
각 빈도 분포를 꺾은선 차트 PNG로 저장한다.
"""

__version__ = "0.1.0"
