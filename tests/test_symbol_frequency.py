"""심볼 분류와 유니그램/바이그램 집계 테스트"""

import io
from collections import Counter
from pathlib import Path

import pytest

from symfreq.analysis.symbol_frequency import (
    CharClass,
    calculate_statistics,
    classify_char,
    count_symbols,
    is_symbol,
    iter_chars,
    rank_frequencies,
    title_for,
)
from symfreq.constants import SYMBOLS
from symfreq.errors import InputReadError

SAMPLE_TEXT = (
    "def f(x):\n"
    "    return x[0] + 42 * (y - 3.14) # note!\n"
    "if a != b && c || d: print(\"$HOME\", '@user', `cmd`, 100%)\n"
    "path = C:\\tmp\\{a}/b; ~/.rc ^ <tag> = _x ?? 7 8 9\n"
)


class TestClassifyChar:
    """코드 포인트 분류 규칙"""

    @pytest.mark.parametrize(
        "ch,expected",
        [
            ("#", CharClass.SYMBOL),
            ("\\", CharClass.SYMBOL),
            ("`", CharClass.SYMBOL),
            ('"', CharClass.SYMBOL),
            ("7", CharClass.DIGIT),
            ("\u0663", CharClass.DIGIT),  # ARABIC-INDIC DIGIT THREE
            ("\u00b2", CharClass.OTHER),  # SUPERSCRIPT TWO
            (" ", CharClass.SKIPPABLE_SPACE),
            ("\t", CharClass.SKIPPABLE_SPACE),
            ("\u00a0", CharClass.SKIPPABLE_SPACE),
            ("\n", CharClass.OTHER),
            ("\r", CharClass.OTHER),
            ("\x1c", CharClass.OTHER),  # FILE SEPARATOR
            ("\x1d", CharClass.OTHER),  # GROUP SEPARATOR
            ("\x1e", CharClass.OTHER),  # RECORD SEPARATOR
            ("\x1f", CharClass.OTHER),  # UNIT SEPARATOR
            ("\x85", CharClass.SKIPPABLE_SPACE),  # NEXT LINE
            ("a", CharClass.OTHER),
            (",", CharClass.OTHER),
            (".", CharClass.OTHER),
            ("한", CharClass.OTHER),
        ],
    )
    def test_classify(self, ch, expected):
        assert classify_char(ch) is expected

    def test_symbol_set_is_fixed(self):
        assert len(SYMBOLS) == 30
        assert all(is_symbol(ch) for ch in "^<>$%{()}=~[]_#@&*'`\\+-/\"|!;:?")
        assert not is_symbol(",")
        assert not is_symbol("5")


class TestCountSymbols:
    """한 번의 순회로 유니그램/바이그램을 집계한다"""

    def test_symbols_separated_by_letters(self):
        unigrams, bigrams = count_symbols("a#b##c")
        assert unigrams == Counter({"#": 3})
        assert bigrams == Counter({"##": 1})

    def test_digits_separated_by_space_are_suppressed(self):
        unigrams, bigrams = count_symbols("1 2")
        assert unigrams == Counter()
        assert bigrams == Counter()

    def test_empty_input(self):
        unigrams, bigrams = count_symbols("")
        assert not unigrams
        assert not bigrams

    def test_single_symbol_has_no_trailing_bigram(self):
        unigrams, bigrams = count_symbols("#")
        assert unigrams == Counter({"#": 1})
        assert not bigrams

    def test_other_character_resets_pair(self):
        _, bigrams = count_symbols("#!a#!")
        assert bigrams == Counter({"#!": 2})
        assert "!#" not in bigrams

    @pytest.mark.parametrize("separator", ["\n", "\r", "\r\n", "\x1c", "\x1f", "x", ","])
    def test_line_breaks_and_others_reset_pair(self, separator):
        _, bigrams = count_symbols(f"#{separator}!")
        assert not bigrams

    @pytest.mark.parametrize("spacing", ["", " ", "\t", "  \t ", "\u00a0", "\f\v"])
    def test_horizontal_whitespace_is_ignored(self, spacing):
        assert count_symbols(f"({spacing})") == count_symbols("()")

    def test_digit_symbol_pairs_are_counted(self):
        unigrams, bigrams = count_symbols("1#2")
        assert unigrams == Counter({"#": 1})
        assert bigrams == Counter({"1#": 1, "#2": 1})

    def test_digit_run_advances_previous_character(self):
        unigrams, bigrams = count_symbols("123!")
        assert unigrams == Counter({"!": 1})
        assert bigrams == Counter({"3!": 1})

    def test_bigram_order_follows_stream(self):
        _, bigrams = count_symbols("<>")
        assert bigrams == Counter({"<>": 1})

    def test_table_keys_invariants(self):
        unigrams, bigrams = count_symbols(SAMPLE_TEXT)

        assert unigrams
        for key in unigrams:
            assert len(key) == 1
            assert key in SYMBOLS
            assert not key.isdecimal()

        assert bigrams
        for key in bigrams:
            assert len(key) == 2
            assert not (key[0].isdecimal() and key[1].isdecimal())

    def test_two_passes_are_identical(self):
        assert count_symbols(SAMPLE_TEXT) == count_symbols(SAMPLE_TEXT)

    def test_accepts_streamed_characters(self):
        stream = io.StringIO(SAMPLE_TEXT)
        assert count_symbols(iter_chars(stream, chunk_size=7)) == count_symbols(SAMPLE_TEXT)


def test_iter_chars_reads_in_chunks():
    stream = io.StringIO("abcdefg")
    assert list(iter_chars(stream, chunk_size=3)) == list("abcdefg")


class TestRankFrequencies:
    """빈도 내림차순 안정 정렬"""

    def test_ties_keep_insertion_order(self):
        table = Counter()
        table["!?"] = 3
        table["?!"] = 3
        table["##"] = 5
        assert rank_frequencies(table) == [("##", 5), ("!?", 3), ("?!", 3)]

    def test_ties_keep_reversed_insertion_order(self):
        table = {"?!": 3, "##": 5, "!?": 3}
        assert rank_frequencies(table) == [("##", 5), ("?!", 3), ("!?", 3)]

    def test_empty_table(self):
        assert rank_frequencies(Counter()) == []


@pytest.mark.parametrize(
    "path,expected",
    [
        (Path("notes.txt"), "notes"),
        (Path("data/report.final.txt"), "report.final"),
        (Path("README"), "README"),
        (Path(".txt"), ""),
    ],
)
def test_title_strips_last_extension(path, expected):
    assert title_for(path) == expected


class TestCalculateStatistics:
    """파일 입력 통계 계산"""

    def test_title_is_file_stem(self, make_input):
        path = make_input("a#b##c", name="report.final.txt")
        stats = calculate_statistics(path)
        assert stats.title == "report.final"
        assert stats.unigrams == Counter({"#": 3})
        assert stats.bigrams == Counter({"##": 1})

    def test_carriage_return_breaks_pair(self, make_input):
        path = make_input(b"#\r!\r\n?")
        stats = calculate_statistics(path)
        assert stats.unigrams == Counter({"#": 1, "!": 1, "?": 1})
        assert not stats.bigrams

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputReadError) as excinfo:
            calculate_statistics(tmp_path / "missing.txt")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_invalid_utf8_aborts(self, make_input):
        path = make_input(b"#!\xff\xfe#")
        with pytest.raises(InputReadError) as excinfo:
            calculate_statistics(path)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_unknown_encoding(self, make_input):
        path = make_input("#!")
        with pytest.raises(InputReadError, match="no-such-codec"):
            calculate_statistics(path, encoding="no-such-codec")

    def test_other_encoding(self, make_input):
        path = make_input("é#!".encode("latin-1"))
        stats = calculate_statistics(path, encoding="latin-1")
        assert stats.bigrams == Counter({"#!": 1})
