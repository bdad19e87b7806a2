"""Unit tests for the public parse API."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from simple_csv.errors import MalformedInputError
from simple_csv.models import Delimiter
from simple_csv.parser import (
    parse_fields_from_text,
    parse_from_file,
    parse_from_stream,
    parse_from_text,
)
from simple_csv.reporting.formatting import escape_field

QUOTED_RECORD = '"日本 \r\n国","""東京""","127,767,944"'


@pytest.mark.parametrize(
    ("text", "count"),
    [
        ("", 0),
        (" ", 1),
        ("日本国,東京,127767944 \r\nアメリカ合衆国, ワシントン, 300007997 \r\n", 2),
        ("日本国,東京, \r\n", 1),
        (QUOTED_RECORD, 1),
        (QUOTED_RECORD + " \r\n", 1),
        (QUOTED_RECORD + " \r\n\r\n", 2),
        (QUOTED_RECORD + " \r\n\n", 2),
        ('"aaa","bbb","ccc" \r\nzzz, yyy, xxx', 2),
        ('"aaa","b \r\nbb","ccc" \r\nzzz, yyy, xxx', 2),
        ('"aaa","b""bb","ccc"', 1),
    ],
)
def test_parse_from_text_record_counts(text: str, count: int) -> None:
    assert len(parse_from_text(text)) == count


@pytest.mark.parametrize(
    ("text", "count"),
    [
        ("", 0),
        (" ", 1),
        ("日本国,東京,127767944 ", 3),
        ("日本国,東京, ", 3),
        (QUOTED_RECORD, 3),
        ('"aaa","bbb","ccc"', 3),
        ('"aaa","b \r\nbb","ccc"', 3),
        ('"","b""bb",""', 3),
    ],
)
def test_parse_fields_from_text_field_counts(text: str, count: int) -> None:
    assert len(parse_fields_from_text(text)) == count


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (" ", [" "]),
        ("日本国,東京,127767944 ", ["日本国", "東京", "127767944 "]),
        ("日本国,東京, ", ["日本国", "東京", " "]),
        ("日本国,東京,", ["日本国", "東京", ""]),
        (QUOTED_RECORD, ["日本 \r\n国", '"東京"', "127,767,944"]),
        ('"aaa","b \r\nbb","ccc"', ["aaa", "b \r\nbb", "ccc"]),
        ('"","b""bb",""', ["", 'b"bb', ""]),
        ('AAA, "BBB"', ["AAA", "BBB"]),
    ],
)
def test_parse_from_text_first_record_fields(text: str, expected: list[str]) -> None:
    assert parse_from_text(text)[0] == expected


def test_parse_from_text_multiple_records() -> None:
    records = parse_from_text('aaa,bbb,ccc\r\n111,,333\r\nAAA,"BBB"')

    assert records == [["aaa", "bbb", "ccc"], ["111", "", "333"], ["AAA", "BBB"]]


def test_parse_from_text_trailing_delimiters_and_escaped_quote() -> None:
    records = parse_from_text('aaa,bbb,ccc\r\n111,222,\r\n,"""bbb",')

    assert records == [["aaa", "bbb", "ccc"], ["111", "222", ""], ["", '"bbb', ""]]


def test_parse_from_text_mixed_line_endings_match_crlf() -> None:
    expected = [["a"], ["b"], ["c"]]

    assert parse_from_text("a\rb\nc\r\n") == expected
    assert parse_from_text("a\r\nb\r\nc\r\n") == expected


def test_parse_from_text_matches_naive_split_without_quotes() -> None:
    text = "id,name,score\r\n1,alice,90\r\n2,,75\r\n3,carol,"
    naive = [line.split(",") for line in text.split("\r\n")]

    assert parse_from_text(text) == naive


def test_parse_fields_from_text_quoting_round_trip() -> None:
    value = 'x,y\r\nsay "hi"'

    assert parse_fields_from_text(escape_field(value)) == [value]
    assert parse_fields_from_text(",".join([escape_field(value), escape_field("")])) == [value, ""]


def test_parse_fields_from_text_edge_cases() -> None:
    assert parse_fields_from_text("a,b,") == ["a", "b", ""]
    assert parse_fields_from_text("a,,b") == ["a", "", "b"]
    assert parse_fields_from_text("") == []
    assert parse_fields_from_text('"""東京"""') == ['"東京"']


def test_parse_fields_from_text_with_tab_and_semicolon() -> None:
    assert parse_fields_from_text("a\tb,c", Delimiter.TAB) == ["a", "b,c"]
    assert parse_fields_from_text("a;b", "semicolon") == ["a", "b"]


def test_parse_from_text_empty_input_yields_no_records() -> None:
    assert parse_from_text("") == []


def test_parse_rejects_unterminated_quote() -> None:
    with pytest.raises(MalformedInputError):
        parse_fields_from_text('"abc')
    with pytest.raises(MalformedInputError) as excinfo:
        parse_from_text('a,b\r\n"c,d\r\n')

    assert excinfo.value.offset == 5


def test_parse_rejects_unsupported_delimiter() -> None:
    with pytest.raises(ValueError, match="Unsupported delimiter"):
        parse_from_text("a|b", "|")
    with pytest.raises(ValueError, match="Unsupported delimiter"):
        parse_fields_from_text("a\x00b", "\x00")


def test_parse_from_file_reads_declared_encoding(tmp_path: Path) -> None:
    path = tmp_path / "sjis.csv"
    path.write_bytes("日本国,東京\r\nアメリカ,\"ワシントン\"\r\n".encode("shift_jis"))

    records = parse_from_file(path, encoding="shift_jis")

    assert records == [["日本国", "東京"], ["アメリカ", "ワシントン"]]


def test_parse_from_file_drops_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "bom.csv"
    path.write_bytes("\ufeffa;b\nc;d".encode("utf-8"))

    assert parse_from_file(str(path), Delimiter.SEMICOLON) == [["a", "b"], ["c", "d"]]


def test_parse_from_file_missing_path_raises_before_reading(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail_read(self: Path) -> bytes:
        raise AssertionError("file should not be read")

    monkeypatch.setattr(Path, "read_bytes", fail_read)

    with pytest.raises(FileNotFoundError, match="CSV file not found"):
        parse_from_file(tmp_path / "missing.csv")
    with pytest.raises(FileNotFoundError):
        parse_from_file(tmp_path)


def test_parse_from_stream_accepts_text_and_bytes() -> None:
    assert parse_from_stream(io.StringIO("a,b\nc,d")) == [["a", "b"], ["c", "d"]]
    assert parse_from_stream(io.BytesIO("x\t東京".encode("utf-8")), "tab") == [["x", "東京"]]


def test_parse_from_stream_drops_byte_order_mark_from_text_streams() -> None:
    assert parse_from_stream(io.StringIO("\ufeffa,b")) == [["a", "b"]]
    assert parse_from_stream(io.BytesIO("\ufeffa,b".encode("utf-8"))) == [["a", "b"]]
