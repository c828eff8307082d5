"""Tests for CSV quoting, filtering and file output."""

import pytest

from ff7r_text.export.csv_sink import CsvSink, format_row, quote, should_emit
from ff7r_text.models.records import TextRecord


def test_quote_doubles_inner_quotes():
    assert quote('Who are you calling "buster", buster?') == (
        '"Who are you calling ""buster"", buster?"'
    )


def test_quote_plain_and_empty():
    assert quote("Cloud") == '"Cloud"'
    assert quote("") == '""'


def test_quote_keeps_newlines():
    assert quote("a\nb") == '"a\nb"'


def test_format_row():
    rec = TextRecord(id="L1", text='Say "hi"', attributes={"ACTOR": "Aerith"})
    assert format_row(rec) == '"L1","Aerith","Say ""hi"""'


@pytest.mark.parametrize(
    ("text", "attributes", "expected"),
    [
        ("Hello", {"ACTOR": "Cloud"}, True),
        ("", {"ACTOR": "Cloud"}, False),
        ("Hello", {"ACTOR": ""}, False),
        ("Hello", {}, False),
        ("Hello", {"ARTICLE": "a"}, False),
    ],
)
def test_should_emit(text, attributes, expected):
    assert should_emit(TextRecord(id="L1", text=text, attributes=attributes)) is expected


def test_sink_writes_header_and_filtered_rows(tmp_path):
    out = tmp_path / "out" / "US.csv"
    records = [
        TextRecord(id="L1", text="Hello", attributes={"ACTOR": "Cloud"}),
        TextRecord(id="L2", text="", attributes={"ACTOR": "Cloud"}),
        TextRecord(id="L3", text="Nobody", attributes={}),
        TextRecord(id="L4", text="Line\nbreak", attributes={"ACTOR": "Tifa"}),
    ]
    with CsvSink(out) as sink:
        assert sink.write_records(records) == 2

    assert sink.rows_written == 2
    assert out.read_text(encoding="utf-8") == (
        "ID,Speaker,Text\n"
        '"L1","Cloud","Hello"\n'
        '"L4","Tifa","Line\nbreak"\n'
    )


def test_sink_accumulates_across_packages(tmp_path):
    out = tmp_path / "JP.csv"
    rec = TextRecord(id="L1", text="はい", attributes={"ACTOR": "クラウド"})
    with CsvSink(out) as sink:
        sink.write_records([rec])
        sink.write_records([rec, rec])
    assert sink.rows_written == 3
    assert out.read_text(encoding="utf-8").count("\n") == 4


def test_sink_must_be_open(tmp_path):
    sink = CsvSink(tmp_path / "x.csv")
    with pytest.raises(RuntimeError):
        sink.write_records([])
