"""Tests for the .uexp line stream parser."""

import pytest

from ff7r_text.errors import InvalidReference, TruncatedData
from ff7r_text.models.records import TextRecord
from ff7r_text.parser.names import NameTable
from ff7r_text.parser.options import ParseOptions
from ff7r_text.parser.record_parser import iter_records, parse_records, read_record_file
from package_builder import build_uexp, record


NAMES = NameTable(["ACTOR", "ARTICLE", "PLURAL"])


def test_single_line():
    data = build_uexp([record("L1", "Hello", [((0, 0), "Cloud")])])
    assert parse_records(data, NameTable(["ACTOR"])) == [
        TextRecord(id="L1", text="Hello", attributes={"ACTOR": "Cloud"})
    ]


def test_empty_stream():
    assert parse_records(build_uexp([]), NAMES) == []


def test_preamble_bytes_are_ignored():
    data = build_uexp([record("L1", "Hi")], preamble=b"\xff" * 13)
    assert parse_records(data, NAMES)[0].id == "L1"


def test_lines_in_file_order():
    data = build_uexp([
        record("L1", "One", [((0, 0), "Cloud")]),
        record("L2", "Two", [((0, 0), "Tifa")]),
        record("L3", "Three", [((0, 0), "Barret")]),
    ])
    records = parse_records(data, NAMES)
    assert [r.id for r in records] == ["L1", "L2", "L3"]
    assert [r.actor for r in records] == ["Cloud", "Tifa", "Barret"]


def test_lines_are_not_filtered():
    data = build_uexp([
        record("L1", "", [((0, 0), "Cloud")]),
        record("L2", "No speaker"),
        record("L3", "Article only", [((1, 0), "a")]),
    ])
    records = parse_records(data, NAMES)
    assert len(records) == 3
    assert records[0].text == ""
    assert records[1].attributes == {}
    assert records[2].actor == ""


def test_multiple_attributes():
    data = build_uexp([
        record("Potion", "Potion", [
            ((1, 0), "a"),
            ((2, 0), "Potions"),
        ]),
    ])
    assert parse_records(data, NAMES)[0].attributes == {
        "ARTICLE": "a",
        "PLURAL": "Potions",
    }


def test_repeated_key_keeps_last_value():
    data = build_uexp([
        record("L1", "Hi", [((0, 0), "Cloud"), ((0, 0), "Zack")]),
    ])
    assert parse_records(data, NAMES)[0].attributes == {"ACTOR": "Zack"}


def test_attribute_key_instance_suffix():
    data = build_uexp([record("L1", "Hi", [((0, 3), "x")])])
    assert parse_records(data, NAMES)[0].attributes == {"ACTOR_2": "x"}
    loose = parse_records(data, NAMES, ParseOptions(instance_suffix=False))
    assert loose[0].attributes == {"ACTOR": "x"}


def test_wide_text():
    text = "「ここはどこだ？」"
    data = build_uexp([record("L1", text, [((0, 0), "クラウド")], wide=True)])
    parsed = parse_records(data, NAMES)[0]
    assert parsed.text == text
    assert parsed.actor == "クラウド"


def test_text_with_quotes_and_newlines_is_preserved():
    text = 'Who are you calling "buster",\nbuster?'
    data = build_uexp([record("L1", text, [((0, 0), "Cloud")])])
    assert parse_records(data, NAMES)[0].text == text


def test_unknown_name_index():
    data = build_uexp([record("L1", "Hi", [((9, 0), "Cloud")])])
    with pytest.raises(InvalidReference):
        parse_records(data, NAMES)


def test_truncated_stream_aborts_whole_parse():
    data = build_uexp([
        record("L1", "One", [((0, 0), "Cloud")]),
        record("L2", "Two", [((0, 0), "Tifa")]),
    ])
    with pytest.raises(TruncatedData):
        parse_records(data[:-2], NAMES)


def test_file_shorter_than_preamble():
    with pytest.raises(TruncatedData):
        parse_records(b"\x00" * 10, NAMES)


def test_iter_records_is_lazy():
    data = build_uexp([record("L1", "One"), record("L2", "Two")])
    it = iter_records(data, NAMES)
    assert next(it).id == "L1"
    assert next(it).id == "L2"
    with pytest.raises(StopIteration):
        next(it)


def test_read_record_file(tmp_path):
    path = tmp_path / "Text.uexp"
    path.write_bytes(build_uexp([record("L1", "Hi", [((0, 0), "Cloud")])]))
    assert read_record_file(path, NAMES)[0].actor == "Cloud"
