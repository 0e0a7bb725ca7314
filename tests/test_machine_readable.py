#!/usr/bin/env python3
"""Tests for the machine-readable output parser."""

import itertools

import pytest

from vagrant_exec.exceptions import EntryNotFoundError, MalformedRecordError
from vagrant_exec.machine_readable import (
    Record,
    decode_data,
    encode_data,
    escape_field,
    parse_line,
    parse_machine_readable,
    pluck_entry_data,
)
from vagrant_exec.models import VAGRANT_COMMA, VAGRANT_NEWLINE


class TestParseLine:
    """Test parsing of a single line."""

    def test_simple_record(self):
        record = parse_line("1700000000,default,state,running")
        assert record == Record(1700000000, "default", "state", ["running"])

    def test_empty_target(self):
        record = parse_line("1700000000,,version-installed,2.3.0")
        assert record.target == ""
        assert record.type == "version-installed"
        assert record.data == ("2.3.0",)

    def test_structural_commas_split_data(self):
        record = parse_line("1700000000,web,metadata,provider,virtualbox")
        assert record.data == ("provider", "virtualbox")

    def test_escaped_comma_stays_in_one_field(self):
        record = parse_line("1700000000,,ui,info,Installed version: 2.3.0%!(VAGRANT_COMMA) installed")
        assert record.data == ("info", "Installed version: 2.3.0, installed")

    def test_escaped_newline(self):
        record = parse_line("1700000000,web,state-human-long,first line\\nsecond line")
        assert record.data == ("first line\nsecond line",)

    def test_exactly_three_commas_gives_empty_data(self):
        record = parse_line("1700000000,,ui,")
        assert record.data == ()

    @pytest.mark.parametrize("line", [
        "1700000000,default,state",
        "1700000000",
        "",
    ])
    def test_too_few_commas(self, line):
        with pytest.raises(MalformedRecordError, match="expected at least 3 commas"):
            parse_line(line)

    def test_invalid_timestamp(self):
        with pytest.raises(MalformedRecordError, match="invalid timestamp"):
            parse_line("yesterday,default,state,running")

    def test_missing_type(self):
        with pytest.raises(MalformedRecordError, match="missing record type"):
            parse_line("1700000000,default,,running")

    def test_custom_tokens(self):
        record = parse_line("1,web,note,a<C>b<N>c", comma_token="<C>", newline_token="<N>")
        assert record.data == ("a,b\nc",)


class TestParseMachineReadable:
    """Test parsing of complete command output."""

    def test_preserves_order(self, status_output):
        records = parse_machine_readable(status_output)
        assert len(records) == 9
        assert [r.target for r in records[:2]] == ["web", "web"]
        assert records[-1].target == ""
        assert records[-1].type == "ui"

    def test_accepts_str(self):
        records = parse_machine_readable("1700000000,default,state,running\n")
        assert records == [Record(1700000000, "default", "state", ["running"])]

    def test_no_trailing_newline(self):
        records = parse_machine_readable(b"1,a,state,running\n2,b,state,saved")
        assert [r.timestamp for r in records] == [1, 2]

    def test_crlf_line_endings(self):
        records = parse_machine_readable(b"1,a,state,running\r\n")
        assert records[0].data == ("running",)

    def test_empty_output(self):
        assert parse_machine_readable(b"") == []

    def test_malformed_line_aborts_parse(self):
        output = b"1,a,state,running\nnot a record\n2,b,state,saved\n"
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_machine_readable(output)
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "not a record"

    def test_blank_line_in_middle_is_malformed(self):
        with pytest.raises(MalformedRecordError):
            parse_machine_readable(b"1,a,state,running\n\n2,b,state,saved\n")


class TestEscaping:
    """Test encoding and decoding of data fields."""

    ALPHABET = ["a", "n", "\\", ",", "\n", "%", VAGRANT_COMMA]

    @classmethod
    def generated_values(cls, max_length=4):
        for length in range(1, max_length + 1):
            for chars in itertools.product(cls.ALPHABET, repeat=length):
                yield "".join(chars)

    @pytest.mark.parametrize("fields", [
        ["plain"],
        ["with, comma", "other"],
        ["multi\nline"],
        ["both,\nkinds", "", "x,y,z"],
    ])
    def test_round_trip(self, fields):
        assert decode_data(encode_data(fields)) == fields

    def test_round_trip_generated(self):
        checked = 0
        for value in self.generated_values():
            if VAGRANT_COMMA in value or VAGRANT_NEWLINE in value:
                with pytest.raises(ValueError):
                    encode_data([value])
                continue
            assert decode_data(encode_data([value])) == [value]
            assert decode_data(encode_data([value, value])) == [value, value]
            checked += 1
        assert checked > 1000

    def test_comma_written_as_token(self):
        assert encode_data(["a,b"]) == "a%!(VAGRANT_COMMA)b"

    @pytest.mark.parametrize("value", [
        "C:\\new,dir",
        "see %!(VAGRANT_COMMA) here, ok",
    ])
    def test_value_containing_token_rejected(self, value):
        with pytest.raises(ValueError, match="placeholder"):
            escape_field(value)
        with pytest.raises(ValueError):
            encode_data(["ok", value])

    def test_custom_token_rejected(self):
        with pytest.raises(ValueError):
            escape_field("a<C>b", comma_token="<C>")
        assert escape_field("C:\\new", newline_token="<N>") == "C:\\new"

    def test_single_empty_field_rejected(self):
        with pytest.raises(ValueError, match="single empty field"):
            encode_data([""])

    def test_decode_empty(self):
        assert decode_data("") == []


class TestRecord:
    def test_data_stored_as_tuple(self):
        record = Record(1, "web", "state", ["running"])
        assert record.data == ("running",)
        assert record == parse_line("1,web,state,running")

    def test_record_is_hashable(self):
        assert len({parse_line("1,web,state,running"), parse_line("1,web,state,running")}) == 1


class TestPluckEntryData:
    """Test single-value lookup."""

    def test_returns_first_match(self):
        records = [
            Record(1, "", "ui", ["info", "hello"]),
            Record(1, "", "version-installed", ["2.3.0"]),
            Record(2, "", "version-installed", ["9.9.9"]),
        ]
        assert pluck_entry_data(records, "version-installed") == ["2.3.0"]

    def test_not_found(self):
        records = [Record(1, "", "ui", ["info", "hello"])]
        with pytest.raises(EntryNotFoundError) as exc_info:
            pluck_entry_data(records, "version-installed")
        assert exc_info.value.entry_type == "version-installed"

    def test_not_found_is_lookup_error(self):
        with pytest.raises(LookupError):
            pluck_entry_data([], "version-installed")

    def test_ui_line_version_does_not_count(self, version_output):
        records = parse_machine_readable(version_output.replace(b"version-installed", b"version-other"))
        with pytest.raises(EntryNotFoundError):
            pluck_entry_data(records, "version-installed")

    def test_result_is_a_copy(self):
        records = parse_machine_readable(b"1700000000,,version-installed,2.3.0\n")
        data = pluck_entry_data(records, "version-installed")
        data.append("extra")
        assert records[0].data == ("2.3.0",)
        assert pluck_entry_data(records, "version-installed") == ["2.3.0"]
