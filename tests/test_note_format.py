from datetime import datetime

from backend.app.core.note_format import (
    FIELD_SEPARATOR,
    format_note,
    format_timestamp,
    parse_note_string,
    parse_timestamp,
)


def test_parse_valid_note_line():
    timestamp, text = parse_note_string("2018-04-02 10:16:24.868;; This is a short note.")
    assert timestamp == datetime(2018, 4, 2, 10, 16, 24, 868000)
    assert text == "This is a short note."


def test_only_first_separator_splits():
    timestamp, text = parse_note_string("2018-04-02 10:16:24.868;; a;; b;; c")
    assert timestamp is not None
    assert text == "a;; b;; c"


def test_text_without_separator_is_whole_input():
    assert parse_note_string("Customer 1234 created") == (None, "Customer 1234 created")


def test_malformed_prefix_keeps_whole_input():
    raw = "02.04.2018 10:16;; Called back"
    assert parse_note_string(raw) == (None, raw)


def test_prefix_needs_exact_millisecond_digits():
    for prefix in ("2018-04-02 10:16:24", "2018-04-02 10:16:24.8", "2018-04-02 10:16:24.868123"):
        raw = f"{prefix};; text"
        assert parse_note_string(raw) == (None, raw)


def test_impossible_date_is_not_a_timestamp():
    assert parse_timestamp("2018-13-40 10:16:24.868") is None
    raw = "2018-13-40 10:16:24.868;; text"
    assert parse_note_string(raw) == (None, raw)


def test_separator_without_space_is_not_a_separator():
    raw = "2018-04-02 10:16:24.868;;no space"
    assert parse_note_string(raw) == (None, raw)


def test_empty_text_after_separator():
    timestamp, text = parse_note_string("2018-04-02 10:16:24.868" + FIELD_SEPARATOR)
    assert timestamp == datetime(2018, 4, 2, 10, 16, 24, 868000)
    assert text == ""


def test_format_pads_fields_and_drops_sub_millisecond_digits():
    assert format_timestamp(datetime(2018, 3, 5, 7, 8, 9, 7999)) == "2018-03-05 07:08:09.007"


def test_parse_then_format_reproduces_line():
    for line in (
        "2018-03-15 20:10:27.730;; Customer 1234 created",
        "1999-12-31 23:59:59.999;; ",
        "2024-02-29 00:00:00.000;; leap;; day",
    ):
        timestamp, text = parse_note_string(line)
        assert format_note(timestamp, text) == line


def test_non_ascii_digits_are_not_a_timestamp():
    for prefix in ("２０１８-04-02 10:16:24.868", "٢٠١٨-٠٤-٠٢ ١٠:١٦:٢٤.٨٦٨"):
        assert parse_timestamp(prefix) is None
        raw = f"{prefix};; text"
        assert parse_note_string(raw) == (None, raw)
