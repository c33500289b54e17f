"""Tests for payload parsing and formatting helpers."""

from datetime import datetime, timezone, timedelta

from services.utils import parse_answer_payload, answer_payload, chunk, format_timestamp


class TestAnswerPayload:
    def test_valid(self):
        assert parse_answer_payload(answer_payload(15)) == 15

    def test_unknown_kind(self):
        assert parse_answer_payload("foo:15") is None

    def test_non_numeric_id(self):
        assert parse_answer_payload("ans:") is None
        assert parse_answer_payload("ans:x1") is None

    def test_empty(self):
        assert parse_answer_payload(None) is None


class TestChunk:
    def test_two_per_row(self):
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]


class TestFormatTimestamp:
    def test_naive_value_is_treated_as_utc(self):
        naive = datetime(2026, 1, 6, 9, 0)
        aware = datetime(2026, 1, 6, 9, 0, tzinfo=timezone.utc)
        assert format_timestamp(naive) == format_timestamp(aware)

    def test_converted_to_local_time(self):
        value = datetime(2026, 1, 6, 9, 0, tzinfo=timezone.utc)
        assert format_timestamp(value) == value.astimezone().strftime("%d.%m.%Y %H:%M")

    def test_other_zone_is_converted(self):
        moscow = datetime(2026, 1, 6, 12, 0, tzinfo=timezone(timedelta(hours=3)))
        utc = datetime(2026, 1, 6, 9, 0, tzinfo=timezone.utc)
        assert format_timestamp(moscow) == format_timestamp(utc)

    def test_missing_value(self):
        assert format_timestamp(None) == "—"
