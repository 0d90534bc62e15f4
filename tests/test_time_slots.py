import pytest

from app.utils.time_slots import SlotTime, parse_time_slot


class TestParseTimeSlot:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12:00 AM", SlotTime(0, 0)),
            ("12:30 PM", SlotTime(12, 30)),
            ("6 AM - 7 AM", SlotTime(6, 0)),
            ("6:00 AM - 7:00 AM", SlotTime(6, 0)),
            ("11:45 pm - 12:45 am", SlotTime(23, 45)),
            ("Evening slot 7:15PM onwards", SlotTime(19, 15)),
            ("1 Pm", SlotTime(13, 0)),
        ],
    )
    def test_parses_start_time(self, text, expected):
        assert parse_time_slot(text) == expected

    def test_only_first_time_is_used(self):
        assert parse_time_slot("9:00 PM - 10:00 PM") == SlotTime(21, 0)

    @pytest.mark.parametrize("text", ["", "morning", "18:00", "6:00 - 7:00", None, 600])
    def test_no_match_returns_none(self, text):
        assert parse_time_slot(text) is None

    def test_minutes_are_not_validated(self):
        assert parse_time_slot("5:75 AM") == SlotTime(5, 75)

    def test_parsing_is_idempotent(self):
        text = "4:30 PM - 5:30 PM"
        assert parse_time_slot(text) == parse_time_slot(text) == SlotTime(16, 30)

    def test_valid_inputs_stay_in_clock_range(self):
        for hour in range(1, 13):
            for meridiem in ("AM", "PM"):
                parsed = parse_time_slot(f"{hour}:59 {meridiem}")
                assert 0 <= parsed.hour <= 23
                assert parsed.minute == 59
