"""Unit tests for session validation and completeness."""

import pytest

from scheduling.domain import is_session_complete, validate_session
from scheduling.domain.validation import ViolationCode, is_session_schedulable


def codes(session) -> set[ViolationCode]:
    return {violation.code for violation in validate_session(session)}


class TestValidateSession:
    """Tests for validate_session."""

    def test_valid_session_has_no_violations(self, make_session):
        assert validate_session(make_session()) == []

    def test_blank_session_reports_every_missing_field(self, make_session):
        session = make_session(name="", venue="", day=None, start_time="", end_time="")
        assert codes(session) == {
            ViolationCode.NAME_REQUIRED,
            ViolationCode.VENUE_REQUIRED,
            ViolationCode.DATE_REQUIRED,
            ViolationCode.START_REQUIRED,
            ViolationCode.END_REQUIRED,
        }

    def test_whitespace_name_is_missing(self, make_session):
        assert codes(make_session(name="   ")) == {ViolationCode.NAME_REQUIRED}

    @pytest.mark.parametrize("value", ["25:00", "9.30", "0930", "12:75"])
    def test_malformed_start_time(self, make_session, value):
        assert codes(make_session(start_time=value)) == {ViolationCode.START_FORMAT}

    def test_malformed_end_time(self, make_session):
        assert codes(make_session(end_time="7pm")) == {ViolationCode.END_FORMAT}

    def test_end_must_follow_start(self, make_session):
        assert codes(make_session(start_time="14:00", end_time="12:00")) == {
            ViolationCode.END_NOT_AFTER_START
        }

    def test_equal_times_rejected(self, make_session):
        assert codes(make_session(start_time="14:00", end_time="14:00")) == {
            ViolationCode.END_NOT_AFTER_START
        }

    def test_single_digit_hour_compared_numerically(self, make_session):
        assert validate_session(make_session(start_time="9:00", end_time="10:00")) == []

    def test_all_day_flag_skips_time_checks(self, make_session):
        assert validate_session(make_session(all_day=True, start_time="", end_time="bogus")) == []

    def test_all_day_label_skips_time_checks(self, make_session):
        assert validate_session(make_session(label="All Day", start_time="", end_time="")) == []

    def test_violation_carries_field_and_message(self, make_session):
        [violation] = validate_session(make_session(venue=""))
        assert violation.field == "venue"
        assert violation.message == "Venue is required"

    def test_never_raises_on_odd_input(self, make_session):
        assert validate_session(make_session(start_time=" ", end_time=" ")) != []


class TestIsSessionComplete:
    """Tests for is_session_complete."""

    def test_complete(self, make_session):
        assert is_session_complete(make_session())

    @pytest.mark.parametrize(
        "overrides",
        [{"name": ""}, {"venue": ""}, {"day": None}, {"start_time": ""}, {"end_time": ""}],
    )
    def test_missing_field(self, make_session, overrides):
        assert not is_session_complete(make_session(**overrides))

    def test_all_day_without_times_is_complete(self, make_session):
        assert is_session_complete(make_session(all_day=True, start_time="", end_time=""))

    def test_complete_but_malformed_is_not_schedulable(self, make_session):
        session = make_session(start_time="15:00", end_time="13:00")
        assert is_session_complete(session)
        assert not is_session_schedulable(session)
