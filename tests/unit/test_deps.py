"""Unit tests for request parameter parsing."""
import pytest

from votebox.api.deps import ID_MAX, ID_MIN, parse_id
from votebox.core.exceptions import InvalidIdentifierError


@pytest.mark.unit
class TestParseId:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", 1),
            ("42", 42),
            ("-3", -3),
            ("+7", 7),
            ("007", 7),
            (str(ID_MAX), ID_MAX),
            (str(ID_MIN), ID_MIN),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_id("Poll ID", value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            "",
            "1.5",
            "0x10",
            None,
            " 12 ",
            "12\n",
            "1_0",
            "+",
            "١٢",
            "99999999999999999999",
            str(ID_MAX + 1),
            str(ID_MIN - 1),
        ],
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidIdentifierError, match="Poll ID must be a valid integer!") as exc_info:
            parse_id("Poll ID", value)

        assert exc_info.value.value == value
