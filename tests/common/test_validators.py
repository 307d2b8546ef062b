import pytest

from tutor_desk.common.validators import parse_amount, parse_optional_rate, parse_rate, require_non_empty
from tutor_desk.core.exceptions import ParseError, ValidationError


def test_require_non_empty_strips():
    assert require_non_empty("  Maths ", "Class name") == "Maths"


def test_require_non_empty_rejects_blank():
    with pytest.raises(ValidationError, match="Class name is required"):
        require_non_empty("   ", "Class name")


def test_parse_amount_rounds_to_cents():
    assert parse_amount("12.3456") == 12.35


@pytest.mark.parametrize("value", ["abc", "", None, "nan"])
def test_parse_amount_non_numeric_is_parse_error(value):
    with pytest.raises(ParseError):
        parse_amount(value)


@pytest.mark.parametrize("value", ["0", "-5"])
def test_parse_amount_must_be_positive(value):
    with pytest.raises(ValidationError):
        parse_amount(value)


def test_optional_rate_blank_clears():
    assert parse_optional_rate("") is None
    assert parse_optional_rate(None) is None
    assert parse_optional_rate("45") == 45.0


def test_rate_cannot_be_negative():
    with pytest.raises(ValidationError):
        parse_optional_rate("-1")


def test_parse_rate_blank_is_zero():
    assert parse_rate(" ") == 0.0
