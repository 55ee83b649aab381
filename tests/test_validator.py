"""Tests for request validation."""

import pytest

from udp_passgen.core.charset import PasswordClass
from udp_passgen.core.validator import (
    PasswordLength,
    is_stop_request,
    parse_class,
    validate_class,
    validate_length,
)
from udp_passgen.utils.exceptions import ValidationFailure


class TestValidateClass:
    @pytest.mark.parametrize("selector", list("namsuNAMSU"))
    def test_accepts_defined_classes(self, selector):
        assert validate_class(selector) is True

    @pytest.mark.parametrize("selector", ["q", "Q", "h", "b", "1", "", "ns", " "])
    def test_rejects_everything_else(self, selector):
        assert validate_class(selector) is False

    def test_parse_class(self):
        assert parse_class("U") is PasswordClass.UNAMBIGUOUS

    def test_parse_class_rejects(self):
        with pytest.raises(ValidationFailure):
            parse_class("x")


class TestValidateLength:
    @pytest.mark.parametrize("text", ["6", "8", "32", "007", "0032"])
    def test_accepts_in_range(self, text):
        assert validate_length(text) is True

    @pytest.mark.parametrize(
        "text",
        ["", "5", "33", "0", "abc", "8a", " 8", "-8", "+8", "8.0", "¹⁰", "1" * 400],
    )
    def test_rejects(self, text):
        assert validate_length(text) is False

    def test_long_zero_padded_value(self):
        assert validate_length("0" * 1000 + "12") is True


class TestPasswordLength:
    def test_parse(self):
        length = PasswordLength.parse("007")
        assert length == 7
        assert isinstance(length, int)

    @pytest.mark.parametrize("text", ["33", "x", ""])
    def test_parse_rejects(self, text):
        with pytest.raises(ValidationFailure):
            PasswordLength.parse(text)

    @pytest.mark.parametrize("value", [5, 33, -1])
    def test_constructor_checks_range(self, value):
        with pytest.raises(ValidationFailure):
            PasswordLength(value)


class TestStopRequest:
    @pytest.mark.parametrize("selector", ["q", "Q"])
    def test_stop(self, selector):
        assert is_stop_request(selector)

    @pytest.mark.parametrize("selector", ["n", "qq", ""])
    def test_not_stop(self, selector):
        assert not is_stop_request(selector)
