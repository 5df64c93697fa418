import pytest

from quiver.validators import email, not_empty, only_numbers


class TestNotEmpty:
    def test_accepts_text(self):
        assert not_empty("User name")("bob") is True

    def test_rejects_empty_with_name(self):
        assert not_empty("User name")("") == "User name cannot be empty."

    def test_whitespace_is_not_empty(self):
        assert not_empty("x")(" ") is True

    def test_rejects_empty_selection(self):
        assert not_empty("Toppings")([]) == "Toppings cannot be empty."

    def test_accepts_selection(self):
        assert not_empty("Toppings")(["ham"]) is True


class TestEmail:
    @pytest.mark.parametrize("value", ["a@b.co", "first.last@example.org", "me+tag@mail.example.io"])
    def test_accepts_addresses(self, value):
        assert email(value) is True

    @pytest.mark.parametrize("value", ["not-an-email", "a@.co", "a@b.c", "@b.co", "a@b.co\n"])
    def test_rejects_with_message(self, value):
        assert email(value) == "Please provide a valid email address."


class TestOnlyNumbers:
    def test_accepts_digits(self):
        assert only_numbers("0123") is True

    @pytest.mark.parametrize("value", ["", "12a", "1.5", "-3", " 1"])
    def test_rejects_other_text(self, value):
        assert only_numbers(value) == "Please provide only numbers."
