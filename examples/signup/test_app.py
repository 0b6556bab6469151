"""Tests for the signup example — filtering, validation, registration flow."""

from types import SimpleNamespace


def _form(
    username: str = "testuser",
    email: str = "test@example.com",
    password: str = "securepass123",
    confirm: str = "securepass123",
) -> dict[str, str]:
    return {
        "username": username,
        "email": email,
        "password": password,
        "confirm_password": confirm,
    }


class TestSignupSuccess:
    def test_registers_user(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form())
        assert outcome == {"ok": True, "user": {"username": "testuser", "email": "test@example.com"}}

    def test_values_are_filtered(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(username="  bob ", email=" Bob@Example.COM "))
        assert outcome["user"] == {"username": "bob", "email": "bob@example.com"}

    def test_confirmation_compared_after_trim(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(confirm=" securepass123 "))
        assert outcome["ok"] is True


class TestSignupErrors:
    def test_all_missing(self, example: SimpleNamespace) -> None:
        outcome = example.signup({})
        assert outcome["ok"] is False
        assert set(outcome["errors"]) == {"username", "email", "password", "confirm_password"}
        assert set(outcome["errors"].values()) == {"Required"}

    def test_one_message_per_field(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(username="a!"))
        assert outcome["errors"] == {"username": "Must be between 3 and 30 symbols"}

    def test_bad_username_characters(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(username="bad name"))
        assert outcome["errors"]["username"] == "Only letters, numbers, and underscores allowed"

    def test_passwords_must_match(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(confirm="different123"))
        assert outcome["errors"] == {"confirm_password": "Passwords do not match"}

    def test_duplicate_username(self, example: SimpleNamespace) -> None:
        example.signup(_form())
        outcome = example.signup(_form(email="other@example.com"))
        assert outcome["errors"] == {"username": "This username is already taken"}

    def test_summary_uses_labels(self, example: SimpleNamespace) -> None:
        outcome = example.signup(_form(email="nope", password="short", confirm="short"))
        assert outcome["summary"] == (
            "[E-mail] Must be a valid email address, [Password] Must be between 8 and 128 symbols"
        )
