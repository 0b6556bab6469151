"""Signup — registration form with filters, checks, and cross-field rules.

Demonstrates winnow's rule sets: a catch-all filter entry, a field list
pattern, a cross-field confirmation check, a custom check, and
``error_string()`` with display labels.

Credentials are stored in memory — this is a demo, not production auth.

Demonstrates:
- ``validate()`` with a ``RuleSpec`` built once at import time
- ``trim`` on every field via ``re.compile(".*")``
- ``required``, ``length_between``, ``matches``, ``equal_to``
- Custom check (username already taken)
- ``error_string(names=...)`` for a one-line summary

Run:
    python app.py
"""

import re
from collections.abc import Mapping
from typing import Any

from winnow import RuleSpec, validate
from winnow.checks import equal_to, length_between, matches, required
from winnow.filters import lower, trim

# ---------------------------------------------------------------------------
# In-memory "database"
# ---------------------------------------------------------------------------

_users: list[dict[str, str]] = []

# ---------------------------------------------------------------------------
# Custom check — username must be free
# ---------------------------------------------------------------------------


def _username_free(value: Any, data: Mapping[str, Any], field: str) -> str | None:
    if any(user["username"] == value for user in _users):
        return "This username is already taken"
    return None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

RULES = RuleSpec(
    fields=("username", "email", "password", "confirm_password"),
    filters=(
        (re.compile(".*"), trim),
        ("email", lower),
    ),
    checks=(
        (["username", "email", "password", "confirm_password"], required()),
        (
            "username",
            [
                length_between(3, 30),
                matches(r"^[a-zA-Z0-9_]+$", "Only letters, numbers, and underscores allowed"),
                _username_free,
            ],
        ),
        ("email", matches(r"^[^@\s]+@[^@\s]+\.[a-zA-Z]{2,}$", "Must be a valid email address")),
        ("password", length_between(8, 128)),
        ("confirm_password", equal_to("password", "Passwords do not match")),
    ),
)

LABELS = {
    "username": "Username",
    "email": "E-mail",
    "password": "Password",
    "confirm_password": "Password confirmation",
}


def signup(form: Mapping[str, Any]) -> dict[str, Any]:
    """Register a user, or report why the form was rejected."""
    result = validate(form, RULES)
    if not result:
        return {
            "ok": False,
            "errors": dict(result.errors),
            "summary": result.error_string(names=LABELS),
        }

    user = {"username": result.value("username"), "email": result.value("email")}
    _users.append(user)
    return {"ok": True, "user": user}


if __name__ == "__main__":
    print(signup({"username": " ada ", "email": "Ada@Example.com", "password": "x"}))
    print(signup({
        "username": "ada",
        "email": "Ada@Example.com ",
        "password": "analytical-engine",
        "confirm_password": "analytical-engine",
    }))
