"""Password strength rule shared by user request schemas."""

import re

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_]).{8,}$")

PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 8 characters long and contain an uppercase "
    "letter, a lowercase letter, a digit and a special character."
)


def check_password_strength(password: str) -> str:
    """Return the password unchanged or raise ValueError if it is too weak."""
    if not PASSWORD_PATTERN.match(password):
        raise ValueError(PASSWORD_POLICY_MESSAGE)
    return password


def blank_to_none(value: object) -> object:
    """Treat empty strings in partial updates as "not provided"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
