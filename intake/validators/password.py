"""
Password policy. Every rule is evaluated so all violations are reported together.
"""
import re

MIN_LENGTH = 8
MAX_LENGTH = 30

SPECIAL_CHARACTERS = "!@#%^&*()-_=+\\/><.,`~"

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d", re.ASCII)
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

MISMATCH = "Passwords do not match."
BAD_LENGTH = f"Password must be between {MIN_LENGTH} and {MAX_LENGTH} characters."
NO_UPPER = "Password must contain at least one uppercase letter."
NO_LOWER = "Password must contain at least one lowercase letter."
NO_DIGIT = "Password must contain at least one digit."
NO_SPECIAL = "Password must contain at least one special character."
HAS_QUOTE = "Password cannot contain double quotes."
HAS_IDENTITY = "Password cannot contain your user ID or name."


def check_password(
    password: str,
    confirm: str,
    user_id: str = "",
    first_name: str = "",
    last_name: str = "",
) -> list[str]:
    """
    Returns the list of policy violations, in rule order. Empty means the password passes.
    """
    errors = []

    if password != confirm:
        errors.append(MISMATCH)
    if not MIN_LENGTH <= len(password) <= MAX_LENGTH:
        errors.append(BAD_LENGTH)
    if not _UPPER.search(password):
        errors.append(NO_UPPER)
    if not _LOWER.search(password):
        errors.append(NO_LOWER)
    if not _DIGIT.search(password):
        errors.append(NO_DIGIT)
    if not _SPECIAL.search(password):
        errors.append(NO_SPECIAL)
    if '"' in password:
        errors.append(HAS_QUOTE)
    if contains_identity(password, user_id, first_name, last_name):
        errors.append(HAS_IDENTITY)

    return errors


def contains_identity(password: str, *identity: str) -> bool:
    """Case-insensitive substring check; blank identity parts never match."""
    lowered = password.lower()
    return any(part.strip() and part.strip().lower() in lowered for part in identity)


def format_alert(errors: list[str]) -> str:
    return "\n".join(errors)
