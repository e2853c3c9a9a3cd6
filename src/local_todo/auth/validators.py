# src/local_todo/auth/validators.py

from __future__ import annotations

import re

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
USERNAME_RE = re.compile(r"[a-zA-Z0-9_]+")

MIN_NAME_LEN = 3
MIN_PASSWORD_LEN = 6
MIN_PASSWORD_CLASSES = 3

# Each validator returns "" when the value is acceptable, else a user-facing message.


def validate_fullname(fullname: str) -> str:
    if not fullname:
        return "Full name is required"
    if len(fullname) < MIN_NAME_LEN:
        return "Full name must be at least 3 characters long"
    return ""


def validate_email(email: str) -> str:
    if not email:
        return "Email is required"
    if not EMAIL_RE.fullmatch(email):
        return "Please enter a valid email address"
    return ""


def validate_username(username: str) -> str:
    if not username:
        return "Username is required"
    if len(username) < MIN_NAME_LEN:
        return "Username must be at least 3 characters long"
    if not USERNAME_RE.fullmatch(username):
        return "Username can only contain letters, numbers, and underscores"
    return ""


def password_strength(password: str) -> int:
    """Number of character classes present: lower, upper, digit, other."""
    checks = (r"[a-z]", r"[A-Z]", r"[0-9]", r"[^a-zA-Z0-9]")
    return sum(1 for pattern in checks if re.search(pattern, password))


def validate_password(password: str) -> str:
    if not password:
        return "Password is required"
    if len(password) < MIN_PASSWORD_LEN:
        return "Password must be at least 6 characters long"
    if password_strength(password) < MIN_PASSWORD_CLASSES:
        return "Password should include uppercase, lowercase, numbers, and special characters"
    return ""


def validate_confirm_password(confirm_password: str, password: str) -> str:
    if not confirm_password:
        return "Please confirm your password"
    if confirm_password != password:
        return "Passwords do not match"
    return ""
