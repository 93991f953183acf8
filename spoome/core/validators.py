"""
Input Validators

This module provides the local checks applied to request objects before
they are sent. They mirror the rules the service enforces, so obviously
bad requests fail fast without a round trip.

Each function returns a bool; the clients turn a False into an
InvalidRequestError naming the offending field.
"""

import re
from typing import Optional
from urllib.parse import urlparse

URL_PATTERN = re.compile(r'^(ftp|http|https)://[^ "]+$')
ALIAS_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')

MAX_ALIAS_LENGTH = 15
MIN_PASSWORD_LENGTH = 8
PASSWORD_SPECIAL_CHARS = {'@', '.'}
PASSWORD_FORBIDDEN_SEQUENCES = ('..', '@@', '@.', '.@')


def service_host(base_url: str) -> str:
    """
    Extract the host of a service base URL.

    Example:
        service_host("https://spoo.me") -> "spoo.me"
        service_host("http://localhost:8000/") -> "localhost:8000"
    """
    parsed = urlparse(base_url)
    return parsed.netloc or base_url.strip('/')


def is_valid_url(url: str, base_url: Optional[str] = None) -> bool:
    """
    Validate a long URL before shortening.

    Args:
        url: The URL to validate
        base_url: Base URL of the target service; URLs pointing back at it
            are rejected (a short link cannot be shortened again)

    Returns:
        True if valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    if not URL_PATTERN.match(url) or '..' in url:
        return False

    if base_url:
        host = service_host(base_url)
        if host and host in url:
            return False

    return True


def is_valid_alias(alias: str) -> bool:
    """
    Validate a custom alias or short code.

    Only [a-zA-Z0-9_-] is allowed, between 1 and 15 characters.
    """
    if not alias or not isinstance(alias, str):
        return False
    return len(alias) <= MAX_ALIAS_LENGTH and bool(ALIAS_PATTERN.match(alias))


def is_valid_password(password: str) -> bool:
    """
    Validate a link password.

    Rules:
    - at least 8 characters
    - contains a letter and a digit
    - contains '@' or '.'
    - no consecutive special characters ('..', '@@', '@.', '.@')
    """
    if not password or not isinstance(password, str):
        return False

    if len(password) < MIN_PASSWORD_LENGTH:
        return False

    has_letter = any(ch.isalpha() for ch in password)
    has_digit = any(ch in '0123456789' for ch in password)
    has_special = any(ch in PASSWORD_SPECIAL_CHARS for ch in password)
    no_consecutive = not any(seq in password for seq in PASSWORD_FORBIDDEN_SEQUENCES)

    return has_letter and has_digit and has_special and no_consecutive


def is_valid_max_clicks(max_clicks: int) -> bool:
    # bool is an int subclass; True is not a click count
    return isinstance(max_clicks, int) and not isinstance(max_clicks, bool) and max_clicks > 0


def is_valid_emoji_sequence(emojies: str) -> bool:
    """
    Validate a custom emoji slug.

    The sequence must be non-empty and contain no whitespace and no ASCII
    characters; the service performs the exact emoji check.
    """
    if not emojies or not isinstance(emojies, str):
        return False
    return not any(ch.isspace() or ord(ch) < 128 for ch in emojies)
