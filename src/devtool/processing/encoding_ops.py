from __future__ import annotations
"""Percent-encoding and base64 helpers operating on UTF-8 text."""

import base64
import string
from urllib.parse import quote_plus, unquote_plus

_B64_ALPHABET = frozenset(string.ascii_letters + string.digits + '+/')


def url_encode(text: str) -> str:
    """Form-encode *text*: unreserved ASCII kept, space as '+', the rest as %XX."""
    return quote_plus(text, safe='', encoding='utf-8', errors='surrogateescape')


def url_decode(text: str) -> str:
    """Decode '+' and valid %XX escapes; malformed escapes are kept verbatim."""
    return unquote_plus(text, encoding='utf-8', errors='replace')


def b64_encode(text: str) -> str:
    return base64.b64encode(text.encode('utf-8', errors='surrogateescape')).decode('ascii')


def b64_decode(text: str) -> str:
    """Leniently decode base64 *text*.

    Characters outside the standard alphabet are ignored, decoding stops at
    the first '=' and a trailing group too short to form a byte is dropped.
    """
    symbols = ''.join(ch for ch in text.split('=', 1)[0] if ch in _B64_ALPHABET)
    if len(symbols) % 4 == 1:
        symbols = symbols[:-1]
    symbols += '=' * (-len(symbols) % 4)
    return base64.b64decode(symbols).decode('utf-8', errors='replace')
