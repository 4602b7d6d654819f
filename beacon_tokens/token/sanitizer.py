"""Normalization of externally supplied tokens."""

from __future__ import annotations

import re
from typing import Any, Optional

from ..config import TOKEN_LENGTH

_WS_RE = re.compile(r"\s+")


def format_pattern(token_length: int = TOKEN_LENGTH) -> "re.Pattern[str]":
    return re.compile(rf"[A-Za-z0-9]{{{token_length}}}")


TOKEN_FORMAT_RE = format_pattern()


def is_valid_format(token: Any, pattern: "re.Pattern[str]" = TOKEN_FORMAT_RE) -> bool:
    """Return True iff ``token`` fully matches ``pattern`` (12 ASCII alphanumerics by default), any case."""
    if not token or not isinstance(token, str):
        return False
    return pattern.fullmatch(token) is not None


class TokenSanitizer:
    """Trim, strip internal whitespace and upper-case a candidate token.

    Anything that is not exactly 12 alphanumerics after whitespace removal is
    rejected with ``None``; nothing is truncated or partially repaired.
    """

    def __init__(self, token_length: int = TOKEN_LENGTH) -> None:
        self._pattern = TOKEN_FORMAT_RE if token_length == TOKEN_LENGTH else format_pattern(token_length)

    def is_valid_format(self, token: Any) -> bool:
        return is_valid_format(token, self._pattern)

    def sanitize(self, raw: Any) -> Optional[str]:
        if not raw or not isinstance(raw, str):
            return None
        candidate = _WS_RE.sub("", raw.strip())
        if self._pattern.fullmatch(candidate) is None:
            return None
        return candidate.upper()
