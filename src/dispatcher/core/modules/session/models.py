"""Session cookie names and token types."""

from typing import NewType

AuthToken = NewType("AuthToken", str)

ACCESS_TOKEN_COOKIE = "access-token"
REFRESH_TOKEN_COOKIE = "refresh-token"
TOKEN_COOKIE_MAX_AGE = 5 * 60 * 60  # 5 hours
