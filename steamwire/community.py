"""Cookie setup for the Steam community web site."""

from __future__ import annotations

from urllib.parse import quote_plus

import requests

__all__ = ["set_cookies"]

_COOKIE_DOMAIN = "steamcommunity.com"
_COOKIE_PATH = "/"


def set_cookies(
    session: requests.Session,
    session_id: str,
    steam_login: str,
    steam_login_secure: str,
) -> None:
    """Store the community login cookies in ``session``'s cookie jar.

    The session id is URL-escaped because the site URL-decodes it; the login
    values are expected to be escaped already.
    """
    cookies = {
        "sessionid": quote_plus(session_id),
        "steamLogin": steam_login,
        "steamLoginSecure": steam_login_secure,
    }
    for name, value in cookies.items():
        session.cookies.set(name, value, domain=_COOKIE_DOMAIN, path=_COOKIE_PATH)