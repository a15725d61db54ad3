"""
Authentication header resolution.

Password mode sends ``Authorization: XREST base64(user:secret)``, where the
secret is the root object's API key once the session is authenticated, and
the configured password before that.  Certificate mode sends no
Authorization header: the client certificate is presented by the transport.
"""

import base64

from nuage_session.config import AUTH_SCHEME
from nuage_session.errors import SessionError
from nuage_session.models import Rootable


def b64encode_credentials(username: str, secret: str) -> str:
    """Standard RFC 4648 Base64 over the UTF-8 bytes of ``user:secret``."""
    return base64.b64encode(f"{username}:{secret}".encode("utf-8")).decode("ascii")


def make_authorization_header(
    username: str | None,
    password: str | None,
    root: Rootable | None,
) -> str:
    """
    Build the XREST Authorization header value.

    Raises:
        SessionError: when the username or the root object is missing, or
            when neither an API key nor a password is available
    """
    if not username:
        raise SessionError("Invalid Credentials", "No username given")

    if root is None:
        raise SessionError("Invalid Credentials", "No root user set")

    key = root.api_key
    if not password and not key:
        raise SessionError("Invalid Credentials", "No password or authentication token given")

    return f"{AUTH_SCHEME} {b64encode_credentials(username, key or password)}"
