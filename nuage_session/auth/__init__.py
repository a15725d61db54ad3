"""Authentication submodule – XREST header construction."""

from nuage_session.auth.headers import b64encode_credentials, make_authorization_header

__all__ = ["b64encode_credentials", "make_authorization_header"]
