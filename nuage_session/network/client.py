"""
HTTP transport configuration for the controller API.

Provides a ``requests.Session`` with JSON defaults, optional client
certificate and an opt-in urllib3 retry policy.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nuage_session.config import HEADER_CONTENT_TYPE, JSON_CONTENT_TYPE

Certificate = str | tuple[str, str]


def build_session(
    verify_ssl: bool = True,
    cert: Certificate | None = None,
    retries: int = 0,
) -> requests.Session:
    """
    Return a requests.Session ready for the controller API.

    Args:
        verify_ssl: Whether to verify the server TLS certificate
        cert: Client certificate – a PEM path holding cert and key, or a
            ``(cert_path, key_path)`` tuple
        retries: Transport-level retries on 502/503/504 and connection errors

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=0.5,
        status_forcelist=[502, 503, 504],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    if cert:
        session.cert = cert
    session.headers.update({
        HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
    })
    return session
