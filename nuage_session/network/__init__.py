"""
Network operations module for HTTP transport setup.
"""

from nuage_session.network.client import Certificate, build_session

__all__ = ["Certificate", "build_session"]
