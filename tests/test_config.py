"""
Tests for configuration helpers and the error type.
"""

import unittest

from nuage_session.config import build_api_url
from nuage_session.errors import SessionError


class TestBuildApiUrl(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(build_api_url("https://vsd:8443"), "https://vsd:8443/nuage/api/v6")

    def test_dotted_version(self):
        self.assertEqual(
            build_api_url("https://vsd:8443/", version="5.0"),
            "https://vsd:8443/nuage/api/v5_0",
        )

    def test_custom_prefix(self):
        self.assertEqual(
            build_api_url("https://vsd", prefix="/api/", version="4.0"),
            "https://vsd/api/v4_0",
        )


class TestSessionError(unittest.TestCase):
    def test_fields(self):
        err = SessionError("T", "D")
        self.assertEqual((err.title, err.description), ("T", "D"))
        self.assertEqual(str(err), "T: D")

    def test_untitled(self):
        self.assertEqual(str(SessionError("", "timed out")), "timed out")

    def test_to_dict(self):
        self.assertEqual(SessionError("T", "D").to_dict(), {"title": "T", "description": "D"})


if __name__ == "__main__":
    unittest.main()
