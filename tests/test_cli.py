"""
Tests for the command-line interface.
"""

import io
import json
import unittest
from unittest.mock import patch

import requests
from requests.structures import CaseInsensitiveDict

from nuage_session import cli
from nuage_session.context import set_current_session
from nuage_session.models import RootObject
from nuage_session.session import Session

URL = "https://vsd:8443/nuage/api/v6"


def _make_response(status_code=200, body=None, headers=None, reason="OK"):
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    resp.headers = CaseInsensitiveDict(headers or {})
    resp._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return resp


class TestParseArgs(unittest.TestCase):
    def test_url_given(self):
        args = cli.parse_args(["--url", URL, "--password", "pw", "whoami"])
        self.assertEqual(args.url, URL)
        self.assertEqual(args.command, "whoami")
        self.assertTrue(args.verify_ssl)

    def test_endpoint_builds_url(self):
        args = cli.parse_args(["--endpoint", "https://vsd:8443", "--version", "5.0", "whoami"])
        self.assertEqual(args.url, "https://vsd:8443/nuage/api/v5_0")

    @patch("nuage_session.cli.DEFAULT_URL", "")
    def test_url_or_endpoint_required(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.parse_args(["whoami"])

    def test_list_options(self):
        args = cli.parse_args([
            "--url", URL, "--no-verify-ssl", "list", "enterprises",
            "--filter", "name == 'x'", "--page", "2", "--page-size", "10",
        ])
        self.assertFalse(args.verify_ssl)
        self.assertEqual(args.category, "enterprises")
        self.assertEqual((args.page, args.page_size), (2, 10))
        self.assertEqual(args.filter, "name == 'x'")

    def test_command_required(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.parse_args(["--url", URL])


class TestBuildSession(unittest.TestCase):
    def test_password_session(self):
        args = cli.parse_args(["--url", URL, "--user", "admin", "--password", "pw",
                               "--organization", "acme", "whoami"])
        session = cli.build_session(args)
        self.assertEqual((session.username, session.password, session.organization),
                         ("admin", "pw", "acme"))
        self.assertIsNone(session.certificate)

    def test_certificate_session(self):
        args = cli.parse_args(["--url", URL, "--cert", "c.pem", "--key", "k.pem", "whoami"])
        session = cli.build_session(args)
        self.assertEqual(session.certificate, ("c.pem", "k.pem"))

    @patch("nuage_session.cli.getpass.getpass", return_value="typed")
    def test_password_prompted(self, mock_getpass):
        args = cli.parse_args(["--url", URL, "--password", "", "whoami"])
        session = cli.build_session(args)
        self.assertEqual(session.password, "typed")
        mock_getpass.assert_called_once()


class TestMain(unittest.TestCase):
    def setUp(self):
        self.session = Session("csproot", "pw", "csp", URL, RootObject())
        patcher = patch.object(self.session.http, "request")
        self.request = patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(set_current_session, None)
        build = patch("nuage_session.cli.build_session", return_value=self.session)
        build.start()
        self.addCleanup(build.stop)

    def _run(self, *argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            cli.main(["--url", URL, "--password", "pw", *argv])
        return out.getvalue()

    def test_whoami_hides_api_key(self):
        self.request.return_value = _make_response(body=[
            {"ID": "u1", "APIKey": "secret-key", "userName": "csproot"},
        ])
        output = json.loads(self._run("whoami"))
        self.assertEqual(output["userName"], "csproot")
        self.assertNotIn("APIKey", output)
        self.assertEqual(self.session.root.api_key, "")

    def test_list(self):
        self.request.side_effect = [
            _make_response(body=[{"ID": "u1", "APIKey": "k"}]),
            _make_response(body=[{"ID": "e1", "name": "acme"}], headers={"X-Nuage-Count": "1"}),
        ]
        output = json.loads(self._run("list", "enterprises", "--page", "0"))
        self.assertEqual(output[0]["ID"], "e1")
        self.assertEqual(output[0]["name"], "acme")
        list_call = self.request.call_args_list[1]
        self.assertEqual(list_call.args, ("GET", URL + "/enterprises"))
        self.assertEqual(list_call.kwargs["headers"]["X-Nuage-Page"], "0")

    def test_error_exits_with_status_1(self):
        self.request.return_value = _make_response(401, reason="Unauthorized")
        with self.assertRaises(SystemExit) as ctx:
            self._run("whoami")
        self.assertEqual(ctx.exception.code, 1)

    def test_events_stops_after_count(self):
        event = {"type": "CREATE", "entityType": "enterprise"}
        self.request.side_effect = [
            _make_response(body=[{"ID": "u1", "APIKey": "k"}]),
        ] + [_make_response(body={"uuid": f"c{i}", "events": [event]}) for i in range(50)]
        output = self._run("events", "--count", "1")
        self.assertIn('"CREATE"', output)


if __name__ == "__main__":
    unittest.main()
