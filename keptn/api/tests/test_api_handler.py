import os
import tempfile

# Set cache dir to a temp dir before importing anything from keptn
tmpdir = tempfile.mkdtemp()
os.environ["KEPTN_CACHE_DIR"] = tmpdir

import json
import re
import unittest
from unittest import mock

import pydantic
import requests
import responses
from responses import matchers

from keptn.api.errors import KeptnAPIError, KeptnConfigurationError
from keptn.api.handler import APIHandler, RawResponse
from keptn.api.types.metadata import Metadata

URL = "http://keptn.example.com/api"


class TestConnectionConfig(unittest.TestCase):
    def test_scheme_is_stripped_from_url(self):
        handler = APIHandler("https://keptn.example.com/api/", "token")
        self.assertEqual(handler.config.base_url, "keptn.example.com/api")
        self.assertEqual(handler.config.scheme, "https")
        self.assertEqual(handler.config.api_url, "https://keptn.example.com/api")

    def test_explicit_scheme_wins(self):
        handler = APIHandler("https://keptn.example.com/api", "token", scheme="http")
        self.assertEqual(handler.config.api_url, "http://keptn.example.com/api")

    def test_default_scheme(self):
        handler = APIHandler("keptn.example.com/api", "token")
        self.assertEqual(handler.config.api_url, "http://keptn.example.com/api")

    def test_unsupported_scheme(self):
        with self.assertRaises(KeptnConfigurationError):
            APIHandler("keptn.example.com/api", "token", scheme="ftp")

    def test_config_is_immutable(self):
        handler = APIHandler(URL, "token")
        with self.assertRaises(pydantic.ValidationError):
            handler.config.auth_token = "other"

    def test_from_env(self):
        env = {
            "KEPTN_API_URL": "https://keptn.example.com/api",
            "KEPTN_API_TOKEN": "secret",
            "KEPTN_AUTH_HEADER": "Authorization",
            "KEPTN_API_TIMEOUT": "30",
            "KEPTN_DEBUG_HEADERS": "x-debug=1,x-trace=abc",
        }
        with mock.patch.dict(os.environ, env):
            handler = APIHandler.from_env()
        self.assertEqual(handler.config.api_url, "https://keptn.example.com/api")
        self.assertEqual(handler.config.auth_token, "secret")
        self.assertEqual(handler.config.auth_header, "Authorization")
        self.assertEqual(handler.config.timeout, 30.0)
        self.assertEqual(
            handler.config.extra_headers, {"x-debug": "1", "x-trace": "abc"}
        )

    def test_from_env_arguments_win(self):
        with mock.patch.dict(os.environ, {"KEPTN_API_URL": "env.example.com"}):
            handler = APIHandler.from_env(base_url="arg.example.com", auth_token="t")
        self.assertEqual(handler.config.base_url, "arg.example.com")
        self.assertEqual(handler.config.auth_header, "x-token")

    def test_from_env_without_url(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(KeptnConfigurationError):
                APIHandler.from_env()

    def test_malformed_debug_headers(self):
        env = {"KEPTN_API_URL": URL, "KEPTN_DEBUG_HEADERS": "no-equal-sign"}
        with mock.patch.dict(os.environ, env):
            with self.assertRaises(KeptnConfigurationError):
                APIHandler.from_env()


class TestRawResponse(unittest.TestCase):
    def test_empty(self):
        self.assertTrue(RawResponse(204, b"", {}).empty)
        self.assertFalse(RawResponse(200, b"{}", {}).empty)


class TestAuthHeader(unittest.TestCase):
    @responses.activate
    def test_auth_header_sent(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            json={"keptnversion": "0.8.0"},
            match=[
                matchers.header_matcher(
                    {"x-token": "secret", "Content-Type": "application/json"}
                )
            ],
        )
        handler = APIHandler(URL, "secret")
        metadata = handler.get_metadata()
        self.assertEqual(metadata.keptnversion, "0.8.0")

    @responses.activate
    def test_custom_auth_header(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            json={},
            match=[matchers.header_matcher({"Authorization": "Bearer abc"})],
        )
        handler = APIHandler(URL, "Bearer abc", auth_header="Authorization")
        handler.get_metadata()
        self.assertNotIn("x-token", responses.calls[0].request.headers)

    @responses.activate
    def test_no_auth_header_without_token_or_header_name(self):
        responses.add(responses.GET, f"{URL}/v1/metadata", json={})
        for token, header in [("", "x-token"), (None, "x-token"), ("secret", "")]:
            APIHandler(URL, token, auth_header=header).get_metadata()
        for call in responses.calls:
            self.assertNotIn("x-token", call.request.headers)
            self.assertEqual(call.request.headers["Content-Type"], "application/json")


class TestStatusHandling(unittest.TestCase):
    def setUp(self):
        self.handler = APIHandler(URL, "secret")

    @responses.activate
    def test_success_with_body(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            json={"bridgeversion": "0.8.0", "namespace": "keptn"},
        )
        metadata = self.handler.get_metadata()
        self.assertEqual(
            metadata, Metadata(bridgeversion="0.8.0", namespace="keptn")
        )

    @responses.activate
    def test_success_with_empty_body(self):
        responses.add(responses.GET, f"{URL}/v1/metadata", body="", status=200)
        self.assertIsNone(self.handler.get_metadata())

    @responses.activate
    def test_any_2xx_is_success(self):
        responses.add(responses.GET, f"{URL}/v1/metadata", body="", status=204)
        self.assertIsNone(self.handler.get_metadata())

    @responses.activate
    def test_error_body(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            json={"code": 500, "message": "internal error"},
            status=500,
        )
        with self.assertRaises(KeptnAPIError) as cm:
            self.handler.get_metadata()
        self.assertEqual(cm.exception.message, "internal error")
        self.assertEqual(cm.exception.status_code, 500)
        self.assertEqual(cm.exception.code, 500)

    @responses.activate
    def test_malformed_error_body(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            body="<html>bad gateway</html>",
            status=502,
        )
        with self.assertRaises(KeptnAPIError) as cm:
            self.handler.get_metadata()
        self.assertIn("Could not decode error response", cm.exception.message)
        self.assertEqual(cm.exception.status_code, 502)

    @responses.activate
    def test_error_body_without_message(self):
        responses.add(responses.GET, f"{URL}/v1/metadata", json={"code": 1}, status=400)
        with self.assertRaises(KeptnAPIError) as cm:
            self.handler.get_metadata()
        self.assertIn("Could not decode error response", cm.exception.message)
        self.assertIn("message", cm.exception.message)
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(cm.exception.status_code, 400)

    @responses.activate
    def test_undecodable_success_body(self):
        responses.add(responses.GET, f"{URL}/v1/metadata", body="not json")
        with self.assertRaises(KeptnAPIError) as cm:
            self.handler.get_metadata()
        self.assertIn("Could not decode Metadata", cm.exception.message)

    @responses.activate
    def test_network_error(self):
        responses.add(
            responses.GET,
            f"{URL}/v1/metadata",
            body=requests.ConnectionError("connection refused"),
        )
        with self.assertRaises(KeptnAPIError) as cm:
            self.handler.get_metadata()
        self.assertIn("connection refused", cm.exception.message)
        self.assertIsNone(cm.exception.status_code)


def _fake_session(status_code=200, content=b"", headers=None):
    response = mock.MagicMock()
    response.status_code = status_code
    response.content = content
    response.headers = headers or {}
    session = mock.MagicMock(spec=requests.Session)
    session.request.return_value = response
    return session, response


class TestResponseRelease(unittest.TestCase):
    def test_closed_on_success(self):
        session, response = _fake_session(200, b'{"keptnversion": "0.8.0"}')
        APIHandler(URL, "secret", http_client=session).get_metadata()
        response.close.assert_called_once_with()

    def test_closed_on_empty_success(self):
        session, response = _fake_session(200, b"")
        APIHandler(URL, "secret", http_client=session).get_metadata()
        response.close.assert_called_once_with()

    def test_closed_on_error_status(self):
        session, response = _fake_session(404, b'{"message": "not found"}')
        with self.assertRaises(KeptnAPIError):
            APIHandler(URL, "secret", http_client=session).get_metadata()
        response.close.assert_called_once_with()

    def test_closed_on_malformed_error(self):
        session, response = _fake_session(500, b"oops")
        with self.assertRaises(KeptnAPIError):
            APIHandler(URL, "secret", http_client=session).get_metadata()
        response.close.assert_called_once_with()

    def test_closed_on_read_failure(self):
        session, response = _fake_session()
        type(response).content = mock.PropertyMock(
            side_effect=requests.exceptions.ChunkedEncodingError("reset")
        )
        with self.assertRaises(KeptnAPIError) as cm:
            APIHandler(URL, "secret", http_client=session).get_metadata()
        self.assertIn("reset", cm.exception.message)
        response.close.assert_called_once_with()

    def test_timeout_is_passed_to_session(self):
        session, _ = _fake_session(200, b"")
        APIHandler(URL, "secret", http_client=session, timeout=5).get_metadata()
        _, kwargs = session.request.call_args
        self.assertEqual(kwargs["timeout"], 5)
        self.assertEqual(kwargs["headers"]["x-token"], "secret")

    def test_injected_session_is_used_as_is(self):
        session, _ = _fake_session(200, b"")
        handler = APIHandler(URL, "secret", http_client=session)
        handler.get_metadata()
        session.mount.assert_not_called()
        session.request.assert_called_once()
        args, _ = session.request.call_args
        self.assertEqual(args, ("GET", f"{URL}/v1/metadata"))


class TestPathEscaping(unittest.TestCase):
    @responses.activate
    def test_path_segments_are_escaped(self):
        responses.add(responses.DELETE, re.compile(r".*/service/.*"), json={})
        APIHandler(URL, "secret").delete_service("my project", "a/b?c")
        self.assertEqual(
            responses.calls[0].request.url,
            f"{URL}/shipyard-controller/v1/project/my%20project/service/a%2Fb%3Fc",
        )

    @responses.activate
    def test_plain_names_are_unchanged(self):
        responses.add(
            responses.DELETE,
            f"{URL}/shipyard-controller/v1/project/sockshop/service/carts",
            json={"message": "deleted"},
        )
        response = APIHandler(URL, "secret").delete_service("sockshop", "carts")
        self.assertEqual(response.message, "deleted")
        self.assertEqual(
            json.loads(responses.calls[0].response.text), {"message": "deleted"}
        )


if __name__ == "__main__":
    unittest.main()
