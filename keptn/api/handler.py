"""
The api/handler module serves as the single entry point of all apis, holding
the connection configuration such as the url and the auth token, as well as
the http session that all calls go through.
"""

import os
from typing import Dict, Mapping, NamedTuple, Optional, Union

import requests
from pydantic import BaseModel, ConfigDict, Field
from requests.adapters import HTTPAdapter

from keptn import config
from keptn._internal import logging as internal_logging

from .errors import KeptnAPIError, KeptnConfigurationError

# import the related API resources. Note that in all these files, they should
# not import the handler to avoid circular imports.
from .evaluation import EvaluationAPI
from .event import EventAPI
from .metadata import MetadataAPI
from .project import ProjectAPI
from .service import ServiceAPI
from .types.common import Error
from .types.evaluation import Evaluation
from .types.event import EventContext, KeptnContextExtendedCE
from .types.metadata import Metadata
from .types.project import CreateProject, DeleteProjectResponse, Project
from .types.service import CreateService, DeleteServiceResponse


class ConnectionConfig(BaseModel):
    """
    The connection configuration shared by all calls issued through one
    handler. It cannot be changed after the handler is created.
    """

    model_config = ConfigDict(frozen=True)

    # Host and path of the api, without the scheme, e.g. "keptn.example.com/api".
    base_url: str
    scheme: str = config.DEFAULT_SCHEME
    auth_token: Optional[str] = None
    auth_header: Optional[str] = config.DEFAULT_AUTH_HEADER
    # Seconds to wait for the server. None means that the call blocks until the
    # server answers.
    timeout: Optional[float] = None
    extra_headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def api_url(self) -> str:
        return f"{self.scheme}://{self.base_url}"


class RawResponse(NamedTuple):
    """
    The body and headers of a successful (2xx) response.
    """

    status_code: int
    body: bytes
    headers: Mapping[str, str]

    @property
    def empty(self) -> bool:
        """
        Whether the server answered without a body. This is a successful call
        without a result, not an error.
        """
        return len(self.body) == 0


def _split_scheme(url: str):
    """
    Returns (scheme, url without scheme). The scheme is None if the url does
    not carry one.
    """
    for scheme in config.SUPPORTED_SCHEMES:
        prefix = scheme + "://"
        if url.startswith(prefix):
            return scheme, url[len(prefix) :]
    return None, url


def _parse_debug_headers(value: str) -> Dict[str, str]:
    # KEPTN_DEBUG_HEADERS should be in the format of comma separated
    # header_key=header_value pairs.
    headers = {}
    try:
        for pair in value.split(","):
            key, header_value = pair.split("=")
            headers[key.strip()] = header_value.strip()
    except ValueError:
        raise KeptnConfigurationError(
            f"{config.DEBUG_HEADERS_ENV} should be in the format of comma separated"
            f" header_key=header_value pairs. Got {value}"
        )
    return headers


def default_http_client() -> requests.Session:
    """
    Creates the session used when the caller does not bring one. Proxies are
    taken from the environment. Failed requests are never retried.
    """
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class APIHandler(object):
    """
    A Keptn API handler that is associated with one Keptn installation. This
    class holds all the apis callable by the user, and performs the http calls
    on their behalf.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: Optional[str] = None,
        auth_header: Optional[str] = config.DEFAULT_AUTH_HEADER,
        http_client: Optional[requests.Session] = None,
        scheme: Optional[str] = None,
        timeout: Optional[float] = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ):
        """
        Creates a handler that authenticates at the api endpoint via the provided
        token.

        :param str base_url: the url of the api. A leading "http://" or "https://"
            is stripped; it is used as the scheme if `scheme` is not given.
        :param str auth_token: the api token. No auth header is sent if empty.
        :param str auth_header: the name of the header carrying the token. No
            auth header is sent if empty.
        :param requests.Session http_client: the session to send requests with.
            Pass your own to configure tls, proxies or a fake transport in tests.
        :param str scheme: "http" or "https".
        :param float timeout: seconds to wait for the server, None to wait forever.
        """
        url_scheme, base_url = _split_scheme(base_url)
        scheme = scheme or url_scheme or config.DEFAULT_SCHEME
        if scheme not in config.SUPPORTED_SCHEMES:
            raise KeptnConfigurationError(
                f"Unsupported scheme {scheme}. Use one of {config.SUPPORTED_SCHEMES}."
            )
        self.config = ConnectionConfig(
            base_url=base_url.rstrip("/"),
            scheme=scheme,
            auth_token=auth_token,
            auth_header=auth_header,
            timeout=timeout,
            extra_headers=extra_headers or {},
        )

        self._header = {"Content-Type": "application/json"}
        if auth_token and auth_header:
            self._header[auth_header] = auth_token
        for k, v in self.config.extra_headers.items():
            self._header.setdefault(k, v)

        self._session = (
            http_client if http_client is not None else default_http_client()
        )

        internal_logging.enable()

        # Add individual APIs
        self.project = ProjectAPI(self)
        self.service = ServiceAPI(self)
        self.event = EventAPI(self)
        self.evaluation = EvaluationAPI(self)
        self.metadata = MetadataAPI(self)

    @classmethod
    def from_env(
        cls,
        base_url: Optional[str] = None,
        auth_token: Optional[str] = None,
        auth_header: Optional[str] = None,
        scheme: Optional[str] = None,
        http_client: Optional[requests.Session] = None,
    ) -> "APIHandler":
        """
        Creates a handler, resolving every argument that is not given from the
        environment: KEPTN_API_URL, KEPTN_API_TOKEN, KEPTN_AUTH_HEADER,
        KEPTN_SCHEME, KEPTN_API_TIMEOUT and KEPTN_DEBUG_HEADERS.
        """
        base_url = base_url or os.environ.get(config.API_URL_ENV)
        if not base_url:
            raise KeptnConfigurationError(
                f"You must specify the api url, or set {config.API_URL_ENV} in the"
                " environment."
            )
        auth_token = auth_token or os.environ.get(config.API_TOKEN_ENV)
        auth_header = (
            auth_header
            or os.environ.get(config.AUTH_HEADER_ENV)
            or config.DEFAULT_AUTH_HEADER
        )
        scheme = scheme or os.environ.get(config.SCHEME_ENV)
        timeout = config._parse_timeout(os.environ.get(config.API_TIMEOUT_ENV))
        extra_headers = (
            _parse_debug_headers(os.environ[config.DEBUG_HEADERS_ENV])
            if os.environ.get(config.DEBUG_HEADERS_ENV)
            else None
        )
        return cls(
            base_url,
            auth_token=auth_token,
            auth_header=auth_header,
            http_client=http_client,
            scheme=scheme,
            timeout=timeout,
            extra_headers=extra_headers,
        )

    def _safe_add(self, kwargs: Dict) -> Dict:
        """
        Internal utility function to add default values to the kwargs.
        """
        kwargs["headers"] = dict(kwargs.get("headers") or {})
        kwargs.setdefault("timeout", self.config.timeout)
        for k, v in self._header.items():
            kwargs["headers"].setdefault(k, v)
        return kwargs

    def _request(self, method: str, path: str, **kwargs) -> RawResponse:
        """
        Sends the request and reads the whole response. The response is closed
        before returning on every path.

        Raises:
            KeptnAPIError: if the request cannot be sent or the response cannot
            be read, or if the status code is not 2xx.
        """
        url = self.config.api_url + path
        try:
            response = self._session.request(method, url, **self._safe_add(kwargs))
        except requests.RequestException as e:
            internal_logging.log(f"{method} {url} failed: {e}")
            raise KeptnAPIError(str(e)) from e
        try:
            body = response.content
        except requests.RequestException as e:
            raise KeptnAPIError(str(e)) from e
        finally:
            response.close()

        status_code = response.status_code
        internal_logging.log(f"{method} {url} -> {status_code}")
        if 200 <= status_code < 300:
            return RawResponse(status_code, body, response.headers)
        raise self._error_from_body(status_code, body)

    @staticmethod
    def _error_from_body(status_code: int, body: bytes) -> KeptnAPIError:
        """
        Builds the error for a non-2xx response from the error body the server
        sent. If the body is not a valid error, the error describes why.
        """
        try:
            error = Error.model_validate_json(body)
        except ValueError as e:
            return KeptnAPIError(
                f"Could not decode error response: {e}", status_code=status_code
            )
        try:
            error.validate_model()
        except ValueError as e:
            # a json error without a message still carries the remote code
            return KeptnAPIError(
                f"Could not decode error response: {e}",
                status_code=status_code,
                code=error.code,
            )
        return KeptnAPIError(error.message, status_code=status_code, code=error.code)

    def _get(self, path: str, **kwargs) -> RawResponse:
        return self._request("GET", path, **kwargs)

    def _post(self, path: str, data: Optional[bytes] = None, **kwargs) -> RawResponse:
        return self._request("POST", path, data=data, **kwargs)

    def _put(self, path: str, data: Optional[bytes] = None, **kwargs) -> RawResponse:
        return self._request("PUT", path, data=data, **kwargs)

    def _delete(self, path: str, **kwargs) -> RawResponse:
        return self._request("DELETE", path, **kwargs)

    def close(self):
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    # Flat shortcuts for the most common calls.

    def send_event(self, event: KeptnContextExtendedCE) -> Optional[EventContext]:
        return self.event.send(event)

    def trigger_evaluation(
        self, project: str, stage: str, service: str, evaluation: Evaluation
    ) -> Optional[EventContext]:
        return self.evaluation.trigger(project, stage, service, evaluation)

    def get_event(
        self, keptn_context: str, event_type: str
    ) -> Optional[KeptnContextExtendedCE]:
        """
        Deprecated: use `event.get_events` instead.
        """
        return self.event.get(keptn_context, event_type)

    def create_project(self, project: CreateProject) -> Optional[str]:
        return self.project.create(project)

    def update_project(self, project: CreateProject) -> Optional[str]:
        return self.project.update(project)

    def delete_project(
        self, project: Union[str, Project]
    ) -> Optional[DeleteProjectResponse]:
        return self.project.delete(project)

    def create_service(self, project: str, service: CreateService) -> Optional[str]:
        return self.service.create(project, service)

    def delete_service(
        self, project: str, service: str
    ) -> Optional[DeleteServiceResponse]:
        return self.service.delete(project, service)

    def get_metadata(self) -> Optional[Metadata]:
        return self.metadata.get()
