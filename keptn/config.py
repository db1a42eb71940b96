"""
Overall configurations and constants for the Keptn python client.
"""

import os
from pathlib import Path
from typing import Optional

# Cache directory for the client's local files, such as internal logs.
# In cases like unit testing, you can change this to a directory that is
# available via the environment variable `KEPTN_CACHE_DIR`, BEFORE IMPORTING KEPTN.
#
# Implementation note: the cache directory is not created at import time. loguru
# creates the log directory when internal logging is enabled.
CACHE_DIR = Path(os.environ.get("KEPTN_CACHE_DIR", Path.home() / ".cache" / "keptn"))
LOGS_DIR = CACHE_DIR / "logs"

################################################################################
# Connection defaults. These are read by `APIHandler.from_env()` at call time,
# so that changing the environment after import takes effect.
################################################################################

# Environment variable that holds the url of the Keptn api, e.g.
# `keptn.example.com/api` or `https://keptn.example.com/api`.
API_URL_ENV = "KEPTN_API_URL"
# Environment variable that holds the api token.
API_TOKEN_ENV = "KEPTN_API_TOKEN"
# Environment variable that holds the name of the header carrying the token.
AUTH_HEADER_ENV = "KEPTN_AUTH_HEADER"
# Environment variable that holds the scheme used when the url carries none.
SCHEME_ENV = "KEPTN_SCHEME"
# Environment variable that holds the request timeout in seconds.
API_TIMEOUT_ENV = "KEPTN_API_TIMEOUT"
# Comma separated header_key=header_value pairs added to every request.
DEBUG_HEADERS_ENV = "KEPTN_DEBUG_HEADERS"

# The api-gateway of Keptn expects the token in the `x-token` header.
DEFAULT_AUTH_HEADER = "x-token"
DEFAULT_SCHEME = "http"
SUPPORTED_SCHEMES = ("http", "https")

# Page size used by the deprecated single event lookup.
DEFAULT_EVENT_PAGE_SIZE = 10


def _to_bool(s: str) -> bool:
    """
    Convert a string to a boolean value.
    """
    if not isinstance(s, str):
        raise TypeError(f"Expected a string, got {type(s)}")
    true_values = ("yes", "true", "t", "1", "y", "on")
    false_values = ("no", "false", "f", "0", "n", "off", "")
    s = s.lower()
    if s in true_values:
        return True
    elif s in false_values:
        return False
    else:
        raise ValueError(
            f"Invalid boolean value: {s}. Valid true values: {true_values}. Valid false"
            f" values: {false_values}."
        )


def _parse_timeout(timeout_str: Optional[str]) -> Optional[float]:
    """
    Parses the timeout given in KEPTN_API_TIMEOUT. An unset value, or any of
    "0", "false", "off", means that no timeout is enforced by the client and
    the call blocks until the server answers.
    """
    if timeout_str is None or timeout_str.lower() in ("", "0", "f", "false", "off"):
        return None
    try:
        timeout = float(timeout_str)
    except ValueError:
        print(
            f"You have set an invalid value for {API_TIMEOUT_ENV} {timeout_str}."
            " No timeout will be used."
        )
        return None
    return timeout if timeout > 0 else None
