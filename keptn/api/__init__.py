# flake8: noqa
"""
The Keptn api: an APIHandler holds the connection to a Keptn installation and
exposes the operations, grouped by resource, e.g. `handler.project.create(...)`.
"""

from . import types
from .errors import KeptnAPIError, KeptnConfigurationError, ModelValidationError
from .handler import APIHandler, ConnectionConfig, RawResponse
