# flake8: noqa
"""
The Keptn python client.
"""

from ._version import __version__

from .api import APIHandler, KeptnAPIError
