"""
Errors raised by the Keptn api client.
"""

from typing import Optional


class KeptnAPIError(RuntimeError):
    """
    The single error type surfaced by api calls. It is raised both when the
    Keptn api answers with a non-2xx status, and when the call fails locally
    (network errors, json encode / decode errors, invalid request models).
    Callers should only rely on `message`; `status_code` and `code` are filled
    in when a response was received.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def __str__(self):
        if self.status_code is not None:
            return f"{self.message} (status code: {self.status_code})"
        return self.message


class ModelValidationError(ValueError):
    """
    Raised by `KeptnModel.validate_model()`. `name` is the path-qualified name
    of the offending field, e.g. `stages.2.stageName`.
    """

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name} in body {reason}")
        self.name = name
        self.reason = reason

    def prefixed(self, prefix: str) -> "ModelValidationError":
        return ModelValidationError(f"{prefix}.{self.name}", self.reason)


class KeptnConfigurationError(RuntimeError):
    """
    Raised when the client cannot be configured from the given arguments or
    the environment.
    """
