from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import ValidationError

from .errors import KeptnAPIError
from .types.common import KeptnModel

if TYPE_CHECKING:
    # only used for type hinting, but avoids circular imports
    from .handler import APIHandler, RawResponse


# A type variable to represent a subclass of KeptnModel
T = TypeVar("T", bound=KeptnModel)


class APIResource(object):
    """
    APIResource is a base class for all api implementations. It is registered
    with the APIHandler object and provides the generic typed call used by all
    operations. For example, for all project related operations, the ProjectAPI
    class is used which is a subclass of APIResource.

    Implementation note: if you are implementing a new set of API, you should subclass
    APIResource and, in keptn/api/handler.py, add a new line in the __init__ function
    of APIHandler to register the new APIResource. For example, if you are
    implementing a new API for "Sequence", you should define a class
    SequenceAPI(APIResource) and then in the __init__ function of APIHandler, you
    should add the following line:
        self.sequence = SequenceAPI(self)
    See for example keptn/api/project.py for an example.
    """

    _client: "APIHandler"

    def __init__(self, _client: "APIHandler"):
        """
        Initializes the APIResource with the APIHandler object. You should not
        need to explicitly call this method. All APIResource classes should
        be initialized by the APIHandler object in its __init__ function.
        """
        self._client = _client
        self._get = _client._get
        self._post = _client._post
        self._put = _client._put
        self._delete = _client._delete
        self._verbs = {
            "GET": self._get,
            "POST": self._post,
            "PUT": self._put,
            "DELETE": self._delete,
        }

    @staticmethod
    def path(template: str, *segments: str) -> str:
        """
        Fills the `{}` placeholders of the path template with the given segments.
        Each segment is escaped as a single path segment, so that names containing
        reserved characters such as "/" or "?" cannot change the requested
        endpoint.

        Raises:
            KeptnAPIError: if a segment is None or empty. Nothing is sent then.
        """
        for i, s in enumerate(segments):
            if s is None or str(s) == "":
                raise KeptnAPIError(f"path parameter {i} of {template} is required")
        return template.format(*(quote(str(s), safe="") for s in segments))

    def marshal(self, request: KeptnModel) -> bytes:
        """
        Validates the structure of the request model and serializes it to the
        json request body.

        Raises:
            KeptnAPIError: if the model is invalid or cannot be serialized.
        """
        try:
            request.validate_model()
            return request.to_json()
        except ValueError as e:
            # ModelValidationError and pydantic's serialization errors are both
            # ValueErrors.
            raise KeptnAPIError(str(e)) from e

    def decode(
        self, raw: "RawResponse", response_type: Union[Type[T], Type[str], None]
    ) -> Any:
        """
        Decodes the body of a successful response into the given type. An empty
        body is a successful call without a result, and yields None.
        """
        if raw.empty or response_type is None:
            return None
        if response_type is str:
            try:
                return raw.body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise KeptnAPIError(
                    f"Could not decode response body: {e}", status_code=raw.status_code
                ) from e
        try:
            return response_type.model_validate_json(raw.body)
        except ValidationError as e:
            raise KeptnAPIError(
                f"Could not decode {response_type.__name__}: {e}",
                status_code=raw.status_code,
            ) from e

    def execute(
        self,
        method: str,
        path: str,
        request: Optional[KeptnModel] = None,
        response_type: Union[Type[T], Type[str], None] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        The typed call that every operation goes through: marshals the request
        model (if any), sends it with the given method to the given path, and
        decodes the response body into `response_type`.

        Returns:
            An instance of `response_type`, or None if the server answered with
            an empty body.
        Raises:
            KeptnAPIError: if the call fails locally, or the server answers with
            a non-2xx status.
        """
        data = self.marshal(request) if request is not None else None
        raw = self._verbs[method](path, data=data, params=params)
        return self.decode(raw, response_type)
