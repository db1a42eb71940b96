from datetime import datetime
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field

from .common import KeptnModel


class KeptnContextExtendedCE(KeptnModel):
    """
    A CloudEvent as sent to and returned by the Keptn api, extended with the
    keptn specific attributes.
    """

    contenttype: Optional[str] = None
    data: Optional[Any] = None
    extensions: Optional[Any] = None
    id_: Optional[str] = Field(default=None, alias="id")
    shkeptncontext: Optional[str] = None
    shkeptnspecversion: Optional[str] = None
    source: Optional[str] = None
    specversion: Optional[str] = None
    time: Optional[datetime] = None
    triggeredid: Optional[str] = None
    gitcommitid: Optional[str] = None
    type_: Optional[str] = Field(default=None, alias="type")

    required_fields: ClassVar[Tuple[str, ...]] = ("data", "source", "type_")


class Events(KeptnModel):
    """
    A page of events.
    """

    events: Optional[List[KeptnContextExtendedCE]] = None
    next_page_key: Optional[str] = Field(default=None, alias="nextPageKey")
    page_size: Optional[float] = Field(default=None, alias="pageSize")
    total_count: Optional[float] = Field(default=None, alias="totalCount")


class EventContext(KeptnModel):
    """
    Returned when an event is accepted. The keptn context links the event with
    the chain of events that Keptn produces while processing it.
    """

    keptn_context: Optional[str] = Field(default=None, alias="keptnContext")
    token: Optional[str] = None

    required_fields: ClassVar[Tuple[str, ...]] = ("keptn_context",)
