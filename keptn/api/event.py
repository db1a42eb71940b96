import warnings
from typing import Mapping, Optional

from keptn.config import DEFAULT_EVENT_PAGE_SIZE

from .api_resource import APIResource

from .types.event import EventContext, Events, KeptnContextExtendedCE

# cloudevents http binding, binary content mode
_CONTEXT_HEADER = "ce-shkeptncontext"
_ID_HEADER = "ce-id"


def _context_from_headers(headers: Mapping[str, str]) -> Optional[EventContext]:
    keptn_context = headers.get(_CONTEXT_HEADER)
    if not keptn_context:
        return None
    return EventContext(keptn_context=keptn_context, token=headers.get(_ID_HEADER))


class EventAPI(APIResource):
    def send(self, event: KeptnContextExtendedCE) -> Optional[EventContext]:
        """
        Sends an event to Keptn. Keptn processes the event asynchronously; the
        returned event context carries the keptn context that correlates the
        events produced while processing it.

        The context is read from the response body. If the body is empty, it is
        read from the cloudevents binary mode headers instead, and None is
        returned if those are absent as well.
        """
        raw = self._post("/v1/event", data=self.marshal(event))
        if raw.empty:
            return _context_from_headers(raw.headers)
        return self.decode(raw, EventContext)

    def get_events(
        self,
        keptn_context: str,
        event_type: str,
        page_size: int = DEFAULT_EVENT_PAGE_SIZE,
    ) -> Optional[Events]:
        """
        Returns a page of events of the given type in the given keptn context.
        """
        return self.execute(
            "GET",
            "/v1/event",
            params={
                "keptnContext": keptn_context,
                "type": event_type,
                "pageSize": page_size,
            },
            response_type=Events,
        )

    def get(
        self, keptn_context: str, event_type: str
    ) -> Optional[KeptnContextExtendedCE]:
        """
        Returns the first event of the given type in the given keptn context, or
        None if there is none.

        Deprecated: use `get_events` instead.
        """
        warnings.warn(
            "EventAPI.get is deprecated, use EventAPI.get_events instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        events = self.get_events(keptn_context, event_type)
        if events is None or not events.events:
            return None
        return events.events[0]
