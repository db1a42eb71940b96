from typing import Any, Optional

from .common import KeptnModel


class Metadata(KeptnModel):
    bridgeversion: Optional[str] = None
    keptnlabel: Optional[str] = None
    keptnservices: Optional[Any] = None
    keptnversion: Optional[str] = None
    namespace: Optional[str] = None
    shipyardversion: Optional[str] = None
