from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from .common import KeptnModel
from .service import Service


class Stage(KeptnModel):
    stage_name: Optional[str] = Field(default=None, alias="stageName")
    services: Optional[List[Service]] = None

    required_fields: ClassVar[Tuple[str, ...]] = ("stage_name",)


class Stages(KeptnModel):
    """
    A page of stages.
    """

    # Pointer to next page, base64 encoded
    next_page_key: Optional[str] = Field(default=None, alias="nextPageKey")
    # Size of returned page
    page_size: Optional[float] = Field(default=None, alias="pageSize")
    stages: Optional[List[Optional[Stage]]] = None
    # Total number of stages
    total_count: Optional[float] = Field(default=None, alias="totalCount")
