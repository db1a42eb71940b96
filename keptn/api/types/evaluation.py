from typing import Dict, Optional

from pydantic import Field

from .common import KeptnModel


class Evaluation(KeptnModel):
    """
    A request to evaluate the quality gates of a service. Either a timeframe
    (e.g. "5m") or start / end timestamps are given.
    """

    start: Optional[str] = None
    end: Optional[str] = None
    timeframe: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    git_commit_id: Optional[str] = Field(default=None, alias="gitcommitid")
