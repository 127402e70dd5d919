from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


# Lower than any real epoch second, so unparseable dates sort last.
UNPARSEABLE_TIMESTAMP = -(2 ** 63)

# Generic XML tree: nested dicts/lists with string leaves.
FeedTree = Union[dict[str, Any], list[Any], str]


class SourceKind(str, Enum):
    TRACKER = "tracker"
    ACTIVITY_FEED = "activity-feed"


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    project: str = ""
    message: str = ""
    hash: str = ""
    date: str = ""
    timestamp: int = UNPARSEABLE_TIMESTAMP
    link: str = ""
    source: SourceKind

    @property
    def short_hash(self) -> str:
        return self.hash[:7]
