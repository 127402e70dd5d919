from __future__ import annotations

import os

from pydantic import BaseModel, Field


ENV_PREFIX = "COMMIT_FEED_"


class CommitFeedConfig(BaseModel):
    # Identifiers: numeric drupal.org uid, GitHub login. Empty = source disabled.
    tracker_user_id: str = ""
    activity_user_id: str = ""
    count: int = Field(default=4, ge=0)
    cache_time_minutes: int = Field(default=1440, ge=0)
    timeout_s: float = Field(default=10.0, gt=0)
    parallel: bool = False
    tracker_host: str = "www.drupal.org"
    activity_host: str = "github.com"

    @property
    def cache_max_age(self) -> int:
        return self.cache_time_minutes * 60

    @property
    def has_sources(self) -> bool:
        return bool(self.tracker_user_id.strip() or self.activity_user_id.strip())

    @classmethod
    def from_env(cls, **overrides) -> CommitFeedConfig:
        """
        Build config from COMMIT_FEED_* env vars; keyword overrides win.
        Unset vars fall back to the field defaults. Bad values raise ValidationError.
        """
        data: dict[str, object] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                data[name] = raw
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
