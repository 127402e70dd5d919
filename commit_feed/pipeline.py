# commit_feed/pipeline.py
"""
fetch -> normalize -> aggregate, per request.

collect_commits never raises: a source that fails to fetch or normalize
contributes no commits and the other source still shows up.
"""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable
from urllib.parse import quote

from commit_feed.aggregate import aggregate
from commit_feed.config import CommitFeedConfig
from commit_feed.error_codes import NORMALIZE_ERROR
from commit_feed.feed_fetch import FetchResult, fetch_feed
from commit_feed.logging_utils import log_event
from commit_feed.normalize import normalize
from commit_feed.schemas import Commit, SourceKind


FetchFn = Callable[..., FetchResult]

# Aggregation order; ties on timestamp resolve in this order.
SOURCE_ORDER = (SourceKind.TRACKER, SourceKind.ACTIVITY_FEED)


def build_source_urls(cfg: CommitFeedConfig) -> dict[SourceKind, str]:
    urls: dict[SourceKind, str] = {}
    tracker_id = cfg.tracker_user_id.strip()
    activity_id = cfg.activity_user_id.strip()

    if tracker_id:
        urls[SourceKind.TRACKER] = f"https://{cfg.tracker_host}/user/{quote(tracker_id, safe='')}/track/code/feed"
    if activity_id:
        urls[SourceKind.ACTIVITY_FEED] = f"https://{cfg.activity_host}/{quote(activity_id, safe='')}.atom"

    return urls


def _commits_for(kind: SourceKind, url: str, *, fetch: FetchFn, timeout_s: float) -> list[Commit]:
    result = fetch(url, timeout_s=timeout_s)
    if not result.ok:
        return []

    try:
        commits = normalize(kind, result.tree)
    except Exception as exc:
        log_event("feed_normalize_failed", source=kind.value, url=url, error_code=NORMALIZE_ERROR, error=str(exc))
        return []

    log_event("feed_normalized", source=kind.value, url=url, commits=len(commits))
    return commits


def collect_commits(cfg: CommitFeedConfig, *, fetch: FetchFn = fetch_feed) -> list[Commit]:
    """Merged, newest-first commit list for the configured identifiers."""
    urls = build_source_urls(cfg)
    if not urls:
        return []

    t0 = time.perf_counter()
    kinds = [k for k in SOURCE_ORDER if k in urls]

    def run(kind: SourceKind) -> list[Commit]:
        try:
            return _commits_for(kind, urls[kind], fetch=fetch, timeout_s=cfg.timeout_s)
        except Exception as exc:
            # A fetch callable that raises counts as a failed source
            log_event("feed_fetch_failed", source=kind.value, url=urls[kind], error=str(exc))
            return []

    if cfg.parallel and len(kinds) > 1:
        with ThreadPoolExecutor(max_workers=len(kinds)) as pool:
            # map() yields in submission order, not completion order
            per_source = list(pool.map(run, kinds))
    else:
        per_source = [run(kind) for kind in kinds]

    commits = aggregate(per_source, cfg.count)

    log_event(
        "commits_collected",
        sources=[k.value for k in kinds],
        per_source={k.value: len(c) for k, c in zip(kinds, per_source)},
        returned=len(commits),
        elapsed_ms=round((time.perf_counter() - t0) * 1000, 1),
    )
    return commits
