from __future__ import annotations

from collections.abc import Iterable, Sequence

from commit_feed.schemas import Commit


def aggregate(lists: Iterable[Sequence[Commit]], limit: int) -> list[Commit]:
    """
    Merge per-source commit lists, newest first, at most `limit` entries.

    Ties on timestamp keep concatenation order (earlier list first, then
    position within its list); sorted() is stable so negating the key is
    enough, no reverse=True.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    merged: list[Commit] = []
    for commits in lists:
        merged.extend(commits)

    ranked = sorted(merged, key=lambda c: -c.timestamp)
    return ranked[:limit]
