# commit_feed/normalize.py
"""
Per-source normalizers: generic feed tree -> list[Commit].
Pure functions: no network, no logging.

Each source first reads its raw tree into a small typed record (missing
fields default to ""), then pulls project/hash/message out of embedded HTML
with regular expressions. The patterns are lazy and dot-all on purpose: they
are tuned against the upstream markup and must not be tightened.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from commit_feed.schemas import Commit, FeedTree, SourceKind
from commit_feed.timestamps import parse_iso8601, parse_rfc822


TRACKER_DESCRIPTION_RE = re.compile(
    r"http://drupalcode\.org/(.*?)/tree.*?<pre>(.*?)</pre>",
    re.IGNORECASE | re.DOTALL,
)
# Greedy: the hash is the last path segment.
TRACKER_LINK_RE = re.compile(
    r"https://www\.drupal\.org/commitlog/commit/.*/(.*)",
    re.IGNORECASE | re.DOTALL,
)
ACTIVITY_CONTENT_RE = re.compile(
    r'target:repo" rel="noreferrer">.*?/(.*?)</a>.*?/commit/(.*?)".*?<blockquote>(.*?)</blockquote>',
    re.IGNORECASE | re.DOTALL,
)

PUSH_EVENT_MARKER = "PushEvent"


# ---------- tree accessors ----------

def node_at(tree: FeedTree | None, *path: str) -> Any:
    """Walk nested dicts; None as soon as a step is missing or not a dict."""
    node: Any = tree
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def as_sequence(node: Any) -> list[Any]:
    """A repeated element is a list, a single one is a dict; anything else is no items."""
    if isinstance(node, list):
        return node
    if isinstance(node, dict):
        return [node]
    return []


def text_field(node: Any, key: str) -> str:
    value = node.get(key) if isinstance(node, dict) else None
    return value if isinstance(value, str) else ""


def href_field(node: Any, key: str = "link") -> str:
    """Text link (RSS) or attribute-only <link href=.../> (Atom); first alternate wins."""
    value = node.get(key) if isinstance(node, dict) else None
    if isinstance(value, str):
        return value
    candidates = [v for v in as_sequence(value) if isinstance(v, dict)]
    for cand in candidates:
        if cand.get("rel", "alternate") == "alternate" and isinstance(cand.get("href"), str):
            return cand["href"]
    for cand in candidates:
        if isinstance(cand.get("href"), str):
            return cand["href"]
    return ""


def match_group(match: re.Match | None, index: int) -> str:
    """Trimmed capture group, "" when the pattern or this group did not match."""
    if match is None:
        return ""
    value = match.group(index)
    return value.strip() if value else ""


# ---------- intermediate records ----------

@dataclass(frozen=True)
class TrackerItem:
    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""

    @classmethod
    def from_tree(cls, node: Any) -> TrackerItem:
        return cls(
            title=text_field(node, "title"),
            description=text_field(node, "description"),
            link=href_field(node),
            pub_date=text_field(node, "pubDate"),
        )


@dataclass(frozen=True)
class ActivityEntry:
    id: str = ""
    title: str = ""
    content: str = ""
    link: str = ""
    published: str = ""

    @classmethod
    def from_tree(cls, node: Any) -> ActivityEntry:
        return cls(
            id=text_field(node, "id"),
            title=text_field(node, "title"),
            content=text_field(node, "content"),
            link=href_field(node),
            published=text_field(node, "published"),
        )

    @property
    def is_push(self) -> bool:
        return PUSH_EVENT_MARKER in self.id


# ---------- normalizers ----------

def normalize_tracker(tree: FeedTree | None) -> list[Commit]:
    """Tracker RSS: one Commit per channel/item, whether or not the patterns match."""
    out: list[Commit] = []

    for node in as_sequence(node_at(tree, "channel", "item")):
        item = TrackerItem.from_tree(node)
        desc = TRACKER_DESCRIPTION_RE.search(item.description)
        link = TRACKER_LINK_RE.search(item.link)

        out.append(
            Commit(
                title=item.title,
                project=match_group(desc, 1),
                message=match_group(desc, 2),
                hash=match_group(link, 1),
                date=item.pub_date,
                timestamp=parse_rfc822(item.pub_date),
                link=item.link,
                source=SourceKind.TRACKER,
            )
        )

    return out


def normalize_activity(tree: FeedTree | None) -> list[Commit]:
    """Activity Atom: push events only; stars, follows, comments etc. are dropped."""
    out: list[Commit] = []

    for node in as_sequence(node_at(tree, "entry")):
        entry = ActivityEntry.from_tree(node)
        if not entry.is_push:
            continue

        content = ACTIVITY_CONTENT_RE.search(entry.content)

        out.append(
            Commit(
                title=entry.title,
                project=match_group(content, 1),
                hash=match_group(content, 2),
                message=match_group(content, 3),
                date=entry.published,
                timestamp=parse_iso8601(entry.published),
                link=entry.link,
                source=SourceKind.ACTIVITY_FEED,
            )
        )

    return out


NORMALIZERS: dict[SourceKind, Callable[[FeedTree | None], list[Commit]]] = {
    SourceKind.TRACKER: normalize_tracker,
    SourceKind.ACTIVITY_FEED: normalize_activity,
}


def normalize(kind: SourceKind, tree: FeedTree | None) -> list[Commit]:
    return NORMALIZERS[kind](tree)
