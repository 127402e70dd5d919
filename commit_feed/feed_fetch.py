from __future__ import annotations

from dataclasses import dataclass

from commit_feed.error_codes import (
    EMPTY_BODY,
    FETCH_PERMANENT,
    FETCH_TIMEOUT,
    FETCH_TRANSIENT,
    PARSE_ERROR,
    RATE_LIMITED,
)
from commit_feed.feed_tree import FeedParseError, parse_feed_xml
from commit_feed.logging_utils import log_event
from commit_feed.schemas import FeedTree

import http.client
import socket
import urllib.request
import urllib.error


USER_AGENT = "commit-feed/0.1"


class FeedFetchError(Exception):
    """Raised by fetch_xml; fetch_feed turns it into a failed FetchResult."""

    def __init__(self, message: str, *, error_code: str):
        super().__init__(message)
        self.error_code = error_code


@dataclass
class FetchResult:
    ok: bool
    tree: FeedTree | None = None
    error_code: str | None = None
    error_message: str | None = None


def _classify_status(status: int) -> str:
    if status == 429:
        return RATE_LIMITED
    if 400 <= status < 500:
        return FETCH_PERMANENT
    return FETCH_TRANSIENT


def fetch_xml(url: str, *, timeout_s: float = 10.0) -> bytes:
    """GET a feed URL asking for XML and return the raw body bytes."""
    try:
        req = urllib.request.Request(
            url,
            headers={"Accept": "application/xml", "User-Agent": USER_AGENT},
        )
    except ValueError as exc:
        raise FeedFetchError(f"FETCH_FAIL: bad url: {exc}", error_code=FETCH_PERMANENT) from exc

    try:
        with urllib.request.urlopen(req, timeout=timeout_s) as resp:
            status = getattr(resp, "status", None)
            body = resp.read()

            if status is None or not 200 <= status < 300:
                raise FeedFetchError(
                    f"FETCH_FAIL: HTTP {status}",
                    error_code=_classify_status(status or 0),
                )

            return body

    except urllib.error.HTTPError as exc:
        raise FeedFetchError(f"FETCH_FAIL: HTTP {exc.code}", error_code=_classify_status(exc.code)) from exc
    except urllib.error.URLError as exc:
        # urlopen wraps connect timeouts in URLError
        if isinstance(exc.reason, (TimeoutError, socket.timeout)):
            raise FeedFetchError("FETCH_FAIL: timeout", error_code=FETCH_TIMEOUT) from exc
        raise FeedFetchError(f"FETCH_FAIL: URL error: {exc.reason}", error_code=FETCH_TRANSIENT) from exc
    except TimeoutError as exc:
        raise FeedFetchError("FETCH_FAIL: timeout", error_code=FETCH_TIMEOUT) from exc
    except OSError as exc:
        raise FeedFetchError(f"FETCH_FAIL: {exc}", error_code=FETCH_TRANSIENT) from exc
    except http.client.InvalidURL as exc:
        raise FeedFetchError(f"FETCH_FAIL: bad url: {exc}", error_code=FETCH_PERMANENT) from exc
    except http.client.HTTPException as exc:
        # IncompleteRead, BadStatusLine: not OSError subclasses
        raise FeedFetchError(f"FETCH_FAIL: protocol error: {exc!r}", error_code=FETCH_TRANSIENT) from exc
    except ValueError as exc:
        raise FeedFetchError(f"FETCH_FAIL: bad url: {exc}", error_code=FETCH_PERMANENT) from exc


def fetch_feed(url: str, *, timeout_s: float = 10.0) -> FetchResult:
    """Fetch and convert a feed. Never raises: every failure is a FetchResult with ok=False."""
    try:
        body = fetch_xml(url, timeout_s=timeout_s)
    except FeedFetchError as exc:
        log_event("feed_fetch_failed", url=url, error_code=exc.error_code, error_message=str(exc))
        return FetchResult(ok=False, error_code=exc.error_code, error_message=str(exc))

    if not body or not body.strip():
        log_event("feed_fetch_failed", url=url, error_code=EMPTY_BODY, error_message="empty body")
        return FetchResult(ok=False, error_code=EMPTY_BODY, error_message="empty body")

    try:
        tree = parse_feed_xml(body)
    except FeedParseError as exc:
        log_event("feed_fetch_failed", url=url, error_code=PARSE_ERROR, error_message=str(exc))
        return FetchResult(ok=False, error_code=PARSE_ERROR, error_message=str(exc))

    log_event("feed_fetch_ok", url=url, bytes=len(body))
    return FetchResult(ok=True, tree=tree)
