import time

from commit_feed.config import CommitFeedConfig
from commit_feed.error_codes import FETCH_TIMEOUT
from commit_feed.feed_fetch import FetchResult
from commit_feed.feed_tree import parse_feed_xml
from commit_feed.pipeline import build_source_urls, collect_commits
from commit_feed.schemas import SourceKind

TRACKER_URL = "https://www.drupal.org/user/12345/track/code/feed"
ACTIVITY_URL = "https://github.com/octocat.atom"


def make_fetch(responses: dict, calls: list | None = None, delays: dict | None = None):
    """Fake fetch: url -> FetchResult, records (url, timeout_s) calls."""
    def fake_fetch(url, *, timeout_s):
        if calls is not None:
            calls.append((url, timeout_s))
        if delays and url in delays:
            time.sleep(delays[url])
        return responses[url]
    return fake_fetch


def ok(xml: str) -> FetchResult:
    return FetchResult(ok=True, tree=parse_feed_xml(xml))


def failed() -> FetchResult:
    return FetchResult(ok=False, error_code=FETCH_TIMEOUT, error_message="FETCH_FAIL: timeout")


def both_sources(**kw) -> CommitFeedConfig:
    return CommitFeedConfig(tracker_user_id="12345", activity_user_id="octocat", **kw)


def test_build_source_urls_in_fixed_order():
    urls = build_source_urls(both_sources())
    assert list(urls) == [SourceKind.TRACKER, SourceKind.ACTIVITY_FEED]
    assert urls[SourceKind.TRACKER] == TRACKER_URL
    assert urls[SourceKind.ACTIVITY_FEED] == ACTIVITY_URL


def test_build_source_urls_quotes_identifiers():
    urls = build_source_urls(CommitFeedConfig(tracker_user_id="1/2", activity_user_id="a b?#x"))
    assert urls[SourceKind.TRACKER] == "https://www.drupal.org/user/1%2F2/track/code/feed"
    assert urls[SourceKind.ACTIVITY_FEED] == "https://github.com/a%20b%3F%23x.atom"


def test_build_source_urls_skips_blank_ids():
    urls = build_source_urls(CommitFeedConfig(activity_user_id=" octocat "))
    assert urls == {SourceKind.ACTIVITY_FEED: ACTIVITY_URL}


def test_no_identifiers_means_no_fetch():
    calls = []
    assert collect_commits(CommitFeedConfig(), fetch=make_fetch({}, calls)) == []
    assert calls == []


def test_collect_merges_both_sources(tracker_rss, activity_atom):
    calls = []
    fetch = make_fetch({TRACKER_URL: ok(tracker_rss), ACTIVITY_URL: ok(activity_atom)}, calls)

    commits = collect_commits(both_sources(count=4, timeout_s=2.5), fetch=fetch)

    assert [c.source for c in commits] == [
        SourceKind.ACTIVITY_FEED,
        SourceKind.TRACKER,
        SourceKind.TRACKER,
        SourceKind.ACTIVITY_FEED,
    ]
    assert commits[0].hash == "bbb222cccdd"
    assert calls == [(TRACKER_URL, 2.5), (ACTIVITY_URL, 2.5)]


def test_failed_source_does_not_hide_the_other(activity_atom):
    fetch = make_fetch({TRACKER_URL: failed(), ACTIVITY_URL: ok(activity_atom)})

    commits = collect_commits(both_sources(count=10), fetch=fetch)

    assert len(commits) == 2
    assert all(c.source is SourceKind.ACTIVITY_FEED for c in commits)


def test_all_sources_failing_is_empty():
    fetch = make_fetch({TRACKER_URL: failed(), ACTIVITY_URL: failed()})
    assert collect_commits(both_sources(), fetch=fetch) == []


def test_raising_fetch_is_contained(tracker_rss):
    def fetch(url, *, timeout_s):
        if url == ACTIVITY_URL:
            raise RuntimeError("socket exploded")
        return ok(tracker_rss)

    commits = collect_commits(both_sources(count=10), fetch=fetch)
    assert len(commits) == 3


def test_unexpected_tree_shape_is_contained(activity_atom):
    fetch = make_fetch({
        TRACKER_URL: FetchResult(ok=True, tree="just text"),
        ACTIVITY_URL: ok(activity_atom),
    })
    assert len(collect_commits(both_sources(count=10), fetch=fetch)) == 2


def test_parallel_keeps_source_order_on_ties():
    same_day = "2016-03-01T12:00:00Z"
    tracker = (
        "<rss><channel><item><title>tracker</title>"
        "<pubDate>Tue, 01 Mar 2016 12:00:00 +0000</pubDate></item></channel></rss>"
    )
    activity = (
        '<feed xmlns="http://www.w3.org/2005/Atom"><entry>'
        f"<id>PushEvent/1</id><title>activity</title><published>{same_day}</published>"
        "</entry></feed>"
    )
    # Tracker finishes last but must still come first on the tie
    fetch = make_fetch(
        {TRACKER_URL: ok(tracker), ACTIVITY_URL: ok(activity)},
        delays={TRACKER_URL: 0.05},
    )

    commits = collect_commits(both_sources(parallel=True), fetch=fetch)

    assert [c.title for c in commits] == ["tracker", "activity"]
    assert commits[0].timestamp == commits[1].timestamp


def test_count_limits_output(tracker_rss, activity_atom):
    fetch = make_fetch({TRACKER_URL: ok(tracker_rss), ACTIVITY_URL: ok(activity_atom)})
    assert len(collect_commits(both_sources(count=1), fetch=fetch)) == 1
    assert collect_commits(both_sources(count=0), fetch=fetch) == []
