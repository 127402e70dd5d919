# commit_feed/run.py
from __future__ import annotations

import argparse
import json
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from commit_feed.config import CommitFeedConfig
from commit_feed.pipeline import collect_commits
from commit_feed.schemas import Commit


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def format_commit(commit: Commit) -> str:
    project = f"[{commit.project}] " if commit.project else ""
    short = f"{commit.short_hash} " if commit.hash else ""
    return f"{commit.date}  {commit.source.value:<13} {project}{short}{commit.title}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Show recent commits from the tracker and activity feeds.")
    p.add_argument("--tracker-user", help="project tracker user id (overrides COMMIT_FEED_TRACKER_USER_ID)")
    p.add_argument("--activity-user", help="code host login (overrides COMMIT_FEED_ACTIVITY_USER_ID)")
    p.add_argument("--count", type=non_negative_int, help="number of commits to show")
    p.add_argument("--timeout", type=float, help="per-feed timeout in seconds")
    p.add_argument("--parallel", action="store_true", default=None, help="fetch both feeds at once")
    p.add_argument("--json", action="store_true", help="print JSON instead of text")
    args = p.parse_args(argv)

    load_dotenv()
    try:
        cfg = CommitFeedConfig.from_env(
            tracker_user_id=args.tracker_user,
            activity_user_id=args.activity_user,
            count=args.count,
            timeout_s=args.timeout,
            parallel=args.parallel,
        )
    except ValidationError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        return 2

    if not cfg.has_sources:
        print("no feed identifiers configured", file=sys.stderr)
        return 1

    commits = collect_commits(cfg)

    if args.json:
        print(json.dumps([c.model_dump(mode="json") for c in commits], indent=2))
    else:
        for commit in commits:
            print(format_commit(commit))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
