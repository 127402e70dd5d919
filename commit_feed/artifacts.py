from __future__ import annotations

import html

from commit_feed.schemas import Commit


def esc(s: str) -> str:
    return html.escape(s, quote=True)


def render_commit(commit: Commit) -> str:
    title = esc(commit.title or commit.hash or "commit")
    link = esc(commit.link)
    source = esc(commit.source.value)

    project_html = f'<span class="project">{esc(commit.project)}</span>' if commit.project else ""
    hash_html = f'<code class="hash">{esc(commit.short_hash)}</code>' if commit.hash else ""
    message_html = f'<p class="message">{esc(commit.message)}</p>' if commit.message else ""

    return f"""
    <li class="commit commit--{source}">
      <div class="title"><a href="{link}">{title}</a></div>
      <div class="meta">{project_html} {hash_html} <span class="date">{esc(commit.date)}</span></div>
      {message_html}
    </li>
    """


def render_commits_html(commits: list[Commit]) -> str:
    if not commits:
        return '<p class="commits-empty"><em>No recent commits.</em></p>'

    items_html = "\n".join(render_commit(c) for c in commits)
    return f"""<ul class="commits">
    {items_html}
    </ul>
    """


def render_commits_page(commits: list[Commit], *, heading: str = "Recent commits") -> str:
    return f"""<!doctype html>
    <html>
    <head>
    <meta charset="utf-8" />
    <title>{esc(heading)}</title>
    <style>
        body {{ font-family: -apple-system, Segoe UI, Roboto, Arial, sans-serif; margin: 24px; }}
        .commits {{ list-style: none; padding: 0; }}
        .commit {{ padding: 10px 12px; border: 1px solid #eee; border-radius: 8px; margin-bottom: 10px; }}
        .commit--tracker {{ border-left: 4px solid #0678be; }}
        .commit--activity-feed {{ border-left: 4px solid #24292e; }}
        .title a {{ text-decoration: none; }}
        .meta {{ color: #555; font-size: 12px; margin-top: 4px; }}
        .hash {{ background: #f6f8fa; padding: 0 4px; border-radius: 4px; }}
        .message {{ margin: 8px 0 0 0; white-space: pre-wrap; }}
    </style>
    </head>
    <body>
    <h2>{esc(heading)}</h2>
    {render_commits_html(commits)}
    </body>
    </html>
    """
