# tests/conftest.py
from __future__ import annotations

import pytest


TRACKER_RSS = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xml:base="https://www.drupal.org/user/12345/track/code/feed" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Commits by jdoe</title>
    <link>https://www.drupal.org/user/12345/track/code</link>
    <description></description>
    <language>en</language>
    <item>
      <title>commit_block: 8.x-1.x</title>
      <link>https://www.drupal.org/commitlog/commit/54321/9f3c2a1b7d</link>
      <description>&lt;a href="http://drupalcode.org/project/commit_block.git/tree"&gt;commit_block&lt;/a&gt; pushed to 8.x-1.x
&lt;pre&gt;
Issue #2651234 by jdoe: Add GitHub source.
&lt;/pre&gt;</description>
      <pubDate>Tue, 01 Mar 2016 12:00:00 +0000</pubDate>
      <dc:creator>jdoe</dc:creator>
    </item>
    <item>
      <title>views_extras: 7.x-2.x</title>
      <link>https://www.drupal.org/commitlog/commit/777/aa11bb22</link>
      <description>&lt;a href="http://drupalcode.org/project/views_extras.git/tree"&gt;views_extras&lt;/a&gt; &lt;PRE&gt;Fix notice on empty view.&lt;/PRE&gt;</description>
      <pubDate>Mon, 29 Feb 2016 08:30:00 +0000</pubDate>
    </item>
    <item>
      <title>sandbox: master</title>
      <link>https://www.drupal.org/node/1</link>
      <description>Nothing that looks like a commit</description>
      <pubDate>not a date</pubDate>
    </item>
  </channel>
</rss>
"""

ACTIVITY_ATOM = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:media="http://search.yahoo.com/mrss/" xml:lang="en-US">
  <id>tag:github.com,2008:/octocat</id>
  <link type="text/html" rel="alternate" href="https://github.com/octocat"/>
  <link type="application/atom+xml" rel="self" href="https://github.com/octocat.atom"/>
  <title>octocat's Activity</title>
  <updated>2016-03-02T10:00:00Z</updated>
  <entry>
    <id>tag:github.com,2008:PushEvent/3700000001</id>
    <published>2016-03-02T10:00:00Z</published>
    <updated>2016-03-02T10:00:00Z</updated>
    <link type="text/html" rel="alternate" href="https://github.com/octocat/hello-world/compare/aaa...bbb"/>
    <title type="html">octocat pushed to master at octocat/hello-world</title>
    <author><name>octocat</name><uri>https://github.com/octocat</uri></author>
    <media:thumbnail height="30" width="30" url="https://avatars.githubusercontent.com/u/583231"/>
    <content type="html"><![CDATA[<div class="push"><a class="link" data-ga-click="News feed, event click, Event click type:PushEvent target:repo" rel="noreferrer">octocat/hello-world</a>
<ul><li><code><a href="https://github.com/octocat/hello-world/commit/bbb222cccdd">bbb222c</a></code>
<div class="message"><blockquote>
  Fix README typo
</blockquote></div></li></ul></div>]]></content>
  </entry>
  <entry>
    <id>tag:github.com,2008:WatchEvent/3700000002</id>
    <published>2016-03-02T09:00:00Z</published>
    <link type="text/html" rel="alternate" href="https://github.com/someone/thing"/>
    <title type="html">octocat starred someone/thing</title>
    <content type="html"><![CDATA[<a data-ga-click="x target:repo" rel="noreferrer">someone/thing</a> <a href="/someone/thing/commit/deadbeef">x</a><blockquote>not a commit</blockquote>]]></content>
  </entry>
  <entry>
    <id>tag:github.com,2008:PushEvent/3700000003</id>
    <published>2016-02-28T23:15:00Z</published>
    <link type="text/html" rel="alternate" href="https://github.com/octocat/spoon-knife/compare/ccc...ddd"/>
    <title type="html">octocat pushed to gh-pages at octocat/spoon-knife</title>
    <content type="html">&lt;div&gt;branch deleted, no commit list&lt;/div&gt;</content>
  </entry>
</feed>
"""


@pytest.fixture
def tracker_rss() -> str:
    return TRACKER_RSS


@pytest.fixture
def activity_atom() -> str:
    return ACTIVITY_ATOM
