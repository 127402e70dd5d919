"""Stable failure codes for feed fetch and parse operations.

Used by: feed_fetch, pipeline, logging, /commits endpoint.
"""

FETCH_TIMEOUT = "FETCH_TIMEOUT"
FETCH_TRANSIENT = "FETCH_TRANSIENT"
RATE_LIMITED = "RATE_LIMITED"
FETCH_PERMANENT = "FETCH_PERMANENT"
EMPTY_BODY = "EMPTY_BODY"          # 200 with nothing to parse
PARSE_ERROR = "PARSE_ERROR"
NORMALIZE_ERROR = "NORMALIZE_ERROR"
