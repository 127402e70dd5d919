import json
import logging
import os
from datetime import datetime, timezone


logging.basicConfig(level=os.environ.get("COMMIT_FEED_LOG_LEVEL", "INFO").upper())

logger = logging.getLogger("commit_feed")


def log_event(event: str, **fields):
    """One JSON line per event; non-JSON values (enums, datetimes) are str()'d."""
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        **fields,
    }

    logger.info(json.dumps(payload, default=str))
