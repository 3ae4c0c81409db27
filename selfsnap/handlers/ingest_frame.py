"""Records frame images uploaded under the frames prefix.

Triggered by S3 ``ObjectCreated`` notifications. Storage errors propagate so
the event is retried.
"""
import logging

from selfsnap.config import configure_logging, settings
from selfsnap.services.frames import build_frame_record, decode_s3_key, frame_repository

configure_logging()
logger = logging.getLogger(__name__)


def handler(event, context=None):
    for rec in event.get("Records") or []:
        raw_key = rec.get("s3", {}).get("object", {}).get("key")
        if not raw_key:
            logger.warning("Skipping record without an object key: %s", rec.get("eventName"))
            continue

        s3_key = decode_s3_key(raw_key)
        if not s3_key.startswith(settings.frames_prefix):
            logger.debug("Ignoring %s outside %s", s3_key, settings.frames_prefix)
            continue

        record = build_frame_record(s3_key, rec.get("eventTime"))
        frame_repository.put_frame(record)

    return {"statusCode": 200}
