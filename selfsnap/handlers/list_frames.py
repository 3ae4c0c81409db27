import json

from selfsnap.config import configure_logging, settings
from selfsnap.models.frame import FrameListResponse
from selfsnap.services.frames import frame_repository

configure_logging()


def handler(event=None, context=None):
    frames = frame_repository.list_frame_summaries(settings.cloudfront_domain)
    body = FrameListResponse(frames=frames).model_dump(by_alias=True)

    return {
        "statusCode": 200,
        "headers": {
            "content-type": "application/json",
            "cache-control": "no-store",
        },
        "body": json.dumps(body),
    }
