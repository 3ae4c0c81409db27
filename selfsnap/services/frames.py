import io
import logging
import re
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import unquote_plus

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from PIL import Image

from selfsnap.config import settings
from selfsnap.models.frame import ACTIVE_FRAME_PK, FrameRecord, FrameSummary

logger = logging.getLogger(__name__)


def decode_s3_key(key: str) -> str:
    """S3 event keys are form-encoded: '+' is a space, the rest is percent-encoded."""
    return unquote_plus(key)


def display_name_from_key(s3_key: str) -> str:
    file = s3_key.split("/")[-1] or "frame"
    stem = re.sub(r"\.[^.]+$", "", file)
    return re.sub(r"[-_]", " ", stem)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_frame_record(s3_key: str, event_time: Optional[str] = None) -> FrameRecord:
    created_at = event_time or utc_timestamp()
    return FrameRecord(
        s3_key=s3_key,
        name=display_name_from_key(s3_key),
        created_at=created_at,
        gsi1sk=f"{created_at}#{s3_key}",
    )


def to_summary(item: dict, cloudfront_domain: str) -> FrameSummary:
    return FrameSummary(
        s3_key=item["s3Key"],
        name=item.get("name"),
        created_at=item.get("createdAt"),
        url=f"https://{cloudfront_domain}/{item['s3Key']}",
    )


class FrameRepository:
    def __init__(self, table=None, index_name: Optional[str] = None):
        self._table = table
        self.index_name = index_name or settings.ddb_index_name

    @property
    def table(self):
        if self._table is None:
            dynamodb = boto3.resource("dynamodb", region_name=settings.aws_region)
            self._table = dynamodb.Table(settings.ddb_table_name)
        return self._table

    def put_frame(self, record: FrameRecord) -> None:
        self.table.put_item(Item=record.to_item())
        logger.info("Stored frame %s as %r", record.s3_key, record.name)

    def list_active_frames(self) -> List[dict]:
        """Active frame items, newest first."""
        query = {
            "IndexName": self.index_name,
            "KeyConditionExpression": Key("gsi1pk").eq(ACTIVE_FRAME_PK),
            "ScanIndexForward": False,
        }
        items = []
        while True:
            resp = self.table.query(**query)
            items.extend(resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
            query["ExclusiveStartKey"] = last_key
        return items

    def list_frame_summaries(self, cloudfront_domain: Optional[str] = None) -> List[FrameSummary]:
        domain = cloudfront_domain or settings.cloudfront_domain
        return [to_summary(item, domain) for item in self.list_active_frames()]


class FrameNotFound(LookupError):
    pass


class FrameImageStore:
    """Reads frame overlay images from the assets bucket."""

    def __init__(self, client=None, bucket: Optional[str] = None):
        self._client = client
        self.bucket = bucket or settings.frames_bucket

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("s3", region_name=settings.aws_region)
        return self._client

    def load_frame(self, s3_key: str) -> Image.Image:
        if not s3_key.startswith(settings.frames_prefix):
            raise FrameNotFound(s3_key)
        try:
            body = self.client.get_object(Bucket=self.bucket, Key=s3_key)["Body"].read()
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise FrameNotFound(s3_key) from e
            raise

        frame = Image.open(io.BytesIO(body))
        frame.load()
        logger.info("Loaded frame %s (%sx%s)", s3_key, frame.width, frame.height)
        return frame


frame_repository = FrameRepository()
frame_image_store = FrameImageStore()
