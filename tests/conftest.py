import base64
import io

import pytest
from fastapi.testclient import TestClient
from botocore.exceptions import ClientError
from PIL import Image

from selfsnap.api.dependencies import get_frame_image_store
from selfsnap.config import settings
from selfsnap.main import app
from selfsnap.services.frames import FrameImageStore


class FakeTable:
    """In-memory stand-in for a DynamoDB Table resource."""

    def __init__(self, pages=None):
        self.items = []
        self.pages = pages or []
        self.queries = []

    def put_item(self, Item):
        self.items.append(Item)

    def query(self, **kwargs):
        self.queries.append(kwargs)
        if self.pages:
            return self.pages[len(self.queries) - 1]
        return {"Items": list(reversed(self.items))}


class FakeS3Client:
    """In-memory stand-in for the boto3 S3 client."""

    def __init__(self, objects=None):
        self.objects = objects or {}
        self.requests = []

    def get_object(self, Bucket, Key):
        self.requests.append((Bucket, Key))
        if Key not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject")
        return {"Body": io.BytesIO(self.objects[Key])}


def make_frame(size=(400, 600), border=40, color=(255, 0, 255, 255)) -> bytes:
    """PNG frame: opaque border, transparent middle."""
    frame = Image.new("RGBA", size, color)
    frame.paste((0, 0, 0, 0), (border, border, size[0] - border, size[1] - border))
    buffer = io.BytesIO()
    frame.save(buffer, format="PNG")
    return buffer.getvalue()


def make_shot(color, size=(120, 160)) -> str:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="JPEG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


@pytest.fixture
def fake_table():
    return FakeTable()


@pytest.fixture
def collages_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "collages_dir", str(tmp_path))
    return tmp_path


@pytest.fixture
def client(collages_dir):
    with TestClient(app) as c:
        c.delete("/api/session/reset")
        yield c
        c.delete("/api/session/reset")
    app.dependency_overrides.clear()


@pytest.fixture
def s3_client(client):
    fake = FakeS3Client({"frames/pink.png": make_frame()})
    app.dependency_overrides[get_frame_image_store] = lambda: FrameImageStore(client=fake, bucket="assets")
    return fake
