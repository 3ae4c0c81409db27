from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

ACTIVE_FRAME_PK = "FRAME#ACTIVE"


class FrameRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    s3_key: str = Field(alias="s3Key")
    name: str
    is_active: bool = Field(default=True, alias="isActive")
    created_at: str = Field(alias="createdAt")
    gsi1pk: str = ACTIVE_FRAME_PK
    gsi1sk: str

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True)


class FrameSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    s3_key: str = Field(alias="s3Key")
    name: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    url: str


class FrameListResponse(BaseModel):
    frames: List[FrameSummary]
