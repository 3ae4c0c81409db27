from pydantic import BaseModel
from typing import List, Optional

from selfsnap.services.filters import FilterMode


class BoothSession(BaseModel):
    session_id: str
    shots: List[str] = []
    filter: FilterMode = FilterMode.none
    caption: Optional[str] = None
    frame_key: Optional[str] = None
    capture_complete: bool = False

class SessionCreateRequest(BaseModel):
    filter: FilterMode = FilterMode.none
    caption: Optional[str] = None
    frame_key: Optional[str] = None

class ShotUploadRequest(BaseModel):
    photo: str

class SessionStatusResponse(BaseModel):
    session_id: Optional[str]
    shot_count: int
    shots_needed: int
    filter: Optional[FilterMode]
    caption: Optional[str] = None
    frame_key: Optional[str] = None
    capture_complete: bool

class ShotUploadResponse(BaseModel):
    success: bool
    shot_count: int
    shots_needed: int
    capture_complete: bool

class SessionFinalizeResponse(BaseModel):
    success: bool
    filename: str
    download_url: str
    collage: str
