from fastapi import APIRouter, HTTPException, Depends
from PIL import Image, UnidentifiedImageError
from typing import Optional
import base64
import binascii
import io
import logging
import uuid

from selfsnap.models.session import (
    BoothSession, SessionCreateRequest, ShotUploadRequest,
    SessionStatusResponse, ShotUploadResponse, SessionFinalizeResponse
)
from selfsnap.config import settings
from selfsnap.services.frames import FrameImageStore, FrameNotFound
from selfsnap.services.photo import PhotoService, SHOTS_PER_COLLAGE
from selfsnap.services.layout import InvalidDimensions
from selfsnap.api.dependencies import get_frame_image_store, get_photo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])
active_sessions: dict = {}
current_session: Optional[str] = None


def _get_current_session() -> BoothSession:
    if current_session is None or current_session not in active_sessions:
        raise HTTPException(status_code=404, detail="No active session. Please create a session first.")
    return active_sessions[current_session]


def _check_image(photo_b64: str) -> None:
    try:
        # load() decodes every pixel, so truncated uploads fail here
        Image.open(io.BytesIO(base64.b64decode(photo_b64, validate=True))).load()
    except (binascii.Error, UnidentifiedImageError, OSError):
        raise HTTPException(status_code=400, detail="Shot is not a base64 encoded image")


@router.post("/create", response_model=dict)
async def create_session(request: SessionCreateRequest):
    global current_session

    if request.frame_key is not None and not request.frame_key.startswith(settings.frames_prefix):
        raise HTTPException(status_code=400, detail=f"Frame key must start with {settings.frames_prefix}")

    session_id = str(uuid.uuid4())
    session = BoothSession(
        session_id=session_id,
        filter=request.filter,
        caption=request.caption,
        frame_key=request.frame_key
    )

    active_sessions[session_id] = session
    current_session = session_id

    logger.info("Created session %s with filter %s, frame %s", session_id, request.filter.value, request.frame_key)

    return {
        "session_id": session_id,
        "filter": request.filter,
        "frame_key": request.frame_key,
        "shots_needed": SHOTS_PER_COLLAGE
    }


@router.post("/shot", response_model=ShotUploadResponse)
async def add_shot(request: ShotUploadRequest):
    session = _get_current_session()

    if session.capture_complete:
        raise HTTPException(status_code=400, detail=f"Session already has {SHOTS_PER_COLLAGE} shots")
    _check_image(request.photo)

    session.shots.append(request.photo)
    session.capture_complete = len(session.shots) >= SHOTS_PER_COLLAGE
    logger.info("Added shot %d for session %s", len(session.shots), session.session_id)

    return ShotUploadResponse(
        success=True,
        shot_count=len(session.shots),
        shots_needed=SHOTS_PER_COLLAGE,
        capture_complete=session.capture_complete
    )


@router.post("/finalize", response_model=SessionFinalizeResponse)
def finalize_session(
        photo_service: PhotoService = Depends(get_photo_service),
        frame_store: FrameImageStore = Depends(get_frame_image_store)
):
    global current_session

    session = _get_current_session()

    if not session.capture_complete:
        raise HTTPException(status_code=400, detail="Photo capture not complete yet")

    frame = None
    if session.frame_key:
        try:
            frame = frame_store.load_frame(session.frame_key)
        except FrameNotFound:
            raise HTTPException(status_code=404, detail=f"Frame {session.frame_key} not found")
        except OSError:
            raise HTTPException(status_code=400, detail=f"Frame {session.frame_key} is not a readable image")

    logger.info("Finalizing session %s", session.session_id)
    try:
        collage_b64 = photo_service.create_collage(session.shots, session.filter, session.caption, frame)
    except InvalidDimensions as e:
        raise HTTPException(status_code=500, detail=str(e))
    except (OSError, ValueError) as e:
        logger.warning("Discarding unreadable shots for session %s: %s", session.session_id, e)
        session.shots = []
        session.capture_complete = False
        raise HTTPException(status_code=400, detail="A shot could not be decoded, please retake the photos")
    filename = photo_service.save_collage(collage_b64)

    del active_sessions[session.session_id]
    current_session = None

    return SessionFinalizeResponse(
        success=True,
        filename=filename,
        download_url=f"/api/collages/{filename}",
        collage=collage_b64
    )


@router.get("/status", response_model=SessionStatusResponse)
async def get_session_status():
    if current_session is None or current_session not in active_sessions:
        return SessionStatusResponse(
            session_id=None,
            shot_count=0,
            shots_needed=0,
            filter=None,
            capture_complete=False
        )

    session = active_sessions[current_session]

    return SessionStatusResponse(
        session_id=current_session,
        shot_count=len(session.shots),
        shots_needed=SHOTS_PER_COLLAGE,
        filter=session.filter,
        caption=session.caption,
        frame_key=session.frame_key,
        capture_complete=session.capture_complete
    )


@router.delete("/reset")
async def reset_session():
    global current_session

    if current_session and current_session in active_sessions:
        del active_sessions[current_session]
    current_session = None
    return {"success": True}
