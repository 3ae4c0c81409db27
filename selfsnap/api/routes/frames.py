from fastapi import APIRouter, Depends, Response

from selfsnap.api.dependencies import get_frame_repository
from selfsnap.models.frame import FrameListResponse
from selfsnap.services.frames import FrameRepository

router = APIRouter(prefix="/frames", tags=["frames"])


@router.get("/", response_model=FrameListResponse)
def list_frames(
        response: Response,
        frame_repository: FrameRepository = Depends(get_frame_repository)
):
    response.headers["cache-control"] = "no-store"
    return FrameListResponse(frames=frame_repository.list_frame_summaries())
