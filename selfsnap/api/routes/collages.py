from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
import os
from datetime import datetime
from selfsnap.config import settings

router = APIRouter(prefix="/collages", tags=["collages"])

@router.get("/{filename}")
async def download_collage(filename: str):
    if os.path.basename(filename) != filename:
        raise HTTPException(status_code=404, detail="Collage not found")

    filepath = os.path.join(settings.collages_dir, filename)
    if not os.path.exists(filepath):
        raise HTTPException(status_code=404, detail="Collage not found")

    return FileResponse(filepath, media_type="image/jpeg", filename=filename)

@router.get("/")
async def list_collages():
    collages = []

    if os.path.exists(settings.collages_dir):
        for filename in os.listdir(settings.collages_dir):
            if filename.lower().endswith(('.jpg', '.jpeg')):
                filepath = os.path.join(settings.collages_dir, filename)
                stat = os.stat(filepath)
                collages.append({
                    "filename": filename,
                    "size": stat.st_size,
                    "created": datetime.fromtimestamp(stat.st_mtime).isoformat(),
                    "download_url": f"/api/collages/{filename}"
                })

    return {"collages": sorted(collages, key=lambda x: x["created"], reverse=True)}
