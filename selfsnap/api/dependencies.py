from selfsnap.services.frames import frame_image_store, frame_repository
from selfsnap.services.photo import photo_service

def get_photo_service():
    return photo_service

def get_frame_repository():
    return frame_repository

def get_frame_image_store():
    return frame_image_store
