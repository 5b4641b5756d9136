import uuid


def outfit_photo_key(user_id: str, outfit_id: str, ext: str = "jpg") -> str:
    return f"u/{user_id}/outfits/{outfit_id}/{uuid.uuid4().hex}.{ext}"


def photo_filename(ref: str) -> str:
    return ref.rstrip("/").rsplit("/", 1)[-1]
