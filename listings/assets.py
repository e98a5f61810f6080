"""
Asset store for listing images.

Images go to Django's default file storage under ``ASSET_FOLDER``; callers only
see ``{"secure_url", "public_id"}`` so the backend can be swapped through the
``STORAGES`` setting without touching the views.
"""
import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError

logger = logging.getLogger(__name__)


class AssetUploadError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Image upload failed, please try again later."
    default_code = "asset_upload_failed"


def _extension(name):
    return os.path.splitext(name or "")[1].lstrip(".").lower()


def upload_image(file, folder=None, allowed_formats=None) -> dict:
    """
    Store an uploaded image and return ``{"secure_url": ..., "public_id": ...}``.
    ``public_id`` is the storage key, unique per upload.
    """
    folder = folder or settings.ASSET_FOLDER
    allowed_formats = allowed_formats or settings.ASSET_ALLOWED_FORMATS

    ext = _extension(getattr(file, "name", ""))
    if ext not in allowed_formats:
        raise ValidationError({"image": f"Allowed formats: {', '.join(allowed_formats)}."})

    key = f"{folder}/{uuid.uuid4().hex}.{ext}"
    try:
        public_id = default_storage.save(key, file)
        secure_url = default_storage.url(public_id)
    except Exception as e:
        logger.error("Image upload failed key=%s err=%s", key, e)
        raise AssetUploadError() from e

    logger.info("Image uploaded public_id=%s", public_id)
    return {"secure_url": secure_url, "public_id": public_id}


def delete_image(public_id) -> bool:
    """Best-effort removal of a stored image; failures are logged, not raised."""
    if not public_id:
        return False
    try:
        default_storage.delete(public_id)
    except Exception as e:
        logger.warning("Failed to delete image public_id=%s err=%s", public_id, e)
        return False
    logger.info("Image deleted public_id=%s", public_id)
    return True
