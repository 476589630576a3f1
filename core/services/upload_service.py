"""Product image uploads."""

import os
import time

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile

import structlog

from core.constants import ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_MIME_TYPES
from core.exceptions import BusinessRuleError
from core.models import User
from core.schemas.common import UploadResponse

logger = structlog.get_logger(__name__)


class UploadService:
    """Stores product images through Django's default storage."""

    def store_image(self, actor: User, upload: UploadedFile | None) -> UploadResponse:
        """Validate and store one image.

        Both the file extension and the declared MIME type must name one of
        the supported image formats.

        Args:
            actor: The administrator uploading the file
            upload: The uploaded file, or None when the field was missing

        Returns:
            UploadResponse with the public path of the stored file

        Raises:
            BusinessRuleError: If no file was sent or it is not a supported image
        """
        if upload is None:
            raise BusinessRuleError("No image file provided")

        extension = os.path.splitext(upload.name or "")[1].lower()
        content_type = (upload.content_type or "").lower()
        if (
            extension not in ALLOWED_IMAGE_EXTENSIONS
            or content_type not in ALLOWED_IMAGE_MIME_TYPES
        ):
            logger.warning(
                "image_upload_rejected",
                filename=upload.name,
                content_type=content_type,
                admin_id=actor.pk,
            )
            raise BusinessRuleError(
                "Images only",
                detail="Supported formats: jpg, jpeg, png, webp",
            )

        filename = f"image-{int(time.time() * 1000)}{extension}"
        stored_name = default_storage.save(filename, upload)

        logger.info(
            "image_uploaded",
            stored_name=stored_name,
            size=upload.size,
            admin_id=actor.pk,
        )
        return UploadResponse(
            message="Image uploaded successfully",
            image=f"{settings.MEDIA_URL}{stored_name}",
        )


# Global upload service instance
upload_service = UploadService()
