"""ValidatePhotoQuality — validate a photo before quality grading."""

from __future__ import annotations

import base64
import logging
from typing import Any

from cropcheck.core.validator import PhotoValidator
from cropcheck.models.config import ServiceConfig
from cropcheck.models.validation import PhotoValidationRequest
from cropcheck.service.handler import STATUS_INTERNAL, STATUS_OK, default_service

logger = logging.getLogger(__name__)


def handle(
    event: dict[str, Any],
    context: Any,
    validator: PhotoValidator | None = None,
    service: ServiceConfig | None = None,
) -> dict[str, Any]:
    """Validate one photo.

    Input event:
        photoUrl: Photo identifier used for logging
        width, height: Declared dimensions; missing or zero use the service defaults
        imageBase64: Optional base64-encoded photo bytes

    Returns:
        status: OK with the validation result as body, or INTERNAL with details
    """
    photo_url = event.get("photoUrl", "")
    logger.info("Validating photo quality", extra={"photo_url": photo_url})

    try:
        if validator is None or service is None:
            default_validator, default_config = default_service()
            validator = validator or default_validator
            service = service or default_config

        encoded = event.get("imageBase64")
        request = PhotoValidationRequest(
            photo_url=photo_url,
            width=int(event.get("width") or service.default_width),
            height=int(event.get("height") or service.default_height),
            image_buffer=base64.b64decode(encoded, validate=True) if encoded else None,
        )
        result = validator.validate(request)
    except Exception as exc:
        logger.error("Photo validation failed", extra={"photo_url": photo_url, "error": str(exc)})
        return {"status": STATUS_INTERNAL, "details": str(exc) or "Validation failed"}

    return {"status": STATUS_OK, "body": result.to_dict()}
