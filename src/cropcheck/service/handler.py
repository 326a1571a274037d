"""RPC-style entry point — routes request events to method-specific handlers."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from cropcheck.core.extractor import get_extractor
from cropcheck.core.validator import PhotoValidator
from cropcheck.io.config_io import load_config
from cropcheck.models.config import DEFAULT_SCORING, ServiceConfig

CONFIG_ENV_VAR = "CROPCHECK_CONFIG"

STATUS_OK = "OK"
STATUS_INTERNAL = "INTERNAL"
STATUS_UNIMPLEMENTED = "UNIMPLEMENTED"


@lru_cache(maxsize=1)
def default_service() -> tuple[PhotoValidator, ServiceConfig]:
    """Build the process-wide validator, once, from the optional config file."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if path:
        scoring, service = load_config(path)
    else:
        scoring, service = DEFAULT_SCORING, ServiceConfig()
    extractor = get_extractor(
        service.extractor, service.max_image_dimension, service.produce_pixel_fraction
    )
    return PhotoValidator(extractor, scoring), service


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Dispatch on event["method"].

    Supported methods: ValidatePhotoQuality, GetLocalizedSuggestion.
    """
    method = event.get("method") or ""

    if method == "ValidatePhotoQuality":
        from cropcheck.service.handlers.validate_photo import handle

        return handle(event, context)
    elif method == "GetLocalizedSuggestion":
        from cropcheck.service.handlers.localized_suggestion import handle

        return handle(event, context)
    else:
        return {
            "status": STATUS_UNIMPLEMENTED,
            "details": f"Unknown or missing method: {method!r}. "
            "Supported: ValidatePhotoQuality, GetLocalizedSuggestion",
        }
