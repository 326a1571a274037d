"""Photo validation — turns a quality prediction into a caller-facing result."""

from __future__ import annotations

import logging
import time
from types import MappingProxyType

from cropcheck.core.extractor import PlaceholderExtractor, StatisticsExtractor
from cropcheck.core.scorer import score
from cropcheck.models.config import DEFAULT_SCORING, ScoringConfig
from cropcheck.models.quality import Grade, ImageStatistics
from cropcheck.models.validation import PhotoIssue, PhotoValidationRequest, PhotoValidationResult

logger = logging.getLogger(__name__)

# External score per grade, independent of the internal deduction arithmetic
GRADE_SCORES = MappingProxyType(
    {
        Grade.A.value: 0.95,
        Grade.B.value: 0.75,
        Grade.C.value: 0.55,
        Grade.REJECT.value: 0.25,
    }
)
UNKNOWN_GRADE_SCORE = 0.5


def grade_to_score(grade: Grade | str) -> float:
    key = grade.value if isinstance(grade, Grade) else grade
    return GRADE_SCORES.get(key, UNKNOWN_GRADE_SCORE)


class PhotoValidator:
    def __init__(
        self,
        extractor: StatisticsExtractor | None = None,
        config: ScoringConfig = DEFAULT_SCORING,
    ) -> None:
        self.extractor = extractor if extractor is not None else PlaceholderExtractor()
        self.config = config

    def validate(self, request: PhotoValidationRequest) -> PhotoValidationResult:
        """Validate a produce photo for quality grading.

        Checks resolution, exposure, sharpness and produce presence. A photo is
        valid only when it is not rejected and no issue was found. Failures are
        logged and re-raised unchanged.
        """
        start = time.perf_counter()
        try:
            stats = self._get_stats(request)
            logger.debug("Image statistics extracted", extra=stats.to_dict())
            prediction = score(stats, self.config)

            is_valid = prediction.grade != Grade.REJECT and not prediction.issues
            quality_score = grade_to_score(prediction.grade)
            result = PhotoValidationResult(
                is_valid=is_valid,
                quality_score=quality_score,
                grade=prediction.grade,
                confidence=prediction.confidence,
                issues=[
                    PhotoIssue(type=i.type.value, message=i.message, suggestion=i.suggestion)
                    for i in prediction.issues
                ],
            )
        except Exception:
            logger.exception(
                "Photo validation failed",
                extra={"photo_url": request.photo_url},
            )
            raise

        duration_ms = round((time.perf_counter() - start) * 1000, 3)
        logger.info(
            "Photo validation completed",
            extra={
                "photo_url": request.photo_url,
                "is_valid": is_valid,
                "quality_score": quality_score,
                "grade": prediction.grade.value,
                "issue_count": len(prediction.issues),
                "duration_ms": duration_ms,
            },
        )
        return result

    def validate_resolution(self, width: int, height: int) -> bool:
        """Quick check against the minimum resolution only."""
        return width >= self.config.min_width and height >= self.config.min_height

    def _get_stats(self, request: PhotoValidationRequest) -> ImageStatistics:
        # No bytes yields neutral statistics until photos are fetched from photo_url
        return self.extractor.extract(request.image_buffer, request.width, request.height)
