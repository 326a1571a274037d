"""Rule-based quality scoring — pure function, no I/O."""

from __future__ import annotations

from cropcheck.core.localizer import suggest
from cropcheck.models.config import DEFAULT_SCORING, ScoringConfig
from cropcheck.models.quality import (
    Grade,
    ImageStatistics,
    QualityIssue,
    QualityIssueType,
    QualityPrediction,
)


def score_to_grade(score: float, config: ScoringConfig = DEFAULT_SCORING) -> Grade:
    if score >= config.grade_a_min:
        return Grade.A
    if score >= config.grade_b_min:
        return Grade.B
    if score >= config.grade_c_min:
        return Grade.C
    return Grade.REJECT


def compute_confidence(
    stats: ImageStatistics,
    issues: list[QualityIssue],
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Start high, lose confidence per unit of issue severity and on borderline exposure."""
    confidence = config.base_confidence
    for issue in issues:
        confidence -= config.confidence_per_severity * issue.severity

    # Borderline exposure that passed the hard thresholds still costs confidence
    if stats.brightness > config.borderline_bright or stats.brightness < config.borderline_dark:
        confidence -= config.borderline_penalty

    return max(config.min_confidence, min(config.max_confidence, confidence))


def _issue(
    issue_type: QualityIssueType, severity: float, message: str, config: ScoringConfig
) -> QualityIssue:
    return QualityIssue(
        type=issue_type,
        severity=severity,
        message=message,
        suggestion=suggest(issue_type.value, config.suggestion_language),
    )


def score(stats: ImageStatistics, config: ScoringConfig = DEFAULT_SCORING) -> QualityPrediction:
    """Grade a photo from its statistics.

    Every check runs independently and deducts from a perfect score of 1.0.
    Issues are reported in check order: resolution, exposure, blur, produce.
    """
    issues: list[QualityIssue] = []
    raw = 1.0

    # Resolution
    if stats.width < config.min_width or stats.height < config.min_height:
        issues.append(
            _issue(
                QualityIssueType.LOW_RESOLUTION,
                config.resolution_severity,
                f"Resolution {stats.width}x{stats.height} below minimum "
                f"{config.min_width}x{config.min_height}",
                config,
            )
        )
        raw -= config.resolution_penalty

    # Exposure (at most one of dark / bright)
    if stats.brightness < config.min_brightness:
        severity = (config.min_brightness - stats.brightness) / config.min_brightness
        issues.append(
            _issue(
                QualityIssueType.TOO_DARK,
                severity,
                "Photo is too dark for accurate quality assessment",
                config,
            )
        )
        raw -= config.exposure_weight * severity
    elif stats.brightness > config.max_brightness:
        severity = (stats.brightness - config.max_brightness) / (
            config.brightness_ceiling - config.max_brightness
        )
        issues.append(
            _issue(QualityIssueType.TOO_BRIGHT, severity, "Photo is overexposed (too bright)", config)
        )
        raw -= config.exposure_weight * severity

    # Blur
    if stats.sharpness < config.min_sharpness:
        severity = (config.min_sharpness - stats.sharpness) / config.min_sharpness
        issues.append(
            _issue(
                QualityIssueType.BLURRY,
                severity,
                "Photo is blurry, cannot assess quality accurately",
                config,
            )
        )
        raw -= config.blur_weight * severity

    # Produce presence
    if not stats.has_produce_colors:
        issues.append(
            _issue(
                QualityIssueType.NO_PRODUCE,
                config.no_produce_severity,
                "Cannot detect produce in photo",
                config,
            )
        )
        raw -= config.no_produce_penalty

    raw = max(0.0, min(1.0, raw))

    return QualityPrediction(
        grade=score_to_grade(raw, config),
        confidence=compute_confidence(stats, issues, config),
        issues=issues,
    )
