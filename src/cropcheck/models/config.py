"""Configuration models with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    # Resolution
    min_width: int = 1024
    min_height: int = 768
    resolution_severity: float = 0.5
    resolution_penalty: float = 0.2

    # Exposure (0-255 mean brightness)
    min_brightness: float = 40.0
    max_brightness: float = 220.0
    brightness_ceiling: float = 255.0
    exposure_weight: float = 0.25

    # Blur
    min_sharpness: float = 100.0
    blur_weight: float = 0.3

    # Produce presence
    no_produce_severity: float = 0.8
    no_produce_penalty: float = 0.4

    # Grade cut-offs on the clamped raw score
    grade_a_min: float = 0.85
    grade_b_min: float = 0.65
    grade_c_min: float = 0.45

    # Confidence
    base_confidence: float = 0.9
    confidence_per_severity: float = 0.1
    borderline_dark: float = 60.0
    borderline_bright: float = 180.0
    borderline_penalty: float = 0.1
    min_confidence: float = 0.3
    max_confidence: float = 0.99

    # Language used for issue suggestions
    suggestion_language: str = "en"


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    default_width: int = 1024
    default_height: int = 768
    extractor: str = "placeholder"
    max_image_dimension: int = 1024
    produce_pixel_fraction: float = 0.15
