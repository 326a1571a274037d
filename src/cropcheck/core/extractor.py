"""Image statistics extraction backends.

The scorer only ever sees an ``ImageStatistics`` record. Backends implement
``StatisticsExtractor`` so a real image analyzer can replace the placeholder
without touching scoring or validation code.
"""

from __future__ import annotations

import io
from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from cropcheck.models.quality import ImageStatistics

SAMPLE_WINDOW = 1000
MIN_SAMPLE_BYTES = 100
PRODUCE_SIZE_PROXY = 10_000

# Stand-in for "fetch and decode the photo" when the caller sent no bytes.
NEUTRAL_BRIGHTNESS = 140.0
NEUTRAL_CONTRAST = 50.0
NEUTRAL_SHARPNESS = 180.0

# Returned when there are too few bytes to sample.
UNKNOWN_BRIGHTNESS = 128.0
UNKNOWN_CONTRAST = 50.0
UNKNOWN_SHARPNESS = 150.0


class StatisticsExtractor(Protocol):
    def extract(self, raw: bytes | None, width: int, height: int) -> ImageStatistics: ...


def neutral_statistics(width: int, height: int) -> ImageStatistics:
    return ImageStatistics(
        width=width,
        height=height,
        brightness=NEUTRAL_BRIGHTNESS,
        contrast=NEUTRAL_CONTRAST,
        sharpness=NEUTRAL_SHARPNESS,
        has_produce_colors=True,
    )


class PlaceholderExtractor:
    """Byte-sampling heuristics standing in for pixel analysis.

    Brightness and contrast are the mean and standard deviation of the first
    1000 raw bytes, sharpness is contrast x 3 and produce presence is a size
    proxy. None of this looks at decoded pixels.
    """

    def extract(self, raw: bytes | None, width: int, height: int) -> ImageStatistics:
        if raw is None:
            return neutral_statistics(width, height)

        has_produce = len(raw) > PRODUCE_SIZE_PROXY
        if len(raw) < MIN_SAMPLE_BYTES:
            return ImageStatistics(
                width=width,
                height=height,
                brightness=UNKNOWN_BRIGHTNESS,
                contrast=UNKNOWN_CONTRAST,
                sharpness=UNKNOWN_SHARPNESS,
                has_produce_colors=has_produce,
            )

        sample = np.frombuffer(raw[:SAMPLE_WINDOW], dtype=np.uint8).astype(np.float64)
        brightness = float(sample.mean())
        contrast = float(np.sqrt(((sample - brightness) ** 2).mean()))
        return ImageStatistics(
            width=width,
            height=height,
            brightness=brightness,
            contrast=contrast,
            sharpness=contrast * 3,
            has_produce_colors=has_produce,
        )


def compute_blur_score(gray: NDArray[np.float64]) -> float:
    """Compute blur score via Laplacian variance. Lower = blurrier."""
    laplacian = (
        np.roll(gray, 1, axis=0)
        + np.roll(gray, -1, axis=0)
        + np.roll(gray, 1, axis=1)
        + np.roll(gray, -1, axis=1)
        - 4 * gray
    )
    return float(laplacian.var())


def produce_pixel_fraction(hsv: NDArray[np.uint8]) -> float:
    """Fraction of saturated pixels with a red, orange, yellow or green hue.

    Pillow's HSV hue runs 0-255 around the colour wheel; blues and purples
    (roughly 130-235) are not produce colours.
    """
    hue, sat, val = hsv[:, :, 0], hsv[:, :, 1], hsv[:, :, 2]
    coloured = (sat > 60) & (val > 40)
    produce_hue = (hue < 130) | (hue > 235)
    total = hue.size
    if total == 0:
        return 0.0
    return float((coloured & produce_hue).sum()) / total


class PixelExtractor:
    """Decodes the photo with Pillow and measures real pixel statistics."""

    def __init__(self, max_image_dimension: int = 1024, produce_fraction: float = 0.15) -> None:
        self.max_image_dimension = max_image_dimension
        self.produce_fraction = produce_fraction

    def extract(self, raw: bytes | None, width: int, height: int) -> ImageStatistics:
        if raw is None:
            return neutral_statistics(width, height)

        try:
            with Image.open(io.BytesIO(raw)) as img:
                rgb = img.convert("RGB")
        except Exception as exc:
            raise ValueError(f"Could not decode image: {exc}") from exc

        orig_width, orig_height = rgb.width, rgb.height

        # Downsample if too large
        max_dim = self.max_image_dimension
        if rgb.width > max_dim or rgb.height > max_dim:
            ratio = max_dim / max(rgb.width, rgb.height)
            new_size = (max(1, int(rgb.width * ratio)), max(1, int(rgb.height * ratio)))
            rgb = rgb.resize(new_size, Image.Resampling.LANCZOS)

        pixels = np.array(rgb, dtype=np.uint8)
        gray = pixels.mean(axis=2).astype(np.float64)
        hsv = np.array(rgb.convert("HSV"), dtype=np.uint8)

        return ImageStatistics(
            width=orig_width,
            height=orig_height,
            brightness=float(gray.mean()),
            contrast=float(gray.std()),
            sharpness=compute_blur_score(gray),
            has_produce_colors=produce_pixel_fraction(hsv) >= self.produce_fraction,
        )


def get_extractor(
    name: str = "placeholder",
    max_image_dimension: int = 1024,
    produce_fraction: float = 0.15,
) -> StatisticsExtractor:
    """Resolve an extractor backend by name."""
    if name == "placeholder":
        return PlaceholderExtractor()
    if name == "pixel":
        return PixelExtractor(max_image_dimension, produce_fraction)
    raise ValueError(f"Unknown extractor backend: {name!r}. Supported: placeholder, pixel")
