"""Shared fixtures: programmatic test images and logger hygiene."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterator

import numpy as np
import pytest
from PIL import Image

from cropcheck.models.quality import ImageStatistics
from cropcheck.service.handler import default_service


def image_bytes(arr: np.ndarray, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format=fmt)
    return buf.getvalue()


def produce_array(width: int = 1024, height: int = 768, seed: int = 7) -> np.ndarray:
    """Textured green image: sharp, well exposed, produce-coloured."""
    rng = np.random.default_rng(seed)
    base = np.array([40, 160, 40], dtype=np.int16)
    noise = rng.integers(-30, 31, (height, width, 3), dtype=np.int16)
    return np.clip(base + noise, 0, 255).astype(np.uint8)


@pytest.fixture
def good_stats() -> ImageStatistics:
    return ImageStatistics(
        width=2048,
        height=1536,
        brightness=140.0,
        contrast=50.0,
        sharpness=180.0,
        has_produce_colors=True,
    )


@pytest.fixture
def produce_image(tmp_path: Path) -> str:
    path = tmp_path / "tomatoes.png"
    Image.fromarray(produce_array()).save(path)
    return str(path)


@pytest.fixture
def dark_image_bytes() -> bytes:
    return image_bytes(np.full((768, 1024, 3), 10, dtype=np.uint8))


@pytest.fixture(autouse=True)
def _reset_service_state() -> Iterator[None]:
    default_service.cache_clear()
    yield
    default_service.cache_clear()
    pkg_logger = logging.getLogger("cropcheck")
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
