"""Tests for photo validation."""

from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from cropcheck.core.extractor import PlaceholderExtractor
from cropcheck.core.validator import GRADE_SCORES, PhotoValidator, grade_to_score
from cropcheck.models.config import ScoringConfig
from cropcheck.models.quality import Grade, ImageStatistics
from cropcheck.models.validation import PhotoValidationRequest


class _FixedExtractor:
    def __init__(self, stats: ImageStatistics) -> None:
        self.stats = stats
        self.calls: list[tuple[bytes | None, int, int]] = []

    def extract(self, raw: bytes | None, width: int, height: int) -> ImageStatistics:
        self.calls.append((raw, width, height))
        return self.stats


class _BrokenExtractor:
    def extract(self, raw: bytes | None, width: int, height: int) -> ImageStatistics:
        raise RuntimeError("decoder crashed")


class TestValidate:
    def test_small_photo_without_bytes(self) -> None:
        request = PhotoValidationRequest(photo_url="s3://photos/a.jpg", width=500, height=500)
        result = PhotoValidator().validate(request)

        assert result.grade == Grade.B
        assert result.quality_score == 0.75
        assert not result.is_valid
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.type == "LOW_RESOLUTION"
        assert issue.message == "Resolution 500x500 below minimum 1024x768"
        assert issue.suggestion == "Move closer or use higher camera resolution"

    def test_tiny_buffer(self) -> None:
        request = PhotoValidationRequest(
            photo_url="upload-1", width=1024, height=768, image_buffer=b"\xff" * 50
        )
        result = PhotoValidator().validate(request)

        assert [i.type for i in result.issues] == ["NO_PRODUCE"]
        assert result.grade == Grade.C
        assert result.quality_score == 0.55
        assert result.confidence == pytest.approx(0.82)
        assert not result.is_valid

    def test_clean_photo_is_valid(self) -> None:
        request = PhotoValidationRequest(photo_url="ok.jpg", width=1024, height=768)
        result = PhotoValidator().validate(request)

        assert result.is_valid
        assert result.grade == Grade.A
        assert result.quality_score == 0.95
        assert result.confidence == pytest.approx(0.9)
        assert result.issues == []

    def test_any_issue_makes_photo_invalid(self) -> None:
        # A mild dark issue still grades A but fails validation
        stats = ImageStatistics(
            width=2048,
            height=1536,
            brightness=35.0,
            contrast=40.0,
            sharpness=200.0,
            has_produce_colors=True,
        )
        result = PhotoValidator(_FixedExtractor(stats)).validate(PhotoValidationRequest())
        assert result.grade == Grade.A
        assert not result.is_valid

    def test_rejected_photo(self) -> None:
        stats = ImageStatistics(width=10, height=10, brightness=0.0, sharpness=0.0)
        result = PhotoValidator(_FixedExtractor(stats)).validate(PhotoValidationRequest())
        assert result.grade == Grade.REJECT
        assert result.quality_score == 0.25
        assert not result.is_valid

    def test_extractor_receives_request_fields(self) -> None:
        extractor = _FixedExtractor(
            PlaceholderExtractor().extract(None, 1024, 768),
        )
        request = PhotoValidationRequest(
            photo_url="x", width=1600, height=1200, image_buffer=b"abc"
        )
        PhotoValidator(extractor).validate(request)
        assert extractor.calls == [(b"abc", 1600, 1200)]

    def test_scoring_config_is_used(self) -> None:
        config = ScoringConfig(min_width=2000, min_height=1500)
        request = PhotoValidationRequest(photo_url="x", width=1024, height=768)
        result = PhotoValidator(config=config).validate(request)
        assert [i.type for i in result.issues] == ["LOW_RESOLUTION"]

    def test_quality_score_comes_from_grade_table(self) -> None:
        base = ImageStatistics(width=2048, height=1536, brightness=120.0, sharpness=150.0)
        for brightness in (0.0, 20.0, 45.0, 130.0, 230.0, 255.0):
            for sharpness in (0.0, 60.0, 150.0):
                for produce in (True, False):
                    stats = replace(
                        base,
                        brightness=brightness,
                        sharpness=sharpness,
                        has_produce_colors=produce,
                    )
                    result = PhotoValidator(_FixedExtractor(stats)).validate(
                        PhotoValidationRequest()
                    )
                    assert result.quality_score == GRADE_SCORES[result.grade.value]

    def test_to_dict_uses_wire_keys(self) -> None:
        request = PhotoValidationRequest(photo_url="a", width=500, height=500)
        d = PhotoValidator().validate(request).to_dict()
        assert d == {
            "isValid": False,
            "qualityScore": 0.75,
            "grade": "B",
            "confidence": pytest.approx(0.85),
            "issues": [
                {
                    "type": "LOW_RESOLUTION",
                    "message": "Resolution 500x500 below minimum 1024x768",
                    "suggestion": "Move closer or use higher camera resolution",
                }
            ],
        }


class TestLogging:
    def test_completion_record(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="cropcheck")
        request = PhotoValidationRequest(photo_url="s3://photos/b.jpg", width=500, height=500)
        PhotoValidator().validate(request)

        record = next(r for r in caplog.records if r.message == "Photo validation completed")
        assert record.levelname == "INFO"
        assert record.photo_url == "s3://photos/b.jpg"
        assert record.is_valid is False
        assert record.quality_score == 0.75
        assert record.grade == "B"
        assert record.issue_count == 1
        assert record.duration_ms >= 0

    def test_failure_is_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="cropcheck")
        request = PhotoValidationRequest(photo_url="broken.jpg", width=1024, height=768)

        with pytest.raises(RuntimeError, match="decoder crashed"):
            PhotoValidator(_BrokenExtractor()).validate(request)

        errors = [r for r in caplog.records if r.levelname == "ERROR"]
        assert len(errors) == 1
        assert errors[0].message == "Photo validation failed"
        assert errors[0].photo_url == "broken.jpg"
        assert errors[0].exc_info is not None
        assert not any(r.message == "Photo validation completed" for r in caplog.records)


class TestGradeToScore:
    def test_table(self) -> None:
        assert grade_to_score(Grade.A) == 0.95
        assert grade_to_score(Grade.B) == 0.75
        assert grade_to_score(Grade.C) == 0.55
        assert grade_to_score(Grade.REJECT) == 0.25

    def test_unknown_grade(self) -> None:
        assert grade_to_score("Z") == 0.5


class TestValidateResolution:
    def test_minimum(self) -> None:
        validator = PhotoValidator()
        assert validator.validate_resolution(1024, 768)
        assert not validator.validate_resolution(1023, 768)
        assert not validator.validate_resolution(1024, 767)

    def test_custom_minimum(self) -> None:
        validator = PhotoValidator(config=ScoringConfig(min_width=640, min_height=480))
        assert validator.validate_resolution(640, 480)
