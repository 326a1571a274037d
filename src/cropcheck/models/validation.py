"""Caller-facing request and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cropcheck.models.quality import Grade


@dataclass(slots=True)
class PhotoValidationRequest:
    photo_url: str = ""
    width: int = 0
    height: int = 0
    image_buffer: bytes | None = field(default=None, repr=False)


@dataclass(slots=True)
class PhotoIssue:
    type: str = ""
    message: str = ""
    suggestion: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "message": self.message, "suggestion": self.suggestion}


@dataclass(slots=True)
class PhotoValidationResult:
    is_valid: bool = False
    quality_score: float = 0.0
    grade: Grade = Grade.REJECT
    confidence: float = 0.0
    issues: list[PhotoIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, keyed the way RPC clients expect."""
        return {
            "isValid": self.is_valid,
            "qualityScore": self.quality_score,
            "grade": self.grade.value,
            "confidence": self.confidence,
            "issues": [i.to_dict() for i in self.issues],
        }
