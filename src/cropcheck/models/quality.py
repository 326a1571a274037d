"""Data models for image statistics and quality predictions."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class QualityIssueType(str, Enum):
    TOO_DARK = "TOO_DARK"
    TOO_BRIGHT = "TOO_BRIGHT"
    BLURRY = "BLURRY"
    NO_PRODUCE = "NO_PRODUCE"
    LOW_RESOLUTION = "LOW_RESOLUTION"
    POOR_FRAMING = "POOR_FRAMING"  # reserved, no rule emits it yet


class Grade(str, Enum):
    """Quality bucket, ordered A > B > C > REJECT."""

    A = "A"
    B = "B"
    C = "C"
    REJECT = "REJECT"

    @property
    def rank(self) -> int:
        return _GRADE_RANK[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.rank >= other.rank


_GRADE_RANK = {"REJECT": 0, "C": 1, "B": 2, "A": 3}


@dataclass(frozen=True, slots=True)
class ImageStatistics:
    width: int = 0
    height: int = 0
    brightness: float = 0.0  # 0-255 mean
    contrast: float = 0.0  # 0-255 std dev
    sharpness: float = 0.0  # higher = sharper
    has_produce_colors: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class QualityIssue:
    type: QualityIssueType
    severity: float = 0.0
    message: str = ""
    suggestion: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity,
            "message": self.message,
            "suggestion": self.suggestion,
        }


@dataclass(slots=True)
class QualityPrediction:
    grade: Grade = Grade.REJECT
    confidence: float = 0.0
    issues: list[QualityIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "grade": self.grade.value,
            "confidence": self.confidence,
            "issues": [i.to_dict() for i in self.issues],
        }
