"""GetLocalizedSuggestion — remediation text in the submitter's language."""

from __future__ import annotations

from typing import Any

from cropcheck.core.localizer import DEFAULT_LANGUAGE, suggest
from cropcheck.service.handler import STATUS_OK


def handle(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Never fails: unknown issue types and languages resolve through the fallback chain."""
    language = event.get("language") or DEFAULT_LANGUAGE
    suggestion = suggest(str(event.get("issueType") or ""), str(language))
    return {"status": STATUS_OK, "body": {"suggestion": suggestion}}
