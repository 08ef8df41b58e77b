"""
Helpers for a user's saved artifacts.

Storage itself belongs to the caller; these functions only create ids,
build records from OCR results and filter a list the way the artifact
list view does.
"""

from __future__ import annotations

import time
from collections.abc import Iterable

from artifactscorer.models import Artifact, ArtifactType, Substat


def new_artifact_id(now_ms: int | None = None) -> str:
    """Return an id made of the current time in milliseconds, in hex."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return format(now_ms, "x")


def make_artifact(
    artifact_type: ArtifactType,
    set_id: str,
    substats: Iterable[Substat],
    level: int = 0,
    artifact_id: str | None = None,
) -> Artifact:
    """Build an Artifact from parsed substats, generating an id if needed."""
    return Artifact(
        id=artifact_id or new_artifact_id(),
        type=artifact_type,
        set_id=set_id,
        level=level,
        substats=tuple(substats),
    )


def filter_artifacts(
    artifacts: Iterable[Artifact],
    artifact_type: ArtifactType | None = None,
    set_id: str | None = None,
) -> list[Artifact]:
    """
    Filter artifacts by slot and/or set.

    None for either argument means "any". When both are given an artifact
    must match both. Input order is kept.
    """
    return [
        art
        for art in artifacts
        if (artifact_type is None or art.type is artifact_type)
        and (set_id is None or art.set_id == set_id)
    ]


def set_ids(artifacts: Iterable[Artifact]) -> list[str]:
    """Distinct set ids in first-seen order, for building a set filter."""
    return list(dict.fromkeys(art.set_id for art in artifacts))
