"""Pydantic v2 models for the host build project snapshot.

The snapshot is the read-only view of a Maven-style project that the
configuration model consumes: identity, compile source roots, resource
descriptors, and build output locations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Resource descriptor
# ---------------------------------------------------------------------------

class Resource(BaseModel):
    """A resource directory as declared by the host build.

    Only ``directory`` matters for IDE metadata; the filtering and
    include/exclude settings are kept so the snapshot mirrors the build model.
    """
    directory: str = Field(..., description="Resource root directory")
    includes: list[str] = Field(default_factory=list, description="Include patterns")
    excludes: list[str] = Field(default_factory=list, description="Exclude patterns")
    filtering: bool = Field(default=False, description="Whether property filtering is enabled")


# ---------------------------------------------------------------------------
# Host project
# ---------------------------------------------------------------------------

class HostProject(BaseModel):
    """Snapshot of the host build project."""
    name: Optional[str] = Field(default=None, description="Declared display name")
    artifact_id: Optional[str] = Field(default=None, description="Artifact identifier")
    description: Optional[str] = Field(default=None, description="Declared description")
    basedir: Path = Field(default=Path("."), description="Project base directory")
    compile_source_roots: list[str] = Field(default_factory=list)
    test_compile_source_roots: list[str] = Field(default_factory=list)
    resources: list[Resource] = Field(default_factory=list)
    test_resources: list[Resource] = Field(default_factory=list)
    output_directory: Optional[str] = Field(
        default=None, description="Build output directory for main classes"
    )

    @classmethod
    def load(cls, path: str | Path) -> "HostProject":
        """Load a snapshot previously exported as JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)
