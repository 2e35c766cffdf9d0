"""eclipsegen settings.

The user-facing configuration surface: output locations, the optional-sources
and default builder/nature toggles, run modes, and the extension lists merged
into the project configuration.  Settings are Pydantic v2 models so they can
be validated at construction time and loaded from JSON or environment
variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from eclipsegen.project.models import HostProject
from eclipsegen.utils import split_list

_TRUE_VALUES = {"1", "true", "yes", "on"}

# Environment variable -> field name.  List fields take comma-separated values.
_ENV_STRINGS: dict[str, str] = {
    "ECLIPSE_OUTPUT_DIRECTORY": "output_directory",
    "ECLIPSE_TEST_OUTPUT_DIRECTORY": "test_output_directory",
    "ECLIPSE_ALT_TARGET": "alternative_output",
    "ECLIPSE_ENCODING": "encoding",
}

_ENV_FLAGS: dict[str, str] = {
    "ECLIPSE_SOURCES_OPTIONAL": "sources_optional",
    "ECLIPSE_DRYRUN": "dryrun",
    "ECLIPSE_SKIP": "skip",
    "ECLIPSE_DEFAULT_BUILDERS": "default_builders",
    "ECLIPSE_DEFAULT_NATURES": "default_natures",
}

_ENV_LISTS: dict[str, str] = {
    "ECLIPSE_EXTRA_BUILDERS": "extra_builders",
    "ECLIPSE_EXTRA_NATURES": "extra_natures",
    "ECLIPSE_EXTRA_SOURCES": "extra_sources",
    "ECLIPSE_EXTRA_RESOURCES": "extra_resources",
    "ECLIPSE_EXTRA_TEST_SOURCES": "extra_test_sources",
    "ECLIPSE_EXTRA_TEST_RESOURCES": "extra_test_resources",
}


class Settings(BaseModel):
    """Options controlling one descriptor generation run.

    ``output_directory`` and ``test_output_directory`` are required by the
    generator; when left unset they are filled from the host build output by
    :meth:`resolve_output_dirs`.
    """

    output_directory: Optional[str] = Field(default=None)
    test_output_directory: Optional[str] = Field(default=None)
    alternative_output: Optional[str] = Field(
        default=None, description="Overrides both main and test output locations"
    )
    sources_optional: bool = Field(
        default=True, description="Mark generated source and resource roots as optional"
    )
    dryrun: bool = Field(default=False, description="Render but do not write descriptors")
    skip: bool = Field(default=False, description="Do nothing")
    default_builders: bool = Field(default=True)
    default_natures: bool = Field(default=True)
    extra_builders: list[str] = Field(default_factory=list)
    extra_natures: list[str] = Field(default_factory=list)
    extra_sources: list[str] = Field(default_factory=list)
    extra_resources: list[str] = Field(default_factory=list)
    extra_test_sources: list[str] = Field(default_factory=list)
    extra_test_resources: list[str] = Field(default_factory=list)
    encoding: str = Field(default="utf-8", min_length=1)

    # ------------------------------------------------------------------
    # Output resolution
    # ------------------------------------------------------------------

    def resolve_output_dirs(self, project: HostProject) -> "Settings":
        """Return a copy with unset output directories taken from *project*.

        Both default to the host's main build output directory, so test
        classes share the main output unless configured otherwise.  When the
        host declares no output either, ``<basedir>/target/classes`` is used.
        """
        host_output = project.output_directory or (
            Path(project.basedir) / "target" / "classes"
        ).as_posix()
        return self.model_copy(
            update={
                "output_directory": self.output_directory or host_output,
                "test_output_directory": self.test_output_directory or host_output,
            }
        )

    # ------------------------------------------------------------------
    # Loaders
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load settings from a JSON file.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Settings`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Build ``Settings`` from ``ECLIPSE_*`` environment variables.

        Recognised variables (all optional):
            ECLIPSE_OUTPUT_DIRECTORY, ECLIPSE_TEST_OUTPUT_DIRECTORY,
            ECLIPSE_ALT_TARGET, ECLIPSE_ENCODING, ECLIPSE_SOURCES_OPTIONAL,
            ECLIPSE_DRYRUN, ECLIPSE_SKIP, ECLIPSE_DEFAULT_BUILDERS,
            ECLIPSE_DEFAULT_NATURES, ECLIPSE_EXTRA_BUILDERS,
            ECLIPSE_EXTRA_NATURES, ECLIPSE_EXTRA_SOURCES,
            ECLIPSE_EXTRA_RESOURCES, ECLIPSE_EXTRA_TEST_SOURCES,
            ECLIPSE_EXTRA_TEST_RESOURCES.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        for var, field_name in _ENV_STRINGS.items():
            if env.get(var):
                kwargs[field_name] = env[var]
        for var, field_name in _ENV_FLAGS.items():
            if env.get(var):
                kwargs[field_name] = env[var].strip().lower() in _TRUE_VALUES
        for var, field_name in _ENV_LISTS.items():
            if env.get(var):
                kwargs[field_name] = split_list(env[var])

        return cls(**kwargs)
