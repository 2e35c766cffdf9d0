"""The normalised IDE project configuration.

A :class:`ProjectConfig` is built in two explicit steps:

1. :func:`initial_project_config` takes a snapshot of the host project plus
   the optional default builder/nature pairs.
2. :func:`extend_project_config` appends the user-declared extension lists.

Both steps are pure.  Lists keep insertion order and duplicates, so the
generated descriptors are reproducible for a given input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from pydantic import BaseModel, ConfigDict, Field

from eclipsegen.utils import first_present

from .models import HostProject

if TYPE_CHECKING:
    from eclipsegen.config import Settings


# ---------------------------------------------------------------------------
# Eclipse defaults
# ---------------------------------------------------------------------------

DEFAULT_BUILDERS: tuple[str, ...] = (
    "org.eclipse.jdt.core.javabuilder",
    "org.eclipse.m2e.core.maven2Builder",
)

DEFAULT_NATURES: tuple[str, ...] = (
    "org.eclipse.jdt.core.javanature",
    "org.eclipse.m2e.core.maven2Nature",
)

UNDEFINED_NAME = "undefined"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """IDE-relevant layout of one project.

    Instances are frozen and hold their lists as tuples; every ``with_*``
    method returns an updated copy and leaves the receiver untouched.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=UNDEFINED_NAME, min_length=1)
    comment: str = Field(default="")
    sources: tuple[str, ...] = Field(default=())
    test_sources: tuple[str, ...] = Field(default=())
    resources: tuple[str, ...] = Field(default=())
    test_resources: tuple[str, ...] = Field(default=())
    builders: tuple[str, ...] = Field(default=())
    natures: tuple[str, ...] = Field(default=())

    def _with(self, **changes: object) -> "ProjectConfig":
        return self.model_copy(update=changes)

    def with_name(self, name: str) -> "ProjectConfig":
        return self._with(name=name)

    def with_comment(self, comment: str) -> "ProjectConfig":
        return self._with(comment=comment)

    def with_sources(self, sources: Iterable[str]) -> "ProjectConfig":
        return self._with(sources=tuple(sources))

    def with_test_sources(self, test_sources: Iterable[str]) -> "ProjectConfig":
        return self._with(test_sources=tuple(test_sources))

    def with_resources(self, resources: Iterable[str]) -> "ProjectConfig":
        return self._with(resources=tuple(resources))

    def with_test_resources(self, test_resources: Iterable[str]) -> "ProjectConfig":
        return self._with(test_resources=tuple(test_resources))

    def with_builders(self, builders: Iterable[str]) -> "ProjectConfig":
        return self._with(builders=tuple(builders))

    def with_natures(self, natures: Iterable[str]) -> "ProjectConfig":
        return self._with(natures=tuple(natures))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def initial_project_config(
    project: HostProject,
    *,
    default_builders: bool = True,
    default_natures: bool = True,
) -> ProjectConfig:
    """Snapshot *project* into a configuration, without user extensions.

    The name falls back from the declared name to the artifact id and then
    to ``"undefined"``; a missing description becomes an empty comment.
    Resource descriptors are reduced to their directories.
    """
    return (
        ProjectConfig()
        .with_name(first_present(project.name, project.artifact_id, default=UNDEFINED_NAME))
        .with_comment(first_present(project.description, default=""))
        .with_sources(project.compile_source_roots)
        .with_test_sources(project.test_compile_source_roots)
        .with_resources(r.directory for r in project.resources)
        .with_test_resources(r.directory for r in project.test_resources)
        .with_builders(DEFAULT_BUILDERS if default_builders else ())
        .with_natures(DEFAULT_NATURES if default_natures else ())
    )


def extend_project_config(
    config: ProjectConfig,
    *,
    extra_sources: Iterable[str] = (),
    extra_resources: Iterable[str] = (),
    extra_test_sources: Iterable[str] = (),
    extra_test_resources: Iterable[str] = (),
    extra_builders: Iterable[str] = (),
    extra_natures: Iterable[str] = (),
) -> ProjectConfig:
    """Append the extension lists to each list of *config* (base first)."""
    return (
        config
        .with_sources((*config.sources, *extra_sources))
        .with_resources((*config.resources, *extra_resources))
        .with_test_sources((*config.test_sources, *extra_test_sources))
        .with_test_resources((*config.test_resources, *extra_test_resources))
        .with_builders((*config.builders, *extra_builders))
        .with_natures((*config.natures, *extra_natures))
    )


def read_project_config(project: HostProject, settings: "Settings") -> ProjectConfig:
    """Build the final configuration for *project* under *settings*."""
    initial = initial_project_config(
        project,
        default_builders=settings.default_builders,
        default_natures=settings.default_natures,
    )
    return extend_project_config(
        initial,
        extra_sources=settings.extra_sources,
        extra_resources=settings.extra_resources,
        extra_test_sources=settings.extra_test_sources,
        extra_test_resources=settings.extra_test_resources,
        extra_builders=settings.extra_builders,
        extra_natures=settings.extra_natures,
    )
