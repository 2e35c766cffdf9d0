"""Descriptor generation for the ``.project`` and ``.classpath`` files.

Both operations are pure: they take a :class:`ProjectConfig` (plus the output
locations for the classpath) and return the complete document text.  Nothing
is read from or written to disk here.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from eclipsegen.project.project_config import ProjectConfig
from eclipsegen.utils import relative_path

from .templates import TemplateRenderer


PROJECT_FILE_NAME = ".project"
CLASSPATH_FILE_NAME = ".classpath"

JRE_CONTAINER = "org.eclipse.jdt.launching.JRE_CONTAINER"


# ---------------------------------------------------------------------------
# Classpath entries
# ---------------------------------------------------------------------------


class EntryRole(str, Enum):
    """What a classpath entry stands for."""
    SOURCE = "source"
    TEST_SOURCE = "test-source"
    RESOURCE = "resource"
    TEST_RESOURCE = "test-resource"
    CONTAINER = "container"
    OUTPUT = "output"
    TEST_OUTPUT = "test-output"


class ClasspathEntry(BaseModel):
    """One ``<classpathentry>`` element."""
    kind: str = Field(..., description="Eclipse entry kind: src, con or output")
    path: str
    role: EntryRole
    output: Optional[str] = Field(
        default=None, description="Per-entry output folder, set for test roots only"
    )
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def optional(self) -> bool:
        return self.attributes.get("optional") == "true"


def build_classpath_entries(
    config: ProjectConfig,
    *,
    output_directory: str,
    test_output_directory: str,
    alternative_output: Optional[str] = None,
    sources_optional: bool = True,
    basedir: str | Path | None = None,
) -> list[ClasspathEntry]:
    """Compute the ordered classpath entries for *config*.

    Order: sources, test sources, resources, test resources, the JRE
    container, then the output location(s).  Every configured path yields
    exactly one entry, duplicates included.

    ``alternative_output`` replaces both output directories when given.
    Otherwise the main and test outputs are used as-is; when they differ,
    test roots point their ``output`` at the test output and a second output
    entry is emitted for it.
    """
    if alternative_output:
        main_output = test_output = relative_path(alternative_output, basedir)
    else:
        main_output = relative_path(output_directory, basedir)
        test_output = relative_path(test_output_directory, basedir)
    separate_test_output = main_output != test_output

    def root(path: str, role: EntryRole, test: bool) -> ClasspathEntry:
        attributes: dict[str, str] = {}
        if sources_optional:
            attributes["optional"] = "true"
        if test:
            attributes["test"] = "true"
        return ClasspathEntry(
            kind="src",
            path=relative_path(path, basedir),
            role=role,
            output=test_output if test and separate_test_output else None,
            attributes=attributes,
        )

    entries: list[ClasspathEntry] = []
    entries += [root(p, EntryRole.SOURCE, test=False) for p in config.sources]
    entries += [root(p, EntryRole.TEST_SOURCE, test=True) for p in config.test_sources]
    entries += [root(p, EntryRole.RESOURCE, test=False) for p in config.resources]
    entries += [root(p, EntryRole.TEST_RESOURCE, test=True) for p in config.test_resources]

    entries.append(ClasspathEntry(kind="con", path=JRE_CONTAINER, role=EntryRole.CONTAINER))

    entries.append(ClasspathEntry(kind="output", path=main_output, role=EntryRole.OUTPUT))
    if separate_test_output:
        entries.append(
            ClasspathEntry(
                kind="output",
                path=test_output,
                role=EntryRole.TEST_OUTPUT,
                attributes={"test": "true"},
            )
        )

    return entries


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class DescriptorGenerator:
    """Renders the Eclipse ``.project`` and ``.classpath`` documents."""

    _PROJECT_TEMPLATE = "project.xml.j2"
    _CLASSPATH_TEMPLATE = "classpath.xml.j2"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def project_file(self, config: ProjectConfig, *, encoding: str = "UTF-8") -> str:
        """Render the ``.project`` document: name, comment, builders, natures.

        *encoding* is only written into the XML declaration; it must match the
        charset the caller encodes the result with.
        """
        return self.renderer.render(
            self._PROJECT_TEMPLATE,
            {
                "encoding": encoding,
                "name": config.name,
                "comment": config.comment,
                "builders": config.builders,
                "natures": config.natures,
            },
        )

    def classpath_file(
        self,
        config: ProjectConfig,
        *,
        output_directory: str,
        test_output_directory: str,
        alternative_output: Optional[str] = None,
        sources_optional: bool = True,
        basedir: str | Path | None = None,
        encoding: str = "UTF-8",
    ) -> str:
        """Render the ``.classpath`` document.

        See :func:`build_classpath_entries` for the entry rules.
        """
        entries = build_classpath_entries(
            config,
            output_directory=output_directory,
            test_output_directory=test_output_directory,
            alternative_output=alternative_output,
            sources_optional=sources_optional,
            basedir=basedir,
        )
        return self.renderer.render(
            self._CLASSPATH_TEMPLATE, {"encoding": encoding, "entries": entries}
        )
