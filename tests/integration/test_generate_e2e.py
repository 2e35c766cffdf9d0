"""Integration tests for the read-then-generate flow.

These tests read a real ``pom.xml`` from disk, run the full generation, and
verify that the written descriptors are well-formed and complete.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from eclipsegen.config import Settings
from eclipsegen.project import HostProject, read_pom
from eclipsegen.runner import EclipseRunner


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _generate(project: HostProject, settings: Settings) -> tuple[ET.Element, ET.Element]:
    """Run the generator and return the parsed ``.project`` and ``.classpath`` roots."""
    await EclipseRunner(settings, project).execute()
    basedir = Path(project.basedir)
    return (
        ET.parse(basedir / ".project").getroot(),
        ET.parse(basedir / ".classpath").getroot(),
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestGenerateFromPom:
    @pytest.mark.asyncio
    async def test_sample_pom(self, sample_pom: Path):
        project_root, classpath_root = await _generate(read_pom(sample_pom), Settings())

        assert project_root.findtext("name") == "Task Service"
        assert project_root.findtext("comment") == "Manages tasks & reminders."
        assert len(project_root.findall("buildSpec/buildCommand")) == 2
        assert len(project_root.findall("natures/nature")) == 2

        paths = [e.get("path") for e in classpath_root.findall("classpathentry")]
        assert paths == [
            "src/main/java",
            "src/test/java",
            "src/main/resources",
            "src/main/config",
            "src/test/resources",
            "org.eclipse.jdt.launching.JRE_CONTAINER",
            "target/classes",
        ]

    @pytest.mark.asyncio
    async def test_rerun_is_identical(self, minimal_pom: Path):
        project = read_pom(minimal_pom)
        await EclipseRunner(Settings(), project).execute()
        first = (minimal_pom.parent / ".classpath").read_bytes()
        await EclipseRunner(Settings(), project).execute()
        assert (minimal_pom.parent / ".classpath").read_bytes() == first


@pytest.mark.integration
class TestSingleSourceScenario:
    @pytest.mark.asyncio
    async def test_counts(self, tmp_project_dir: Path):
        project = HostProject(
            basedir=tmp_project_dir,
            compile_source_roots=["src/main/java"],
            output_directory="target/classes",
        )
        settings = Settings(
            output_directory="target/classes",
            test_output_directory="target/classes",
        )
        project_root, classpath_root = await _generate(project, settings)

        assert len(project_root.findall("name")) == 1
        assert len(project_root.findall("comment")) == 1
        assert (project_root.findtext("comment") or "") == ""
        assert len(project_root.findall("buildSpec/buildCommand")) == 2
        assert len(project_root.findall("natures/nature")) == 2

        entries = classpath_root.findall("classpathentry")
        assert [e.get("kind") for e in entries] == ["src", "con", "output"]
        optional = entries[0].find("attributes/attribute[@name='optional']")
        assert optional is not None
        assert optional.get("value") == "true"
