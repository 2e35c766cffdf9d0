"""Shared pytest fixtures for the eclipsegen test suite.

Provides reusable fixtures for:
- Temporary project directories
- Sample ``pom.xml`` documents
- Pre-built host project snapshots
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from eclipsegen.project.models import HostProject, Resource


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary project base directory (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# POM documents
# ---------------------------------------------------------------------------

SAMPLE_POM = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <project xmlns="http://maven.apache.org/POM/4.0.0"
             xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
             xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
      <modelVersion>4.0.0</modelVersion>
      <groupId>com.example</groupId>
      <artifactId>task-service</artifactId>
      <version>1.0.0</version>
      <name>Task Service</name>
      <description>Manages tasks &amp; reminders.</description>
      <build>
        <resources>
          <resource>
            <directory>src/main/resources</directory>
            <filtering>true</filtering>
            <includes>
              <include>**/*.properties</include>
            </includes>
          </resource>
          <resource>
            <directory>${project.basedir}/src/main/config</directory>
            <excludes>
              <exclude>**/*.bak</exclude>
            </excludes>
          </resource>
        </resources>
      </build>
    </project>
""")

MINIMAL_POM = textwrap.dedent("""\
    <project>
      <modelVersion>4.0.0</modelVersion>
      <groupId>com.example</groupId>
      <artifactId>minimal</artifactId>
      <version>0.1</version>
    </project>
""")


@pytest.fixture
def sample_pom(tmp_project_dir: Path) -> Path:
    """A namespaced ``pom.xml`` with a name, description and custom resources."""
    pom = tmp_project_dir / "pom.xml"
    pom.write_text(SAMPLE_POM, encoding="utf-8")
    return pom


@pytest.fixture
def minimal_pom(tmp_project_dir: Path) -> Path:
    """A ``pom.xml`` without namespace, name or build section."""
    pom = tmp_project_dir / "pom.xml"
    pom.write_text(MINIMAL_POM, encoding="utf-8")
    return pom


# ---------------------------------------------------------------------------
# Host project & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def host_project(tmp_project_dir: Path) -> HostProject:
    """A Maven standard-layout snapshot rooted at ``tmp_project_dir``."""
    base = tmp_project_dir.as_posix()
    return HostProject(
        name="Task Service",
        artifact_id="task-service",
        description="Manages tasks.",
        basedir=tmp_project_dir,
        compile_source_roots=[f"{base}/src/main/java"],
        test_compile_source_roots=[f"{base}/src/test/java"],
        resources=[Resource(directory=f"{base}/src/main/resources", filtering=True)],
        test_resources=[Resource(directory=f"{base}/src/test/resources")],
        output_directory=f"{base}/target/classes",
    )
