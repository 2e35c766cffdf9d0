"""Read a Maven ``pom.xml`` into a :class:`HostProject` snapshot.

Only the project's own declarations are considered: parent POMs, profiles
and general property interpolation are not resolved.  Sections that are not
declared fall back to the Maven standard directory layout.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .models import HostProject, Resource


# ---------------------------------------------------------------------------
# Maven standard layout
# ---------------------------------------------------------------------------

DEFAULT_SOURCE_DIRECTORY = "src/main/java"
DEFAULT_TEST_SOURCE_DIRECTORY = "src/test/java"
DEFAULT_RESOURCE_DIRECTORY = "src/main/resources"
DEFAULT_TEST_RESOURCE_DIRECTORY = "src/test/resources"
DEFAULT_BUILD_DIRECTORY = "target"

_POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


class PomError(Exception):
    """Raised when a ``pom.xml`` is missing or cannot be parsed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def read_pom(path: str | Path) -> HostProject:
    """Parse *path* and return the corresponding host project snapshot.

    *path* may point at the ``pom.xml`` itself or at the directory holding it.

    Raises:
        PomError: If the file does not exist or is not a valid POM.
    """
    pom_path = Path(path)
    if pom_path.is_dir():
        pom_path = pom_path / "pom.xml"
    if not pom_path.is_file():
        raise PomError(pom_path, "file not found")

    try:
        root = ET.parse(pom_path).getroot()
    except ET.ParseError as exc:
        raise PomError(pom_path, f"invalid XML: {exc}") from exc

    if _local_name(root.tag) != "project":
        raise PomError(pom_path, f"unexpected root element <{_local_name(root.tag)}>")

    pom = _PomReader(root)
    basedir = pom_path.parent.resolve()
    build = pom.child(root, "build")

    build_directory = _resolve(
        basedir, pom.text(build, "directory") or DEFAULT_BUILD_DIRECTORY, None
    )

    def resolve(value: str) -> str:
        return _resolve(basedir, value, build_directory)

    source_directory = pom.text(build, "sourceDirectory") or DEFAULT_SOURCE_DIRECTORY
    test_source_directory = (
        pom.text(build, "testSourceDirectory") or DEFAULT_TEST_SOURCE_DIRECTORY
    )
    output_directory = pom.text(build, "outputDirectory") or f"{build_directory}/classes"

    return HostProject(
        name=pom.text(root, "name"),
        artifact_id=pom.text(root, "artifactId"),
        description=pom.text(root, "description"),
        basedir=basedir,
        compile_source_roots=[resolve(source_directory)],
        test_compile_source_roots=[resolve(test_source_directory)],
        resources=pom.resources(build, "resources", "resource", DEFAULT_RESOURCE_DIRECTORY, resolve),
        test_resources=pom.resources(
            build, "testResources", "testResource", DEFAULT_TEST_RESOURCE_DIRECTORY, resolve
        ),
        output_directory=resolve(output_directory),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

class _PomReader:
    """Namespace-tolerant element lookups over a parsed POM."""

    def __init__(self, root: ET.Element) -> None:
        self.ns = _POM_NAMESPACE if root.tag.startswith("{") else None

    def _tag(self, name: str) -> str:
        return f"{{{self.ns}}}{name}" if self.ns else name

    def child(self, parent: Optional[ET.Element], name: str) -> Optional[ET.Element]:
        if parent is None:
            return None
        return parent.find(self._tag(name))

    def children(self, parent: Optional[ET.Element], name: str) -> list[ET.Element]:
        if parent is None:
            return []
        return parent.findall(self._tag(name))

    def text(self, parent: Optional[ET.Element], name: str) -> Optional[str]:
        element = self.child(parent, name)
        if element is None or element.text is None:
            return None
        return element.text.strip() or None

    def resources(self, build, container, item, default, resolve) -> list[Resource]:
        section = self.child(build, container)
        if section is None:
            return [Resource(directory=resolve(default))]

        result: list[Resource] = []
        for element in self.children(section, item):
            directory = self.text(element, "directory")
            if directory is None:
                continue
            result.append(
                Resource(
                    directory=resolve(directory),
                    includes=self._patterns(element, "includes", "include"),
                    excludes=self._patterns(element, "excludes", "exclude"),
                    filtering=(self.text(element, "filtering") or "").lower() == "true",
                )
            )
        return result

    def _patterns(self, element: ET.Element, container: str, item: str) -> list[str]:
        section = self.child(element, container)
        return [
            child.text.strip()
            for child in self.children(section, item)
            if child.text and child.text.strip()
        ]


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _resolve(basedir: Path, value: str, build_directory: Optional[str]) -> str:
    """Substitute the basedir/build-directory expressions and absolutise *value*."""
    for expression in ("${project.basedir}", "${basedir}"):
        value = value.replace(expression, str(basedir))
    if build_directory is not None:
        value = value.replace("${project.build.directory}", build_directory)

    path = Path(value)
    if not path.is_absolute():
        path = basedir / path
    return path.as_posix()
