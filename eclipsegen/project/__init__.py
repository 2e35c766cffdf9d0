"""Host project snapshot and the normalised IDE project configuration.

Usage::

    from eclipsegen.project import read_pom, read_project_config

    project = read_pom("path/to/pom.xml")
    config = read_project_config(project, settings)
    print(config.sources, config.builders)
"""

from eclipsegen.project.models import HostProject, Resource
from eclipsegen.project.pom import PomError, read_pom
from eclipsegen.project.project_config import (
    DEFAULT_BUILDERS,
    DEFAULT_NATURES,
    ProjectConfig,
    extend_project_config,
    initial_project_config,
    read_project_config,
)

__all__ = [
    "DEFAULT_BUILDERS",
    "DEFAULT_NATURES",
    "HostProject",
    "PomError",
    "ProjectConfig",
    "Resource",
    "extend_project_config",
    "initial_project_config",
    "read_pom",
    "read_project_config",
]
