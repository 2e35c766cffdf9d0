"""Eclipse descriptor rendering.

Quick usage::

    from eclipsegen.descriptors import DescriptorGenerator

    generator = DescriptorGenerator()
    project_xml = generator.project_file(config)
    classpath_xml = generator.classpath_file(
        config,
        output_directory="target/classes",
        test_output_directory="target/test-classes",
    )
"""

from eclipsegen.descriptors.generator import (
    CLASSPATH_FILE_NAME,
    JRE_CONTAINER,
    PROJECT_FILE_NAME,
    ClasspathEntry,
    DescriptorGenerator,
    EntryRole,
    build_classpath_entries,
)
from eclipsegen.descriptors.templates import TemplateRenderer

__all__ = [
    "CLASSPATH_FILE_NAME",
    "JRE_CONTAINER",
    "PROJECT_FILE_NAME",
    "ClasspathEntry",
    "DescriptorGenerator",
    "EntryRole",
    "TemplateRenderer",
    "build_classpath_entries",
]
