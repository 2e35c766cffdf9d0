"""eclipsegen runner.

Generates the Eclipse ``.project`` and ``.classpath`` files for a Maven-style
project:

1. Build the :class:`ProjectConfig` from the host snapshot and the settings.
2. Render both descriptors.
3. Write each one to the project base directory (or show it, on a dry run).

Usage::

    python -m eclipsegen path/to/project
    python -m eclipsegen path/to/project --dry-run --alt-target bin
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from rich.panel import Panel

from eclipsegen.config import Settings
from eclipsegen.descriptors import (
    CLASSPATH_FILE_NAME,
    PROJECT_FILE_NAME,
    DescriptorGenerator,
)
from eclipsegen.project import HostProject, PomError, read_pom, read_project_config
from eclipsegen.project.project_config import ProjectConfig
from eclipsegen.utils import (
    console,
    print_error,
    print_file_preview,
    print_info,
    print_success,
    print_summary_table,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a descriptor cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Could not write file: {path}: {message}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class GeneratedFile(BaseModel):
    """Outcome of generating one descriptor."""
    path: Path
    content: str
    written: bool = Field(default=False, description="False on a dry run")
    overwritten: bool = Field(default=False, description="An existing file was replaced")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class EclipseRunner:
    """Drives one descriptor generation run.

    Attributes:
        settings: Run settings with output directories resolved against the
            host project.
        project: Host project snapshot.
        generator: Descriptor renderer.
    """

    def __init__(
        self,
        settings: Settings,
        project: HostProject,
        generator: Optional[DescriptorGenerator] = None,
    ) -> None:
        self.settings = settings.resolve_output_dirs(project)
        self.project = project
        self.generator = generator or DescriptorGenerator()

    async def execute(self) -> list[GeneratedFile]:
        """Generate both descriptors.

        Returns:
            One :class:`GeneratedFile` per descriptor, ``.project`` first.
            Empty when the run is skipped.

        Raises:
            GenerationError: If a descriptor cannot be written.
        """
        if self.settings.skip:
            print_info("Skipping eclipse")
            return []

        basedir = Path(self.project.basedir)
        config = read_project_config(self.project, self.settings)
        self._print_banner(basedir, config)

        encoding = self.settings.encoding
        project_content = self.generator.project_file(config, encoding=encoding)
        classpath_content = self.generator.classpath_file(
            config,
            output_directory=self.settings.output_directory,
            test_output_directory=self.settings.test_output_directory,
            alternative_output=self.settings.alternative_output,
            sources_optional=self.settings.sources_optional,
            basedir=basedir,
            encoding=encoding,
        )

        return [
            await self.generate_file(basedir / PROJECT_FILE_NAME, project_content),
            await self.generate_file(basedir / CLASSPATH_FILE_NAME, classpath_content),
        ]

    async def generate_file(self, path: Path, content: str) -> GeneratedFile:
        """Write *content* to *path*, replacing any existing file.

        On a dry run the content is printed instead and nothing is touched.
        """
        if self.settings.dryrun:
            print_file_preview(path, content)
            return GeneratedFile(path=path, content=content)

        try:
            data = content.encode(self.settings.encoding)
        except LookupError as exc:
            raise GenerationError(path, f"unknown encoding {self.settings.encoding!r}") from exc
        except UnicodeEncodeError as exc:
            raise GenerationError(
                path, f"content not representable in {self.settings.encoding}"
            ) from exc

        overwritten = path.exists()
        if overwritten:
            print_info(f"Overwriting existing file: {path}")

        try:
            await asyncio.to_thread(path.write_bytes, data)
        except OSError as exc:
            raise GenerationError(path, exc.strerror or str(exc)) from exc

        print_success(f"Generated {path}")
        return GeneratedFile(path=path, content=content, written=True, overwritten=overwritten)

    def _print_banner(self, basedir: Path, config: ProjectConfig) -> None:
        mode = "dry run" if self.settings.dryrun else "write"
        console.print(
            Panel(
                f"[bold bright_cyan]eclipsegen[/bold bright_cyan]\n"
                f"Project : {config.name}\n"
                f"Basedir : {basedir}\n"
                f"Mode    : {mode}",
                border_style="bright_cyan",
            )
        )
        output = self.settings.alternative_output or self.settings.output_directory
        print_summary_table(
            {
                "Sources": str(len(config.sources)),
                "Test sources": str(len(config.test_sources)),
                "Resources": str(len(config.resources)),
                "Test resources": str(len(config.test_resources)),
                "Builders": ", ".join(config.builders) or "-",
                "Natures": ", ".join(config.natures) or "-",
                "Output": str(output),
            },
            title="Project configuration",
        )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="eclipsegen",
        description="Generate Eclipse .project and .classpath files from a Maven project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  eclipsegen .\n"
            "  eclipsegen ./my-app --dry-run\n"
            "  eclipsegen ./my-app --alt-target bin --extra-source src/gen/java\n"
        ),
    )

    parser.add_argument(
        "basedir",
        nargs="?",
        default=".",
        help="Project directory containing pom.xml (default: .)",
    )
    parser.add_argument(
        "--snapshot",
        default=None,
        help="Read the project from a JSON snapshot instead of pom.xml",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="JSON settings file (default: ECLIPSE_* environment variables)",
    )
    parser.add_argument("--output-directory", default=None)
    parser.add_argument("--test-output-directory", default=None)
    parser.add_argument(
        "--alt-target",
        dest="alternative_output",
        default=None,
        help="Use this build output directory for main and test classes",
    )
    parser.add_argument("--encoding", default=None)
    parser.add_argument("--dry-run", dest="dryrun", action="store_true", default=None)
    parser.add_argument("--skip", action="store_true", default=None)
    parser.add_argument(
        "--no-sources-optional", dest="sources_optional", action="store_false", default=None
    )
    parser.add_argument(
        "--no-default-builders", dest="default_builders", action="store_false", default=None
    )
    parser.add_argument(
        "--no-default-natures", dest="default_natures", action="store_false", default=None
    )
    for option in (
        "builder",
        "nature",
        "source",
        "resource",
        "test-source",
        "test-resource",
    ):
        parser.add_argument(
            f"--extra-{option}",
            dest=f"extra_{option.replace('-', '_')}s",
            action="append",
            default=None,
            metavar="VALUE",
            help=f"Additional {option.replace('-', ' ')} (repeatable)",
        )
    return parser


def _settings_from_args(args) -> Settings:
    """Start from the settings file (or environment) and apply CLI overrides."""
    base = Settings.load(Path(args.settings)) if args.settings else Settings.from_env()
    overrides = {
        name: value
        for name, value in vars(args).items()
        if name in Settings.model_fields and value is not None
    }
    return base.model_copy(update=overrides)


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``eclipsegen`` / ``python -m eclipsegen``."""
    args = _build_parser().parse_args(argv)

    try:
        settings = _settings_from_args(args)
        if settings.skip:
            print_info("Skipping eclipse")
            return
        if args.snapshot:
            project = HostProject.load(args.snapshot)
        else:
            project = read_pom(args.basedir)
        asyncio.run(EclipseRunner(settings, project).execute())
    except (PomError, GenerationError, ValidationError, OSError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
