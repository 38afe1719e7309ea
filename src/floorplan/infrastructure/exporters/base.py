"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from floorplan.application.dtos import PlanOutput


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered for a format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"No exporter registered for format '{format_name}'. "
            f"Available formats: {', '.join(available) or 'none'}"
        )

    def __str__(self) -> str:
        return self.args[0]


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a PlanOutput to a specific file format.

    Attributes:
        format_name: Registry name of the format (e.g., "svg", "json").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: PlanOutput, path: Path) -> None:
        """Export a plan to a file.

        Args:
            output: The plan output to export.
            path: Path where the file will be saved.
        """
        ...

    @abstractmethod
    def export_string(self, output: PlanOutput) -> str:
        """Export a plan as a string."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonPlanExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            raise UnsupportedFormatError(format_name, cls.available_formats())
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        """True when an exporter is registered for ``format_name``."""
        return format_name in cls._exporters


class ExportManager:
    """Exports a plan to one or more formats inside an output directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                Created on first export if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: PlanOutput,
        project_name: str = "floorplan",
    ) -> dict[str, Path]:
        """Export a plan to several formats.

        Files are named ``{project_name}.{extension}``.

        Args:
            formats: Format names to export (e.g., ["svg", "json"]).
            output: The plan output to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to written file paths.

        Raises:
            UnsupportedFormatError: If any format is not registered. Nothing
                is written in that case.
            OSError: If file operations fail.
        """
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filepath = self.output_dir / f"{project_name}.{exporter.file_extension}"
            logger.info("Exporting to %s: %s", format_name, filepath)
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results
