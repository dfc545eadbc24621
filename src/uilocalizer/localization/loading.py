"""Data file loading infrastructure.

Provides the protocol for line-oriented data loaders, a filesystem
implementation with path-traversal security, and result/summary data
structures for tracking load attempts.

Components:
    ResourceLoader - Protocol for reading data files as lines (structural typing)
    PathResourceLoader - Disk-based loader rooted at the asset directory
    AssetLayout - File names making up one configuration generation
    ResourceLoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of all load results of a generation

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from uilocalizer.constants import (
    BASE_TRANSLATION_FILE,
    CONFIG_FILE,
    MAGAZINE_TRANSLATION_FILE,
    PRIMARY_TRANSLATION_FILE,
)
from uilocalizer.diagnostics import Diagnostic, DiagnosticCode
from uilocalizer.enums import LoadStatus
from uilocalizer.localization.types import ResourceId

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ResourceLoader",
    # Concrete loader
    "PathResourceLoader",
    # Layout
    "AssetLayout",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
    "read_resource",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Protocol for reading line-oriented data files.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def read_lines(self, resource_id: str) -> list[str]:
        ...         return self.files[resource_id].splitlines()
        ...     def describe_path(self, resource_id: str) -> str:
        ...         return f"memory:{resource_id}"
    """

    def read_lines(self, resource_id: ResourceId) -> list[str]:
        """Read a data file as a list of lines.

        Args:
            resource_id: File name relative to the asset directory

        Returns:
            Lines without trailing newline characters

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            ValueError: If resource_id is unsafe
        """
        ...

    def describe_path(self, resource_id: ResourceId) -> str:
        """Return human-readable path for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """File system loader for UTF-8 data files under one root directory.

    Security:
        Resource IDs containing ".." or absolute paths are rejected, and
        every resolved path is validated against the root directory.

    Example:
        >>> loader = PathResourceLoader("BepInEx/plugins/l10n_assets")
        >>> lines = loader.read_lines("translate.txt")

    Attributes:
        root_dir: Asset directory containing config and translation files
    """

    root_dir: str
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_resource_id(resource_id: ResourceId) -> None:
        """Validate resource_id for path traversal attacks and whitespace.

        Raises:
            ValueError: If resource_id contains unsafe path components or
                       leading/trailing whitespace
        """
        if not resource_id:
            msg = "Resource ID cannot be empty"
            raise ValueError(msg)
        if resource_id.strip() != resource_id:
            msg = f"Resource ID contains leading/trailing whitespace: {resource_id!r}"
            raise ValueError(msg)
        if Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def resolve(self, resource_id: ResourceId) -> Path:
        """Resolve resource_id to a path inside the root directory.

        Raises:
            ValueError: If the resolved path escapes the root directory
        """
        self._validate_resource_id(resource_id)
        full_path = (self._resolved_root / resource_id).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{resource_id}' escapes root directory"
            raise ValueError(msg) from None
        return full_path

    def describe_path(self, resource_id: ResourceId) -> str:
        """Return the on-disk path string for diagnostics."""
        return str(Path(self.root_dir) / resource_id)

    def read_lines(self, resource_id: ResourceId) -> list[str]:
        """Read a UTF-8 data file as lines.

        A leading byte order mark is dropped.
        """
        text = self.resolve(resource_id).read_text(encoding="utf-8-sig")
        return text.splitlines()


@dataclass(frozen=True, slots=True)
class AssetLayout:
    """Names of the data files that make up one configuration generation.

    Translation packs are listed in priority order: the primary pack loads
    first so its entries win over the base pack.

    Attributes:
        config: Configuration file (language, ranges, fonts, positions)
        translation_packs: Main translation files, highest priority first
        magazine_pack: Translation file for magazine listings
    """

    config: ResourceId = CONFIG_FILE
    translation_packs: tuple[ResourceId, ...] = (PRIMARY_TRANSLATION_FILE, BASE_TRANSLATION_FILE)
    magazine_pack: ResourceId = MAGAZINE_TRANSLATION_FILE


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single data file.

    Attributes:
        resource_id: File identifier (e.g., 'translate.txt')
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the file
        entry_count: Entries added from this file (translations, rules, ...)
    """

    resource_id: ResourceId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if file load failed with an error."""
        return self.status == LoadStatus.ERROR

    def to_diagnostic(self) -> Diagnostic | None:
        """Describe a failed load as a Diagnostic (None on success)."""
        match self.status:
            case LoadStatus.NOT_FOUND:
                return Diagnostic(
                    code=DiagnosticCode.FILE_NOT_FOUND,
                    message=f"Data file not found: {self.resource_id}",
                    source_path=self.source_path,
                    severity="warning",
                )
            case LoadStatus.ERROR:
                return Diagnostic(
                    code=DiagnosticCode.FILE_UNREADABLE,
                    message=f"Failed to read {self.resource_id}: {self.error}",
                    source_path=self.source_path,
                )
        return None


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the load results of one generation.

    Attributes:
        results: All individual load results (immutable tuple)
    """

    results: tuple[ResourceLoadResult, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results where the file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get(self, resource_id: ResourceId) -> ResourceLoadResult | None:
        """Get the result for a specific file, if it was attempted."""
        for result in self.results:
            if result.resource_id == resource_id:
                return result
        return None

    @property
    def all_successful(self) -> bool:
        """Check if every attempted file was found and read."""
        return self.errors == 0 and self.not_found == 0


def read_resource(
    loader: ResourceLoader, resource_id: ResourceId
) -> tuple[list[str], ResourceLoadResult]:
    """Read a data file, converting failures into a load result.

    Missing files are logged as warnings and unreadable files as errors;
    neither raises.

    Args:
        loader: Loader to read from
        resource_id: File to read

    Returns:
        Tuple of (lines, result); lines is empty unless status is SUCCESS.
        The result's entry_count is 0 and is filled in by the caller.
    """
    source_path = loader.describe_path(resource_id)
    try:
        lines = loader.read_lines(resource_id)
    except FileNotFoundError:
        logger.warning("Data file not found: %s", source_path)
        return [], ResourceLoadResult(resource_id, LoadStatus.NOT_FOUND, source_path=source_path)
    except (OSError, ValueError) as e:
        logger.error("Failed to read %s: %s", source_path, e)
        return [], ResourceLoadResult(
            resource_id, LoadStatus.ERROR, error=e, source_path=source_path
        )
    return lines, ResourceLoadResult(resource_id, LoadStatus.SUCCESS, source_path=source_path)
