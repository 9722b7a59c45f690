"""Resource loading for localization text files.

Reading text from storage is kept apart from parsing: a TextLoader returns
source strings, load_table() turns one into a TextTable.

Components:
    TextLoader - Protocol for loading source text (structural typing)
    PathTextLoader - Disk-based loader with path-traversal prevention
    load_table - Load and parse one resource into a TextTable

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from loctext.localization.table import TextTable

if TYPE_CHECKING:
    from loctext.syntax.parser import TextParser

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TextLoader",
    # Concrete loader
    "PathTextLoader",
    # Helper
    "load_table",
]

logger = logging.getLogger(__name__)


class TextLoader(Protocol):
    """Protocol for loading localization source text.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for custom loaders (asset bundles, HTTP, databases).

    Example:
        >>> class DictLoader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def load(self, resource_id: str) -> str:
        ...         return self.files[resource_id]
        >>> table = load_table(DictLoader({"ui.txt": 'OK => en="OK"'}), "ui.txt")
    """

    def load(self, resource_id: str) -> str:
        """Load source text for resource_id.

        Raises:
            FileNotFoundError: If the resource doesn't exist
            OSError: If the resource cannot be read
        """
        ...


@dataclass(frozen=True, slots=True)
class PathTextLoader:
    """File system loader rooted at a fixed directory.

    Security:
        Resource IDs containing "..", absolute paths, or leading/trailing
        whitespace are rejected. Resolved paths are checked against the
        root directory.

    Example:
        >>> loader = PathTextLoader("assets/locale")
        >>> source = loader.load("menu.txt")
        # Reads: assets/locale/menu.txt

    Attributes:
        root_dir: Directory all resources are loaded from
        encoding: Text encoding (default: utf-8)
    """

    root_dir: str | Path
    encoding: str = "utf-8"
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_resource_id(resource_id: str) -> None:
        """Validate resource_id for path traversal attacks and whitespace.

        Raises:
            ValueError: If resource_id contains unsafe path components or
                       leading/trailing whitespace
        """
        if not resource_id:
            msg = "Resource ID cannot be empty"
            raise ValueError(msg)
        stripped = resource_id.strip()
        if stripped != resource_id:
            msg = (
                f"Resource ID contains leading/trailing whitespace: {resource_id!r}. "
                f"Stripped would be: {stripped!r}"
            )
            raise ValueError(msg)
        if Path(resource_id).is_absolute():
            msg = f"Absolute paths not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)
        if ".." in resource_id:
            msg = f"Path traversal sequences not allowed in resource_id: '{resource_id}'"
            raise ValueError(msg)

    def describe_path(self, resource_id: str) -> str:
        """Return the filesystem path a resource would be read from."""
        return str(self._resolved_root / resource_id)

    def load(self, resource_id: str) -> str:
        """Read resource_id below root_dir.

        Raises:
            ValueError: If resource_id is unsafe
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        self._validate_resource_id(resource_id)

        full_path = (self._resolved_root / resource_id).resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = f"Path '{resource_id}' resolves outside root directory"
            raise ValueError(msg)

        logger.debug("Loading text resource: %s", full_path)
        return full_path.read_text(encoding=self.encoding)


def load_table(
    loader: TextLoader,
    resource_id: str,
    *,
    parser: TextParser | None = None,
) -> TextTable:
    """Load one resource and parse it into a TextTable.

    Args:
        loader: Source of raw text
        resource_id: Resource to load
        parser: Configured parser (default: TextParser())

    Returns:
        TextTable built from the resource

    Raises:
        OSError: If loading fails
        TextParseError: On a fatal format error
        DuplicateTextIdError: If the resource defines an id twice
    """
    source = loader.load(resource_id)
    table = TextTable.from_source(source, parser=parser)
    logger.info("Loaded %d text(s) from %s", len(table), resource_id)
    return table
