"""Batch conversion between JSON files and block text files."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator

from enocodec.codec.parser import parse
from enocodec.codec.serializer import Serializer
from enocodec.codec.values import json_safe
from enocodec.convert.config import ConverterConfig

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"
ENO_SUFFIX = ".eno"


class ConversionStatus(Enum):
    """Outcome of converting a single file."""

    CONVERTED = "converted"
    DRY_RUN = "dry_run"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class FileResult:
    """Result of converting one file."""

    source: Path
    target: Path | None
    status: ConversionStatus
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "source": str(self.source),
            "target": str(self.target) if self.target else None,
            "status": self.status.value,
            "error": self.error,
        }


@dataclass
class ConversionStats:
    """Counters for a batch run."""

    total: int = 0  # Matching files found
    converted: int = 0
    skipped: int = 0
    errors: int = 0
    results: list[FileResult] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        """Count a file result."""
        self.results.append(result)
        if result.status == ConversionStatus.SKIPPED:
            self.skipped += 1
            return

        self.total += 1
        if result.status == ConversionStatus.CONVERTED:
            self.converted += 1
        elif result.status == ConversionStatus.FAILED:
            self.errors += 1

    @property
    def failed(self) -> bool:
        """Check if any file failed to convert."""
        return self.errors > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "total": self.total,
            "converted": self.converted,
            "skipped": self.skipped,
            "errors": self.errors,
        }


class FileConverter:
    """Walks a file tree and converts every file with a given suffix.

    Subclasses implement ``convert_text`` for one direction.
    """

    source_suffix = ""
    target_suffix = ""

    def __init__(
        self,
        output: Path | str | None = None,
        pattern: str | None = None,
        dry_run: bool = False,
    ) -> None:
        """Initialize converter.

        Args:
            output: Output directory. None writes next to each input file.
            pattern: Regex that file names must contain.
            dry_run: Report what would be written without writing.
        """
        self.output = Path(output) if output else None
        self.pattern = re.compile(pattern) if pattern else None
        self.dry_run = dry_run

    def convert_text(self, text: str) -> str:
        """Convert the content of one file."""
        raise NotImplementedError

    def output_path(self, source: Path, root: Path) -> Path:
        """Compute where the converted file for ``source`` is written.

        Args:
            source: Input file.
            root: Directory the batch was started from.

        Returns:
            Target path with the target suffix.
        """
        if self.output is None:
            target = source
        else:
            try:
                relative = source.relative_to(root)
            except ValueError:
                relative = Path(source.name)
            target = self.output / relative

        if target.suffix == self.source_suffix:
            return target.with_suffix(self.target_suffix)
        return target.with_name(target.name + self.target_suffix)

    def matches(self, source: Path) -> bool:
        """Check if a file name passes the pattern filter."""
        return self.pattern is None or self.pattern.search(source.name) is not None

    def convert_file(self, source: Path | str, target: Path | str) -> FileResult:
        """Convert a single file.

        Read, decode and write errors are reported in the result rather than
        raised.
        """
        source = Path(source)
        target = Path(target)

        try:
            converted = self.convert_text(source.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.error("Error converting %s: %s", source, e)
            return FileResult(source, target, ConversionStatus.FAILED, error=str(e))

        if self.dry_run:
            logger.info("[DRY RUN] Would convert %s to %s", source, target)
            return FileResult(source, target, ConversionStatus.DRY_RUN)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(converted, encoding="utf-8")
        except OSError as e:
            logger.error("Error writing %s: %s", target, e)
            return FileResult(source, target, ConversionStatus.FAILED, error=str(e))

        logger.info("Converted %s to %s", source, target)
        return FileResult(source, target, ConversionStatus.CONVERTED)

    def convert_path(self, path: Path | str) -> ConversionStats:
        """Convert a file or every matching file below a directory.

        Args:
            path: File or directory to convert.

        Returns:
            ConversionStats for the run.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Path not found: {path}")

        stats = ConversionStats()
        root = path if path.is_dir() else path.parent
        for result in self._iter_results(path, root):
            stats.record(result)
        return stats

    def _iter_results(self, path: Path, root: Path) -> Iterator[FileResult]:
        if path.is_dir():
            for source in sorted(path.rglob(f"*{self.source_suffix}")):
                if source.is_file():
                    yield self._convert_matching(source, root)
            return

        if path.is_file() and path.suffix == self.source_suffix:
            yield self._convert_matching(path, root)
            return

        logger.info("Skipping %s: not a %s file", path, self.source_suffix)
        yield FileResult(path, None, ConversionStatus.SKIPPED)

    def _convert_matching(self, source: Path, root: Path) -> FileResult:
        if not self.matches(source):
            logger.info("Skipping %s: doesn't match pattern", source)
            return FileResult(source, None, ConversionStatus.SKIPPED)
        return self.convert_file(source, self.output_path(source, root))


class JsonToEnoConverter(FileConverter):
    """Converts ``.json`` files to ``.eno`` block text files."""

    source_suffix = JSON_SUFFIX
    target_suffix = ENO_SUFFIX

    def __init__(self, config: ConverterConfig | None = None, dry_run: bool = False) -> None:
        self.config = config or ConverterConfig()
        super().__init__(output=self.config.output, pattern=self.config.pattern, dry_run=dry_run)
        self.serializer = Serializer(self.config.serialize_options)

    def convert_text(self, text: str) -> str:
        """Decode JSON text and serialize it to block text."""
        return self.serializer.serialize(json.loads(text))


class EnoToJsonConverter(FileConverter):
    """Converts ``.eno`` block text files back to ``.json`` files."""

    source_suffix = ENO_SUFFIX
    target_suffix = JSON_SUFFIX

    def __init__(
        self,
        output: Path | str | None = None,
        pattern: str | None = None,
        dry_run: bool = False,
        indent: int = 2,
    ) -> None:
        super().__init__(output=output, pattern=pattern, dry_run=dry_run)
        self.indent = indent

    def convert_text(self, text: str) -> str:
        """Parse block text and encode it as JSON.

        NaN and infinities are written as null.
        """
        value = json_safe(parse(text))
        return json.dumps(value, indent=self.indent, ensure_ascii=False, allow_nan=False) + "\n"
