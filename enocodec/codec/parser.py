"""Parser from block text to the value model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from enocodec.codec.values import coerce_scalar

BLOCK_MARKER = "|"
LIST_ITEM_PREFIX = "- "

# Key used for list items that have no key line in scope
ORPHAN_LIST_KEY = ""


@dataclass
class Frame:
    """A map being filled and the indentation its entries live at.

    ``last_key`` is the key most recently written to ``container``; list
    item lines are appended to it. ``owner_key`` is the key in the enclosing
    frame that opened this map.
    """

    container: dict[str, Any]
    indent: int
    last_key: str | None = None
    owner_key: str | None = None

    def assign(self, key: str, value: Any) -> None:
        """Write a value and remember its key as the list target."""
        self.container[key] = value
        self.last_key = key


@dataclass
class OpenBlock:
    """A multiline value being captured after a ``key|`` line."""

    key: str
    indent: int
    frame: Frame
    lines: list[str] = field(default_factory=list)

    def flush(self) -> None:
        """Store the captured text in the frame that opened the block."""
        self.frame.assign(self.key, "\n".join(self.lines))


def parse(text: str) -> dict[str, Any]:
    """Parse block text into a map.

    Malformed input is never rejected; it produces the closest map the
    line rules allow.
    """
    return EnoParser().parse(text)


def parse_file(file_path: Path | str) -> dict[str, Any]:
    """Parse a UTF-8 encoded block text file."""
    return parse(Path(file_path).read_text(encoding="utf-8"))


class EnoParser:
    """Single-pass, indentation-driven parser for block text.

    Structure is recovered from indentation and punctuation only:

    - ``key: value`` assigns a scalar, ``key:`` opens a nested map
    - ``- item`` appends a string to the list bound to the last key
    - ``key|`` starts a multiline value that runs while lines are deeper
    """

    def __init__(self) -> None:
        self.result: dict[str, Any] = {}
        self.stack: list[Frame] = []
        self.block: OpenBlock | None = None

    def parse(self, text: str) -> dict[str, Any]:
        """Parse text and return the top-level map."""
        self.result = {}
        self.stack = [Frame(self.result, -1)]
        self.block = None

        for line in text.split("\n"):
            if not line.strip():
                continue
            self._parse_line(line)

        # Unterminated blocks are accepted
        self._close_block()
        return self.result

    @property
    def frame(self) -> Frame:
        """The currently active frame."""
        return self.stack[-1]

    def _parse_line(self, line: str) -> None:
        content = line.lstrip()
        indent = len(line) - len(content)

        if self.block is not None:
            if indent > self.block.indent:
                self.block.lines.append(content)
                return
            self._close_block()

        if content.rstrip().endswith(BLOCK_MARKER):
            key = content.rstrip()[: -len(BLOCK_MARKER)].strip()
            self.block = OpenBlock(key=key, indent=indent, frame=self.frame)
            return

        if content.startswith(LIST_ITEM_PREFIX):
            self._add_list_item(content[len(LIST_ITEM_PREFIX):].strip())
            return

        key, colon, value = content.partition(":")
        if not colon:
            return
        self._assign(key.strip(), value.strip(), indent)

    def _close_block(self) -> None:
        if self.block is not None:
            self.block.flush()
            self.block = None

    def _add_list_item(self, item: str) -> None:
        frame = self.frame
        # "key:" followed directly by "- item": the map opened for the key
        # is still empty, so the list belongs to the key itself.
        if frame.owner_key is not None and frame.last_key is None and not frame.container:
            self.stack.pop()
            frame = self.frame

        key = frame.last_key if frame.last_key is not None else ORPHAN_LIST_KEY
        if not isinstance(frame.container.get(key), list):
            frame.assign(key, [])
        if item:
            frame.container[key].append(item)

    def _assign(self, key: str, value: str, indent: int) -> None:
        while len(self.stack) > 1 and self.frame.indent >= indent:
            self.stack.pop()

        frame = self.frame
        if value == "[]":
            frame.assign(key, [])
        elif value == "{}":
            frame.assign(key, {})
        elif not value:
            nested: dict[str, Any] = {}
            frame.assign(key, nested)
            self.stack.append(Frame(nested, indent, owner_key=key))
        else:
            frame.assign(key, coerce_scalar(value))
