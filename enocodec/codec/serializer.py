"""Serializer from the value model to block text."""

from __future__ import annotations

from typing import Any, Generator, Iterable

from enocodec.codec.options import SerializeOptions
from enocodec.codec.values import format_scalar, is_container, is_empty

INDENT = "  "

# A render step yields (child value, child indent) and is sent back the
# child's rendered text. The step's return value is its own rendering.
RenderStep = Generator[tuple[Any, str], str, str]


def serialize(
    value: Any,
    indent: str = "",
    options: SerializeOptions | None = None,
    *,
    ignore_empty: bool = True,
    skip_fields: Iterable[str] = (),
    use_flags: bool = False,
    force_multiline: Iterable[str] = (),
) -> str:
    """Serialize a value to block text.

    Args:
        value: Value to serialize (as produced by ``json.loads``).
        indent: Indentation prefix for the outermost lines.
        options: Formatting options. When given, the keyword overrides are ignored.
        ignore_empty: Omit map entries holding a blank string or an empty list.
        skip_fields: Map keys that are never written.
        use_flags: Write ``true`` as a bare key line and omit ``false``.
        force_multiline: Keys whose string values are written as ``-- key`` blocks.

    Returns:
        Lines joined with newlines, without a trailing newline.
    """
    if options is None:
        options = SerializeOptions.build(
            ignore_empty=ignore_empty,
            skip_fields=skip_fields,
            use_flags=use_flags,
            force_multiline=force_multiline,
        )
    return Serializer(options).serialize(value, indent)


class Serializer:
    """Renders values with a fixed set of options.

    Nesting is handled with an explicit stack of render steps rather than
    recursion, so the depth of the input is bounded only by memory.
    """

    def __init__(self, options: SerializeOptions | None = None) -> None:
        self.options = options or SerializeOptions()

    def serialize(self, value: Any, indent: str = "") -> str:
        """Serialize a value starting at the given indentation."""
        stack: list[RenderStep] = [self._render(value, indent)]
        result: str | None = None

        while stack:
            try:
                child = stack[-1].send(result)
            except StopIteration as done:
                stack.pop()
                result = done.value
                continue
            stack.append(self._render(*child))
            result = None

        return result or ""

    def _render(self, value: Any, indent: str) -> RenderStep:
        if value is None:
            return ""
        if isinstance(value, list):
            return (yield from self._render_list(value, indent))
        if isinstance(value, dict):
            return (yield from self._render_map(value, indent))
        return format_scalar(value)

    def _render_list(self, items: list, indent: str) -> RenderStep:
        if self.options.ignore_empty and not items:
            return ""

        lines: list[str] = []
        for item in items:
            if is_container(item):
                content = yield item, indent + INDENT
                if content:
                    lines.append(f"{indent}- {content}")
            else:
                lines.append(f"{indent}- {format_scalar(item)}")
        return "\n".join(lines)

    def _render_map(self, mapping: dict, indent: str) -> RenderStep:
        options = self.options
        lines: list[str] = []

        for key, value in mapping.items():
            if key in options.skip_fields:
                continue
            if value is None:
                continue
            if options.ignore_empty and isinstance(value, (str, list)) and is_empty(value):
                continue

            if isinstance(value, list):
                # List items sit at the same indentation as their key
                content = yield value, indent
                if content:
                    lines.append(f"{indent}{key}:")
                    lines.append(content)
            elif isinstance(value, dict):
                content = yield value, indent + INDENT
                if content:
                    lines.append(f"{indent}{key}:")
                    lines.extend(_rewrite_nested_lines(content))
            elif options.use_flags and isinstance(value, bool):
                if value:
                    lines.append(f"{indent}{key}")
            elif isinstance(value, str) and key in options.force_multiline:
                marker = f"{indent}-- {key}"
                lines.append(marker)
                lines.extend(f"{indent}{line}" for line in value.split("\n"))
                lines.append(marker)
            else:
                lines.append(f"{indent}{key}: {format_scalar(value)}")

        return "\n".join(lines)


def _rewrite_nested_lines(content: str) -> list[str]:
    """Rewrite ``key: value`` to ``key=value`` inside a nested map.

    Only the first ``": "`` of a line is replaced and list item lines are kept
    as they are. Each enclosing map applies the rewrite again.
    """
    rewritten = []
    for line in content.split("\n"):
        if line.strip().startswith("- "):
            rewritten.append(line)
        else:
            rewritten.append(line.replace(": ", "=", 1))
    return rewritten
