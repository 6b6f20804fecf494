"""Formatting options for the serializer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class SerializeOptions:
    """Options that change the serializer's output.

    All options are independent of each other.
    """

    ignore_empty: bool = True  # Drop blank strings and empty lists
    skip_fields: frozenset[str] = field(default_factory=frozenset)  # Keys never written
    use_flags: bool = False  # true -> bare key line, false -> omitted
    force_multiline: frozenset[str] = field(default_factory=frozenset)  # Keys written as "-- key" blocks

    def __post_init__(self) -> None:
        """Normalize field collections to frozensets."""
        object.__setattr__(self, "skip_fields", frozenset(self.skip_fields))
        object.__setattr__(self, "force_multiline", frozenset(self.force_multiline))

    @classmethod
    def build(
        cls,
        ignore_empty: bool = True,
        skip_fields: Iterable[str] = (),
        use_flags: bool = False,
        force_multiline: Iterable[str] = (),
    ) -> SerializeOptions:
        """Create options from any iterables of field names."""
        return cls(
            ignore_empty=ignore_empty,
            skip_fields=frozenset(skip_fields),
            use_flags=use_flags,
            force_multiline=frozenset(force_multiline),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary."""
        return {
            "ignore_empty": self.ignore_empty,
            "skip_fields": sorted(self.skip_fields),
            "use_flags": self.use_flags,
            "force_multiline": sorted(self.force_multiline),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SerializeOptions:
        """Create options from dictionary."""
        return cls.build(
            ignore_empty=data.get("ignore_empty", True),
            skip_fields=data.get("skip_fields") or (),
            use_flags=data.get("use_flags", False),
            force_multiline=data.get("force_multiline") or (),
        )


DEFAULT_OPTIONS = SerializeOptions()
