"""Bounded, UI-safe evidence (locations and examples) attached to findings."""

import html
import re
from collections.abc import Iterable

from design_health.domain.constants import MAX_EXAMPLES
from design_health.domain.entities import Location, LocationType
from design_health.domain.records import Record, RecordReader

_TAG_RE = re.compile(r"<[^>]*>")
_ANGLE_RE = re.compile(r"[<>]")
_WHITESPACE_RE = re.compile(r"\s+")


class EvidenceBuilder:
    """
    Builds locations and examples for a finding's offending population.

    Every output is capped at MAX_EXAMPLES and preserves input order. An empty
    population yields an empty tuple; nothing is ever padded.
    """

    def __init__(self, collection_names: dict[str, str] | None = None) -> None:
        self._collection_names = dict(collection_names or {})

    def variable_locations(self, variables: Iterable[Record]) -> tuple[Location, ...]:
        """Variable name plus its collection's name, resolved via variableCollectionId."""
        out: list[Location] = []
        for variable in variables:
            if len(out) >= MAX_EXAMPLES:
                break
            collection_id = RecordReader.text(variable, "variableCollectionId")
            out.append(
                Location(
                    name=RecordReader.display_name(variable),
                    type=LocationType.VARIABLE,
                    collection=self._collection_names.get(collection_id) if collection_id else None,
                )
            )
        return tuple(out)

    def component_locations(self, components: Iterable[Record]) -> tuple[Location, ...]:
        """Component name plus node id."""
        out: list[Location] = []
        for component in components:
            if len(out) >= MAX_EXAMPLES:
                break
            out.append(
                Location(
                    name=RecordReader.display_name(component),
                    type=LocationType.COMPONENT,
                    node_id=RecordReader.node_id(component),
                )
            )
        return tuple(out)

    @staticmethod
    def names(records: Iterable[Record]) -> tuple[str, ...]:
        """Display names of the first MAX_EXAMPLES records."""
        return EvidenceBuilder.examples(RecordReader.display_name(r) for r in records)

    @staticmethod
    def examples(items: Iterable[str]) -> tuple[str, ...]:
        """First MAX_EXAMPLES strings."""
        out: list[str] = []
        for item in items:
            if len(out) >= MAX_EXAMPLES:
                break
            out.append(item)
        return tuple(out)

    @staticmethod
    def plain_text(text: str) -> str:
        """Strip markup so the text renders safely as plain text."""
        cleaned = text
        # Entities may be nested (&amp;lt;); unescape until stable.
        while (unescaped := html.unescape(cleaned)) != cleaned:
            cleaned = unescaped
        cleaned = _TAG_RE.sub(" ", cleaned)
        cleaned = _ANGLE_RE.sub(" ", cleaned)
        return _WHITESPACE_RE.sub(" ", cleaned).strip()
