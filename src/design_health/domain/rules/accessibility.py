"""Accessibility: contrast-capable color pairs, state variants, semantic colors."""

import re
from dataclasses import dataclass

from design_health.domain.constants import (
    ACCESSIBILITY,
    MAX_CONTRAST_PAIRS,
    SECTION_COMPONENTS,
    SECTION_VARIABLES,
    SEMANTIC_COLOR_NAMES,
    STATE_VARIANTS,
    TYPE_COLOR,
    WCAG_AA_RATIO,
)
from design_health.domain.entities import Finding
from design_health.domain.records import Record, RecordReader
from design_health.domain.rules import CategoryScorer, RuleContext, ScoreMath

BACKGROUND_RE = re.compile(r"background|bg|surface|canvas|base", re.IGNORECASE)
FOREGROUND_RE = re.compile(r"text|foreground|fg|on-|on\.|label|title|body|heading", re.IGNORECASE)


@dataclass(frozen=True)
class ColorToken:
    """First direct (non-alias) color value of a COLOR variable."""
    variable: Record
    name: str
    r: float
    g: float
    b: float

    @property
    def luminance(self) -> float:
        """WCAG relative luminance."""
        return (
            0.2126 * self._linearize(self.r)
            + 0.7152 * self._linearize(self.g)
            + 0.0722 * self._linearize(self.b)
        )

    @staticmethod
    def _linearize(channel: float) -> float:
        return channel / 12.92 if channel <= 0.04045 else ((channel + 0.055) / 1.055) ** 2.4

    def contrast_with(self, other: "ColorToken") -> float:
        """WCAG contrast ratio (>= 1)."""
        lighter = max(self.luminance, other.luminance)
        darker = min(self.luminance, other.luminance)
        return (lighter + 0.05) / (darker + 0.05)


class AccessibilityScorer(CategoryScorer):
    """Checks color contrast, state variant coverage, and semantic color tokens."""

    category = ACCESSIBILITY

    def evaluate(self, context: RuleContext) -> list[Finding]:
        return [
            self._color_contrast(context),
            self._state_variants(context),
            self._semantic_colors(context),
        ]

    @staticmethod
    def color_tokens(variables: tuple[Record, ...]) -> list[ColorToken]:
        """Direct color literals, one per COLOR variable, in input order."""
        tokens: list[ColorToken] = []
        for variable in variables:
            name = RecordReader.name(variable)
            if variable.get("resolvedType") != TYPE_COLOR or not name:
                continue
            for value in RecordReader.values_by_mode(variable):
                rgb = RecordReader.rgb(value)
                if rgb is not None:
                    tokens.append(ColorToken(variable, name, *rgb))
                    break
        return tokens

    @staticmethod
    def contrast_pairs(colors: list[ColorToken]) -> list[tuple[ColorToken, ColorToken]]:
        """(foreground, background) pairs by naming, falling back to a luminance split."""
        backgrounds = [c for c in colors if BACKGROUND_RE.search(c.name)]
        foregrounds = [c for c in colors if FOREGROUND_RE.search(c.name)]
        if backgrounds and foregrounds:
            pairs = [(fg, bg) for fg in foregrounds for bg in backgrounds]
        else:
            light = [c for c in colors if c.luminance > 0.5]
            dark = [c for c in colors if c.luminance <= 0.5]
            pairs = [(d, li) for d in dark for li in light]
        return pairs[:MAX_CONTRAST_PAIRS]

    def _color_contrast(self, context: RuleContext) -> Finding:
        finding_id, label = "a11y-color-contrast", "Color contrast"
        colors = self.color_tokens(context.snapshot.variables)
        if self.withheld(context, len(colors), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if len(colors) < 2:
            return self.judged(
                finding_id, label, 100,
                "No direct color values to evaluate." if not colors
                else "Only one color found; need at least two to check contrast.",
            )

        pairs = self.contrast_pairs(colors)
        if not pairs:
            return self.judged(
                finding_id, label, 50,
                "Could not identify foreground/background color pairs to check contrast.")

        failing: list[tuple[ColorToken, ColorToken, float]] = []
        for fg, bg in pairs:
            ratio = fg.contrast_with(bg)
            if ratio < WCAG_AA_RATIO:
                failing.append((fg, bg, ratio))
        passing = len(pairs) - len(failing)
        # Each failing foreground is listed once, in first-failure order.
        failing_foregrounds = list({id(fg): fg.variable for fg, _bg, _r in failing}.values())
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(passing, len(pairs)),
            f"{passing} of {len(pairs)} color pairs meet the WCAG AA contrast ratio "
            f"({WCAG_AA_RATIO}:1).",
            locations=context.evidence.variable_locations(failing_foregrounds),
            examples=[f"{fg.name} / {bg.name} ({ratio:.1f}:1)" for fg, bg, ratio in failing],
        )

    def _state_variants(self, context: RuleContext) -> Finding:
        finding_id, label = "a11y-state-variants", "State variants"
        names = [n.lower() for n in (RecordReader.name(c) for c in context.snapshot.components) if n]
        if self.withheld(context, len(names), SECTION_COMPONENTS):
            return self.unavailable(finding_id, label, context, SECTION_COMPONENTS)
        if not names:
            return self.judged(finding_id, label, 100, "No components to evaluate.")

        found = [state for state in STATE_VARIANTS if any(state in n for n in names)]
        missing = [state for state in STATE_VARIANTS if state not in found]
        details = (
            f"Found {len(found)} of {len(STATE_VARIANTS)} state variants. "
            f"Missing: {', '.join(missing)}."
            if missing
            else f"All {len(STATE_VARIANTS)} state variants are represented."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(found), len(STATE_VARIANTS)), details,
            examples=[f"missing {state}" for state in missing],
        )

    def _semantic_colors(self, context: RuleContext) -> Finding:
        finding_id, label = "a11y-semantic-colors", "Semantic color naming"
        color_vars = [
            v for v in context.snapshot.variables
            if v.get("resolvedType") == TYPE_COLOR and RecordReader.name(v)
        ]
        if self.withheld(context, len(color_vars), SECTION_VARIABLES):
            return self.unavailable(finding_id, label, context, SECTION_VARIABLES)
        if not color_vars:
            return self.judged(finding_id, label, 0, "No color variables found.")

        found: list[str] = []
        missing: list[str] = []
        examples: list[str] = []
        for semantic in SEMANTIC_COLOR_NAMES:
            matching = [
                RecordReader.name(v) or "" for v in color_vars
                if semantic in (RecordReader.name(v) or "").lower()
            ]
            if matching:
                found.append(semantic)
                examples.append(f"{semantic}: {', '.join(matching[:2])}")
            else:
                missing.append(semantic)
        details = (
            f"Found {len(found)} of {len(SEMANTIC_COLOR_NAMES)} semantic color categories. "
            f"Missing: {', '.join(missing)}."
            if missing
            else "All semantic color categories (error, warning, success, info, danger) are present."
        )
        return self.judged(
            finding_id, label, ScoreMath.ratio_score(len(found), len(SEMANTIC_COLOR_NAMES)),
            details, examples=examples,
        )
