"""Domain constants: category table, caps, and vocabularies used by the scorers."""

import math
from types import MappingProxyType
from typing import NamedTuple


class CategorySpec(NamedTuple):
    """Static description of one scoring category."""

    id: str
    label: str
    short_label: str
    weight: float


NAMING_SEMANTICS = CategorySpec("naming-semantics", "Naming & Semantics", "Naming", 0.25)
TOKEN_ARCHITECTURE = CategorySpec("token-architecture", "Token Architecture", "Tokens", 0.20)
COMPONENT_METADATA = CategorySpec("component-metadata", "Component Metadata", "Components", 0.20)
ACCESSIBILITY = CategorySpec("accessibility", "Accessibility", "Accessibility", 0.10)
CONSISTENCY = CategorySpec("consistency", "Consistency", "Consistency", 0.15)
COVERAGE = CategorySpec("coverage", "Coverage", "Coverage", 0.10)

# Report order of the six categories.
CATEGORY_ORDER: tuple[CategorySpec, ...] = (
    NAMING_SEMANTICS,
    TOKEN_ARCHITECTURE,
    COMPONENT_METADATA,
    ACCESSIBILITY,
    CONSISTENCY,
    COVERAGE,
)

CATEGORY_WEIGHTS: MappingProxyType[str, float] = MappingProxyType(
    {spec.id: spec.weight for spec in CATEGORY_ORDER}
)

MAX_SHORT_LABEL_LENGTH = 15

# Hard cap on locations and examples attached to any finding.
MAX_EXAMPLES = 5

SECTION_VARIABLES = "variables"
SECTION_COLLECTIONS = "collections"
SECTION_COMPONENTS = "components"
SECTION_STYLES = "styles"
SECTIONS: tuple[str, ...] = (
    SECTION_VARIABLES,
    SECTION_COLLECTIONS,
    SECTION_COMPONENTS,
    SECTION_STYLES,
)

# dataAvailability key carrying the human-readable reason per section.
SECTION_ERROR_KEYS: MappingProxyType[str, str] = MappingProxyType({
    SECTION_VARIABLES: "variableError",
    SECTION_COLLECTIONS: "collectionError",
    SECTION_COMPONENTS: "componentError",
    SECTION_STYLES: "styleError",
})

DEFAULT_UNAVAILABLE_REASONS: MappingProxyType[str, str] = MappingProxyType({
    SECTION_VARIABLES: "Enterprise plan or Desktop Bridge plugin required",
    SECTION_COLLECTIONS: "Enterprise plan or Desktop Bridge plugin required",
    SECTION_COMPONENTS: "component library could not be fetched",
    SECTION_STYLES: "styles could not be fetched",
})

ALIAS_TYPE = "VARIABLE_ALIAS"

TYPE_COLOR = "COLOR"
TYPE_FLOAT = "FLOAT"
TYPE_STRING = "STRING"
TYPE_BOOLEAN = "BOOLEAN"
ALL_VARIABLE_TYPES: tuple[str, ...] = (TYPE_COLOR, TYPE_FLOAT, TYPE_STRING, TYPE_BOOLEAN)

VISUAL_COLOR_WORDS: tuple[str, ...] = (
    "red", "blue", "green", "yellow", "orange", "purple", "pink", "black",
    "white", "gray", "grey", "cyan", "magenta", "teal", "indigo", "violet",
    "brown", "lime", "amber", "emerald", "rose", "sky", "slate", "zinc",
    "stone", "neutral",
)

VISUAL_VARIANT_VALUES: tuple[str, ...] = (
    "red", "blue", "green", "yellow", "orange", "purple", "pink", "black",
    "white", "gray", "grey", "cyan",
)

SEMANTIC_VARIANT_VALUES: tuple[str, ...] = (
    "primary", "secondary", "tertiary", "danger", "warning", "success", "info",
    "error", "disabled", "default", "accent", "muted", "destructive",
    "outline", "ghost", "link",
)

STATE_VARIANTS: tuple[str, ...] = (
    "disabled", "error", "focus", "hover", "active", "pressed", "selected",
)

SEMANTIC_COLOR_NAMES: tuple[str, ...] = ("error", "warning", "success", "info", "danger")

# (category name, regex) pairs; matched case-insensitively against component names.
CORE_COMPONENT_PATTERNS: tuple[tuple[str, str], ...] = (
    ("button", r"button"),
    ("input", r"input|text\s*field"),
    ("card", r"card"),
    ("modal/dialog", r"modal|dialog"),
    ("navigation", r"nav|navigation|menu|sidebar"),
    ("alert/toast", r"alert|toast|notification|snackbar"),
)

# (scale name, divisor) tried in order; first best ratio wins.
SIZE_SCALES: tuple[tuple[str, int], ...] = (
    ("4px base", 4),
    ("8px base", 8),
    ("2px base", 2),
)

WCAG_AA_RATIO = 4.5
MAX_CONTRAST_PAIRS = 50
MIN_QUALITY_DESC_LENGTH = 20


class WeightTable:
    """Invariant checks over the fixed category weight table."""

    @staticmethod
    def total() -> float:
        """Sum of all category weights."""
        return math.fsum(CATEGORY_WEIGHTS.values())

    @staticmethod
    def validate() -> None:
        """Raise ValueError if weights do not sum to 1.0 or a short label is too long."""
        if not math.isclose(WeightTable.total(), 1.0, abs_tol=1e-9):
            raise ValueError(
                f"Category weights must sum to 1.0, got {WeightTable.total()}")
        for spec in CATEGORY_ORDER:
            if len(spec.short_label) > MAX_SHORT_LABEL_LENGTH:
                raise ValueError(
                    f"Short label '{spec.short_label}' exceeds {MAX_SHORT_LABEL_LENGTH} chars")


WeightTable.validate()
