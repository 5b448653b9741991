"""
Style Defaults - Predefined prop values and sentinels for repairs.

This module provides a centralized repository of the values the repair
rules write, and of the placeholder values they are allowed to
overwrite. Rules never hard-code a style value; they read it from here.

Usage:
    from layout_repair.repair.style_defaults import LayoutDefaults

    if LayoutDefaults.is_background_placeholder(props.get("backgroundColor")):
        ...
"""

from typing import Any, Dict

from .contracts.patches import is_empty_value


def _solid(value: str) -> Dict[str, str]:
    return {"type": "solid", "value": value}


def _padding(top: str, right: str, bottom: str, left: str) -> Dict[str, str]:
    return {"top": top, "right": right, "bottom": bottom, "left": left, "unit": "px"}


class LayoutDefaults:
    """
    Centralized prop values used by the footer and navbar rules.

    Organized by rule family with helpers for placeholder detection.
    """

    # =========================================================================
    # MARKERS
    # =========================================================================

    AI_GENERATED = "_aiGenerated"
    """Prop flag set on nodes created or normalized by the repair pass."""

    THEME_VARIABLE = "var(--"
    """Substring identifying a theme-variable reference."""

    # =========================================================================
    # FOOTER SECTION
    # =========================================================================

    FOOTER_BACKGROUND = "#0f172a"
    """Dark slate background the footer link colours are tuned for."""

    FOOTER_PADDING = _padding("64", "24", "32", "24")
    """Top-heavy padding block for the footer section."""

    BACKGROUND_PLACEHOLDERS = frozenset({"transparent", "none", "initial", "inherit"})
    """Literal background values that count as "not set"."""

    # =========================================================================
    # FOOTER GRID
    # =========================================================================

    GRID_COLUMNS = "repeat(4, 1fr)"
    """Four equal footer columns on desktop."""

    GRID_TWO_COLUMN_MISTAKE = "1fr 1fr"
    """Common generator output that squeezes four columns into two."""

    GRID_COLUMNS_TABLET = "repeat(2, 1fr)"
    GRID_COLUMNS_MOBILE = "1fr"

    GRID_GAP = "48px"
    GRID_MAX_WIDTH = "1200px"

    # =========================================================================
    # FOOTER COLUMNS
    # =========================================================================

    COLUMN_GAP = "12px"
    BRAND_COLUMN_BASIS = "35%"
    LINK_COLUMN_BASIS = "18%"
    COLUMN_MIN_WIDTH = "160px"

    # =========================================================================
    # FOOTER LINKS
    # =========================================================================

    LINK_COLOR = "rgba(255, 255, 255, 0.7)"
    """Translucent white, readable on FOOTER_BACKGROUND."""

    LINK_HOVER_COLOR = "#ffffff"
    LINK_FONT_SIZE = "14px"

    LINK_COLOR_PLACEHOLDERS = frozenset({
        "hsl(var(--primary))",
        "var(--primary)",
        "hsl(var(--foreground))",
        "var(--foreground)",
    })
    """Theme colours that resolve to dark text on the dark footer."""

    # =========================================================================
    # NAVBAR
    # =========================================================================

    NAV_TYPE = "nav-horizontal"
    """Node type the navbar rules apply to."""

    NAV_BACKGROUND = _solid("rgba(255, 255, 255, 0.85)")
    NAV_BACKDROP_FILTER = "blur(12px)"
    NAV_Z_INDEX = 50
    NAV_PADDING = _padding("16", "32", "16", "32")
    NAV_LINKS_GAP = "32px"

    NAV_BACKGROUND_KEYS = (
        "backgroundColor",
        "background",
        "backgroundGradient",
        "backgroundImage",
        "backdropFilter",
    )
    """Any of these present means the navbar already has a background."""

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def color_value(value: Any) -> Any:
        """Unwrap a {"type": ..., "value": ...} colour mapping."""
        if isinstance(value, dict):
            return value.get("value")
        return value

    @classmethod
    def is_theme_reference(cls, value: Any) -> bool:
        """Check if a value references a theme variable."""
        return isinstance(value, str) and cls.THEME_VARIABLE in value

    @classmethod
    def is_background_placeholder(cls, value: Any) -> bool:
        """
        Check if a background colour counts as "not set".

        Empty values, theme-variable references and transparent keywords
        are placeholders; any other concrete colour is deliberate.
        """
        inner = cls.color_value(value)
        if is_empty_value(inner):
            return True
        if not isinstance(inner, str):
            return False
        normalized = inner.strip().lower()
        return normalized in cls.BACKGROUND_PLACEHOLDERS or cls.is_theme_reference(normalized)

    @classmethod
    def is_link_color_placeholder(cls, value: Any) -> bool:
        """Check if a link colour is a primary/foreground theme placeholder."""
        inner = cls.color_value(value)
        if is_empty_value(inner):
            return True
        if not isinstance(inner, str):
            return False
        return inner.strip().lower().replace(" ", "") in cls.LINK_COLOR_PLACEHOLDERS

    @classmethod
    def footer_background(cls) -> Dict[str, str]:
        """Fresh solid background mapping for the footer section."""
        return _solid(cls.FOOTER_BACKGROUND)

    @classmethod
    def footer_padding(cls) -> Dict[str, str]:
        return dict(cls.FOOTER_PADDING)

    @classmethod
    def nav_background(cls) -> Dict[str, str]:
        return dict(cls.NAV_BACKGROUND)

    @classmethod
    def nav_padding(cls) -> Dict[str, str]:
        return dict(cls.NAV_PADDING)
