"""
NavbarClassifier - Pick the logo and menu button out of navbar children.

Each classifier is an ordered chain of strategies. A strategy pairs a
per-child predicate with an extraction window (the first N children,
or all of them); the chain stops at the first strategy that extracts a
child. New fallbacks are added by appending a strategy, not by growing
branching logic.

Usage:
    result = classify_navbar_children(nav["children"])
    if result.logo is not None:
        ...
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from ..contracts.nodes import ComponentNode, icon_name, node_id, node_type

ChildPredicate = Callable[[ComponentNode], bool]


@dataclass(frozen=True)
class ClassifierStrategy:
    """One fallback step of a classifier chain."""

    name: str
    """Strategy name, reported with the match."""

    predicate: ChildPredicate
    """Test applied to each candidate child."""

    window: Optional[int] = None
    """Only the first ``window`` children are considered (None = all)."""

    def extract(
        self,
        children: Sequence[ComponentNode],
        exclude: Sequence[ComponentNode] = (),
    ) -> Optional[ComponentNode]:
        """First child in the window matching the predicate, or None."""
        candidates = children if self.window is None else children[: self.window]
        for child in candidates:
            if any(child is other for other in exclude):
                continue
            if self.predicate(child):
                return child
        return None


def run_chain(
    chain: Sequence[ClassifierStrategy],
    children: Sequence[ComponentNode],
    exclude: Sequence[ComponentNode] = (),
) -> Tuple[Optional[ComponentNode], Optional[str]]:
    """
    Evaluate a strategy chain in order, short-circuiting on first match.

    Returns:
        (matched child, strategy name), or (None, None)
    """
    for strategy in chain:
        match = strategy.extract(children, exclude)
        if match is not None:
            return match, strategy.name
    return None, None


# =============================================================================
# LOGO CHAIN
# =============================================================================


def _id_has_logo_keyword(child: ComponentNode) -> bool:
    child_id = node_id(child)
    return "logo" in child_id or "brand" in child_id


def _is_heading(child: ComponentNode) -> bool:
    return node_type(child) == "heading"


def _is_image(child: ComponentNode) -> bool:
    return node_type(child) == "image"


def _id_has_name_keyword(child: ComponentNode) -> bool:
    child_id = node_id(child)
    if "title" in child_id and "nav" in child_id:
        return True
    return any(keyword in child_id for keyword in ("name", "store", "company"))


LOGO_CHAIN: Tuple[ClassifierStrategy, ...] = (
    ClassifierStrategy("id-logo-or-brand", _id_has_logo_keyword),
    ClassifierStrategy("leading-heading", _is_heading, window=2),
    ClassifierStrategy("leading-image", _is_image, window=1),
    ClassifierStrategy("id-site-name", _id_has_name_keyword),
)

# =============================================================================
# MENU BUTTON CHAIN
# =============================================================================

MENU_ICON_NAMES = frozenset({"menu", "hamburger", "alignjustify"})
MENU_ID_KEYWORDS = ("mobile", "hamburger", "menu-toggle", "menu-button")


def _has_menu_icon(child: ComponentNode) -> bool:
    return icon_name(child) in MENU_ICON_NAMES


def _id_has_menu_keyword(child: ComponentNode) -> bool:
    child_id = node_id(child)
    return any(keyword in child_id for keyword in MENU_ID_KEYWORDS)


MENU_BUTTON_CHAIN: Tuple[ClassifierStrategy, ...] = (
    ClassifierStrategy("menu-icon", _has_menu_icon),
    ClassifierStrategy("id-menu-toggle", _id_has_menu_keyword),
)

# =============================================================================
# LINKS CONTAINER DETECTION
# =============================================================================

# Kept strict: a loose match ("nav" anywhere) would treat ordinary nav items
# as an existing container and skip the restructure.
CONTAINER_EXACT_IDS = frozenset({"nav-links"})
CONTAINER_ID_PREFIXES = ("nav-links-", "link-div")
CONTAINER_DIV_IDS = frozenset({"nav-right", "links-container"})


def is_links_container(child: ComponentNode) -> bool:
    """Check if a navbar child is an already-grouped nav-links container."""
    child_id = node_id(child)
    if not child_id:
        return False
    if child_id in CONTAINER_EXACT_IDS or child_id.startswith(CONTAINER_ID_PREFIXES):
        return True
    return node_type(child) == "div" and child_id in CONTAINER_DIV_IDS


def find_links_container(children: Sequence[ComponentNode]) -> Optional[ComponentNode]:
    """First child recognised as a nav-links container, or None."""
    for child in children:
        if is_links_container(child):
            return child
    return None


# =============================================================================
# CLASSIFICATION
# =============================================================================


@dataclass
class NavbarClassification:
    """Result of classifying a navbar's flat children."""

    logo: Optional[ComponentNode] = None
    logo_strategy: Optional[str] = None
    menu_button: Optional[ComponentNode] = None
    menu_strategy: Optional[str] = None
    nav_items: List[ComponentNode] = field(default_factory=list)
    """Remaining children, in their original relative order."""


def find_logo(children: Sequence[ComponentNode]) -> Optional[ComponentNode]:
    """Logo candidate among navbar children."""
    return run_chain(LOGO_CHAIN, children)[0]


def find_menu_button(
    children: Sequence[ComponentNode],
    exclude: Sequence[ComponentNode] = (),
) -> Optional[ComponentNode]:
    """Menu-button candidate among navbar children."""
    return run_chain(MENU_BUTTON_CHAIN, children, exclude)[0]


def classify_navbar_children(children: Sequence[ComponentNode]) -> NavbarClassification:
    """
    Split navbar children into logo, menu button and nav items.

    The menu button is searched among the children that are not the
    logo, so one child never fills both slots.
    """
    logo, logo_strategy = run_chain(LOGO_CHAIN, children)
    claimed = [logo] if logo is not None else []
    menu_button, menu_strategy = run_chain(MENU_BUTTON_CHAIN, children, claimed)
    if menu_button is not None:
        claimed.append(menu_button)

    nav_items = [
        child for child in children
        if not any(child is other for other in claimed)
    ]
    return NavbarClassification(
        logo=logo,
        logo_strategy=logo_strategy,
        menu_button=menu_button,
        menu_strategy=menu_strategy,
        nav_items=nav_items,
    )
