"""
Analyzers - Pure classification of component tree nodes.
"""

from .navbar_classifier import (
    ClassifierStrategy,
    NavbarClassification,
    LOGO_CHAIN,
    MENU_BUTTON_CHAIN,
    classify_navbar_children,
    find_links_container,
    find_logo,
    find_menu_button,
    is_links_container,
    run_chain,
)

__all__ = [
    "ClassifierStrategy",
    "NavbarClassification",
    "LOGO_CHAIN",
    "MENU_BUTTON_CHAIN",
    "classify_navbar_children",
    "find_links_container",
    "find_logo",
    "find_menu_button",
    "is_links_container",
    "run_chain",
]
