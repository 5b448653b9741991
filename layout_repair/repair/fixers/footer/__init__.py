"""
Footer rules - Repairs applied while the walk is inside a footer.

All five rules write disjoint or idempotent keys, so they can run in
any order without changing the outcome.
"""

from .section_rule import FooterSectionRule, is_footer_section
from .grid_rule import FooterGridRule, is_footer_grid
from .column_rule import FooterColumnRule, is_footer_column
from .link_rule import FooterLinkRule, apply_link_contrast
from .text_link_rule import FooterTextLinkRule

__all__ = [
    "FooterSectionRule",
    "FooterGridRule",
    "FooterColumnRule",
    "FooterLinkRule",
    "FooterTextLinkRule",
    "apply_link_contrast",
    "is_footer_section",
    "is_footer_grid",
    "is_footer_column",
]
