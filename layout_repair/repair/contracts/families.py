"""
Rule Families - Which repair pass a rule belongs to.

The footer and navbar passes key off different root markers and do not
share a context flag, so each rule declares the family whose walk it
runs in.
"""

from enum import Enum


class RuleFamily(Enum):
    """Repair pass a rule belongs to."""

    FOOTER = "footer"
    """Rules applied while the walk is inside a footer section."""

    NAVBAR = "navbar"
    """Rules applied to nav-horizontal nodes."""
