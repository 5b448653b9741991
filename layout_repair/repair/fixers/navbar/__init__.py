"""
Navbar rules - Styling enforcement and structural regrouping for
nav-horizontal nodes.
"""

from .style_rule import NavbarStyleRule
from .restructure import NavbarRestructurer, build_links_container, links_container_id

__all__ = [
    "NavbarStyleRule",
    "NavbarRestructurer",
    "build_links_container",
    "links_container_id",
]
