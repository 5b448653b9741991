"""
Report - Result of a project-level layout repair run.
"""

from dataclasses import dataclass, field
from typing import Dict

from .patches import PatchSet


@dataclass
class RepairReport:
    """
    Summary of one repair run over a project.

    Callers use ``changed`` as a "re-render / re-save" signal; the
    counters and patches are diagnostics, not a diff.
    """

    roots_visited: int = 0
    """Root components walked across all pages."""

    navbar_repairs: int = 0
    """Root components whose navbar pass changed something."""

    footer_repairs: int = 0
    """Root components whose footer pass changed something."""

    navbars_restructured: int = 0
    """Navbars recorded as restructured in the run's ledger."""

    patches: PatchSet = field(default_factory=lambda: PatchSet(source="layout"))
    """Every prop patch applied during the run."""

    duration_ms: float = 0.0
    """Wall-clock duration of the run."""

    @property
    def changed(self) -> bool:
        """Check if the run modified the project."""
        return self.navbar_repairs > 0 or self.footer_repairs > 0

    @property
    def total_repairs(self) -> int:
        """Navbar and footer repairs combined."""
        return self.navbar_repairs + self.footer_repairs

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "changed": self.changed,
            "roots_visited": self.roots_visited,
            "navbar_repairs": self.navbar_repairs,
            "footer_repairs": self.footer_repairs,
            "navbars_restructured": self.navbars_restructured,
            "patches_applied": len(self.patches),
            "duration_ms": round(self.duration_ms, 2),
        }

    def describe(self) -> str:
        """Generate human-readable summary."""
        status = "CHANGED" if self.changed else "UNCHANGED"
        return "\n".join([
            f"RepairReport: {status}",
            f"  Roots visited: {self.roots_visited}",
            f"  Navbar repairs: {self.navbar_repairs} "
            f"({self.navbars_restructured} restructured)",
            f"  Footer repairs: {self.footer_repairs}",
            f"  Patches applied: {len(self.patches)}",
            f"  Duration: {self.duration_ms:.1f}ms",
        ])
