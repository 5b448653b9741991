"""
Runner - Entry points of the layout repair pass.

Per-tree functions repair one root component; per-project functions
walk every page's root components. All of them mutate the tree in
place and return a "should I re-render / re-save" signal.

Usage:
    from layout_repair.repair import repair_project_layout

    report = repair_project_layout(project["pages"])
    if report.changed:
        store.save(project)
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .contracts.nodes import ComponentNode, Page, page_components, raw_node_id
from .contracts.patches import PatchSet
from .contracts.report import RepairReport
from .fixers.rule_engine import RuleEngine, create_default_engine
from .ledger import RestructureLedger, reset_session_ledger, session_ledger
from .walker import FooterWalker, NavbarWalker


logger = logging.getLogger(__name__)


@dataclass
class _SessionCounters:
    """Counters for per-tree calls made since the last reset."""

    footer_repairs: int = 0
    navbar_repairs: int = 0


_counters = _SessionCounters()


def _iter_roots(pages: Sequence[Page]) -> Iterator[ComponentNode]:
    if not isinstance(pages, (list, tuple)):
        return
    for page in pages:
        yield from page_components(page)


# =============================================================================
# RESET HOOKS
# =============================================================================


def reset_footer_indices() -> None:
    """
    Reset footer bookkeeping before a new generation.

    The footer pass keeps no dedup state; only the session counter is
    cleared.
    """
    _counters.footer_repairs = 0
    logger.info("[Layout Repairs] Reset footer indices for new generation")


def reset_navbar_indices() -> None:
    """Start a fresh session ledger before a new generation."""
    reset_session_ledger()
    _counters.navbar_repairs = 0
    logger.info("[Layout Repairs] Reset navbar indices for new generation")


def session_counts() -> dict:
    """Per-tree repair counts since the last reset."""
    return {
        "footer_repairs": _counters.footer_repairs,
        "navbar_repairs": _counters.navbar_repairs,
        "navbars_processed": len(session_ledger()),
    }


# =============================================================================
# FOOTER
# =============================================================================


def repair_footer_in_tree(
    component: ComponentNode,
    engine: Optional[RuleEngine] = None,
    patch_set: Optional[PatchSet] = None,
) -> bool:
    """
    Repair footer sections anywhere under ``component``.

    Returns:
        True if anything changed
    """
    changed = FooterWalker(engine, patch_set).walk(component)
    if changed:
        _counters.footer_repairs += 1
    return changed


def repair_project_footer(pages: Sequence[Page]) -> bool:
    """
    Repair footers on every page of a project.

    Returns:
        True if any root component changed
    """
    walker = FooterWalker(create_default_engine())
    changed = False
    for component in _iter_roots(pages):
        if walker.walk(component):
            changed = True
    return changed


# =============================================================================
# NAVBAR
# =============================================================================


def repair_navbar_in_tree(
    component: ComponentNode,
    ledger: Optional[RestructureLedger] = None,
    engine: Optional[RuleEngine] = None,
    patch_set: Optional[PatchSet] = None,
) -> bool:
    """
    Repair nav-horizontal nodes under ``component``.

    Args:
        component: Root component, mutated in place
        ledger: Ledger of the caller's run; the session ledger when omitted

    Returns:
        True if anything changed
    """
    walker = NavbarWalker(
        engine,
        ledger=ledger if ledger is not None else session_ledger(),
        patch_set=patch_set,
    )
    changed = walker.walk(component)
    if changed:
        _counters.navbar_repairs += 1
    return changed


def repair_project_navbar(pages: Sequence[Page]) -> int:
    """
    Repair navbars on every page of a project.

    Uses a ledger created for this call only, so navbars of another
    project with the same ids are never treated as already processed.

    Returns:
        Number of root components that changed
    """
    walker = NavbarWalker(create_default_engine(), ledger=RestructureLedger())
    repairs = 0
    for component in _iter_roots(pages):
        if walker.walk(component):
            repairs += 1
    return repairs


# =============================================================================
# COMBINED PASS
# =============================================================================


def repair_component_layout(
    component: ComponentNode,
    ledger: Optional[RestructureLedger] = None,
) -> bool:
    """
    Navbar then footer repair for one streamed component.

    Returns:
        True if either pass changed something
    """
    navbar_changed = repair_navbar_in_tree(component, ledger)
    footer_changed = repair_footer_in_tree(component)
    if navbar_changed:
        logger.info(f"Navbar repaired: {raw_node_id(component)}")
    if footer_changed:
        logger.info(f"Footer repaired: {raw_node_id(component)}")
    return navbar_changed or footer_changed


def repair_project_layout(
    pages: Sequence[Page],
    footer: bool = True,
    navbar: bool = True,
) -> RepairReport:
    """
    Full repair pass over a project: navbar first, then footer, per root.

    Args:
        pages: Project pages, mutated in place
        footer: Run the footer pass
        navbar: Run the navbar pass

    Returns:
        RepairReport for the run
    """
    start = time.perf_counter()
    report = RepairReport()
    engine = create_default_engine()
    navbar_walker = NavbarWalker(engine, ledger=RestructureLedger(), patch_set=report.patches)
    footer_walker = FooterWalker(engine, patch_set=report.patches)

    for component in _iter_roots(pages):
        report.roots_visited += 1
        if navbar and navbar_walker.walk(component):
            report.navbar_repairs += 1
        if footer and footer_walker.walk(component):
            report.footer_repairs += 1

    report.navbars_restructured = navbar_walker.restructured
    report.duration_ms = (time.perf_counter() - start) * 1000

    if report.changed:
        logger.info(
            f"Layout repairs applied: {report.navbar_repairs} navbar, "
            f"{report.footer_repairs} footer across {report.roots_visited} components "
            f"({len(report.patches)} patches)"
        )
    return report
