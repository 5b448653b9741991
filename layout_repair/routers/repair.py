"""
Router for the layout repair pass.

Endpoints:
- POST /layout-repair/project: Repair every page of a project
- POST /layout-repair/component: Repair a single root component tree

Called by the generation pipeline once a build finishes; the response
carries the repaired tree and a "changed" flag telling the caller
whether to re-render and re-save.
"""

import logging

from fastapi import APIRouter

from layout_repair.core.config import settings
from layout_repair.repair import (
    RestructureLedger,
    repair_footer_in_tree,
    repair_navbar_in_tree,
    repair_project_layout,
)
from layout_repair.schemas.repair import (
    RepairComponentRequest,
    RepairComponentResponse,
    RepairProjectRequest,
    RepairProjectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/layout-repair", tags=["layout-repair"])


@router.post(
    "/project",
    response_model=RepairProjectResponse,
    summary="Repair a generated project",
    description="""
    Runs the navbar and footer repairs over every root component of
    every page. Deliberate values set by the generator are never
    overwritten.
    """,
)
def repair_project(request: RepairProjectRequest):
    """Repair all pages of a project."""
    pages = [page.model_dump(exclude_unset=True) for page in request.pages]

    report = repair_project_layout(
        pages,
        footer=settings.FOOTER_REPAIR_ENABLED,
        navbar=settings.NAVBAR_REPAIR_ENABLED,
    )
    logger.info(
        f"Repaired project: {len(pages)} pages, changed={report.changed}, "
        f"{report.duration_ms:.1f}ms"
    )

    summary = report.to_dict()
    return RepairProjectResponse(
        pages=pages,
        changed=summary["changed"],
        navbar_repairs=summary["navbar_repairs"],
        footer_repairs=summary["footer_repairs"],
        navbars_restructured=summary["navbars_restructured"],
        patches_applied=summary["patches_applied"],
    )


@router.post(
    "/component",
    response_model=RepairComponentResponse,
    summary="Repair a single component tree",
)
def repair_component(request: RepairComponentRequest):
    """Repair one root component with a ledger scoped to this request."""
    component = request.component
    changed = False

    if settings.NAVBAR_REPAIR_ENABLED:
        if repair_navbar_in_tree(component, ledger=RestructureLedger()):
            changed = True
    if settings.FOOTER_REPAIR_ENABLED:
        if repair_footer_in_tree(component):
            changed = True

    return RepairComponentResponse(component=component, changed=changed)
