"""
Pydantic schemas for the layout repair API.

Component trees are open JSON: only the page envelope is modelled,
nodes travel as plain dicts so the repair pass sees exactly what the
generator produced.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============== PROJECT ==============

class PageSchema(BaseModel):
    """One page of a generated project. Unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    components: List[Dict[str, Any]] = Field(
        default_factory=list, description="Ordered root components"
    )


class RepairProjectRequest(BaseModel):
    """Request to repair every page of a project."""

    pages: List[PageSchema] = Field(..., description="Ordered pages of the project")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "pages": [
                    {
                        "id": "home",
                        "components": [
                            {
                                "id": "main-nav",
                                "type": "nav-horizontal",
                                "props": {},
                                "children": [],
                            }
                        ],
                    }
                ]
            }
        }
    )


class RepairProjectResponse(BaseModel):
    """Repaired pages plus the run summary."""

    pages: List[Dict[str, Any]]
    changed: bool
    navbar_repairs: int
    footer_repairs: int
    navbars_restructured: int
    patches_applied: int


# ============== SINGLE COMPONENT ==============

class RepairComponentRequest(BaseModel):
    """Request to repair one root component tree."""

    component: Dict[str, Any] = Field(..., description="Root component node")


class RepairComponentResponse(BaseModel):
    """Repaired component tree."""

    component: Dict[str, Any]
    changed: bool
