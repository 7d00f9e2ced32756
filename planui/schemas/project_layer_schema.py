from typing import List, Optional

from ninja import Schema


class ProjectLayerCreate(Schema):
    """Schema for adding a layer to a project's catalog"""

    file_id: Optional[int] = None
    type: str  # theme, weight, include, exclude
    theme: Optional[str] = None
    name: str
    legend: Optional[str] = None  # manual, continuous

    # manual legends: one entry per legend class
    values: Optional[List[str]] = None
    color: Optional[List[str]] = None
    labels: Optional[List[str]] = None

    # continuous legends
    unit: Optional[str] = None

    provenance: Optional[str] = None
    order: Optional[int] = None
    visible: bool = True
    hidden: bool = False
    downloadable: bool = True
