from typing import List, Optional

from ninja import Schema


class SolutionThemeInput(Schema):
    """Goal override for one theme layer"""

    project_layer_id: int
    goal: Optional[float] = None


class SolutionCreate(Schema):
    """Schema for creating a solution together with its layer selections"""

    project_id: int
    author_id: int
    title: str
    description: Optional[str] = None
    author_name: str
    author_email: str
    user_group: str
    file_id: Optional[int] = None

    weight_ids: List[int] = []
    include_ids: List[int] = []
    exclude_ids: List[int] = []
    themes: List[SolutionThemeInput] = []
