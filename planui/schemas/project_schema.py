from typing import Optional

from ninja import Schema


class ProjectCreate(Schema):
    """Schema for creating a project"""

    owner_id: int
    title: str
    description: Optional[str] = None
    user_group: str
    planning_unit_file_id: Optional[int] = None


class FileCreate(Schema):
    """Schema for registering an uploaded file against a project"""

    name: str
    description: str = ""
    uploader_id: Optional[int] = None
    project_id: int
    path: str  # relative to the storage root
