"""Project and File models: the planning workspace and the file references it owns"""

from enum import Enum

from django.contrib.auth.models import User
from django.db import models
from django.utils.text import slugify


class UserGroup(str, Enum):
    """Audience a project or solution is published to"""

    PUBLIC = "public"
    PLANNER = "planner"
    MANAGER = "manager"

    @classmethod
    def choices(cls):
        """django model definition needs an iterable for `choices`"""
        return [(key.value, key.name) for key in cls]


class Project(models.Model):
    """Top-level planning workspace holding a layer catalog and its solutions"""

    id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, null=True)
    owner = models.ForeignKey(User, on_delete=models.CASCADE, related_name="projects")
    user_group = models.CharField(max_length=20, choices=UserGroup.choices())
    # the file defining the project's spatial units; opaque to this backend
    planning_unit = models.ForeignKey(
        "File",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="planned_projects",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "project"

    def __str__(self):
        return f"{self.title} ({self.user_group})"

    @property
    def storage_dirname(self) -> str:
        """Name of the project's directory under the storage root"""
        return f"{slugify(self.title) or 'project'}-{self.id}"

    def to_json(self):
        """Return JSON representation"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "owner_id": self.owner_id,
            "user_group": self.user_group,
            "planning_unit_id": self.planning_unit_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class File(models.Model):
    """Reference to a physical file under the storage root; content is never managed here"""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    uploader = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="files"
    )
    project = models.ForeignKey(
        Project, on_delete=models.CASCADE, null=True, blank=True, related_name="files"
    )
    path = models.CharField(max_length=1024, help_text="Path relative to the storage root")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "file"

    def __str__(self):
        return f"{self.name} ({self.path})"

    def to_json(self):
        """Return JSON representation"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "uploader_id": self.uploader_id,
            "project_id": self.project_id,
            "path": self.path,
        }
