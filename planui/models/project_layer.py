"""ProjectLayer model: one entry in a project's layer catalog"""

from enum import Enum

from django.db import models

from planui.models.project import Project, File


class LayerType(str, Enum):
    """How a layer may be used by a solution"""

    THEME = "theme"
    WEIGHT = "weight"
    INCLUDE = "include"
    EXCLUDE = "exclude"

    @classmethod
    def choices(cls):
        """django model definition needs an iterable for `choices`"""
        return [(key.value, key.name) for key in cls]


class LegendType(str, Enum):
    """Legend rendering for a layer"""

    MANUAL = "manual"
    CONTINUOUS = "continuous"

    @classmethod
    def choices(cls):
        """django model definition needs an iterable for `choices`"""
        return [(key.value, key.name) for key in cls]


class Provenance(str, Enum):
    """Where the layer's data comes from"""

    REGIONAL = "regional"
    NATIONAL = "national"
    MISSING = "missing"

    @classmethod
    def choices(cls):
        """django model definition needs an iterable for `choices`"""
        return [(key.value, key.name) for key in cls]


class ProjectLayer(models.Model):
    """A declared layer in a project's catalog; its type never changes after creation"""

    id = models.BigAutoField(primary_key=True)
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="layers")
    file = models.ForeignKey(
        File, on_delete=models.SET_NULL, null=True, blank=True, related_name="project_layers"
    )
    type = models.CharField(max_length=20, choices=LayerType.choices())
    theme = models.CharField(max_length=255, blank=True, null=True)  # "Species at Risk (ECCC)"
    name = models.CharField(max_length=255, help_text="Label used in the table of contents")
    legend = models.CharField(max_length=20, choices=LegendType.choices(), null=True, blank=True)
    values = models.JSONField(null=True, blank=True)  # ["0", "1"]
    color = models.JSONField(null=True, blank=True)  # ["#00000000", "#b3de69"]
    labels = models.JSONField(null=True, blank=True)  # ["absence", "presence"]
    unit = models.CharField(max_length=64, null=True, blank=True)  # "km2"
    provenance = models.CharField(
        max_length=20, choices=Provenance.choices(), null=True, blank=True
    )
    order = models.IntegerField(null=True, blank=True)
    visible = models.BooleanField(default=True)
    hidden = models.BooleanField(default=False)
    downloadable = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "project_layer"
        indexes = [
            models.Index(fields=["project", "type"], name="prjlayer_project_type_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"

    def to_json(self):
        """Return JSON representation"""
        return {
            "id": self.id,
            "project_id": self.project_id,
            "file_id": self.file_id,
            "type": self.type,
            "theme": self.theme,
            "name": self.name,
            "legend": self.legend,
            "values": self.values,
            "color": self.color,
            "labels": self.labels,
            "unit": self.unit,
            "provenance": self.provenance,
            "order": self.order,
            "visible": self.visible,
            "hidden": self.hidden,
            "downloadable": self.downloadable,
        }
