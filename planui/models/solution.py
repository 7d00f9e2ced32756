"""Solution models: a parameterization of a project's catalog for the planning engine"""

from enum import Enum

from django.contrib.auth.models import User
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from planui.models.project import Project, File, UserGroup
from planui.models.project_layer import ProjectLayer, LayerType


class MembershipSet(str, Enum):
    """The three layer selections a solution carries, with the layer type each accepts"""

    WEIGHTS = "weights"
    INCLUDES = "includes"
    EXCLUDES = "excludes"

    @property
    def layer_type(self) -> LayerType:
        """the ProjectLayer type allowed inside this set"""
        return {
            MembershipSet.WEIGHTS: LayerType.WEIGHT,
            MembershipSet.INCLUDES: LayerType.INCLUDE,
            MembershipSet.EXCLUDES: LayerType.EXCLUDE,
        }[self]


class Solution(models.Model):
    """Named, authored selection of weight/include/exclude layers plus per-theme goals"""

    id = models.BigAutoField(primary_key=True)
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name="solutions")
    # output raster computed by the planning engine, attached once available
    file = models.ForeignKey(
        File, on_delete=models.SET_NULL, null=True, blank=True, related_name="solutions"
    )
    author = models.ForeignKey(User, on_delete=models.CASCADE, related_name="solutions")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    author_name = models.CharField(max_length=255)
    author_email = models.CharField(max_length=255)
    user_group = models.CharField(max_length=20, choices=UserGroup.choices())

    weights = models.ManyToManyField(
        ProjectLayer, through="SolutionWeight", related_name="weighted_solutions"
    )
    includes = models.ManyToManyField(
        ProjectLayer, through="SolutionInclude", related_name="included_solutions"
    )
    excludes = models.ManyToManyField(
        ProjectLayer, through="SolutionExclude", related_name="excluded_solutions"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "solution"
        constraints = [
            models.UniqueConstraint(fields=["project", "title"], name="unique_solution_title"),
        ]

    def __str__(self):
        return f"{self.title} ({self.user_group})"

    def membership_ids(self, set_name: MembershipSet) -> list:
        """sorted project layer ids in one of the membership sets"""
        related = getattr(self, set_name.value)
        return sorted(related.values_list("id", flat=True))

    def to_json(self):
        """Return JSON representation, including theme overrides and memberships"""
        return {
            "id": self.id,
            "project_id": self.project_id,
            "file_id": self.file_id,
            "author_id": self.author_id,
            "title": self.title,
            "description": self.description,
            "author_name": self.author_name,
            "author_email": self.author_email,
            "user_group": self.user_group,
            "weight_ids": self.membership_ids(MembershipSet.WEIGHTS),
            "include_ids": self.membership_ids(MembershipSet.INCLUDES),
            "exclude_ids": self.membership_ids(MembershipSet.EXCLUDES),
            "themes": [
                solution_layer.to_json()
                for solution_layer in self.solution_layers.order_by("id")
            ],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class SolutionLayer(models.Model):
    """Goal override binding a solution to one theme layer of its project"""

    id = models.BigAutoField(primary_key=True)
    solution = models.ForeignKey(
        Solution, on_delete=models.CASCADE, related_name="solution_layers"
    )
    project_layer = models.ForeignKey(
        ProjectLayer, on_delete=models.CASCADE, related_name="solution_layers"
    )
    goal = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0.0), MaxValueValidator(1.0)],
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "solution_layer"
        constraints = [
            models.UniqueConstraint(
                fields=["solution", "project_layer"], name="unique_solution_layer"
            ),
            models.CheckConstraint(
                condition=models.Q(goal__isnull=True)
                | models.Q(goal__gte=0.0, goal__lte=1.0),
                name="solution_layer_goal_range",
            ),
        ]

    def __str__(self):
        return f"{self.solution_id}:{self.project_layer_id} goal={self.goal}"

    def to_json(self):
        """Return JSON representation"""
        return {
            "id": self.id,
            "solution_id": self.solution_id,
            "project_layer_id": self.project_layer_id,
            "goal": self.goal,
        }


class SolutionWeight(models.Model):
    """weight layer selected by a solution"""

    solution = models.ForeignKey(Solution, on_delete=models.CASCADE)
    project_layer = models.ForeignKey(ProjectLayer, on_delete=models.CASCADE)

    class Meta:
        db_table = "solution_weights"
        constraints = [
            models.UniqueConstraint(
                fields=["solution", "project_layer"], name="unique_solution_weight"
            ),
        ]


class SolutionInclude(models.Model):
    """include layer selected by a solution"""

    solution = models.ForeignKey(Solution, on_delete=models.CASCADE)
    project_layer = models.ForeignKey(ProjectLayer, on_delete=models.CASCADE)

    class Meta:
        db_table = "solution_includes"
        constraints = [
            models.UniqueConstraint(
                fields=["solution", "project_layer"], name="unique_solution_include"
            ),
        ]


class SolutionExclude(models.Model):
    """exclude layer selected by a solution"""

    solution = models.ForeignKey(Solution, on_delete=models.CASCADE)
    project_layer = models.ForeignKey(ProjectLayer, on_delete=models.CASCADE)

    class Meta:
        db_table = "solution_excludes"
        constraints = [
            models.UniqueConstraint(
                fields=["solution", "project_layer"], name="unique_solution_exclude"
            ),
        ]
