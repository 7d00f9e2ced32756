# Generated migration for the project / catalog / solution models

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


USER_GROUP_CHOICES = [("public", "PUBLIC"), ("planner", "PLANNER"), ("manager", "MANAGER")]


def membership_model(name, db_table, constraint_name):
    """the three solution <-> project layer link tables share one shape"""
    return migrations.CreateModel(
        name=name,
        fields=[
            (
                "id",
                models.BigAutoField(
                    auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                ),
            ),
            (
                "project_layer",
                models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, to="planui.projectlayer"
                ),
            ),
            (
                "solution",
                models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE, to="planui.solution"
                ),
            ),
        ],
        options={
            "db_table": db_table,
            "constraints": [
                models.UniqueConstraint(
                    fields=("solution", "project_layer"), name=constraint_name
                ),
            ],
        },
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True, null=True)),
                ("user_group", models.CharField(choices=USER_GROUP_CHOICES, max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="projects",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "project",
            },
        ),
        migrations.CreateModel(
            name="File",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "path",
                    models.CharField(help_text="Path relative to the storage root", max_length=1024),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "project",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="files",
                        to="planui.project",
                    ),
                ),
                (
                    "uploader",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "file",
            },
        ),
        migrations.AddField(
            model_name="project",
            name="planning_unit",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="planned_projects",
                to="planui.file",
            ),
        ),
        migrations.CreateModel(
            name="ProjectLayer",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("theme", "THEME"),
                            ("weight", "WEIGHT"),
                            ("include", "INCLUDE"),
                            ("exclude", "EXCLUDE"),
                        ],
                        max_length=20,
                    ),
                ),
                ("theme", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "name",
                    models.CharField(
                        help_text="Label used in the table of contents", max_length=255
                    ),
                ),
                (
                    "legend",
                    models.CharField(
                        blank=True,
                        choices=[("manual", "MANUAL"), ("continuous", "CONTINUOUS")],
                        max_length=20,
                        null=True,
                    ),
                ),
                ("values", models.JSONField(blank=True, null=True)),
                ("color", models.JSONField(blank=True, null=True)),
                ("labels", models.JSONField(blank=True, null=True)),
                ("unit", models.CharField(blank=True, max_length=64, null=True)),
                (
                    "provenance",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("regional", "REGIONAL"),
                            ("national", "NATIONAL"),
                            ("missing", "MISSING"),
                        ],
                        max_length=20,
                        null=True,
                    ),
                ),
                ("order", models.IntegerField(blank=True, null=True)),
                ("visible", models.BooleanField(default=True)),
                ("hidden", models.BooleanField(default=False)),
                ("downloadable", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "file",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="project_layers",
                        to="planui.file",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="layers",
                        to="planui.project",
                    ),
                ),
            ],
            options={
                "db_table": "project_layer",
                "indexes": [
                    models.Index(fields=["project", "type"], name="prjlayer_project_type_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Solution",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("author_name", models.CharField(max_length=255)),
                ("author_email", models.CharField(max_length=255)),
                ("user_group", models.CharField(choices=USER_GROUP_CHOICES, max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="solutions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "file",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="solutions",
                        to="planui.file",
                    ),
                ),
                (
                    "project",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="solutions",
                        to="planui.project",
                    ),
                ),
            ],
            options={
                "db_table": "solution",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("project", "title"), name="unique_solution_title"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="SolutionLayer",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "goal",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0.0),
                            django.core.validators.MaxValueValidator(1.0),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "project_layer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="solution_layers",
                        to="planui.projectlayer",
                    ),
                ),
                (
                    "solution",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="solution_layers",
                        to="planui.solution",
                    ),
                ),
            ],
            options={
                "db_table": "solution_layer",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("solution", "project_layer"), name="unique_solution_layer"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(goal__isnull=True)
                        | models.Q(goal__gte=0.0, goal__lte=1.0),
                        name="solution_layer_goal_range",
                    ),
                ],
            },
        ),
        membership_model("SolutionWeight", "solution_weights", "unique_solution_weight"),
        membership_model("SolutionInclude", "solution_includes", "unique_solution_include"),
        membership_model("SolutionExclude", "solution_excludes", "unique_solution_exclude"),
        migrations.AddField(
            model_name="solution",
            name="weights",
            field=models.ManyToManyField(
                related_name="weighted_solutions",
                through="planui.SolutionWeight",
                to="planui.projectlayer",
            ),
        ),
        migrations.AddField(
            model_name="solution",
            name="includes",
            field=models.ManyToManyField(
                related_name="included_solutions",
                through="planui.SolutionInclude",
                to="planui.projectlayer",
            ),
        ),
        migrations.AddField(
            model_name="solution",
            name="excludes",
            field=models.ManyToManyField(
                related_name="excluded_solutions",
                through="planui.SolutionExclude",
                to="planui.projectlayer",
            ),
        ),
    ]
