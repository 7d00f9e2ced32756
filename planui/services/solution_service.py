"""Solution service for business logic

Turns a solution request into a Solution row, its weight/include/exclude
selections and its per-theme goal overrides.
"""

from typing import Iterable, List, Optional, Union

from django.db import IntegrityError, transaction

from planui.core.input_validator import duplicates, require_choice, require_text, validate_goal
from planui.models.project import Project, UserGroup
from planui.models.project_layer import ProjectLayer, LayerType
from planui.models.solution import Solution, SolutionLayer, MembershipSet
from planui.schemas.solution_schema import SolutionCreate
from planui.services.errors import NotFoundError, ReferentialError, ValidationError
from planui.services.project_service import ProjectService
from planui.utils.custom_logger import CustomLogger

logger = CustomLogger("planui.solution_service")


class SolutionService:
    """Service class for solution-related operations"""

    @staticmethod
    def get_solution(solution_id: int) -> Solution:
        """Get a solution by ID.

        Raises:
            NotFoundError: If the solution doesn't exist
        """
        try:
            return Solution.objects.select_related("project").get(id=solution_id)
        except Solution.DoesNotExist:
            raise NotFoundError("Solution", solution_id)

    @staticmethod
    def list_solutions(project_id: int) -> List[Solution]:
        """List a project's solutions in creation order.

        Raises:
            NotFoundError: If the project doesn't exist
        """
        project = ProjectService.get_project(project_id)
        return list(
            Solution.objects.filter(project=project)
            .select_related("author")
            .prefetch_related("solution_layers")
            .order_by("id")
        )

    @staticmethod
    def list_solution_layers(solution_id: int) -> List[SolutionLayer]:
        """List a solution's theme overrides in creation order.

        Raises:
            NotFoundError: If the solution doesn't exist
        """
        solution = SolutionService.get_solution(solution_id)
        return list(solution.solution_layers.order_by("id"))

    @staticmethod
    def _resolve_layers(
        project: Project, layer_ids: Iterable[int], layer_type: LayerType, context: str
    ) -> List[ProjectLayer]:
        """Load the distinct layers named by layer_ids, all of which must be
        `layer_type` layers of `project`.

        Raises:
            ReferentialError: If an id is unknown, in another project or of another type
        """
        unique_ids = set(layer_ids)
        if not unique_ids:
            return []

        layers = {layer.id: layer for layer in ProjectLayer.objects.filter(id__in=unique_ids)}
        missing = sorted(unique_ids - set(layers))
        if missing:
            raise ReferentialError(f"Unknown project layers in {context}: {missing}")

        for layer_id in sorted(unique_ids):
            layer = layers[layer_id]
            if layer.project_id != project.id:
                raise ReferentialError(
                    f"Project layer {layer_id} belongs to project {layer.project_id}, not {project.id}"
                )
            if layer.type != layer_type.value:
                raise ReferentialError(
                    f"Project layer {layer_id} is a {layer.type} layer and cannot be used in {context}"
                )

        return [layers[layer_id] for layer_id in sorted(unique_ids)]

    @staticmethod
    def create_solution(data: SolutionCreate) -> Solution:
        """Create a solution with its membership sets and theme overrides, all or nothing.

        Args:
            data: Solution creation data; author_id is the authenticated actor

        Returns:
            Created Solution instance

        Raises:
            ValidationError: If a field is invalid, a theme repeats, or the title is taken
            NotFoundError: If the project, the author or the result file doesn't exist
            ReferentialError: If a layer id is unknown, in another project or of the wrong type
        """
        title = require_text(data.title, "title")
        author_name = require_text(data.author_name, "author_name")
        author_email = require_text(data.author_email, "author_email")
        require_choice(data.user_group, UserGroup, "user_group")
        for theme in data.themes:
            validate_goal(theme.goal)

        repeated = duplicates(theme.project_layer_id for theme in data.themes)
        if repeated:
            raise ValidationError(f"Theme layers appear more than once: {repeated}")

        project = ProjectService.get_project(data.project_id)
        actor = ProjectService.get_user(data.author_id)

        file = None
        if data.file_id is not None:
            file = ProjectService.get_file(data.file_id)
            if file.project_id not in (None, project.id):
                raise ReferentialError(
                    f"File {file.id} belongs to project {file.project_id}, not {project.id}"
                )

        memberships = {
            set_name: SolutionService._resolve_layers(
                project, ids, set_name.layer_type, set_name.value
            )
            for set_name, ids in (
                (MembershipSet.WEIGHTS, data.weight_ids),
                (MembershipSet.INCLUDES, data.include_ids),
                (MembershipSet.EXCLUDES, data.exclude_ids),
            )
        }
        SolutionService._resolve_layers(
            project,
            [theme.project_layer_id for theme in data.themes],
            LayerType.THEME,
            "themes",
        )

        if Solution.objects.filter(project=project, title=title).exists():
            raise ValidationError(f"Project {project.id} already has a solution titled '{title}'")

        try:
            with transaction.atomic():
                solution = Solution.objects.create(
                    project=project,
                    file=file,
                    author=actor,
                    title=title,
                    description=data.description,
                    author_name=author_name,
                    author_email=author_email,
                    user_group=data.user_group,
                )
                for set_name, layers in memberships.items():
                    getattr(solution, set_name.value).set(layers)

                for theme in data.themes:
                    SolutionLayer.objects.create(
                        solution=solution,
                        project_layer_id=theme.project_layer_id,
                        goal=theme.goal,
                    )
        except IntegrityError:
            raise ValidationError(f"Project {project.id} already has a solution titled '{title}'")

        logger.info(
            f"Created solution {solution.id} in project {project.id} with "
            f"{len(data.themes)} theme overrides"
        )
        return solution

    @staticmethod
    def replace_membership(
        solution_id: int, set_name: Union[MembershipSet, str], layer_ids: Iterable[int]
    ) -> List[int]:
        """Overwrite one of the solution's membership sets.

        Args:
            solution_id: The solution
            set_name: weights, includes or excludes
            layer_ids: The new members; duplicates collapse and order is irrelevant

        Returns:
            The sorted member ids now stored

        Raises:
            ValidationError: If set_name is not a membership set
            NotFoundError: If the solution doesn't exist
            ReferentialError: If a layer id is unknown, in another project or of the wrong type
        """
        try:
            membership = MembershipSet(set_name)
        except ValueError:
            allowed = ", ".join(choice.value for choice in MembershipSet)
            raise ValidationError(f"Invalid membership set '{set_name}'. Must be one of: {allowed}")

        solution = SolutionService.get_solution(solution_id)
        layers = SolutionService._resolve_layers(
            solution.project, layer_ids, membership.layer_type, membership.value
        )

        with transaction.atomic():
            getattr(solution, membership.value).set(layers)

        logger.info(f"Replaced {membership.value} of solution {solution.id} with {len(layers)} layers")
        return [layer.id for layer in layers]

    @staticmethod
    def create_solution_layer(
        solution_id: int, project_layer_id: int, goal: Optional[float]
    ) -> SolutionLayer:
        """Add one theme goal override to an existing solution.

        Raises:
            ValidationError: If the goal is out of range or the theme already has an override
            NotFoundError: If the solution doesn't exist
            ReferentialError: If the layer is unknown, in another project or not a theme
        """
        validate_goal(goal)
        solution = SolutionService.get_solution(solution_id)
        (layer,) = SolutionService._resolve_layers(
            solution.project, [project_layer_id], LayerType.THEME, "themes"
        )

        if SolutionLayer.objects.filter(solution=solution, project_layer=layer).exists():
            raise ValidationError(
                f"Solution {solution.id} already has an override for theme layer {layer.id}"
            )

        try:
            with transaction.atomic():
                solution_layer = SolutionLayer.objects.create(
                    solution=solution, project_layer=layer, goal=goal
                )
        except IntegrityError:
            raise ValidationError(
                f"Solution {solution.id} already has an override for theme layer {layer.id}"
            )

        logger.info(f"Added override for theme layer {layer.id} to solution {solution.id}")
        return solution_layer
