"""Catalog service: the layers declared in a project's catalog"""

from typing import List

from django.db.models import F

from planui.core.layer_validator import LayerValidator
from planui.models.project_layer import ProjectLayer
from planui.schemas.project_layer_schema import ProjectLayerCreate
from planui.services.errors import NotFoundError, ReferentialError, ValidationError
from planui.services.project_service import ProjectService
from planui.utils.custom_logger import CustomLogger

logger = CustomLogger("planui.catalog_service")


class CatalogService:
    """Service class for project layer operations

    Layers are only ever added; they disappear with their project.
    """

    @staticmethod
    def create_project_layer(project_id: int, data: ProjectLayerCreate) -> ProjectLayer:
        """Add a layer to a project's catalog.

        Args:
            project_id: The owning project
            data: Layer attributes

        Returns:
            Created ProjectLayer instance

        Raises:
            NotFoundError: If the project or the file doesn't exist
            ValidationError: If the type or legend metadata is invalid
            ReferentialError: If the file belongs to another project
        """
        project = ProjectService.get_project(project_id)

        is_valid, error_message = LayerValidator.validate_layer_config(data)
        if not is_valid:
            raise ValidationError(error_message)

        file = None
        if data.file_id is not None:
            file = ProjectService.get_file(data.file_id)
            if file.project_id not in (None, project.id):
                raise ReferentialError(
                    f"File {file.id} belongs to project {file.project_id}, not {project.id}"
                )

        layer = ProjectLayer.objects.create(
            project=project,
            file=file,
            type=data.type,
            theme=data.theme,
            name=data.name.strip(),
            legend=data.legend,
            values=data.values,
            color=data.color,
            labels=data.labels,
            unit=data.unit,
            provenance=data.provenance,
            order=data.order,
            visible=data.visible,
            hidden=data.hidden,
            downloadable=data.downloadable,
        )

        logger.info(f"Created {layer.type} layer {layer.id} '{layer.name}' in project {project.id}")
        return layer

    @staticmethod
    def list_project_layers(project_id: int) -> List[ProjectLayer]:
        """A project's catalog by `order` (unordered layers last), then creation order.

        Raises:
            NotFoundError: If the project doesn't exist
        """
        project = ProjectService.get_project(project_id)
        return list(
            ProjectLayer.objects.filter(project=project).order_by(
                F("order").asc(nulls_last=True), "id"
            )
        )

    @staticmethod
    def get_project_layer(layer_id: int) -> ProjectLayer:
        """Get a layer with its file reference.

        Raises:
            NotFoundError: If the layer doesn't exist
        """
        try:
            return ProjectLayer.objects.select_related("file").get(id=layer_id)
        except ProjectLayer.DoesNotExist:
            raise NotFoundError("ProjectLayer", layer_id)
