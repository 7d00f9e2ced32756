"""Project service for business logic

Projects and the file references they own. Project deletion lives in
project_cleanup_service.
"""

from typing import List, Optional

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction

from planui.core.input_validator import require_choice, require_text
from planui.models.project import Project, File, UserGroup
from planui.schemas.project_schema import ProjectCreate, FileCreate
from planui.services.errors import NotFoundError, ReferentialError, ValidationError
from planui.utils.custom_logger import CustomLogger
from planui.utils.file_storage.storage_factory import StorageFactory

logger = CustomLogger("planui.project_service")


class ProjectService:
    """Service class for project and file operations"""

    @staticmethod
    def get_user(user_id: int) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        try:
            return User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise NotFoundError("User", user_id)

    @staticmethod
    def get_project(project_id: int) -> Project:
        """Get a project by ID.

        Args:
            project_id: The project ID

        Returns:
            Project instance

        Raises:
            NotFoundError: If the project doesn't exist
        """
        try:
            return Project.objects.get(id=project_id)
        except Project.DoesNotExist:
            raise NotFoundError("Project", project_id)

    @staticmethod
    def get_file(file_id: int) -> File:
        """Get a file reference by ID.

        Raises:
            NotFoundError: If the file doesn't exist
        """
        try:
            return File.objects.get(id=file_id)
        except File.DoesNotExist:
            raise NotFoundError("File", file_id)

    @staticmethod
    def list_projects(user_group: Optional[str] = None) -> List[Project]:
        """List projects, optionally only those published to one user group.

        Raises:
            ValidationError: If user_group is not a known group
        """
        queryset = Project.objects.all()
        if user_group is not None:
            require_choice(user_group, UserGroup, "user_group")
            queryset = queryset.filter(user_group=user_group)
        return list(queryset.order_by("id"))

    @staticmethod
    def create_project(data: ProjectCreate) -> Project:
        """Create a project and its directory under the storage root.

        Args:
            data: Project creation data; owner_id is the authenticated actor

        Returns:
            Created Project instance

        Raises:
            ValidationError: If a field is missing or invalid, or the title is taken
            NotFoundError: If the owner or the planning unit file doesn't exist
            ReferentialError: If the planning unit file already belongs to a project
        """
        title = require_text(data.title, "title")
        require_choice(data.user_group, UserGroup, "user_group")
        actor = ProjectService.get_user(data.owner_id)

        planning_unit = None
        if data.planning_unit_file_id is not None:
            planning_unit = ProjectService.get_file(data.planning_unit_file_id)
            if planning_unit.project_id is not None:
                raise ReferentialError(
                    f"File {planning_unit.id} belongs to project {planning_unit.project_id}"
                )

        if Project.objects.filter(title=title).exists():
            raise ValidationError(f"A project titled '{title}' already exists")

        storage = StorageFactory.get_storage_adapter()
        try:
            with transaction.atomic():
                project = Project.objects.create(
                    title=title,
                    description=data.description,
                    owner=actor,
                    user_group=data.user_group,
                    planning_unit=planning_unit,
                )
                storage.create_directory(project.storage_dirname)
        except IntegrityError:
            # lost a race with a concurrent create of the same title
            raise ValidationError(f"A project titled '{title}' already exists")

        logger.info(f"Created project {project.id} '{project.title}' for user {actor.id}")
        return project

    @staticmethod
    def update_project_planning_unit(project_id: int, file_id: int) -> Project:
        """Attach or replace the project's planning unit file.

        Raises:
            NotFoundError: If the project or the file doesn't exist
            ReferentialError: If the file belongs to another project
        """
        project = ProjectService.get_project(project_id)
        planning_unit = ProjectService.get_file(file_id)
        if planning_unit.project_id not in (None, project.id):
            raise ReferentialError(
                f"File {planning_unit.id} belongs to project {planning_unit.project_id}"
            )

        project.planning_unit = planning_unit
        project.save(update_fields=["planning_unit", "updated_at"])

        logger.info(f"Set planning unit of project {project.id} to file {planning_unit.id}")
        return project

    @staticmethod
    def create_file(data: FileCreate) -> File:
        """Register a file reference against a project.

        Raises:
            ValidationError: If name or path is missing, or path is not inside the storage root
            NotFoundError: If the project or the uploader doesn't exist
        """
        name = require_text(data.name, "name")
        path = require_text(data.path, "path")
        try:
            StorageFactory.get_storage_adapter().resolve(path)
        except ValueError as err:
            raise ValidationError(str(err))

        project = ProjectService.get_project(data.project_id)
        uploader = None
        if data.uploader_id is not None:
            uploader = ProjectService.get_user(data.uploader_id)

        file = File.objects.create(
            name=name,
            description=data.description or "",
            uploader=uploader,
            project=project,
            path=path,
        )
        logger.info(f"Registered file {file.id} at {file.path} for project {project.id}")
        return file

    @staticmethod
    def list_project_files(project_id: int) -> List[File]:
        """List the file references a project owns.

        Raises:
            NotFoundError: If the project doesn't exist
        """
        project = ProjectService.get_project(project_id)
        return list(project.files.order_by("id"))
