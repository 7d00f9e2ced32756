# this service removes a project together with everything that hangs off it
from dataclasses import dataclass, field
from typing import List, Optional

from django.db import transaction

from planui.models.project import Project, File
from planui.services.errors import NotFoundError
from planui.utils.custom_logger import CustomLogger
from planui.utils.file_storage.storage_factory import StorageFactory
from planui.utils.file_storage.storage_interface import StorageInterface

logger = CustomLogger("planui.project_cleanup_service")


@dataclass
class DeletionPlan:
    """What deleting a project removes from the file store"""

    project_id: int
    project_title: str
    # relative to the storage root, de-duplicated, planning unit first
    file_paths: List[str] = field(default_factory=list)
    project_dir: str = ""
    # an unowned planning unit file no other project uses goes with the project
    orphan_planning_unit_id: Optional[int] = None


class ProjectCleanupService:
    """
    Deletes a project in two phases:
    1. commit: delete the Project row in one transaction; CASCADE removes
       solutions, solution layers, memberships, project layers and files
    2. cleanup: delete the planned physical files and the project directory,
       best effort; a failure is logged and never undoes or fails the commit
    """

    def __init__(self, project_id: int, dry_run: bool = False):
        self.project_id = project_id
        self.dry_run = dry_run
        self.failed_paths: List[str] = []

    def load_project(self, lock: bool = False) -> Project:
        """fetch the project with its planning unit and files; lock=True takes a row
        lock on the project and must run inside a transaction"""
        queryset = Project.objects.select_related("planning_unit").prefetch_related("files")
        if lock:
            # the planning unit join is nullable, only the project row can be locked
            queryset = queryset.select_for_update(of=("self",))
        try:
            return queryset.get(id=self.project_id)
        except Project.DoesNotExist:
            raise NotFoundError("Project", self.project_id)

    @staticmethod
    def plan(project: Project) -> DeletionPlan:
        """the physical files and directory owned by the project"""
        plan = DeletionPlan(
            project_id=project.id,
            project_title=project.title,
            project_dir=project.storage_dirname,
        )

        planning_unit = project.planning_unit
        if planning_unit is not None:
            # an unowned file other projects still reference stays
            unowned = (
                planning_unit.project_id is None
                and not planning_unit.planned_projects.exclude(id=project.id).exists()
                and not planning_unit.project_layers.exclude(project=project).exists()
                and not planning_unit.solutions.exclude(project=project).exists()
            )
            if planning_unit.project_id == project.id or unowned:
                plan.file_paths.append(planning_unit.path)
            if unowned:
                plan.orphan_planning_unit_id = planning_unit.id

        for file in project.files.all():
            if file.path not in plan.file_paths:
                plan.file_paths.append(file.path)

        return plan

    def delete_project(self) -> bool:
        """
        Delete the project. Returns True once the database commit succeeded,
        False for a dry run which only logs what would be removed
        """
        if self.dry_run:
            plan = self.plan(self.load_project())
            self._log_plan(plan)
            for file_path in plan.file_paths:
                logger.info(f"will delete file {file_path}")
            return False

        # the project row stays locked from planning to delete;
        # a failure here propagates and nothing on disk is touched
        with transaction.atomic():
            project = self.load_project(lock=True)
            plan = self.plan(project)
            self._log_plan(plan)
            project.delete()
            if plan.orphan_planning_unit_id is not None:
                File.objects.filter(id=plan.orphan_planning_unit_id).delete()
        logger.info(f"deleted project {plan.project_id} from DB")

        self.cleanup(plan, StorageFactory.get_storage_adapter())
        return True

    @staticmethod
    def _log_plan(plan: DeletionPlan) -> None:
        logger.info(
            f"will delete project {plan.project_id} '{plan.project_title}', "
            f"{len(plan.file_paths)} files and directory {plan.project_dir}"
        )

    def cleanup(self, plan: DeletionPlan, storage: StorageInterface) -> None:
        """delete the planned files, then the project directory; never raises"""
        for file_path in plan.file_paths:
            self._remove(storage, plan, file_path)
        self._remove(storage, plan, plan.project_dir)

        if self.failed_paths:
            logger.warning(
                f"project {plan.project_id} left {len(self.failed_paths)} paths behind",
                extra={"project_id": plan.project_id, "failed_paths": list(self.failed_paths)},
            )

    def _remove(self, storage: StorageInterface, plan: DeletionPlan, file_path: str) -> None:
        try:
            storage.delete_file(file_path)
            logger.info(f"deleted {file_path} from disk")
        except Exception as error:  # pylint:disable=broad-exception-caught
            self.failed_paths.append(file_path)
            logger.warning(
                f"could not delete {file_path} of project {plan.project_id}: {error}",
                extra={
                    "project_id": plan.project_id,
                    "file_path": file_path,
                    "error": str(error),
                },
            )
