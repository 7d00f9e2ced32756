"""Service Tests for ProjectService"""

import pytest
from unittest.mock import patch

from django.contrib.auth.models import User

from planui.models.project import Project, File
from planui.schemas.project_schema import ProjectCreate, FileCreate
from planui.services.errors import NotFoundError, ReferentialError, ValidationError
from planui.services.project_service import ProjectService

pytestmark = pytest.mark.django_db


def project_payload(owner, **overrides):
    payload = {
        "owner_id": owner.id,
        "title": "T1",
        "description": "first project",
        "user_group": "public",
    }
    payload.update(overrides)
    return ProjectCreate(**payload)


# ================================================================================
# create_project
# ================================================================================


class TestCreateProject:
    def test_create_project(self, authuser, storage_root):
        project = ProjectService.create_project(project_payload(authuser))

        assert project.id is not None
        assert project.title == "T1"
        assert project.owner == authuser
        assert project.planning_unit is None
        assert (storage_root / project.storage_dirname).is_dir()

    def test_create_project_with_planning_unit(self, authuser):
        planning_unit = File.objects.create(name="pu.tif", path="shared/pu.tif")

        project = ProjectService.create_project(
            project_payload(authuser, planning_unit_file_id=planning_unit.id)
        )

        assert project.planning_unit == planning_unit

    def test_planning_unit_of_another_project(self, authuser, project_file):
        with pytest.raises(ReferentialError):
            ProjectService.create_project(
                project_payload(authuser, planning_unit_file_id=project_file.id)
            )
        assert not Project.objects.filter(title="T1").exists()

    def test_unknown_planning_unit(self, authuser):
        with pytest.raises(NotFoundError) as excinfo:
            ProjectService.create_project(project_payload(authuser, planning_unit_file_id=999))
        assert excinfo.value.entity == "File"

    def test_unknown_owner(self, authuser):
        with pytest.raises(NotFoundError) as excinfo:
            ProjectService.create_project(project_payload(authuser, owner_id=authuser.id + 100))
        assert excinfo.value.entity == "User"
        assert excinfo.value.error_code == "NOT_FOUND"

    def test_duplicate_title(self, authuser, project):
        with pytest.raises(ValidationError, match="already exists"):
            ProjectService.create_project(project_payload(authuser, title=project.title))
        assert Project.objects.count() == 1

    @pytest.mark.parametrize(
        "overrides", [{"title": ""}, {"title": "   "}, {"user_group": "admin"}]
    )
    def test_invalid_fields(self, authuser, storage_root, overrides):
        with pytest.raises(ValidationError):
            ProjectService.create_project(project_payload(authuser, **overrides))
        assert Project.objects.count() == 0
        assert list(storage_root.iterdir()) == []

    def test_directory_failure_rolls_back(self, authuser):
        with patch(
            "planui.utils.file_storage.local_storage.LocalStorageAdapter.create_directory",
            side_effect=IOError("disk full"),
        ):
            with pytest.raises(IOError):
                ProjectService.create_project(project_payload(authuser))
        assert Project.objects.count() == 0


# ================================================================================
# queries
# ================================================================================


class TestQueries:
    def test_get_project(self, project):
        assert ProjectService.get_project(project.id) == project

    def test_get_project_not_found(self):
        with pytest.raises(NotFoundError, match="Project with id 42 not found"):
            ProjectService.get_project(42)

    def test_list_projects_by_user_group(self, authuser, project):
        managers = Project.objects.create(title="T2", owner=authuser, user_group="manager")

        assert ProjectService.list_projects() == [project, managers]
        assert ProjectService.list_projects("manager") == [managers]
        assert ProjectService.list_projects("planner") == []

    def test_list_projects_unknown_user_group(self):
        with pytest.raises(ValidationError):
            ProjectService.list_projects("admin")


# ================================================================================
# update_project_planning_unit
# ================================================================================


class TestUpdatePlanningUnit:
    def test_attach_and_replace(self, project, project_file):
        updated = ProjectService.update_project_planning_unit(project.id, project_file.id)
        assert updated.planning_unit == project_file

        replacement = File.objects.create(name="pu2.tif", path="pu2.tif", project=project)
        ProjectService.update_project_planning_unit(project.id, replacement.id)

        project.refresh_from_db()
        assert project.planning_unit == replacement

    def test_file_of_another_project(self, authuser, project, project_file):
        other = Project.objects.create(title="Other", owner=authuser, user_group="public")
        with pytest.raises(ReferentialError):
            ProjectService.update_project_planning_unit(other.id, project_file.id)

    def test_unknown_ids(self, project, project_file):
        with pytest.raises(NotFoundError):
            ProjectService.update_project_planning_unit(project.id + 1, project_file.id)
        with pytest.raises(NotFoundError):
            ProjectService.update_project_planning_unit(project.id, project_file.id + 1)


# ================================================================================
# files
# ================================================================================


class TestFiles:
    def test_create_file(self, authuser, project):
        file = ProjectService.create_file(
            FileCreate(
                name="forest.tif",
                description="forest cover",
                uploader_id=authuser.id,
                project_id=project.id,
                path="test-project/forest.tif",
            )
        )

        assert file.project == project
        assert file.uploader == authuser
        assert ProjectService.list_project_files(project.id) == [file]

    @pytest.mark.parametrize("path", ["/etc/passwd", "../outside.tif", "a/../../b.tif", ""])
    def test_path_must_stay_under_storage_root(self, project, path):
        with pytest.raises(ValidationError):
            ProjectService.create_file(
                FileCreate(name="x.tif", project_id=project.id, path=path)
            )
        assert File.objects.count() == 0

    def test_unknown_project_or_uploader(self, project):
        with pytest.raises(NotFoundError):
            ProjectService.create_file(FileCreate(name="x.tif", project_id=999, path="x.tif"))
        with pytest.raises(NotFoundError):
            ProjectService.create_file(
                FileCreate(name="x.tif", project_id=project.id, uploader_id=999, path="x.tif")
            )

    def test_list_project_files_not_found(self):
        with pytest.raises(NotFoundError):
            ProjectService.list_project_files(1234)

    def test_get_user(self, authuser):
        assert ProjectService.get_user(authuser.id) == authuser
        with pytest.raises(NotFoundError):
            ProjectService.get_user(authuser.id + 100)
