import pytest
from django.contrib.auth.models import User

from planui.models.project import Project, File


@pytest.fixture(autouse=True)
def storage_root(settings, tmp_path):
    """every test gets its own storage root"""
    root = tmp_path / "storage"
    root.mkdir()
    settings.PLANUI_STORAGE_ROOT = str(root)
    return root


@pytest.fixture
def authuser(db):
    """A django User object"""
    return User.objects.create(
        username="planner_amy", email="planner_amy@test.com", password="plannerpass"
    )


@pytest.fixture
def project(authuser):
    """A Project created directly in the db"""
    return Project.objects.create(
        title="Test Project", description="Test Description", owner=authuser, user_group="public"
    )


@pytest.fixture
def project_file(project, authuser):
    """A File belonging to the project"""
    return File.objects.create(
        name="forest.tif",
        description="forest cover",
        uploader=authuser,
        project=project,
        path=f"{project.storage_dirname}/forest.tif",
    )
