import pytest
from django.core.management import call_command

from planui.models.project import Project

pytestmark = pytest.mark.django_db


@pytest.fixture
def project_on_disk(project, project_file, storage_root):
    """a pytest fixture which writes the project's file under the storage root"""
    physical = storage_root / project_file.path
    physical.parent.mkdir(parents=True)
    physical.write_bytes(b"raster")
    return project


def test_deleteproject_dry_run(project_on_disk, project_file, capsys):
    """without --yes-really nothing is deleted"""
    call_command("deleteproject", "--project-id", str(project_on_disk.id))

    out = capsys.readouterr().out
    assert f"file: {project_file.path}" in out
    assert f"directory: {project_on_disk.storage_dirname}" in out
    assert "dry run, pass --yes-really to delete" in out
    assert Project.objects.filter(id=project_on_disk.id).exists()


def test_deleteproject(project_on_disk, project_file, storage_root, capsys):
    """with --yes-really the project and its files are gone"""
    call_command("deleteproject", "--project-id", str(project_on_disk.id), "--yes-really")

    out = capsys.readouterr().out
    assert f"deleted project {project_on_disk.id} 'Test Project'" in out
    assert "could not delete" not in out
    assert not Project.objects.filter(id=project_on_disk.id).exists()
    assert not (storage_root / project_file.path).exists()


def test_deleteproject_reports_leftovers(project, project_file, capsys):
    """files missing on disk are reported, the project is still deleted"""
    call_command("deleteproject", "--project-id", str(project.id), "--yes-really")

    out = capsys.readouterr().out
    assert f"could not delete {project_file.path}" in out
    assert f"could not delete {project.storage_dirname}" in out
    assert not Project.objects.filter(id=project.id).exists()


def test_deleteproject_no_such_project(capsys):
    call_command("deleteproject", "--project-id", "424242", "--yes-really")

    assert "no such project" in capsys.readouterr().out
