from dotenv import load_dotenv
from django.core.management.base import BaseCommand

from planui.services.errors import NotFoundError
from planui.services.project_cleanup_service import ProjectCleanupService


load_dotenv()


class Command(BaseCommand):
    """
    This script deletes a project and all associated entities
    Not only in the database, but also its files under the storage root
    """

    help = "Deletes a project"

    def add_arguments(self, parser):  # skipcq: PYL-R0201
        """The main parameter is the project id"""
        parser.add_argument("--project-id", type=int, required=True)
        parser.add_argument("--yes-really", action="store_true")

    def handle(self, *args, **options):
        service = ProjectCleanupService(options["project_id"], dry_run=not options["yes_really"])
        try:
            project = service.load_project()
        except NotFoundError:
            print("no such project")
            return

        plan = service.plan(project)
        for file_path in plan.file_paths:
            print(f"file: {file_path}")
        print(f"directory: {plan.project_dir}")

        if service.delete_project():
            print(f"deleted project {plan.project_id} '{plan.project_title}'")
            for file_path in service.failed_paths:
                print(f"could not delete {file_path}")
        else:
            print("dry run, pass --yes-really to delete")
