"""
Look up a LaserDisc on lddb.com.

Usage:
    python manage.py lddb_lookup 013131123456
    python manage.py lddb_lookup ML104655 --reference

    # From file (for testing extraction against a saved page):
    python manage.py lddb_lookup 013131123456 --file discs_app/services/tests/html_snapshot/lddb_search_table.html
"""

from django.core.management.base import BaseCommand
from django.utils import timezone

from discs_app.models import APICallCounter
from discs_app.services.lookup_service import SERVICE_NAME, LookupService
from discs_app.services.page_content import PageContent
from discs_app.services.result_assembler import assemble

DISPLAY_FIELDS = [
    ("Title", "title"),
    ("Year", "year"),
    ("Director", "director"),
    ("Genre", "genre"),
    ("Format", "format"),
    ("Sides", "sides"),
    ("Runtime (min)", "runtime"),
    ("Cover", "cover_image_url"),
    ("LDDB URL", "lddb_url"),
]


class Command(BaseCommand):
    help = "Look up LaserDisc information on lddb.com by UPC or catalog reference"

    def add_arguments(self, parser):  # type: ignore[no-untyped-def]
        parser.add_argument(
            "identifier",
            type=str,
            help="UPC (or catalog reference with --reference)",
        )
        parser.add_argument(
            "--reference",
            action="store_true",
            help="Treat the identifier as a catalog reference instead of a UPC",
        )
        parser.add_argument(
            "--file",
            type=str,
            help="Path to a saved lddb.com search page to extract from instead of fetching",
        )

    def handle(self, *args, **options) -> str | None:  # type: ignore[no-untyped-def]
        identifier: str = options["identifier"]
        file_path: str | None = options.get("file")

        if file_path:
            self.stdout.write(f"Loading HTML from file: {file_path}")
            with open(file_path, encoding="utf-8") as f:
                html_content = f.read()
            assembled = assemble(PageContent(html_content), identifier)
            result = assembled.result
            if assembled.detail_url:
                self.stdout.write(f"  Detail page: {assembled.detail_url}")
        else:
            self.stdout.write(f"Looking up '{identifier}' on lddb.com...")
            service = LookupService()
            if options["reference"]:
                result = service.lookup_by_reference(identifier)
            else:
                result = service.lookup_by_upc(identifier)

        self.stdout.write("")

        if not result.found:
            self.stdout.write(self.style.WARNING("LaserDisc not found."))
            if result.error:
                self.stderr.write(self.style.ERROR(f"Error: {result.error}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Found: {result.title}"))
            for label, field in DISPLAY_FIELDS:
                value = getattr(result, field)
                if value:
                    self.stdout.write(f"  {label}: {value}")

        if not file_path:
            today = timezone.now().date()
            calls = APICallCounter.get_total_calls(SERVICE_NAME, today, today)
            self.stdout.write("")
            self.stdout.write(f"lddb.com requests today: {calls}")

        return None
