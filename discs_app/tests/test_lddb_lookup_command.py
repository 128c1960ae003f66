import os
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command

from discs_app.services.lookup_result import LookupResult

SNAPSHOT_DIR = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),
    "services",
    "tests",
    "html_snapshot",
)


@pytest.mark.django_db
class TestLddbLookupCommand:
    def test_from_file(self):
        out = StringIO()

        call_command(
            "lddb_lookup",
            "013131123456",
            "--file",
            os.path.join(SNAPSHOT_DIR, "lddb_search_listing.html"),
            stdout=out,
        )

        output = out.getvalue()
        assert "Found: The Empire Strikes Back" in output
        assert "Year: 1980" in output
        assert "Detail page: https://www.lddb.com/search.php?REF=ML104655" in output

    @patch("discs_app.management.commands.lddb_lookup.LookupService")
    def test_reference_lookup(self, mock_service_class):
        mock_service_class.return_value.lookup_by_reference.return_value = LookupResult(
            upc="ML104655", title="Star Wars", year=1977, found=True
        )
        out = StringIO()

        call_command("lddb_lookup", "ML104655", "--reference", stdout=out)

        mock_service_class.return_value.lookup_by_reference.assert_called_once_with("ML104655")
        assert "Found: Star Wars" in out.getvalue()
        assert "lddb.com requests today: 0" in out.getvalue()

    @patch("discs_app.management.commands.lddb_lookup.LookupService")
    def test_not_found(self, mock_service_class):
        mock_service_class.return_value.lookup_by_upc.return_value = LookupResult(
            upc="000", error="Invalid UPC format"
        )
        out = StringIO()
        err = StringIO()

        call_command("lddb_lookup", "000", stdout=out, stderr=err)

        assert "LaserDisc not found." in out.getvalue()
        assert "Invalid UPC format" in err.getvalue()
