from unittest.mock import MagicMock

from discs_app.services.detail_page_enricher import DetailPageEnricher, enrich_from_page, site_origin
from discs_app.services.lddb_client import LDDBClientError
from discs_app.services.lookup_result import LookupResult
from discs_app.services.page_content import PageContent

ORIGIN = "https://www.lddb.com"


def _page(body: str) -> PageContent:
    return PageContent(f"<html><body>\n{body}\n</body></html>")


class TestEnrichFromPage:
    def test_fills_empty_fields(self, detail_page):
        result = LookupResult(upc="1", title="The Empire Strikes Back", found=True)
        enrich_from_page(detail_page, result, ORIGIN)

        assert result.director == "Irvin Kershner"
        assert result.genre == "Science Fiction"
        assert result.runtime == 124
        assert result.cover_image_url == "https://www.lddb.com/covers/ML104655.jpg"

    def test_keeps_existing_fields(self, detail_page):
        result = LookupResult(
            upc="1",
            director="George Lucas",
            genre="Adventure",
            cover_image_url="https://img.example.com/front.jpg",
        )
        enrich_from_page(detail_page, result, ORIGIN)

        assert result.director == "George Lucas"
        assert result.genre == "Adventure"
        assert result.cover_image_url == "https://img.example.com/front.jpg"

    def test_runtime_is_replaced(self, detail_page):
        result = LookupResult(upc="1", runtime=120)
        enrich_from_page(detail_page, result, ORIGIN)
        assert result.runtime == 124

    def test_trailing_punctuation_trimmed(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page("<p>Director: Ridley Scott.</p>\n<p>Genre: Horror,</p>"), result, ORIGIN)
        assert result.director == "Ridley Scott"
        assert result.genre == "Horror"

    def test_overlong_values_ignored(self):
        result = LookupResult(upc="1")
        page = _page(f"<p>Director: {'x' * 150}</p>\n<p>Genre: {'y' * 60}</p>")
        enrich_from_page(page, result, ORIGIN)
        assert result.director == ""
        assert result.genre == ""

    def test_running_time_label(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page("<p>Running time: 117 min</p>"), result, ORIGIN)
        assert result.runtime == 117

    def test_runtime_without_minutes_suffix_ignored(self):
        result = LookupResult(upc="1", runtime=90)
        enrich_from_page(_page("<p>Runtime: 2:00</p>"), result, ORIGIN)
        assert result.runtime == 90

    def test_absolute_cover_url_kept(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page('<img src="https://img.example.com/a.jpg" alt="Cover">'), result, ORIGIN)
        assert result.cover_image_url == "https://img.example.com/a.jpg"

    def test_laserdisc_alt_text_matches(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page('<img src="/img/123.jpg" alt="LaserDisc front">'), result, ORIGIN)
        assert result.cover_image_url == "https://www.lddb.com/img/123.jpg"

    def test_relative_cover_path_ignored(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page('<img src="covers/123.jpg" alt="">'), result, ORIGIN)
        assert result.cover_image_url == ""

    def test_protocol_relative_cover_url_keeps_its_host(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page('<img src="//img.lddb.com/covers/1.jpg" alt="cover">'), result, ORIGIN)
        assert result.cover_image_url == "https://img.lddb.com/covers/1.jpg"

    def test_empty_director_does_not_take_next_line(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page("<p>Director:</p>\n<p>Genre: Science Fiction</p>"), result, ORIGIN)
        assert result.director == ""
        assert result.genre == "Science Fiction"

    def test_empty_genre_does_not_take_next_line(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page("<p>Genre:</p>\n<p>Runtime: 110 min</p>"), result, ORIGIN)
        assert result.genre == ""
        assert result.runtime == 110

    def test_non_breaking_space_after_label(self):
        result = LookupResult(upc="1")
        enrich_from_page(_page("<p>Director:&nbsp;John Carpenter</p>"), result, ORIGIN)
        assert result.director == "John Carpenter"

    def test_first_cover_like_image_decides(self):
        result = LookupResult(upc="1")
        page = _page('<img src="covers/1.jpg">\n<img src="/covers/2.jpg">')
        enrich_from_page(page, result, ORIGIN)
        assert result.cover_image_url == ""


class TestDetailPageEnricher:
    def test_enrich_fetches_and_fills(self, detail_page):
        client = MagicMock()
        client.base_url = ORIGIN
        client.fetch.return_value = detail_page
        result = LookupResult(upc="1", title="The Empire Strikes Back", found=True)

        error = DetailPageEnricher(client).enrich(f"{ORIGIN}/search.php?REF=ML104655", result)

        assert error is None
        client.fetch.assert_called_once_with(f"{ORIGIN}/search.php?REF=ML104655")
        assert result.director == "Irvin Kershner"

    def test_fetch_failure_returns_error_and_leaves_result(self):
        client = MagicMock()
        client.base_url = ORIGIN
        client.fetch.side_effect = LDDBClientError("Request timed out")
        result = LookupResult(upc="1", title="Star Wars", year=1977, found=True)

        error = DetailPageEnricher(client).enrich(f"{ORIGIN}/search.php?REF=X1", result)

        assert error == "Failed to fetch detail page: Request timed out"
        assert result == LookupResult(upc="1", title="Star Wars", year=1977, found=True)

    def test_cover_resolved_against_site_origin_not_base_path(self, detail_page):
        client = MagicMock()
        client.base_url = "https://www.lddb.com/mirror"
        client.fetch.return_value = detail_page
        result = LookupResult(upc="1", title="The Empire Strikes Back", found=True)

        DetailPageEnricher(client).enrich("https://www.lddb.com/mirror/search.php?REF=ML104655", result)

        assert result.cover_image_url == "https://www.lddb.com/covers/ML104655.jpg"


class TestSiteOrigin:
    def test_drops_path(self):
        assert site_origin("https://www.lddb.com/mirror/") == "https://www.lddb.com"

    def test_keeps_port(self):
        assert site_origin("http://localhost:8080") == "http://localhost:8080"
