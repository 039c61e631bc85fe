"""Unit tests for language code resolution."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus
from packages.texterify.languages import (
    LANGUAGE_PAGE_SIZE,
    LanguageResolver,
    map_language_codes,
)


@pytest.mark.unit
class TestMapLanguageCodes:
    def test_maps_codes_through_included_records(self, make_language_page):
        page = make_language_page([("lang-en", "en"), ("lang-de", "de")], 2).data

        assert map_language_codes(page) == {"en": "lang-en", "de": "lang-de"}

    def test_skips_languages_without_resolvable_code(self):
        page = {
            "data": [
                {
                    "id": "lang-en",
                    "relationships": {"language_code": {"data": {"id": "lc-en"}}},
                },
                {
                    "id": "lang-xx",
                    "relationships": {"language_code": {"data": {"id": "lc-missing"}}},
                },
                {"id": "lang-none", "relationships": {"language_code": {"data": None}}},
            ],
            "included": [{"id": "lc-en", "attributes": {"code": "en"}}],
            "meta": {"total": 3},
        }

        assert map_language_codes(page) == {"en": "lang-en"}


@pytest.mark.unit
class TestLanguageResolver:
    def test_single_page(self, fake_client):
        result = LanguageResolver(fake_client).resolve("p1")

        assert result.is_success
        assert result.data == {"en": "lang-en", "de": "lang-de", "fr": "lang-fr"}
        assert fake_client.calls_to("list_languages") == [
            ("list_languages", "p1", None, 1, LANGUAGE_PAGE_SIZE)
        ]

    def test_collects_codes_across_pages(self, make_fake_client, make_language_page):
        first = [(f"lang-{i}", f"c{i}") for i in range(50)]
        second = [("lang-50", "c50"), ("lang-51", "c51")]
        client = make_fake_client(
            language_pages=[
                make_language_page(first, 52),
                make_language_page(second, 52),
            ]
        )

        result = LanguageResolver(client).resolve("p1")

        assert len(result.data) == 52
        assert result.data["c0"] == "lang-0"
        assert result.data["c51"] == "lang-51"
        assert [call[3] for call in client.calls_to("list_languages")] == [1, 2]

    def test_stops_on_empty_page_when_total_is_wrong(
        self, make_fake_client, make_language_page
    ):
        client = make_fake_client(
            language_pages=[
                make_language_page([("lang-en", "en")], 10_000),
                make_language_page([], 10_000),
            ]
        )

        result = LanguageResolver(client, page_size=1).resolve("p1")

        assert result.is_success
        assert result.data == {"en": "lang-en"}
        assert len(client.calls_to("list_languages")) == 2

    def test_page_failure_aborts_resolution(self, make_fake_client, make_language_page):
        failure = OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "Authentication failed (403).",
            error_code="HTTP_403",
        )
        client = make_fake_client(
            language_pages=[make_language_page([("lang-en", "en")], 2), failure]
        )

        result = LanguageResolver(client, page_size=1).resolve("p1")

        assert result is failure
