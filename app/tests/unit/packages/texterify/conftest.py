"""Fixtures for Texterify package tests."""

from typing import Dict, List, Optional, Tuple

import pytest

from infrastructure.operations import OperationResult


def language_page(entries: List[Tuple[str, str]], total: int) -> OperationResult:
    """Build a languages page body.

    Args:
        entries: (language_id, code) pairs
        total: Value reported in ``meta.total``
    """
    return OperationResult.success(
        data={
            "data": [
                {
                    "id": language_id,
                    "type": "language",
                    "relationships": {
                        "language_code": {
                            "data": {"id": f"lc-{code}", "type": "language_code"}
                        }
                    },
                }
                for language_id, code in entries
            ],
            "included": [
                {
                    "id": f"lc-{code}",
                    "type": "language_code",
                    "attributes": {"code": code},
                }
                for _, code in entries
            ],
            "meta": {"total": total},
        }
    )


class FakeTexterifyClient:
    """In-memory stand-in for TexterifyClient that records every call."""

    def __init__(self, language_pages: Optional[List[OperationResult]] = None):
        self.calls: List[tuple] = []
        self.language_pages = language_pages or [
            language_page([("lang-en", "en"), ("lang-de", "de"), ("lang-fr", "fr")], 3)
        ]
        self.create_key_result = OperationResult.success(
            data={"data": {"id": "key-1", "attributes": {"name": "welcome"}}}
        )
        self.translation_failures: Dict[str, OperationResult] = {}
        self.translation_bodies: Dict[str, dict] = {}
        self.delete_result = OperationResult.success(data=None)
        self.created_translations: List[dict] = []
        self.results: Dict[str, OperationResult] = {}

    def calls_to(self, method: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == method]

    def _result(self, method: str) -> OperationResult:
        return self.results.get(method, OperationResult.success(data={"data": []}))

    def list_projects(
        self, search=None, page=None, per_page=None, operation="listing projects"
    ):
        self.calls.append(("list_projects", search, page, per_page))
        return self._result("list_projects")

    def list_languages(
        self,
        project_id,
        search=None,
        page=None,
        per_page=None,
        operation="listing languages",
    ):
        self.calls.append(("list_languages", project_id, search, page, per_page))
        if search is not None or "list_languages" in self.results:
            return self._result("list_languages")
        index = (page or 1) - 1
        if index < len(self.language_pages):
            return self.language_pages[index]
        return language_page([], 0)

    def list_keys(
        self,
        project_id,
        search=None,
        page=None,
        per_page=None,
        only_untranslated=None,
        operation="listing keys",
    ):
        self.calls.append(
            ("list_keys", project_id, search, page, per_page, only_untranslated)
        )
        return self._result("list_keys")

    def get_key(self, project_id, key_id, operation="getting key"):
        self.calls.append(("get_key", project_id, key_id))
        return self._result("get_key")

    def create_key(self, project_id, body, operation="creating key"):
        self.calls.append(("create_key", project_id, body))
        if "create_key" in self.results:
            return self.results["create_key"]
        return self.create_key_result

    def update_key(self, project_id, key_id, body, operation="updating key"):
        self.calls.append(("update_key", project_id, key_id, body))
        return self._result("update_key")

    def delete_keys(self, project_id, key_ids, operation="deleting keys"):
        self.calls.append(("delete_keys", project_id, list(key_ids), operation))
        if operation == "rolling back key":
            return self.delete_result
        return self._result("delete_keys")

    def create_translation(self, project_id, body, operation="setting translation"):
        self.calls.append(("create_translation", project_id, body, operation))
        language_id = body["language_id"]
        if language_id in self.translation_failures:
            return self.translation_failures[language_id]
        if "create_translation" in self.results:
            return self.results["create_translation"]
        self.created_translations.append(body)
        response = self.translation_bodies.get(
            language_id, {"data": {"id": f"tr-{language_id}"}}
        )
        return OperationResult.success(data=response)


@pytest.fixture
def fake_client():
    return FakeTexterifyClient()


@pytest.fixture
def make_language_page():
    return language_page


@pytest.fixture
def make_fake_client():
    return FakeTexterifyClient
