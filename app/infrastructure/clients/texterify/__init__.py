"""Texterify API client for infrastructure layer.

Public API (Package Level):
- TexterifyClient: Client for Texterify REST API operations

Note: Application code should obtain the shared client from
infrastructure.services, not construct one per call.

Developer Usage (Recommended):
    from infrastructure.services import TexterifyClientDep

    @router.get("/keys")
    def keys(project_id: str, client: TexterifyClientDep):
        result = client.list_keys(project_id)
        if result.is_success:
            return result.data
"""

from infrastructure.clients.texterify.client import TexterifyClient

__all__ = [
    "TexterifyClient",
]
