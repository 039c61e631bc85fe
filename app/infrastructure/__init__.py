"""Infrastructure modules for the Texterify tool server.

Centralized infrastructure components:
- clients: Texterify API client (TexterifyClient)
- configuration: Settings management (Settings, ConfigurationError)
- logging: Structured logging setup and request context
- operations: Operation results and response classification
- services: Dependency injection services (SettingsDep, get_settings)
"""

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
