"""structlog processors installed by ``configure_logging``.

- add_service_context(): stamp app name, version and environment
- mask_sensitive_data(): redact credential-like fields, including nested
  mappings such as request headers
- truncate_large_values(): cap long strings (raw API response bodies)
"""

from typing import Any, Callable, Mapping

EventDict = dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

REDACTED = "***REDACTED***"

# Matched case-insensitively against key names. "auth" covers the
# Auth-Email / Auth-Secret headers and the TEXTERIFY_AUTH_* settings.
SENSITIVE_PATTERNS = frozenset(
    {
        "auth",
        "secret",
        "password",
        "token",
        "api_key",
        "apikey",
        "credential",
        "cookie",
        "bearer",
    }
)


def add_service_context(
    app_name: str, app_version: str = "unknown", environment: str = "dev"
) -> Processor:
    """Create a processor adding ``app_name``, ``app_version`` and ``environment``.

    Values already present on the event are kept.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def _is_sensitive(key: str, patterns: frozenset[str]) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in patterns)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if isinstance(value, Mapping):
        return {
            key: (
                mask_value
                if isinstance(key, str)
                and _is_sensitive(key, patterns)
                and item is not None
                else _mask(item, patterns, mask_value)
            )
            for key, item in value.items()
        }
    return value


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Create a processor redacting values whose key looks like a credential.

    Nested mappings are walked, so ``headers={"Auth-Secret": ...}`` is
    redacted as well. ``None`` values are left alone.

    Args:
        mask_value: Replacement for redacted values
        additional_patterns: Extra key fragments to treat as sensitive
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 1000) -> Processor:
    """Create a processor cutting top-level strings longer than ``max_length``.

    The client logs raw response bodies on failure; an HTML error page from a
    proxy should not flood the log.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
