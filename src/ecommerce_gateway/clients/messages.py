"""Message helpers shared by the backend clients.

Inside the gateway, message fields use the proto field names
(``category_title``). On the wire, requests are encoded with the proto3 JSON
names (``categoryTitle``) and responses are accepted in either form.
"""

from collections.abc import Callable
from typing import Any

from pydantic.alias_generators import to_camel, to_snake

from ecommerce_gateway.entities import PageWindow


def window_message(window: PageWindow) -> dict[str, Any]:
    """Translate a pagination window into the list request fields."""
    return {"offset": window.offset, "limit": window.limit, "search": window.search}


def _rename_keys(value: Any, rename: Callable[[str], str]) -> Any:
    if isinstance(value, dict):
        return {rename(key): _rename_keys(item, rename) for key, item in value.items()}
    if isinstance(value, list):
        return [_rename_keys(item, rename) for item in value]
    return value


def encode_message(message: dict[str, Any]) -> dict[str, Any]:
    """Rename request fields to their proto3 JSON names, recursively."""
    return _rename_keys(message, to_camel)


def decode_message(message: dict[str, Any]) -> dict[str, Any]:
    """Rename response fields back to proto field names, recursively.

    ``hasAccess`` and ``has_access`` both decode to ``has_access``.
    """
    return _rename_keys(message, to_snake)
