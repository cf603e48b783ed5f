"""
Response envelope shared by every JSON endpoint: `{"success": true, "data": ...}`.
"""

from typing import Any


def ok(data: Any = None, **extra: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True, "data": data}
    body.update(extra)
    return body
