from __future__ import annotations

from typing import Any


def err(message: str, error: Any = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"message": message}
    if error is not None:
        payload["error"] = error
    return payload


def msg(message: str) -> dict[str, str]:
    return {"message": message}
