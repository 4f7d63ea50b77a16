# server/api/responses.py

from typing import Any


def success(data: Any = None) -> dict:
    return {"status": "success", "data": data}
