"""
Response envelope helpers.
"""
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(status_code: int, message: str, data: Any = None, success: bool = False) -> JSONResponse:
    """Build a JSON response in the ``{status, message, data}`` envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"status": success, "message": message, "data": data})
    )
