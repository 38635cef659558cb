from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.responses import JSONResponse

from app.core.schemas import ErrorResponse


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def error_response(status_code: int, message: str, debug: Any = None, **extra: Any) -> JSONResponse:
    """Uniform {success: false, error, timestamp} envelope; `debug` is omitted when None."""
    body = ErrorResponse(error=message, timestamp=utc_timestamp(), debug=debug).model_dump(exclude_none=True)
    body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status_code, content=body)


def debug_detail(enabled: bool, **detail: Any) -> Optional[dict]:
    return detail if enabled else None
