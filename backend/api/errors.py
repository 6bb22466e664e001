# Role: Maps webhook failures that survive the fallback layer (fallback switched off) onto HTTP 502.

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from backend.tools.errors import WebhookError


@contextmanager
def webhook_errors_as_http() -> Iterator[None]:
    try:
        yield
    except WebhookError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
