from datetime import datetime
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request


def resolve_service(request: Request, name: str) -> Any:
    """Look up `name` in the container on `request.app.state`.

    A missing container or registration is a server fault and surfaces
    as HTTP 500.
    """
    container = getattr(request.app.state, 'container', None)
    if container is None:
        raise HTTPException(status_code=500, detail="No service container on app")
    try:
        return container.get(name)
    except KeyError:
        raise HTTPException(status_code=500, detail=f"'{name}' is not registered") from None


def get_started_at(request: Request) -> datetime:
    """Route dependency yielding the startup timestamp."""
    return resolve_service(request, 'started_at')
