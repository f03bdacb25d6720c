from datetime import datetime

from fastapi import APIRouter, Depends
from debug_lib.services.resolver import get_started_at
from .health import StatusPayload, get_status

router = APIRouter()


# HEAD mirrors GET
@router.api_route('/', methods=['GET', 'HEAD'], response_model=StatusPayload)
async def api_status(started_at: datetime = Depends(get_started_at)):
    return get_status(started_at)
