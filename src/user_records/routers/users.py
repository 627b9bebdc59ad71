from fastapi import APIRouter, Depends, Request

from ..deps import get_table_name, get_user_record_service
from ..logging_config import get_logger
from ..responses import STATUS_CREATED, STATUS_OK, to_json_response
from ..services.user_record_service import UserRecordService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("")
async def get_users(
    email: str = "",
    svc: UserRecordService = Depends(get_user_record_service),
    table: str = Depends(get_table_name),
):
    # a non-empty email selects one record, otherwise the whole table is returned
    if email:
        return to_json_response(await svc.fetch_one(email, table), STATUS_OK)
    return to_json_response(await svc.fetch_all(table), STATUS_OK)


@router.post("")
async def create_user(
    request: Request,
    svc: UserRecordService = Depends(get_user_record_service),
    table: str = Depends(get_table_name),
):
    body = await request.body()
    logger.debug("creating_user_record", table=table)
    return to_json_response(await svc.create(body, table), STATUS_CREATED)


@router.put("")
async def update_user(
    request: Request,
    svc: UserRecordService = Depends(get_user_record_service),
    table: str = Depends(get_table_name),
):
    body = await request.body()
    return to_json_response(await svc.update(body, table), STATUS_OK)


@router.delete("")
async def delete_user(
    email: str = "",
    svc: UserRecordService = Depends(get_user_record_service),
    table: str = Depends(get_table_name),
):
    return to_json_response(await svc.delete(email, table), STATUS_OK)
