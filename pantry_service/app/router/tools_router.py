# app/router/tools_router.py
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from shared.core.auth import require_right, validate_current_token
from shared.core.database import get_pantry_db as get_db
from shared.core.schemas import UserToken
from shared.utils.enums import Right
from .. import tools

router = APIRouter(prefix="/api/tools", tags=["tools"])


@router.get("/", dependencies=[Depends(require_right(Right.GET_OWN_ITEMS))])
def read_tools():
    return [tool.describe() for tool in tools.list_tools()]


@router.post("/{tool_id}")
def call_tool(
    tool_id: str,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    tool = tools.get_tool(tool_id)
    # rights differ per tool
    require_right(tool.right)(current_user)

    # identity always comes from the bearer token, never from the payload
    payload["user_id"] = str(current_user.user_id)
    if "updated_by" in tool.input_model.model_fields:
        payload["updated_by"] = current_user.display_name

    return tools.invoke_tool(db, tool_id, payload)
