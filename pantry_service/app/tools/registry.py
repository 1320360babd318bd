# app/tools/registry.py
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import Right

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolDefinition:
    """An agent-callable wrapper around one service function."""

    id: str
    name: str
    description: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    fn: Callable[[Session, BaseModel], Any]
    right: Right = Right.GET_OWN_ITEMS

    def describe(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_model.model_json_schema(),
            "output_schema": self.output_model.model_json_schema(),
        }


_TOOLS: Dict[str, ToolDefinition] = {}


def register(*tools: ToolDefinition) -> None:
    for tool in tools:
        if tool.id in _TOOLS:
            raise ValueError(f"Duplicate tool id: {tool.id}")
        _TOOLS[tool.id] = tool


def get_tool(tool_id: str) -> ToolDefinition:
    try:
        return _TOOLS[tool_id]
    except KeyError:
        raise NotFoundError(f"Unknown tool '{tool_id}'",
                            AppStatusCode.TOOL_NOT_FOUND)


def list_tools() -> List[ToolDefinition]:
    return list(_TOOLS.values())


def invoke_tool(db: Session, tool_id: str, payload: dict) -> dict:
    """Validate the payload, run the tool, and return JSON-ready output."""
    tool = get_tool(tool_id)
    inputs = tool.input_model.model_validate(payload)
    logger.info("Invoking tool %s", tool_id)
    result = tool.fn(db, inputs)
    return tool.output_model.model_validate(result).model_dump(mode="json")
