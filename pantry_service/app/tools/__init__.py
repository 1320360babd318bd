# importing the tool modules registers their definitions
from . import item_tools, stock_update_tools  # noqa: F401
from .registry import get_tool, invoke_tool, list_tools  # noqa: F401
