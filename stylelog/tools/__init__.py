import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from stylelog.store.base import OutfitStore
from stylelog.store.types import RecordNotFoundError
from stylelog.tools.definitions import TOOLS, TOOL_NAMES
from stylelog.tools.handlers import HANDLERS

logger = logging.getLogger(__name__)


def tool_result(text: str, is_error: bool = False) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}], "is_error": is_error}


def list_tools() -> list[Dict[str, Any]]:
    return TOOLS


async def call_tool(name: str, arguments: Optional[Dict[str, Any]], store: OutfitStore) -> Dict[str, Any]:
    """Run a tool; failures come back as ``is_error`` results rather than exceptions."""
    handler = HANDLERS.get(name)
    if handler is None:
        return tool_result(f"Unknown tool: {name}", is_error=True)
    try:
        text = await handler(store, dict(arguments or {}))
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in e["loc"]) or "input" for e in exc.errors())
        return tool_result(f"Error executing {name}: invalid arguments ({fields})", is_error=True)
    except RecordNotFoundError as exc:
        return tool_result(f"Error executing {name}: {exc.detail} ({exc.record_id})", is_error=True)
    except (KeyError, ValueError) as exc:
        return tool_result(f"Error executing {name}: {exc}", is_error=True)
    logger.info("tools:call name=%s ok", name)
    return tool_result(text)


__all__ = ["TOOLS", "TOOL_NAMES", "call_tool", "list_tools", "tool_result"]
