import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .api import GitHubOperations
from .types import ToolDescriptor, ToolResult, TextBlock

logger = logging.getLogger(__name__)

class UnknownToolError(Exception):
    """Raised when a requested tool is not in the catalog."""
    pass

class ToolExecutionError(Exception):
    """Raised when a tool invocation fails after the tool was resolved."""
    pass

def find_tool(catalog: Iterable[ToolDescriptor], name: str) -> ToolDescriptor:
    for tool in catalog:
        if tool.name == name:
            return tool
    raise UnknownToolError(f"Unknown tool: {name}")

def apply_defaults(tool: ToolDescriptor, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Build the keyword arguments for the adapter call.

    Every declared property is present in the result: the caller's value,
    else the declared default, else None. Undeclared keys are dropped.
    """
    arguments = dict(arguments or {})
    missing = [field for field in tool.required if arguments.get(field) is None]
    if missing:
        raise ValueError(f"Missing required argument(s): {', '.join(missing)}")

    defaults = tool.defaults()
    return {
        field: arguments[field] if field in arguments else defaults.get(field)
        for field in tool.properties
    }

def to_result(data: Any) -> ToolResult:
    return ToolResult(content=[TextBlock(text=json.dumps(data, indent=2, ensure_ascii=False))])

async def handle(catalog: Iterable[ToolDescriptor], adapter: GitHubOperations,
                 name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
    """Run one tool invocation against the adapter.

    Raises UnknownToolError before anything else happens when ``name`` is
    not in ``catalog``. Any other failure, including a missing required
    argument or an error from GitHub, is raised as ToolExecutionError
    carrying the original message.
    """
    tool = find_tool(catalog, name)
    logger.info(f"Calling tool {name}")

    try:
        kwargs = apply_defaults(tool, arguments)
        # Adapter methods are named after the tools they serve
        data = await getattr(adapter, tool.name)(**kwargs)
    except Exception as e:
        logger.error(f"Error executing tool {name}: {str(e)}", exc_info=True)
        raise ToolExecutionError(f"Error executing tool {name}: {str(e)}") from e

    return to_result(data)
