"""GitHub tools exposed over the Model Context Protocol."""

from .api import GitHubAPI, GitHubAPIError, GitHubOperations
from .config import Settings
from .dispatcher import handle, UnknownToolError, ToolExecutionError
from .tools import TOOL_CATALOG, list_tools, validate_catalog
from .types import ToolDescriptor, TextBlock, ToolResult

__all__ = [
    # API classes
    'GitHubAPI',
    'GitHubAPIError',
    'GitHubOperations',

    # Configuration
    'Settings',

    # Dispatch
    'handle',
    'UnknownToolError',
    'ToolExecutionError',

    # Tool catalog
    'TOOL_CATALOG',
    'list_tools',
    'validate_catalog',

    # Type definitions
    'ToolDescriptor',
    'TextBlock',
    'ToolResult',
]
