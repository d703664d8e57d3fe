"""Tool catalog: the GitHub tools advertised to MCP hosts."""

from typing import Iterable, Tuple

from .types import ToolDescriptor

_OWNER = {"type": "string", "description": "Repository owner"}
_REPO = {"type": "string", "description": "Repository name"}
_STATE_ENUM = ["open", "closed", "all"]

def _per_page(noun: str) -> dict:
    return {
        "type": "number",
        "default": 30,
        "maximum": 100,
        "description": f"Number of {noun} to return",
    }

def validate_catalog(catalog: Iterable[ToolDescriptor]) -> Tuple[ToolDescriptor, ...]:
    """Check tool names are unique and required fields are declared."""
    catalog = tuple(catalog)
    seen = set()
    for tool in catalog:
        if tool.name in seen:
            raise ValueError(f"Duplicate tool name: {tool.name}")
        seen.add(tool.name)
        undeclared = [field for field in tool.required if field not in tool.properties]
        if undeclared:
            raise ValueError(
                f"Tool {tool.name} requires undeclared fields: {', '.join(undeclared)}"
            )
    return catalog

TOOL_CATALOG = validate_catalog([
    ToolDescriptor(
        name="list_repositories",
        description="List repositories for the authenticated user",
        input_schema={
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": ["all", "owner", "member"],
                    "default": "owner",
                    "description": "Type of repositories to list",
                },
                "sort": {
                    "type": "string",
                    "enum": ["created", "updated", "pushed", "full_name"],
                    "default": "updated",
                    "description": "Sort repositories by",
                },
                "per_page": _per_page("repositories"),
            },
        },
    ),
    ToolDescriptor(
        name="get_repository",
        description="Get details about a specific repository",
        input_schema={
            "type": "object",
            "properties": {"owner": _OWNER, "repo": _REPO},
            "required": ["owner", "repo"],
        },
    ),
    ToolDescriptor(
        name="list_issues",
        description="List issues for a repository",
        input_schema={
            "type": "object",
            "properties": {
                "owner": _OWNER,
                "repo": _REPO,
                "state": {
                    "type": "string",
                    "enum": _STATE_ENUM,
                    "default": "open",
                    "description": "Issue state",
                },
                "labels": {
                    "type": "string",
                    "description": "Comma-separated list of labels",
                },
                "per_page": _per_page("issues"),
            },
            "required": ["owner", "repo"],
        },
    ),
    ToolDescriptor(
        name="create_issue",
        description="Create a new issue in a repository",
        input_schema={
            "type": "object",
            "properties": {
                "owner": _OWNER,
                "repo": _REPO,
                "title": {"type": "string", "description": "Issue title"},
                "body": {"type": "string", "description": "Issue body"},
                "labels": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Issue labels",
                },
                "assignees": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Issue assignees",
                },
            },
            "required": ["owner", "repo", "title"],
        },
    ),
    ToolDescriptor(
        name="list_pull_requests",
        description="List pull requests for a repository",
        input_schema={
            "type": "object",
            "properties": {
                "owner": _OWNER,
                "repo": _REPO,
                "state": {
                    "type": "string",
                    "enum": _STATE_ENUM,
                    "default": "open",
                    "description": "Pull request state",
                },
                "per_page": _per_page("pull requests"),
            },
            "required": ["owner", "repo"],
        },
    ),
    ToolDescriptor(
        name="get_file_content",
        description="Get content of a file from a repository",
        input_schema={
            "type": "object",
            "properties": {
                "owner": _OWNER,
                "repo": _REPO,
                "path": {"type": "string", "description": "File path"},
                "ref": {
                    "type": "string",
                    "default": "main",
                    "description": (
                        "Git reference (branch, tag, commit SHA). Defaults to 'main'; "
                        "pass the default branch explicitly for repositories that use another name"
                    ),
                },
            },
            "required": ["owner", "repo", "path"],
        },
    ),
])

def list_tools() -> Tuple[ToolDescriptor, ...]:
    """Return the descriptors of every available tool."""
    return TOOL_CATALOG
