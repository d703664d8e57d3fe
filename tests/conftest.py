import pytest
from typing import Any, Dict, List, Optional, Tuple

class StubGitHub:
    """In-memory stand-in for GitHubAPI that records every call."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.response = response if response is not None else {}
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def _record(self, name: str, **kwargs) -> Any:
        self.calls.append((name, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    async def list_repositories(self, **kwargs):
        return await self._record("list_repositories", **kwargs)

    async def get_repository(self, **kwargs):
        return await self._record("get_repository", **kwargs)

    async def list_issues(self, **kwargs):
        return await self._record("list_issues", **kwargs)

    async def create_issue(self, **kwargs):
        return await self._record("create_issue", **kwargs)

    async def list_pull_requests(self, **kwargs):
        return await self._record("list_pull_requests", **kwargs)

    async def get_file_content(self, **kwargs):
        return await self._record("get_file_content", **kwargs)

@pytest.fixture
def stub_github():
    """Stub adapter returning an empty object."""
    return StubGitHub()

@pytest.fixture
def repo_payload():
    """A trimmed GitHub repository response."""
    return {
        "id": 1296269,
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "owner": {"login": "octocat", "id": 1},
        "private": False,
        "description": "This your first repo!",
        "default_branch": "master",
        "topics": ["octocat", "api"],
    }

@pytest.fixture
def make_stub():
    """Factory for stub adapters with a canned response or error."""
    return StubGitHub
