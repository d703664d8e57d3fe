import httpx
import logging
from typing import Optional, Dict, Any, List, Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "github-mcp-server/0.1.0"

class GitHubAPIError(Exception):
    """Raised when GitHub API requests fail."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class GitHubOperations(Protocol):
    """The GitHub operations the tools are forwarded to."""

    async def list_repositories(self, type: str = "owner", sort: str = "updated",
                                per_page: int = 30) -> Any: ...

    async def get_repository(self, owner: str, repo: str) -> Any: ...

    async def list_issues(self, owner: str, repo: str, state: str = "open",
                          labels: Optional[str] = None, per_page: int = 30) -> Any: ...

    async def create_issue(self, owner: str, repo: str, title: str,
                           body: Optional[str] = None, labels: Optional[List[str]] = None,
                           assignees: Optional[List[str]] = None) -> Any: ...

    async def list_pull_requests(self, owner: str, repo: str, state: str = "open",
                                 per_page: int = 30) -> Any: ...

    async def get_file_content(self, owner: str, repo: str, path: str,
                               ref: Optional[str] = "main") -> Any: ...

def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}

def _segment(value: Any) -> str:
    """Percent-encode a value so it stays a single URL path segment."""
    value = quote(str(value), safe="")
    # Bare dot segments would be collapsed by URL normalization
    if value in (".", ".."):
        value = value.replace(".", "%2E")
    return value

def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{_segment(owner)}/{_segment(repo)}"

def _file_path(path: str) -> str:
    return "/".join(_segment(part) for part in path.split("/"))

class GitHubAPI:
    """Client for the GitHub REST API.

    Each method maps to exactly one REST call and returns the decoded
    response body as GitHub sent it. Retries, caching and pagination are
    left to the caller; timeouts come from the ``httpx`` client.
    """

    def __init__(self, client: httpx.AsyncClient, token: Optional[str] = None,
                 base_url: str = GITHUB_API_URL):
        self.client = client
        self.base_url = base_url.rstrip('/')
        self.headers = {
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28',
            'User-Agent': USER_AGENT,
        }
        # Without a token GitHub answers with its own authorization error
        if token:
            self.headers['Authorization'] = f'Bearer {token}'

    async def _request(self, method: str, path: str,
                       params: Optional[Dict[str, Any]] = None,
                       json: Optional[Dict[str, Any]] = None) -> Any:
        """Make a request to the GitHub REST API and decode the JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GitHub {method} {url} params={params}")
        try:
            response = await self.client.request(
                method,
                url,
                headers=self.headers,
                params=_drop_none(params) if params else None,
                json=_drop_none(json) if json else None,
            )
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            try:
                message = e.response.json().get('message', e.response.reason_phrase)
            except (ValueError, AttributeError):
                message = e.response.text or e.response.reason_phrase
            raise GitHubAPIError(f"GitHub API error {status}: {message}", status) from e
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GitHub request failed: {str(e)}") from e

    async def list_repositories(self, type: str = "owner", sort: str = "updated",
                                per_page: int = 30) -> Any:
        """List repositories for the authenticated user."""
        return await self._request(
            'GET', '/user/repos',
            params={'type': type, 'sort': sort, 'per_page': per_page}
        )

    async def get_repository(self, owner: str, repo: str) -> Any:
        return await self._request('GET', _repo_path(owner, repo))

    async def list_issues(self, owner: str, repo: str, state: str = "open",
                          labels: Optional[str] = None, per_page: int = 30) -> Any:
        """List issues for a repository. ``labels`` is comma-separated."""
        return await self._request(
            'GET', f"{_repo_path(owner, repo)}/issues",
            params={'state': state, 'labels': labels, 'per_page': per_page}
        )

    async def create_issue(self, owner: str, repo: str, title: str,
                           body: Optional[str] = None, labels: Optional[List[str]] = None,
                           assignees: Optional[List[str]] = None) -> Any:
        return await self._request(
            'POST', f"{_repo_path(owner, repo)}/issues",
            json={'title': title, 'body': body, 'labels': labels, 'assignees': assignees}
        )

    async def list_pull_requests(self, owner: str, repo: str, state: str = "open",
                                 per_page: int = 30) -> Any:
        return await self._request(
            'GET', f"{_repo_path(owner, repo)}/pulls",
            params={'state': state, 'per_page': per_page}
        )

    async def get_file_content(self, owner: str, repo: str, path: str,
                               ref: Optional[str] = "main") -> Any:
        """Get the contents entry for a file (or directory listing) at ``ref``."""
        return await self._request(
            'GET', f"{_repo_path(owner, repo)}/contents/{_file_path(path)}",
            params={'ref': ref}
        )
