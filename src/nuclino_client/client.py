"""HTTP client for the Nuclino API.

This module wraps a requests Session and exposes one method per documented
Nuclino endpoint. Every method builds its URL, sends the API key in the
Authorization header, and hands the response to the shared envelope decoder,
so all endpoints report failures through the same typed exceptions.

The client does not retry, cache, or paginate on its own. Each call is a
single blocking round trip. Paginated endpoints return a ResultList so the
caller can pass `next_cursor()` back as `after`.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar, Union
from urllib.parse import quote
from uuid import UUID

import requests

from src.models.file import File
from src.models.page import Page
from src.models.user import IdOnly, Team, User
from src.models.workspace import Workspace

from .auth import BASE_URL, Authenticator
from .envelope import ResultList, decode_response, list_of
from .errors import FileIOError, RequestError, make_error
from .payloads import ModifyItem, NewPage

logger = logging.getLogger(__name__)

T = TypeVar('T')

IdLike = Union[UUID, str]

USER_AGENT = "nuclino-client-python/0.1.0"


class NuclinoClient:
    """Client for the Nuclino API, acting as one specific user.

    The underlying requests Session is created on first use, so constructing
    a client never touches the network. A Session may also be passed in, for
    example to mount custom adapters; the client is as thread-safe as that
    Session is.

    Example:
        >>> client = NuclinoClient.create_from_env()
        >>> for workspace in client.workspace_list():
        ...     print(workspace.name, workspace.id)
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Nuclino API key, sent verbatim in the Authorization header
            base_url: API base URL (defaults to https://api.nuclino.com)
            session: Optional requests Session to send requests through
            timeout: Optional per-request timeout in seconds, passed to requests.
                No timeout is applied when None.
        """
        self._api_key = api_key
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self._session = session
        self.timeout = timeout

    @classmethod
    def create(cls, api_key: str, base_url: Optional[str] = None) -> "NuclinoClient":
        """Create a client from an API key and an optional base url override."""
        return cls(api_key, base_url)

    @classmethod
    def create_from_env(cls, authenticator: Optional[Authenticator] = None) -> "NuclinoClient":
        """Create a client with the API key read from NUCLINO_API_KEY.

        Raises:
            ApiKeyNotFoundError: If the key is not set
        """
        creds = (authenticator or Authenticator()).get_credentials()
        return cls(creds.api_key, creds.base_url)

    # =========================================================================
    # Users and teams
    # =========================================================================

    def user(self, user_id: IdLike) -> User:
        """Fetch a single user by id."""
        return self._get(self._url(f"/v0/users/{_path_id(user_id)}"), User.from_dict)

    def team_list(self, limit: Optional[int] = None, after: Optional[str] = None) -> List[Team]:
        """Fetch the teams the API key has access to, optionally paginated."""
        url = self._url("/v0/teams", [("limit", limit), ("after", after)])
        return self._get(url, list_of(Team.from_dict)).as_list()

    def team(self, team_id: IdLike) -> Team:
        """Fetch a single team by id."""
        return self._get(self._url(f"/v0/teams/{_path_id(team_id)}"), Team.from_dict)

    # =========================================================================
    # Workspaces
    # =========================================================================

    def workspace_list(
        self,
        limit: Optional[int] = None,
        after: Optional[str] = None,
    ) -> List[Workspace]:
        """Fetch the workspaces the API key has access to, optionally paginated."""
        url = self._url("/v0/workspaces", [("limit", limit), ("after", after)])
        return self._get(url, list_of(Workspace.from_dict)).as_list()

    def workspace(self, workspace_id: IdLike) -> Workspace:
        """Fetch a single workspace by id."""
        return self._get(self._url(f"/v0/workspaces/{_path_id(workspace_id)}"), Workspace.from_dict)

    # =========================================================================
    # Pages (items and collections)
    # =========================================================================

    def page_create(self, new_page: NewPage) -> Page:
        """Create an item or a collection, depending on how new_page was built."""
        return self._post(self._url("/v0/items"), new_page.to_dict(), Page.from_dict)

    def page(self, page_id: IdLike) -> Page:
        """Fetch a page, including content when it is an item."""
        return self._get(self._url(f"/v0/items/{_path_id(page_id)}"), Page.from_dict)

    def page_update(self, page_id: IdLike, updated: ModifyItem) -> Page:
        """Update the title and/or content of a page."""
        return self._put(self._url(f"/v0/items/{_path_id(page_id)}"), updated.to_dict(), Page.from_dict)

    def page_delete(self, page_id: IdLike) -> IdOnly:
        """Move a page to the trash."""
        return self._delete(self._url(f"/v0/items/{_path_id(page_id)}"), IdOnly.from_dict)

    def all_pages_for_team(
        self,
        team_id: IdLike,
        limit: Optional[int] = None,
        after: Optional[IdLike] = None,
    ) -> ResultList[Page]:
        """List a team's items and collections, without page content.

        The service returns at most `limit` pages (100 by default). To fetch
        the next batch, pass the id of the last page received as `after`.
        """
        url = self._url("/v0/items", [("teamId", team_id), ("limit", limit), ("after", after)])
        return self._get(url, list_of(Page.from_dict))

    def all_pages_for_workspace(
        self,
        workspace_id: IdLike,
        limit: Optional[int] = None,
        after: Optional[IdLike] = None,
    ) -> ResultList[Page]:
        """List a workspace's items and collections, without page content.

        See all_pages_for_team for pagination.
        """
        url = self._url(
            "/v0/items",
            [("workspaceId", workspace_id), ("limit", limit), ("after", after)],
        )
        return self._get(url, list_of(Page.from_dict))

    def search_team(self, team_id: IdLike, search: str, limit: Optional[int] = None) -> List[Page]:
        """Search a team's pages for text. Results carry highlight text, not content."""
        url = self._url(
            "/v0/items",
            [("teamId", team_id), ("search", search), ("limit", limit)],
        )
        return self._get(url, list_of(Page.from_dict)).as_list()

    def search_workspace(
        self,
        workspace_id: IdLike,
        search: str,
        limit: Optional[int] = None,
    ) -> List[Page]:
        """Search a workspace's pages for text. Results carry highlight text, not content."""
        url = self._url(
            "/v0/items",
            [("workspaceId", workspace_id), ("search", search), ("limit", limit)],
        )
        return self._get(url, list_of(Page.from_dict)).as_list()

    # =========================================================================
    # Files
    # =========================================================================

    def file(self, file_id: IdLike) -> File:
        """Fetch file metadata, including a short-lived download link."""
        return self._get(self._url(f"/v0/files/{_path_id(file_id)}"), File.from_dict)

    def download_file(self, url: str) -> bytes:
        """Download file contents from a signed download url.

        The signed url carries its own credentials, so the API key is not sent.

        Raises:
            RequestError: If the transport fails
            ClientError: If the storage host answers with a 4xx status
            ServerError: If the storage host answers with a 5xx status
        """
        response = self._send("GET", url, authorize=False)
        if not response.ok:
            raise make_error(response.status_code, response.reason or "")
        return response.content

    def save_file(self, file: Union[File, IdLike], path: Union[str, Path]) -> Path:
        """Download a file and write it to disk.

        Args:
            file: File metadata, or the id of the file to look up first
            path: Destination file, or an existing directory to place the
                file in under its own name. Only the final component of the
                server-side name is used, and it must stay inside the directory.

        Returns:
            The path written

        Raises:
            FileIOError: If the file cannot be written, or its name is unusable
        """
        if not isinstance(file, File):
            file = self.file(file)

        target = Path(path)
        if target.is_dir():
            target = _inside(target, file.file_name)

        contents = self.download_file(file.download.url)
        try:
            target.write_bytes(contents)
        except OSError as e:
            raise FileIOError(str(target), e.strerror or str(e)) from e

        logger.info(f"Saved {file.file_name} ({len(contents)} bytes) to {target}")
        return target

    # =========================================================================
    # HTTP plumbing
    # =========================================================================

    def _get_session(self) -> requests.Session:
        """Get or create the requests Session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _url(self, path: str, query: Sequence[Tuple[str, Any]] = ()) -> str:
        """Build a full URL, appending percent-encoded query parameters that are set."""
        params = [
            f"{key}={quote(str(value), safe='')}"
            for key, value in query
            if value is not None
        ]
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{'&'.join(params)}"
        return url

    def _headers(self, authorize: bool = True) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if authorize:
            headers["Authorization"] = self._api_key
        return headers

    def _send(
        self,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
        authorize: bool = True,
    ) -> requests.Response:
        """Send one request and return the raw response.

        Raises:
            RequestError: If no response was obtained
        """
        logger.debug(f"{method} {url}")
        try:
            return self._get_session().request(
                method,
                url,
                headers=self._headers(authorize),
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise RequestError(str(e)) from e

    def _request(
        self,
        method: str,
        url: str,
        parse: Callable[[Any], T],
        payload: Optional[Dict[str, Any]] = None,
    ) -> T:
        response = self._send(method, url, payload)
        logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        return decode_response(response.content, response.status_code, parse)

    def _get(self, url: str, parse: Callable[[Any], T]) -> T:
        return self._request("GET", url, parse)

    def _post(self, url: str, payload: Dict[str, Any], parse: Callable[[Any], T]) -> T:
        return self._request("POST", url, parse, payload)

    def _put(self, url: str, payload: Dict[str, Any], parse: Callable[[Any], T]) -> T:
        return self._request("PUT", url, parse, payload)

    def _delete(self, url: str, parse: Callable[[Any], T]) -> T:
        return self._request("DELETE", url, parse)


def _path_id(value: IdLike) -> str:
    """Percent-encode an id for use as a single URL path segment."""
    return quote(str(value), safe='')


def _inside(directory: Path, file_name: str) -> Path:
    """Place a server-supplied file name inside directory.

    Raises:
        FileIOError: If the name is empty, a dot entry, or resolves outside directory
    """
    name = Path(file_name).name
    if name in ("", ".", ".."):
        raise FileIOError(str(directory / file_name), "unusable file name")

    target = directory / name
    if directory.resolve() not in target.resolve().parents:
        raise FileIOError(str(target), f"file name {file_name!r} points outside {directory}")
    return target
