"""
Gong API Client

Typed async gateway to Gong's REST API:
- Calls, extensive call data and transcripts
- Users and aggregate activity stats
- CRM deals and CRM-object call links
- Email activity
- Library folders

Authentication is HTTP Basic with ``access_key:access_key_secret``.
Gong allows roughly 1000 requests per hour per key; this client does not
throttle or retry, so a 429 surfaces to the caller as a GongAPIError.
"""

import base64
from dataclasses import dataclass
from typing import Any, Literal, Optional
from urllib.parse import urlencode

import httpx

from ..core.config import DEFAULT_GONG_API_BASE_URL, GongSettings, get_settings
from ..core.exceptions import GongAPIError, MissingCredentialsError
from ..core.logging import get_logger
from ..models.schemas import (
    Call,
    CrmCallsLink,
    CrmObjectType,
    Deal,
    Email,
    LibraryFolder,
    PaginatedResponse,
    Transcript,
    User,
)
from .envelopes import GongResource, normalize_page, unwrap_list

logger = get_logger(__name__)

HttpMethod = Literal["GET", "POST"]

# Enrichment requested for every extensive call lookup
EXTENSIVE_CONTENT_SELECTOR: dict[str, Any] = {
    "context": "Extended",
    "exposedFields": {
        "parties": True,
        "content": {
            "trackers": True,
            "topics": True,
            "pointsOfInterest": True,
        },
        "collaboration": {
            "publicComments": True,
        },
    },
}


@dataclass(frozen=True)
class GongConfig:
    """Gong client configuration"""

    access_key: str
    access_key_secret: str
    base_url: str = DEFAULT_GONG_API_BASE_URL
    timeout: Optional[float] = None  # seconds; None waits indefinitely

    @classmethod
    def from_settings(cls, settings: Optional[GongSettings] = None) -> "GongConfig":
        """
        Build a config from environment-backed settings.

        Raises:
            MissingCredentialsError: If the access key or secret is empty
        """
        settings = settings or get_settings()
        if not settings.gong_access_key:
            raise MissingCredentialsError("GONG_ACCESS_KEY")
        if not settings.gong_access_key_secret:
            raise MissingCredentialsError("GONG_ACCESS_KEY_SECRET")

        return cls(
            access_key=settings.gong_access_key,
            access_key_secret=settings.gong_access_key_secret,
            base_url=settings.gong_api_base_url,
            timeout=settings.gong_http_timeout,
        )


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset filters so they are never sent upstream as null"""
    return {key: value for key, value in values.items() if value is not None}


def _with_query(path: str, params: dict[str, Optional[str]]) -> str:
    """Append only the supplied query parameters to a path"""
    query = urlencode({key: value for key, value in params.items() if value})
    return f"{path}?{query}" if query else path


class GongClient:
    """
    Async client for the Gong REST API.

    The client holds no per-request state: every method performs exactly one
    HTTP exchange and returns a normalized result, so one instance can be
    shared by concurrent callers.

    Example usage:
        client = GongClient(GongConfig(access_key="...", access_key_secret="..."))

        page = await client.list_calls(from_date_time="2024-01-01T00:00:00Z")
        while page.cursor:
            page = await client.list_calls(
                from_date_time="2024-01-01T00:00:00Z",
                cursor=page.cursor,
            )
    """

    def __init__(
        self,
        config: GongConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

        credentials = base64.b64encode(
            f"{config.access_key}:{config.access_key_secret}".encode("utf-8")
        ).decode("ascii")
        self._auth_header = f"Basic {credentials}"

    @classmethod
    def from_settings(
        cls,
        settings: Optional[GongSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GongClient":
        """Create a client from GONG_* environment settings"""
        return cls(GongConfig.from_settings(settings), transport=transport)

    @property
    def auth_header(self) -> str:
        """Authorization header value, computed once at construction"""
        return self._auth_header

    async def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Make one authenticated request to the Gong API.

        Args:
            endpoint: Path under the base URL, including any query string
            method: GET or POST
            body: JSON request body

        Returns:
            Decoded JSON response

        Raises:
            GongAPIError: If Gong answers with a non-2xx status
            httpx.HTTPError: If the exchange itself fails
        """
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported HTTP method for Gong API: {method}")

        url = f"{self.config.base_url}{endpoint}"
        headers = {
            "Authorization": self._auth_header,
            "Content-Type": "application/json",
        }

        logger.debug(f"Gong {method} {endpoint}")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    json=body,
                )
        except httpx.HTTPError as e:
            logger.error(f"Gong request failed: {method} {endpoint}: {e}")
            raise

        if not response.is_success:
            logger.error(f"Gong API error ({response.status_code}) for {method} {endpoint}")
            raise GongAPIError(response.status_code, response.text)

        return response.json()

    # =========================================================================
    # CALLS
    # =========================================================================

    async def list_calls(
        self,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
        workspace_id: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> PaginatedResponse[Call]:
        """
        List calls with optional filters.

        Args:
            from_date_time: ISO-8601 lower bound on call start
            to_date_time: ISO-8601 upper bound on call start
            workspace_id: Restrict to one workspace
            cursor: Cursor from a previous page

        Returns:
            One page of calls
        """
        endpoint = _with_query(
            "/calls",
            {
                "fromDateTime": from_date_time,
                "toDateTime": to_date_time,
                "workspaceId": workspace_id,
                "cursor": cursor,
            },
        )

        response = await self.request(endpoint, "GET")
        return normalize_page(GongResource.CALLS, response, Call)

    async def get_calls_extensive(self, call_ids: list[str]) -> list[Call]:
        """
        Get detailed call data including parties, content and CRM context.

        Args:
            call_ids: Gong call IDs

        Returns:
            Calls with ``content`` and ``context`` populated
        """
        response = await self.request(
            "/calls/extensive",
            "POST",
            {
                "filter": {"callIds": call_ids},
                "contentSelector": EXTENSIVE_CONTENT_SELECTOR,
            },
        )
        return unwrap_list(GongResource.CALLS_EXTENSIVE, response, Call)

    async def get_transcript(self, call_id: str) -> Optional[Transcript]:
        """
        Get the transcript of a single call.

        Returns:
            The transcript, or None if Gong has none for this call
        """
        response = await self.request(
            "/calls/transcript",
            "POST",
            {"filter": {"callIds": [call_id]}},
        )

        transcripts = unwrap_list(GongResource.TRANSCRIPTS, response, Transcript)
        if not transcripts:
            logger.debug(f"No transcript returned for call {call_id}")
            return None
        return transcripts[0]

    async def search_calls(
        self,
        search_term: Optional[str] = None,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
        primary_user_ids: Optional[list[str]] = None,
        cursor: Optional[str] = None,
    ) -> PaginatedResponse[Call]:
        """
        Search calls.

        Gong has no search endpoint, so this is ``list_calls`` restricted to
        the date range and cursor. ``search_term`` and ``primary_user_ids``
        are accepted but not sent upstream; results are not filtered by them.
        """
        if search_term or primary_user_ids:
            logger.debug("search_calls: search_term and primary_user_ids are not applied upstream")

        return await self.list_calls(
            from_date_time=from_date_time,
            to_date_time=to_date_time,
            cursor=cursor,
        )

    # =========================================================================
    # USERS
    # =========================================================================

    async def list_users(self, cursor: Optional[str] = None) -> PaginatedResponse[User]:
        """List all users in the company, one page at a time"""
        endpoint = _with_query("/users", {"cursor": cursor})

        response = await self.request(endpoint, "GET")
        return normalize_page(GongResource.USERS, response, User)

    async def get_users(self, user_ids: list[str]) -> list[User]:
        """Get specific users by ID"""
        response = await self.request(
            "/users/extensive",
            "POST",
            {"filter": {"userIds": user_ids}},
        )
        return unwrap_list(GongResource.USERS_EXTENSIVE, response, User)

    # =========================================================================
    # CRM / DEALS
    # =========================================================================

    async def get_calls_by_crm_object(
        self,
        object_type: CrmObjectType,
        object_ids: list[str],
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
    ) -> list[CrmCallsLink]:
        """
        Get the calls associated with CRM objects.

        Args:
            object_type: Account, Deal, Lead or Contact
            object_ids: CRM object IDs
            from_date_time: Optional ISO-8601 lower bound
            to_date_time: Optional ISO-8601 upper bound

        Returns:
            One link record per CRM object, listing call IDs only
        """
        response = await self.request(
            "/crm/object/calls",
            "POST",
            {
                "filter": _compact({
                    "objectType": CrmObjectType(object_type).value,
                    "objectIds": object_ids,
                    "fromDateTime": from_date_time,
                    "toDateTime": to_date_time,
                }),
            },
        )
        return unwrap_list(GongResource.CRM_CALL_LINKS, response, CrmCallsLink)

    async def list_deals(
        self,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> PaginatedResponse[Deal]:
        """
        List deals/opportunities.

        Requires a CRM integration in Gong; without one the page is empty.
        """
        response = await self.request(
            "/crm/deals",
            "POST",
            _compact({
                "filter": _compact({
                    "fromDateTime": from_date_time,
                    "toDateTime": to_date_time,
                }),
                "cursor": cursor,
            }),
        )
        return normalize_page(GongResource.DEALS, response, Deal)

    # =========================================================================
    # EMAILS
    # =========================================================================

    async def list_emails(
        self,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> PaginatedResponse[Email]:
        """
        List email activity.

        Requires email integration in Gong; without one the page is empty.
        """
        response = await self.request(
            "/emails",
            "POST",
            _compact({
                "filter": _compact({
                    "fromDateTime": from_date_time,
                    "toDateTime": to_date_time,
                }),
                "cursor": cursor,
            }),
        )
        return normalize_page(GongResource.EMAILS, response, Email)

    # =========================================================================
    # STATS
    # =========================================================================

    async def get_user_stats(
        self,
        from_date: str,
        to_date: str,
        user_ids: Optional[list[str]] = None,
    ) -> list[dict[str, Any]]:
        """
        Get aggregated activity stats per user.

        Gong does not guarantee a schema for these records, so they are
        returned as plain dicts.
        """
        response = await self.request(
            "/stats/activity/aggregate",
            "POST",
            {
                "filter": _compact({
                    "fromDate": from_date,
                    "toDate": to_date,
                    "userIds": user_ids,
                }),
            },
        )
        return unwrap_list(GongResource.USER_STATS, response)

    # =========================================================================
    # LIBRARY (Saved Calls)
    # =========================================================================

    async def list_library_folders(self) -> list[LibraryFolder]:
        """List library folders"""
        response = await self.request("/library/folders", "GET")
        return unwrap_list(GongResource.LIBRARY_FOLDERS, response, LibraryFolder)
