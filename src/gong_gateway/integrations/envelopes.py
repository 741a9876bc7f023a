"""
Gong Response Envelopes

Every Gong endpoint wraps its payload differently: the record array lives
under a resource-specific key (``calls``, ``users``, ``emailActivities``,
``crmCallsLinks``, ...) and paging metadata, when there is any, sits in a
nested ``records`` object. The table below records that per-resource
knowledge; the two normalizers are the only code that reads an envelope.

Missing arrays are normal: Gong omits ``deals`` or ``emailActivities``
entirely when the CRM or email integration is not configured for the
account. They normalize to an empty list, never to an error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from ..models.schemas import PaginatedResponse


class GongResource(str, Enum):
    """Endpoint families with a distinct response envelope"""

    CALLS = "calls"
    CALLS_EXTENSIVE = "calls_extensive"
    TRANSCRIPTS = "transcripts"
    USERS = "users"
    USERS_EXTENSIVE = "users_extensive"
    DEALS = "deals"
    EMAILS = "emails"
    CRM_CALL_LINKS = "crm_call_links"
    USER_STATS = "user_stats"
    LIBRARY_FOLDERS = "library_folders"


@dataclass(frozen=True)
class ResourceEnvelope:
    """Where a resource keeps its records and its paging metadata"""

    records_field: str
    metadata_field: Optional[str] = None


ENVELOPES: dict[GongResource, ResourceEnvelope] = {
    GongResource.CALLS: ResourceEnvelope("calls", metadata_field="records"),
    GongResource.CALLS_EXTENSIVE: ResourceEnvelope("calls"),
    GongResource.TRANSCRIPTS: ResourceEnvelope("callTranscripts"),
    GongResource.USERS: ResourceEnvelope("users", metadata_field="records"),
    GongResource.USERS_EXTENSIVE: ResourceEnvelope("users"),
    GongResource.DEALS: ResourceEnvelope("deals", metadata_field="records"),
    GongResource.EMAILS: ResourceEnvelope("emailActivities", metadata_field="records"),
    GongResource.CRM_CALL_LINKS: ResourceEnvelope("crmCallsLinks"),
    GongResource.USER_STATS: ResourceEnvelope("usersStats"),
    GongResource.LIBRARY_FOLDERS: ResourceEnvelope("libraryFolders"),
}


def extract_records(resource: GongResource, payload: Any) -> list[Any]:
    """
    Pull the raw record array out of a response envelope.

    Args:
        resource: Which endpoint family produced the payload
        payload: Decoded JSON body

    Returns:
        The records in upstream order, or an empty list if the field is absent
    """
    if not isinstance(payload, dict):
        return []
    records = payload.get(ENVELOPES[resource].records_field)
    return list(records) if records else []


def unwrap_list(
    resource: GongResource,
    payload: Any,
    model: Optional[type[BaseModel]] = None,
) -> list[Any]:
    """
    Normalize a non-paginated envelope into a flat list.

    Args:
        resource: Which endpoint family produced the payload
        payload: Decoded JSON body
        model: Optional model to build each record into; raw dicts otherwise

    Returns:
        Records in upstream order
    """
    records = extract_records(resource, payload)
    if model is None:
        return records
    return [model.model_validate(record) for record in records]


def normalize_page(
    resource: GongResource,
    payload: Any,
    model: type[BaseModel],
) -> PaginatedResponse:
    """
    Normalize a paginated envelope into a PaginatedResponse.

    The cursor is copied through untouched; it is never derived locally.

    Args:
        resource: Which endpoint family produced the payload
        payload: Decoded JSON body
        model: Model to build each record into

    Returns:
        PaginatedResponse with records, cursor and total_records
    """
    envelope = ENVELOPES[resource]
    metadata: dict[str, Any] = {}
    if envelope.metadata_field and isinstance(payload, dict):
        found = payload.get(envelope.metadata_field)
        if isinstance(found, dict):
            metadata = found

    return PaginatedResponse[model](
        records=unwrap_list(resource, payload, model),
        cursor=metadata.get("cursor"),
        total_records=metadata.get("totalRecords"),
    )
