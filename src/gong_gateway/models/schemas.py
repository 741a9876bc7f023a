"""
Pydantic schemas for Gong API resources

The shapes are dictated by the Gong API and only declared here. Identifiers
are required; everything else is optional and unknown upstream fields are
kept. Nested blocks whose shape Gong varies are left as decoded JSON,
numbers are floats, and an unrecognized party affiliation reads as Unknown.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================


class PartyAffiliation(str, Enum):
    INTERNAL = "Internal"
    EXTERNAL = "External"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class EmailDirection(str, Enum):
    INBOUND = "Inbound"
    OUTBOUND = "Outbound"


class CrmObjectType(str, Enum):
    ACCOUNT = "Account"
    DEAL = "Deal"
    LEAD = "Lead"
    CONTACT = "Contact"


# =============================================================================
# BASE
# =============================================================================


class GongModel(BaseModel):
    """Base for all resource records: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


# =============================================================================
# CRM CONTEXT
# =============================================================================


class CrmField(GongModel):
    name: str
    value: Any = None


class CrmContextObject(GongModel):
    object_type: str
    object_id: str
    fields: list[CrmField] = Field(default_factory=list)


class CrmContext(GongModel):
    """CRM objects attached to a call or a party by an external system"""

    system: str
    objects: list[CrmContextObject] = Field(default_factory=list)


# =============================================================================
# CALLS
# =============================================================================


class Party(GongModel):
    id: str
    email_address: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    user_id: Optional[str] = None
    speaker_id: Optional[str] = None
    context: Optional[list[CrmContext]] = None
    affiliation: PartyAffiliation = PartyAffiliation.UNKNOWN


class CallContent(GongModel):
    """
    Content blocks of an extensive call lookup.

    Gong reshapes these between API versions (``pointsOfInterest`` is a list
    on some accounts and an object keyed by kind on others), so they are
    kept as decoded JSON.
    """

    trackers: Any = None
    topics: Any = None
    points_of_interest: Any = None


class Call(GongModel):
    """
    A recorded call.

    ``content`` and ``context`` are only populated by the extensive lookup
    (``GongClient.get_calls_extensive``); plain listing leaves them unset.
    """

    id: str
    title: Optional[str] = None
    scheduled: Optional[str] = None
    started: Optional[str] = None
    duration: Optional[float] = None
    primary_user_id: Optional[str] = None
    direction: Optional[str] = None
    scope: Optional[str] = None
    media: Optional[str] = None
    language: Optional[str] = None
    url: Optional[str] = None
    parties: list[Party] = Field(default_factory=list)
    content: Optional[CallContent] = None
    context: Optional[list[CrmContext]] = None


# =============================================================================
# TRANSCRIPTS
# =============================================================================


class Sentence(GongModel):
    start: float
    end: float
    text: str


class TranscriptEntry(GongModel):
    """One speaker turn; sentences keep upstream order"""

    speaker_id: str
    topic: Optional[str] = None
    sentences: list[Sentence] = Field(default_factory=list)


class Transcript(GongModel):
    call_id: str
    transcript: list[TranscriptEntry] = Field(default_factory=list)


# =============================================================================
# USERS
# =============================================================================


class UserSettings(GongModel):
    web_conferences_recorded: bool = False
    prevent_web_conference_recording: bool = False


class User(GongModel):
    id: str
    email_address: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    phone_number: Optional[str] = None
    extension: Optional[str] = None
    personal_meeting_urls: Optional[list[str]] = None
    settings: Optional[UserSettings] = None
    manager_id: Optional[str] = None
    meeting_consent_page_url: Optional[str] = None
    active: bool = True
    created: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


# =============================================================================
# CRM: DEALS AND CALL LINKS
# =============================================================================


class DealAccount(GongModel):
    id: str
    name: Optional[str] = None


class Deal(GongModel):
    id: str
    url: Optional[str] = None
    title: Optional[str] = None
    account: Optional[DealAccount] = None
    close_date: Optional[str] = None
    amount: Optional[float] = None
    stage: Optional[str] = None
    status: Optional[str] = None


class CrmCallRef(GongModel):
    call_id: str


class CrmCallsLink(GongModel):
    """Association between one CRM object and the calls logged against it"""

    object_id: str
    calls: list[CrmCallRef] = Field(default_factory=list)


# =============================================================================
# EMAILS
# =============================================================================


class Email(GongModel):
    id: str
    subject: Optional[str] = None
    from_email_address: Optional[str] = None
    to_email_addresses: list[str] = Field(default_factory=list)
    cc_email_addresses: Optional[list[str]] = None
    sent_time: Optional[str] = None
    direction: Optional[EmailDirection] = None
    body: Optional[str] = None


# =============================================================================
# LIBRARY
# =============================================================================


class LibraryFolder(GongModel):
    id: str
    name: str


# =============================================================================
# PAGINATION
# =============================================================================


T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Normalized envelope returned by every listing method.

    ``cursor`` is an opaque upstream token: pass it back unchanged to fetch
    the next page; ``None`` means this is the last page. ``total_records`` is
    Gong's estimate of matches across all pages, not ``len(records)``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    records: list[T] = Field(default_factory=list)
    cursor: Optional[str] = None
    total_records: Optional[int] = None

    @property
    def has_more(self) -> bool:
        return bool(self.cursor)
