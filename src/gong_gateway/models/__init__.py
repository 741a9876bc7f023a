"""Gong resource models"""

from .schemas import (
    Call,
    CallContent,
    CrmCallRef,
    CrmCallsLink,
    CrmContext,
    CrmObjectType,
    Deal,
    Email,
    EmailDirection,
    LibraryFolder,
    PaginatedResponse,
    Party,
    PartyAffiliation,
    Transcript,
    TranscriptEntry,
    User,
)

__all__ = [
    "Call",
    "CallContent",
    "CrmCallRef",
    "CrmCallsLink",
    "CrmContext",
    "CrmObjectType",
    "Deal",
    "Email",
    "EmailDirection",
    "LibraryFolder",
    "PaginatedResponse",
    "Party",
    "PartyAffiliation",
    "Transcript",
    "TranscriptEntry",
    "User",
]
