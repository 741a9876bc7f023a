"""
Gong API Gateway

Typed async client for Gong's conversation-intelligence REST API with:
- One authenticated request primitive
- Uniform PaginatedResponse for every listing endpoint
- Calls, transcripts, users, deals, emails, stats and library folders
"""

from .core import GongAPIError, GongGatewayException, MissingCredentialsError
from .integrations import GongClient, GongConfig, iter_pages
from .models import (
    Call,
    CrmCallsLink,
    CrmObjectType,
    Deal,
    Email,
    EmailDirection,
    LibraryFolder,
    PaginatedResponse,
    Party,
    PartyAffiliation,
    Transcript,
    User,
)

__version__ = "0.1.0"

__all__ = [
    "GongClient",
    "GongConfig",
    "iter_pages",
    "GongAPIError",
    "GongGatewayException",
    "MissingCredentialsError",
    "Call",
    "CrmCallsLink",
    "CrmObjectType",
    "Deal",
    "Email",
    "EmailDirection",
    "LibraryFolder",
    "PaginatedResponse",
    "Party",
    "PartyAffiliation",
    "Transcript",
    "User",
]
