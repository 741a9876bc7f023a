"""Gong API integration"""

from .gong_client import GongClient, GongConfig, EXTENSIVE_CONTENT_SELECTOR
from .envelopes import GongResource, ResourceEnvelope, ENVELOPES
from .pagination import iter_pages

__all__ = [
    "GongClient",
    "GongConfig",
    "EXTENSIVE_CONTENT_SELECTOR",
    "GongResource",
    "ResourceEnvelope",
    "ENVELOPES",
    "iter_pages",
]
