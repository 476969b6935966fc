"""
API models for the menu options engine.
"""

from api.models.catalog import CartResponse, CatalogResponse
from api.models.selection import (
    CommitRefusedResponse,
    CommitRequest,
    CommitResponse,
    SelectionRequest,
    SelectionResponse,
)

__all__ = [
    "CartResponse",
    "CatalogResponse",
    "CommitRefusedResponse",
    "CommitRequest",
    "CommitResponse",
    "SelectionRequest",
    "SelectionResponse",
]
