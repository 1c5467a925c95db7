"""Application ports - interfaces for external adapters."""

from parish.application.ports.document_store import DocumentStore
from parish.application.ports.identity_provider import Identity, IdentityProvider

__all__ = [
    "DocumentStore",
    "Identity",
    "IdentityProvider",
]
