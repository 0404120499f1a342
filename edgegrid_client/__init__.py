"""
EdgeGrid client - typed SDK for the AppSec, PAPI and NetStorage APIs.

Layers:
- core: Session, configuration, errors, validation and wire types
- sdk: High-level EdgeGridClient with one operations class per resource
"""

from edgegrid_client.core.client import (
    APIError,
    ClientConfig,
    EdgeGridError,
    NotFoundError,
    RequestOptions,
    StructValidationError,
    TransportError,
)
from edgegrid_client.sdk import EdgeGridClient

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "ClientConfig",
    "EdgeGridClient",
    "EdgeGridError",
    "NotFoundError",
    "RequestOptions",
    "StructValidationError",
    "TransportError",
]
