"""
Core layer - Session, errors, validation and wire types.

This layer provides:
- Typed dataclasses matching the API request and response bodies
- Low-level HTTP session with signing hook and error decoding
- Required-field validation run before any request is sent
"""

from edgegrid_client.core.client import (
    APIError,
    ClientConfig,
    EdgeGridError,
    ErrorItem,
    NotFoundError,
    RequestOptions,
    Response,
    Session,
    StructValidationError,
    TransportError,
)
from edgegrid_client.core.types import (
    CreateConfigurationCloneRequest,
    CreateConfigurationCloneResponse,
    CreateStorageGroupRequest,
    DeleteStorageGroupRequest,
    GetConfigurationCloneRequest,
    GetConfigurationCloneResponse,
    GetPropertyVersionHostnamesRequest,
    GetPropertyVersionHostnamesResponse,
    GetStorageGroupRequest,
    Hostname,
    HostnameRequestItems,
    HostnameResponseItems,
    ListStorageGroupsRequest,
    ListStorageGroupsResponse,
    StorageGroup,
    StorageGroupResponse,
    UpdatePropertyVersionHostnamesRequest,
    UpdatePropertyVersionHostnamesResponse,
    UpdateStorageGroupRequest,
)
from edgegrid_client.core.validation import validate_required

__all__ = [
    "APIError",
    "ClientConfig",
    "CreateConfigurationCloneRequest",
    "CreateConfigurationCloneResponse",
    "CreateStorageGroupRequest",
    "DeleteStorageGroupRequest",
    "EdgeGridError",
    "ErrorItem",
    "GetConfigurationCloneRequest",
    "GetConfigurationCloneResponse",
    "GetPropertyVersionHostnamesRequest",
    "GetPropertyVersionHostnamesResponse",
    "GetStorageGroupRequest",
    "Hostname",
    "HostnameRequestItems",
    "HostnameResponseItems",
    "ListStorageGroupsRequest",
    "ListStorageGroupsResponse",
    "NotFoundError",
    "RequestOptions",
    "Response",
    "Session",
    "StorageGroup",
    "StorageGroupResponse",
    "StructValidationError",
    "TransportError",
    "UpdatePropertyVersionHostnamesRequest",
    "UpdatePropertyVersionHostnamesResponse",
    "UpdateStorageGroupRequest",
    "validate_required",
]
