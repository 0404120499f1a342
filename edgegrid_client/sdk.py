"""
EdgeGrid SDK - High-level client with typed operations.

This layer provides one operations class per resource, built on top of the
core Session. Every operation validates its request, builds the path, makes
exactly one call and decodes the result.
"""

import json
from collections.abc import Callable, Collection
from typing import Any, TypeVar

from edgegrid_client.core.client import (
    ClientConfig,
    EdgeGridError,
    NotFoundError,
    RequestOptions,
    Session,
    build_query,
    path_segment,
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
    ListStorageGroupsRequest,
    ListStorageGroupsResponse,
    StorageGroup,
    StorageGroupResponse,
    UpdatePropertyVersionHostnamesRequest,
    UpdatePropertyVersionHostnamesResponse,
    UpdateStorageGroupRequest,
)
from edgegrid_client.core.validation import validate_required

T = TypeVar("T")


class EdgeGridClient:
    """
    High-level client for the AppSec, PAPI and NetStorage APIs.

    Example:
        client = EdgeGridClient(ClientConfig(base_url="https://akab-xxxx.luna.akamaiapis.net"))

        clone = client.appsec.get_configuration_clone(
            GetConfigurationCloneRequest(config_id=43253, version=15)
        )
        hostnames = client.papi.get_property_version_hostnames(
            GetPropertyVersionHostnamesRequest(property_id="prp_175780", property_version=3)
        )

    """

    def __init__(self, config: ClientConfig):
        """
        Initialize the client.

        Args:
            config: Immutable client configuration

        """
        self._session = Session(config)

        # Sub-clients for each API family
        self.appsec = ConfigurationCloneOperations(self._session)
        self.papi = PropertyHostnameOperations(self._session)
        self.storage = StorageGroupOperations(self._session)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "EdgeGridClient":
        """Create a client from EDGEGRID_* environment variables."""
        return cls(ClientConfig.from_env(env_file))

    @property
    def config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._session.config


class _Operations:
    """Shared request/decode plumbing for the operation classes."""

    def __init__(self, session: Session):
        self._session = session

    def _call(
        self,
        method: str,
        path: str,
        expected: Collection[int],
        parser: Callable[[dict[str, Any]], T],
        body: Any = None,
        options: RequestOptions | None = None,
        not_found_message: bool = False,
    ) -> T:
        """
        Execute one request and decode the response.

        Raises:
            APIError: If the status is not one of the expected codes
            NotFoundError: On 404 when not_found_message is set
            TransportError: If the request could not be sent

        """
        response = self._session.exec(method, path, body=body, options=options)
        if response.status in expected:
            try:
                return parser(response.json() or {})
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise EdgeGridError(f"Invalid JSON response: {e}") from e
        if not_found_message and response.status == 404:
            raise NotFoundError(path)
        raise self._session.error(response)


# =============================================================================
# AppSec Operations
# =============================================================================


class ConfigurationCloneOperations(_Operations):
    """Operations on security configuration versions."""

    def get_configuration_clone(
        self,
        params: GetConfigurationCloneRequest,
        options: RequestOptions | None = None,
    ) -> GetConfigurationCloneResponse:
        """
        Get a configuration version.

        Args:
            params: Configuration id and version number
            options: Per-call header overrides

        Returns:
            GetConfigurationCloneResponse

        Raises:
            StructValidationError: If config_id or version is missing
            APIError: On a non-200 response

        """
        self._session.log(options).debug("GetConfigurationClone")
        validate_required(params)

        path = f"/appsec/v1/configs/{path_segment(params.config_id)}/versions/{path_segment(params.version)}"
        return self._call("GET", path, (200,), GetConfigurationCloneResponse.from_dict, options=options)

    def create_configuration_clone(
        self,
        params: CreateConfigurationCloneRequest,
        options: RequestOptions | None = None,
    ) -> CreateConfigurationCloneResponse:
        """
        Create a new configuration version cloned from an existing one.

        Args:
            params: Configuration id, source version and rule update flag
            options: Per-call header overrides

        Returns:
            CreateConfigurationCloneResponse for the new version

        """
        self._session.log(options).debug("CreateConfigurationClone")
        validate_required(params)

        path = f"/appsec/v1/configs/{path_segment(params.config_id)}/versions"
        return self._call(
            "POST",
            path,
            (200, 201),
            CreateConfigurationCloneResponse.from_dict,
            body=params.to_dict(),
            options=options,
        )


# =============================================================================
# Property Hostname Operations
# =============================================================================


class PropertyHostnameOperations(_Operations):
    """Operations on the hostnames of a property version."""

    @staticmethod
    def _hostnames_path(property_id: str, property_version: int, query: dict[str, Any]) -> str:
        return (
            f"/papi/v1/properties/{path_segment(property_id)}"
            f"/versions/{path_segment(property_version)}/hostnames?{build_query(query)}"
        )

    def get_property_version_hostnames(
        self,
        params: GetPropertyVersionHostnamesRequest,
        options: RequestOptions | None = None,
    ) -> GetPropertyVersionHostnamesResponse:
        """
        List the hostnames of a property version.

        Args:
            params: Property id and version; contract, group and validation flag are optional
            options: Per-call header overrides

        Returns:
            GetPropertyVersionHostnamesResponse

        Raises:
            StructValidationError: If property_id or property_version is missing
            NotFoundError: If the property version does not exist
            APIError: On any other non-200 response

        """
        self._session.log(options).debug("GetPropertyVersionHostnames")
        validate_required(params)

        path = self._hostnames_path(params.property_id, params.property_version, params.query())
        return self._call(
            "GET",
            path,
            (200,),
            GetPropertyVersionHostnamesResponse.from_dict,
            options=options,
            not_found_message=True,
        )

    def update_property_version_hostnames(
        self,
        params: UpdatePropertyVersionHostnamesRequest,
        options: RequestOptions | None = None,
    ) -> UpdatePropertyVersionHostnamesResponse:
        """
        Replace the hostnames of a property version.

        Args:
            params: Property id, version and the full hostname list
            options: Per-call header overrides

        Returns:
            UpdatePropertyVersionHostnamesResponse with the resulting hostnames

        Raises:
            StructValidationError: If property_id, property_version or hostnames are missing
            NotFoundError: If the property version does not exist
            APIError: On any other non-200 response

        """
        self._session.log(options).debug("UpdatePropertyVersionHostnames")
        validate_required(params)

        path = self._hostnames_path(params.property_id, params.property_version, params.query())
        return self._call(
            "PUT",
            path,
            (200,),
            UpdatePropertyVersionHostnamesResponse.from_dict,
            body=params.to_list(),
            options=options,
            not_found_message=True,
        )


# =============================================================================
# Storage Group Operations
# =============================================================================


STORAGE_GROUPS_PATH = "/storage/v1/storage-groups"


class StorageGroupOperations(_Operations):
    """Operations on NetStorage storage groups."""

    def list_storage_groups(
        self,
        params: ListStorageGroupsRequest | None = None,
        options: RequestOptions | None = None,
    ) -> ListStorageGroupsResponse:
        """
        List storage groups, optionally filtered by purpose.

        Returns:
            ListStorageGroupsResponse

        """
        self._session.log(options).debug("ListStorageGroups")
        params = params or ListStorageGroupsRequest()

        query = build_query(params.query())
        path = f"{STORAGE_GROUPS_PATH}?{query}" if query else STORAGE_GROUPS_PATH
        return self._call("GET", path, (200,), ListStorageGroupsResponse.from_dict, options=options)

    def get_storage_group(
        self,
        params: GetStorageGroupRequest,
        options: RequestOptions | None = None,
    ) -> StorageGroup:
        """
        Get a storage group by ID.

        Args:
            params: The storage group ID
            options: Per-call header overrides

        Returns:
            StorageGroup details

        """
        self._session.log(options).debug("GetStorageGroup")
        validate_required(params)

        path = f"{STORAGE_GROUPS_PATH}/{path_segment(params.storage_group_id)}"
        return self._call("GET", path, (200,), StorageGroup.from_dict, options=options)

    def create_storage_group(
        self,
        params: CreateStorageGroupRequest,
        options: RequestOptions | None = None,
    ) -> StorageGroupResponse:
        """Create a storage group."""
        self._session.log(options).debug("CreateStorageGroup")
        validate_required(params)

        return self._call(
            "POST",
            STORAGE_GROUPS_PATH,
            (200, 201, 202),
            StorageGroupResponse.from_dict,
            body=params.storage_group.to_dict(),
            options=options,
        )

    def update_storage_group(
        self,
        params: UpdateStorageGroupRequest,
        options: RequestOptions | None = None,
    ) -> StorageGroupResponse:
        """Update a storage group."""
        self._session.log(options).debug("UpdateStorageGroup")
        validate_required(params)

        path = f"{STORAGE_GROUPS_PATH}/{path_segment(params.storage_group_id)}"
        return self._call(
            "PUT",
            path,
            (200, 202),
            StorageGroupResponse.from_dict,
            body=params.storage_group.to_dict(),
            options=options,
        )

    def delete_storage_group(
        self,
        params: DeleteStorageGroupRequest,
        options: RequestOptions | None = None,
    ) -> StorageGroupResponse:
        """
        Delete a storage group.

        Returns:
            StorageGroupResponse; empty when the API answers without a body

        """
        self._session.log(options).debug("DeleteStorageGroup")
        validate_required(params)

        path = f"{STORAGE_GROUPS_PATH}/{path_segment(params.storage_group_id)}"
        return self._call("DELETE", path, (200, 202, 204), StorageGroupResponse.from_dict, options=options)
