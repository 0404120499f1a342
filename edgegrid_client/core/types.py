"""
Request and response types for the EdgeGrid APIs.

Request dataclasses declare their mandatory fields in REQUIRED_FIELDS as
dotted attribute paths. Response dataclasses are built from the JSON body
with from_dict.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop unset values (None, empty strings and collections, zero numbers); keep booleans."""
    return {k: v for k, v in data.items() if isinstance(v, bool) or v}


# =============================================================================
# AppSec Types
# =============================================================================


@dataclass
class VersionActivation:
    """Activation state of a configuration version on one network."""

    status: str = ""
    time: str | None = None
    action: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VersionActivation":
        """Create from API response dict."""
        data = data or {}
        return cls(
            status=data.get("status", ""),
            time=data.get("time"),
            action=data.get("action"),
        )


@dataclass
class ConfigurationVersion:
    """A security configuration version."""

    config_id: int = 0
    config_name: str = ""
    version: int = 0
    version_notes: str = ""
    create_date: str | None = None
    created_by: str | None = None
    based_on: int | None = None
    production: VersionActivation = field(default_factory=VersionActivation)
    staging: VersionActivation = field(default_factory=VersionActivation)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create from API response dict."""
        return cls(
            config_id=data.get("configId", 0),
            config_name=data.get("configName", ""),
            version=data.get("version", 0),
            version_notes=data.get("versionNotes", ""),
            create_date=data.get("createDate"),
            created_by=data.get("createdBy"),
            based_on=data.get("basedOn"),
            production=VersionActivation.from_dict(data.get("production")),
            staging=VersionActivation.from_dict(data.get("staging")),
        )


@dataclass
class GetConfigurationCloneRequest:
    """Identifies one configuration version."""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("config_id", "version")

    config_id: int = 0
    version: int = 0


@dataclass
class GetConfigurationCloneResponse(ConfigurationVersion):
    """A configuration version as returned by a lookup."""


@dataclass
class CreateConfigurationCloneRequest:
    """Clone an existing configuration version into a new one."""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("config_id", "create_from_version")

    config_id: int = 0
    create_from_version: int = 0
    rule_update: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {
            "createFromVersion": self.create_from_version,
            "ruleUpdate": self.rule_update,
        }


@dataclass
class CreateConfigurationCloneResponse(ConfigurationVersion):
    """The configuration version created by a clone."""


# =============================================================================
# Property Hostname Types
# =============================================================================


@dataclass
class Hostname:
    """A hostname mapping on a property version."""

    cname_type: str = ""
    edge_hostname_id: str = ""
    cname_from: str = ""
    cname_to: str = ""
    cert_provisioning_type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hostname":
        """Create from API response dict."""
        return cls(
            cname_type=data.get("cnameType", ""),
            edge_hostname_id=data.get("edgeHostnameId", ""),
            cname_from=data.get("cnameFrom", ""),
            cname_to=data.get("cnameTo", ""),
            cert_provisioning_type=data.get("certProvisioningType", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request, omitting empty fields."""
        return _compact(
            {
                "cnameType": self.cname_type,
                "edgeHostnameId": self.edge_hostname_id,
                "cnameFrom": self.cname_from,
                "cnameTo": self.cname_to,
                "certProvisioningType": self.cert_provisioning_type,
            }
        )


@dataclass
class HostnameRequestItems:
    """Hostnames to set on a property version."""

    items: list[Hostname] = field(default_factory=list)


@dataclass
class HostnameResponseItems:
    """Hostnames returned for a property version."""

    items: list[Hostname] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "HostnameResponseItems":
        """Create from API response dict."""
        data = data or {}
        return cls(items=[Hostname.from_dict(item) for item in data.get("items") or []])


@dataclass
class PropertyVersionHostnames:
    """Hostnames of a property version with the ids it belongs to."""

    account_id: str = ""
    contract_id: str = ""
    group_id: str = ""
    property_id: str = ""
    property_version: int = 0
    etag: str = ""
    hostnames: HostnameResponseItems = field(default_factory=HostnameResponseItems)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create from API response dict."""
        return cls(
            account_id=data.get("accountId", ""),
            contract_id=data.get("contractId", ""),
            group_id=data.get("groupId", ""),
            property_id=data.get("propertyId", ""),
            property_version=data.get("propertyVersion", 0),
            etag=data.get("etag", ""),
            hostnames=HostnameResponseItems.from_dict(data.get("hostnames")),
        )


@dataclass
class GetPropertyVersionHostnamesRequest:
    """Look up the hostnames of a property version."""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("property_id", "property_version")

    property_id: str = ""
    property_version: int = 0
    contract_id: str = ""
    group_id: str = ""
    validate_hostnames: bool = False

    def query(self) -> dict[str, Any]:
        """Query parameters in wire order."""
        return {
            "contractId": self.contract_id,
            "groupId": self.group_id,
            "validateHostnames": self.validate_hostnames,
        }


@dataclass
class GetPropertyVersionHostnamesResponse(PropertyVersionHostnames):
    """Hostnames currently set on a property version."""


@dataclass
class UpdatePropertyVersionHostnamesRequest:
    """Replace the hostnames of a property version."""

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "property_id",
        "property_version",
        "hostnames",
        "hostnames.items",
    )

    property_id: str = ""
    property_version: int = 0
    contract_id: str = ""
    group_id: str = ""
    validate_hostnames: bool = False
    hostnames: HostnameRequestItems | None = None

    def query(self) -> dict[str, Any]:
        """Query parameters in wire order."""
        return {
            "contractId": self.contract_id,
            "groupId": self.group_id,
            "validateHostnames": self.validate_hostnames,
        }

    def to_list(self) -> list[dict[str, Any]]:
        """The request body: a bare JSON array of hostnames."""
        if self.hostnames is None:
            return []
        return [hostname.to_dict() for hostname in self.hostnames.items]


@dataclass
class UpdatePropertyVersionHostnamesResponse(PropertyVersionHostnames):
    """Hostnames set on a property version after an update."""


# =============================================================================
# Storage Group Types
# =============================================================================


@dataclass
class Link:
    """A hypermedia link."""

    rel: str
    href: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        """Create from API response dict."""
        return cls(rel=data.get("rel", ""), href=data.get("href", ""))


@dataclass
class ResponseStatus:
    """Status returned on create, update or delete of a storage entity."""

    change_id: str = ""
    links: list[Link] | None = None
    message: str = ""
    passing_validation: bool = False
    propagation_status: str = ""
    propagation_status_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResponseStatus":
        """Create from API response dict."""
        links = data.get("links")
        return cls(
            change_id=data.get("changeId", ""),
            links=[Link.from_dict(link) for link in links] if links is not None else None,
            message=data.get("message", ""),
            passing_validation=data.get("passingValidation", False),
            propagation_status=data.get("propagationStatus", ""),
            propagation_status_date=data.get("propagationStatusDate", ""),
        )


@dataclass
class CPCode:
    """A CP code attached to a storage group."""

    cpcode_id: int = 0
    download_security: str = ""
    use_ssl: bool = False
    serve_from_zip: bool = False
    send_hash: bool = False
    quick_delete: bool = False
    number_of_files: int = 0
    number_of_bytes: int = 0
    last_changes_propagated: bool = False
    request_upload_logs: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CPCode":
        """Create from API response dict."""
        return cls(
            cpcode_id=data.get("cpcodeId", 0),
            download_security=data.get("downloadSecurity", ""),
            use_ssl=data.get("useSsl", False),
            serve_from_zip=data.get("serveFromZip", False),
            send_hash=data.get("sendHash", False),
            quick_delete=data.get("quickDelete", False),
            number_of_files=data.get("numberOfFiles", 0),
            number_of_bytes=data.get("numberOfBytes", 0),
            last_changes_propagated=data.get("lastChangesPropagated", False),
            request_upload_logs=data.get("requestUploadLogs", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "cpcodeId": self.cpcode_id,
                "downloadSecurity": self.download_security,
                "useSsl": self.use_ssl,
                "serveFromZip": self.serve_from_zip,
                "sendHash": self.send_hash,
                "quickDelete": self.quick_delete,
                "requestUploadLogs": self.request_upload_logs,
            }
        )


@dataclass
class Zone:
    """An upload/download zone of a storage group."""

    zone_name: str = ""
    no_capacity_action: str = ""
    allow_upload: bool = False
    allow_download: bool = False
    last_modified_by: str = ""
    last_modified_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Zone":
        """Create from API response dict."""
        return cls(
            zone_name=data.get("zoneName", ""),
            no_capacity_action=data.get("noCapacityAction", ""),
            allow_upload=data.get("allowUpload", False),
            allow_download=data.get("allowDownload", False),
            last_modified_by=data.get("lastModifiedBy", ""),
            last_modified_date=data.get("lastModifiedDate", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "zoneName": self.zone_name,
                "noCapacityAction": self.no_capacity_action,
                "allowUpload": self.allow_upload,
                "allowDownload": self.allow_download,
            }
        )


@dataclass
class StorageGroup:
    """A NetStorage storage group."""

    storage_group_id: int = 0
    storage_group_name: str = ""
    storage_group_type: str = ""
    storage_group_purpose: str = ""
    domain_prefix: str = ""
    aspera_enabled: bool = False
    pci_enabled: bool = False
    estimated_usage_gb: float = 0
    allow_edit: bool = False
    provision_status: str = ""
    contract_id: str = ""
    cpcodes: list[CPCode] = field(default_factory=list)
    zones: list[Zone] = field(default_factory=list)
    last_modified_by: str = ""
    last_modified_date: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StorageGroup":
        """Create from API response dict."""
        return cls(
            storage_group_id=data.get("storageGroupId", 0),
            storage_group_name=data.get("storageGroupName", ""),
            storage_group_type=data.get("storageGroupType", ""),
            storage_group_purpose=data.get("storageGroupPurpose", ""),
            domain_prefix=data.get("domainPrefix", ""),
            aspera_enabled=data.get("asperaEnabled", False),
            pci_enabled=data.get("pciEnabled", False),
            estimated_usage_gb=data.get("estimatedUsageGB", 0),
            allow_edit=data.get("allowEdit", False),
            provision_status=data.get("provisionStatus", ""),
            contract_id=data.get("contractId", ""),
            cpcodes=[CPCode.from_dict(c) for c in data.get("cpcodes") or []],
            zones=[Zone.from_dict(z) for z in data.get("zones") or []],
            last_modified_by=data.get("lastModifiedBy", ""),
            last_modified_date=data.get("lastModifiedDate", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request; read-only fields are not sent."""
        return _compact(
            {
                "storageGroupId": self.storage_group_id,
                "storageGroupName": self.storage_group_name,
                "storageGroupType": self.storage_group_type,
                "storageGroupPurpose": self.storage_group_purpose,
                "domainPrefix": self.domain_prefix,
                "asperaEnabled": self.aspera_enabled,
                "pciEnabled": self.pci_enabled,
                "estimatedUsageGB": self.estimated_usage_gb,
                "contractId": self.contract_id,
                "cpcodes": [c.to_dict() for c in self.cpcodes],
                "zones": [z.to_dict() for z in self.zones],
            }
        )


@dataclass
class StorageGroupResponse:
    """Result of a storage group create, update or delete."""

    status: ResponseStatus | None = None
    resource: StorageGroup | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StorageGroupResponse":
        """Create from API response dict."""
        status = data.get("status")
        resource = data.get("resource")
        return cls(
            status=ResponseStatus.from_dict(status) if status is not None else None,
            resource=StorageGroup.from_dict(resource) if resource is not None else None,
        )


@dataclass
class ListStorageGroupsRequest:
    """Optional filters for listing storage groups."""

    storage_group_purpose: str | None = None

    def query(self) -> dict[str, Any]:
        """Query parameters in wire order."""
        return {"storageGroupPurpose": self.storage_group_purpose or None}


@dataclass
class ListStorageGroupsResponse:
    """All storage groups visible to the caller."""

    items: list[StorageGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListStorageGroupsResponse":
        """Create from API response dict."""
        return cls(items=[StorageGroup.from_dict(item) for item in data.get("items") or []])


@dataclass
class GetStorageGroupRequest:
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("storage_group_id",)

    storage_group_id: int = 0


@dataclass
class CreateStorageGroupRequest:
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "storage_group",
        "storage_group.storage_group_name",
        "storage_group.contract_id",
    )

    storage_group: StorageGroup | None = None


@dataclass
class UpdateStorageGroupRequest:
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("storage_group_id", "storage_group")

    storage_group_id: int = 0
    storage_group: StorageGroup | None = None


@dataclass
class DeleteStorageGroupRequest:
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("storage_group_id",)

    storage_group_id: int = 0
