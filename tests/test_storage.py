"""
Storage group operation tests against a local mock API server.

Run with: python -m pytest tests/test_storage.py -v
"""

import pytest

from conftest import load_fixture
from edgegrid_client import APIError, EdgeGridError, StructValidationError
from edgegrid_client.core.client import ErrorItem
from edgegrid_client.core.types import (
    CPCode,
    CreateStorageGroupRequest,
    DeleteStorageGroupRequest,
    GetStorageGroupRequest,
    Link,
    ListStorageGroupsRequest,
    ResponseStatus,
    StorageGroup,
    UpdateStorageGroupRequest,
    Zone,
)

VALIDATION_FAILURE_BODY = """
{
    "type": "validation-error",
    "title": "Validation failure",
    "instance": "6d00fc96-5431-4efa-86eb-afbb6cbdb5bc",
    "status": 400,
    "detail": "Validation failed. Please review the errors.",
    "errors": [
        {
            "type": "error-types/invalid-value",
            "title": "Invalid value",
            "detail": "Unable to find the given storage group.",
            "field": "storageGroupId"
        }
    ]
}
"""

EXPECTED_GROUP = StorageGroup(
    storage_group_id=1,
    storage_group_name="Storage1",
    storage_group_type="NETSTORAGE",
    storage_group_purpose="NETSTORAGE",
    domain_prefix="storage1",
    estimated_usage_gb=0.1,
    allow_edit=True,
    provision_status="PROVISIONED",
    contract_id="1-1TJZH5",
    cpcodes=[
        CPCode(
            cpcode_id=12345,
            download_security="ALL_EXCEPT_ZIP",
            number_of_files=42,
            number_of_bytes=1024,
            last_changes_propagated=True,
        )
    ],
    zones=[
        Zone(
            zone_name="europe",
            no_capacity_action="SPILL_OUTSIDE",
            allow_upload=True,
            allow_download=True,
            last_modified_by="jdoe",
            last_modified_date="2021-01-12T10:00:00Z",
        )
    ],
    last_modified_by="jdoe",
    last_modified_date="2021-01-12T10:00:00Z",
)


class TestGetStorageGroup:
    """GET /storage/v1/storage-groups/{storageGroupId}"""

    def test_200_ok(self, client, mock_server):
        mock_server.respond(200, load_fixture("StorageGroup.json"))

        result = client.storage.get_storage_group(GetStorageGroupRequest(storage_group_id=1))

        assert result == EXPECTED_GROUP
        assert mock_server.requests[0].method == "GET"
        assert mock_server.requests[0].path == "/storage/v1/storage-groups/1"

    def test_200_with_undecodable_body(self, client, mock_server):
        mock_server.respond(200, b"\xff\xfe")

        with pytest.raises(EdgeGridError, match="Invalid JSON response"):
            client.storage.get_storage_group(GetStorageGroupRequest(storage_group_id=1))

    def test_400_validation_failure(self, client, mock_server):
        mock_server.respond(400, VALIDATION_FAILURE_BODY)

        with pytest.raises(APIError) as exc_info:
            client.storage.get_storage_group(GetStorageGroupRequest(storage_group_id=-9))

        error = exc_info.value
        assert error == APIError(
            type="validation-error",
            title="Validation failure",
            detail="Validation failed. Please review the errors.",
            status_code=400,
        )
        assert error.instance == "6d00fc96-5431-4efa-86eb-afbb6cbdb5bc"
        assert error.errors == [
            ErrorItem(
                type="error-types/invalid-value",
                title="Invalid value",
                detail="Unable to find the given storage group.",
                field="storageGroupId",
            )
        ]
        assert mock_server.requests[0].path == "/storage/v1/storage-groups/-9"

    def test_404_is_a_plain_api_error(self, client, mock_server):
        mock_server.respond(404, '{"type":"not_found","title":"Not found","detail":"No such group","status":404}')

        with pytest.raises(APIError) as exc_info:
            client.storage.get_storage_group(GetStorageGroupRequest(storage_group_id=7))

        assert exc_info.value.status_code == 404

    def test_validation_error(self, client, mock_server):
        with pytest.raises(StructValidationError):
            client.storage.get_storage_group(GetStorageGroupRequest())

        assert mock_server.requests == []


class TestListStorageGroups:
    """GET /storage/v1/storage-groups"""

    @pytest.mark.parametrize(
        "params,expected_path",
        [
            (None, "/storage/v1/storage-groups"),
            (ListStorageGroupsRequest(), "/storage/v1/storage-groups"),
            (
                ListStorageGroupsRequest(storage_group_purpose="NETSTORAGE"),
                "/storage/v1/storage-groups?storageGroupPurpose=NETSTORAGE",
            ),
        ],
    )
    def test_200_ok(self, client, mock_server, params, expected_path):
        mock_server.respond(200, load_fixture("StorageGroups.json"))

        result = client.storage.list_storage_groups(params)

        assert [group.storage_group_id for group in result.items] == [1, 2]
        assert [group.provision_status for group in result.items] == ["PROVISIONED", "NOT_PROVISIONED"]
        assert mock_server.requests[0].path == expected_path


class TestWriteStorageGroup:
    """POST, PUT and DELETE on /storage/v1/storage-groups"""

    def _group(self) -> StorageGroup:
        return StorageGroup(
            storage_group_name="Storage1",
            storage_group_type="NETSTORAGE",
            storage_group_purpose="NETSTORAGE",
            domain_prefix="storage1",
            contract_id="1-1TJZH5",
            zones=[Zone(zone_name="europe", no_capacity_action="SPILL_OUTSIDE", allow_upload=True)],
        )

    def test_create_202_accepted(self, client, mock_server):
        mock_server.respond(202, load_fixture("StorageGroupResponse.json"))

        result = client.storage.create_storage_group(CreateStorageGroupRequest(storage_group=self._group()))

        assert result.status == ResponseStatus(
            change_id="d6e3b0f5-aa59-4d6b-8dbd-7b0ed3b2c7a1",
            links=[Link(rel="self", href="/storage/v1/storage-groups/1")],
            message="Request accepted",
            passing_validation=True,
            propagation_status="PENDING",
            propagation_status_date="2021-01-12T10:05:00Z",
        )
        assert result.resource.storage_group_id == 1
        assert result.resource.provision_status == "PROVISIONING"

        request = mock_server.requests[0]
        assert request.method == "POST"
        assert request.path == "/storage/v1/storage-groups"
        assert request.json() == {
            "storageGroupName": "Storage1",
            "storageGroupType": "NETSTORAGE",
            "storageGroupPurpose": "NETSTORAGE",
            "domainPrefix": "storage1",
            "asperaEnabled": False,
            "pciEnabled": False,
            "contractId": "1-1TJZH5",
            "zones": [
                {
                    "zoneName": "europe",
                    "noCapacityAction": "SPILL_OUTSIDE",
                    "allowUpload": True,
                    "allowDownload": False,
                }
            ],
        }

    @pytest.mark.parametrize(
        "params,missing",
        [
            (CreateStorageGroupRequest(), ["storage_group"]),
            (
                CreateStorageGroupRequest(storage_group=StorageGroup()),
                ["storage_group.storage_group_name", "storage_group.contract_id"],
            ),
            (
                CreateStorageGroupRequest(storage_group=StorageGroup(storage_group_name="Storage1")),
                ["storage_group.contract_id"],
            ),
        ],
    )
    def test_create_validation_error(self, client, mock_server, params, missing):
        with pytest.raises(StructValidationError) as exc_info:
            client.storage.create_storage_group(params)

        assert exc_info.value.fields == missing
        assert mock_server.requests == []

    def test_update_200_ok(self, client, mock_server):
        mock_server.respond(200, load_fixture("StorageGroupResponse.json"))

        result = client.storage.update_storage_group(
            UpdateStorageGroupRequest(storage_group_id=1, storage_group=self._group())
        )

        assert result.status.message == "Request accepted"
        request = mock_server.requests[0]
        assert request.method == "PUT"
        assert request.path == "/storage/v1/storage-groups/1"
        assert request.json()["storageGroupName"] == "Storage1"

    def test_update_validation_error(self, client, mock_server):
        with pytest.raises(StructValidationError) as exc_info:
            client.storage.update_storage_group(UpdateStorageGroupRequest(storage_group=self._group()))

        assert exc_info.value.fields == ["storage_group_id"]
        assert mock_server.requests == []

    def test_delete_204_no_content(self, client, mock_server):
        mock_server.respond(204)

        result = client.storage.delete_storage_group(DeleteStorageGroupRequest(storage_group_id=1))

        assert result.status is None
        assert result.resource is None
        assert mock_server.requests[0].method == "DELETE"
        assert mock_server.requests[0].path == "/storage/v1/storage-groups/1"

    def test_delete_202_accepted(self, client, mock_server):
        mock_server.respond(202, load_fixture("StorageGroupResponse.json"))

        result = client.storage.delete_storage_group(DeleteStorageGroupRequest(storage_group_id=1))

        assert result.status.propagation_status == "PENDING"

    def test_delete_500_internal_server_error(self, client, mock_server):
        mock_server.respond(500, '{"type":"internal_error","title":"Internal Server Error","detail":"boom","status":500}')

        with pytest.raises(APIError) as exc_info:
            client.storage.delete_storage_group(DeleteStorageGroupRequest(storage_group_id=1))

        assert exc_info.value == APIError(
            type="internal_error", title="Internal Server Error", detail="boom", status_code=500
        )
