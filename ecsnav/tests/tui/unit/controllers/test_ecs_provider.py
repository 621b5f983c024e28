"""Unit tests for EcsResourceProvider with mocked boto3 clients."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from ecsnav.controllers.ecs import EcsResourceProvider
from ecsnav.exceptions import ProviderError
from ecsnav.models.core.resources import ClusterInfo

CLUSTER = ClusterInfo.from_arn("arn:aws:ecs:us-east-1:123:cluster/prod")


def client_error(code: str = "AccessDeniedException") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "denied"}}, "ListClusters")


def container_instance(instance_id: str) -> dict:
    return {
        "ec2InstanceId": instance_id,
        "status": "ACTIVE",
        "runningTasksCount": 2,
        "pendingTasksCount": 0,
        "registeredAt": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "containerInstanceArn": f"arn:aws:ecs:us-east-1:123:container-instance/{instance_id}",
    }


@pytest.fixture
def ecs_client() -> MagicMock:
    return MagicMock(name="ecs")


@pytest.fixture
def ec2_client() -> MagicMock:
    return MagicMock(name="ec2")


@pytest.fixture
def session(ecs_client: MagicMock, ec2_client: MagicMock) -> MagicMock:
    session = MagicMock()
    session.client.side_effect = lambda service, region_name: {
        "ecs": ecs_client,
        "ec2": ec2_client,
    }[service]
    return session


@pytest.fixture
def provider(session: MagicMock) -> EcsResourceProvider:
    provider = EcsResourceProvider(session)
    provider.set_region("us-east-1")
    return provider


class TestClients:
    """Test client creation and caching."""

    def test_clients_cached_per_region(
        self, provider: EcsResourceProvider, session: MagicMock, ecs_client: MagicMock
    ) -> None:
        ecs_client.list_clusters.return_value = {"clusterArns": []}
        provider.list_clusters("us-east-1")
        provider.list_clusters("us-east-1")
        provider.list_clusters("eu-west-1")

        regions = [call.kwargs["region_name"] for call in session.client.call_args_list]
        assert regions == ["us-east-1", "eu-west-1"]

    def test_no_region_selected(self, session: MagicMock) -> None:
        provider = EcsResourceProvider(session)
        with pytest.raises(ProviderError, match="No region selected"):
            provider.list_instances(CLUSTER)


class TestListClusters:
    """Test one-page cluster listing."""

    def test_first_page(self, provider: EcsResourceProvider, ecs_client: MagicMock) -> None:
        ecs_client.list_clusters.return_value = {
            "clusterArns": ["arn:a/prod"],
            "nextToken": "abc",
        }
        page = provider.list_clusters("us-east-1")

        ecs_client.list_clusters.assert_called_once_with()
        assert page.arns == ["arn:a/prod"]
        assert page.next_token == "abc"

    def test_next_token_forwarded(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        ecs_client.list_clusters.return_value = {"clusterArns": []}
        page = provider.list_clusters("us-east-1", "abc")

        ecs_client.list_clusters.assert_called_once_with(nextToken="abc")
        assert page.next_token is None

    def test_client_error_wrapped(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        error = client_error()
        ecs_client.list_clusters.side_effect = error

        with pytest.raises(ProviderError) as exc_info:
            provider.list_clusters("us-east-1")
        assert exc_info.value.operation == "ListClusters"
        assert exc_info.value.service == "ecs"
        assert exc_info.value.cause is error

    def test_botocore_error_wrapped(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        ecs_client.list_clusters.side_effect = EndpointConnectionError(endpoint_url="https://ecs")
        with pytest.raises(ProviderError):
            provider.list_clusters("us-east-1")


class TestListInstances:
    """Test container instance listing."""

    def test_walks_paginator(self, provider: EcsResourceProvider, ecs_client: MagicMock) -> None:
        paginator = ecs_client.get_paginator.return_value
        paginator.paginate.return_value = [
            {"containerInstanceArns": ["a", "b"]},
            {"containerInstanceArns": ["c"]},
        ]
        assert provider.list_instances(CLUSTER) == ["a", "b", "c"]
        ecs_client.get_paginator.assert_called_once_with("list_container_instances")
        paginator.paginate.assert_called_once_with(cluster=CLUSTER.arn)

    def test_error_wrapped(self, provider: EcsResourceProvider, ecs_client: MagicMock) -> None:
        ecs_client.get_paginator.return_value.paginate.side_effect = client_error()
        with pytest.raises(ProviderError) as exc_info:
            provider.list_instances(CLUSTER)
        assert exc_info.value.operation == "ListContainerInstances"


class TestDescribeInstances:
    """Test container instance description."""

    def test_keyed_by_instance_id(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        ecs_client.describe_container_instances.return_value = {
            "containerInstances": [container_instance("i-1"), container_instance("i-2")],
            "failures": [],
        }
        result = provider.describe_instances(CLUSTER, ["a", "b"])

        assert list(result) == ["i-1", "i-2"]
        assert result["i-1"].running_task_count == 2
        ecs_client.describe_container_instances.assert_called_once_with(
            cluster=CLUSTER.arn, containerInstances=["a", "b"]
        )

    def test_batches_of_one_hundred(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        ecs_client.describe_container_instances.return_value = {"containerInstances": []}
        arns = [f"arn-{n}" for n in range(250)]

        provider.describe_instances(CLUSTER, arns)

        batches = [
            call.kwargs["containerInstances"]
            for call in ecs_client.describe_container_instances.call_args_list
        ]
        assert [len(batch) for batch in batches] == [100, 100, 50]
        assert batches[2][-1] == "arn-249"

    def test_failures_are_skipped(
        self, provider: EcsResourceProvider, ecs_client: MagicMock
    ) -> None:
        ecs_client.describe_container_instances.return_value = {
            "containerInstances": [container_instance("i-1")],
            "failures": [{"arn": "b", "reason": "MISSING"}],
        }
        assert list(provider.describe_instances(CLUSTER, ["a", "b"])) == ["i-1"]


class TestDescribeInstanceDetail:
    """Test EC2 instance lookup."""

    def test_parses_first_instance(
        self, provider: EcsResourceProvider, ec2_client: MagicMock
    ) -> None:
        ec2_client.describe_instances.return_value = {
            "Reservations": [
                {"Instances": [{"InstanceId": "i-1", "PrivateIpAddress": "10.0.0.1"}]}
            ]
        }
        detail = provider.describe_instance_detail("i-1")

        ec2_client.describe_instances.assert_called_once_with(InstanceIds=["i-1"])
        assert detail.private_ip == "10.0.0.1"

    def test_not_found(self, provider: EcsResourceProvider, ec2_client: MagicMock) -> None:
        ec2_client.describe_instances.return_value = {"Reservations": []}
        with pytest.raises(ProviderError, match="i-1 not found"):
            provider.describe_instance_detail("i-1")

    def test_error_wrapped(self, provider: EcsResourceProvider, ec2_client: MagicMock) -> None:
        ec2_client.describe_instances.side_effect = client_error("InvalidInstanceID.Malformed")
        with pytest.raises(ProviderError) as exc_info:
            provider.describe_instance_detail("bad")
        assert exc_info.value.service == "ec2"
