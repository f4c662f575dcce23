"""Pytest configuration and shared fixtures."""

import asyncio

import pytest

from stack_auditor.clients.cloudformation_client import StackAPIError


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture
def aws_credentials(monkeypatch):
    """Set fake AWS credentials so boto3 never reaches a real account."""
    test_vars = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


# =============================================================================
# CloudFormation Fakes
# =============================================================================

def make_summary(name: str, status: str = "CREATE_COMPLETE", **extra) -> dict:
    """Build a ListStacks summary item the way the provider returns it."""
    return {
        "StackName": name,
        "StackId": f"arn:aws:cloudformation:us-east-1:123456789012:stack/{name}/0001",
        "StackStatus": status,
        **extra,
    }


class FakeCloudFormationClient:
    """
    In-memory stand-in for CloudFormationClient.

    ``pages`` is a list of pages (lists of summary dicts) or exceptions to
    raise in place of a page. ``templates`` maps stack name to body and
    ``errors`` maps stack name to the exception its template request raises.
    """

    def __init__(
        self,
        region: str,
        pages: list | None = None,
        templates: dict | None = None,
        errors: dict | None = None,
        delay: float = 0.0,
    ):
        self.region = region
        self.pages = pages or []
        self.templates = templates or {}
        self.errors = errors or {}
        self.delay = delay

        self.status_filters: list[list[str]] = []
        self.pages_served = 0
        self.template_calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def iter_stack_summary_pages(self, status_filter):
        self.status_filters.append(list(status_filter))
        for page in self.pages:
            await asyncio.sleep(0)
            if isinstance(page, Exception):
                raise page
            self.pages_served += 1
            yield page

    async def get_template_body(self, stack_name: str, stage: str):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        self.template_calls.append((stack_name, stage))
        try:
            await asyncio.sleep(self.delay)
            if stack_name in self.errors:
                raise self.errors[stack_name]
            return self.templates.get(stack_name)
        finally:
            self.in_flight -= 1


class FakeClientFactory:
    """Returns one FakeCloudFormationClient per region, creating empty ones on demand."""

    def __init__(self, clients: dict[str, FakeCloudFormationClient] | None = None):
        self.clients = dict(clients or {})

    def add(self, client: FakeCloudFormationClient) -> FakeCloudFormationClient:
        self.clients[client.region] = client
        return client

    def get_client(self, region: str) -> FakeCloudFormationClient:
        if region not in self.clients:
            self.clients[region] = FakeCloudFormationClient(region)
        return self.clients[region]


def access_denied(stack_name: str = "stack") -> StackAPIError:
    return StackAPIError(f"AccessDenied reading {stack_name}", error_code="AccessDenied")


@pytest.fixture
def fake_client_factory():
    """Create an empty FakeClientFactory."""
    return FakeClientFactory()


@pytest.fixture
def fake_factory_cls():
    """Expose the fake factory class to tests that need a fresh factory per example."""
    return FakeClientFactory


@pytest.fixture
def fake_client_cls():
    """Expose the fake client class to tests."""
    return FakeCloudFormationClient


@pytest.fixture
def summary_factory():
    """Expose the ListStacks summary builder to tests."""
    return make_summary


@pytest.fixture
def access_denied_error():
    """Expose the AccessDenied error builder to tests."""
    return access_denied


# =============================================================================
# Pytest Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
