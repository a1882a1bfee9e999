from typing import Optional

import pytest
from google.cloud import resourcemanager_v3

from projectinfo.gcp.projects import ProjectsLookup
from projectinfo.identity import ProjectIdentity

# Nothing listens on port 1, so requests to it fail right away
UNREACHABLE_METADATA_URL = "http://127.0.0.1:1/computeMetadata/v1/project/project-id"

ENV_VARS = [
    "GOOGLE_CLOUD_PROJECT",
    "PORT",
    "HOST",
    "METADATA_URL",
    "TIMEOUT_METADATA",
    "DEBUG",
]


class FakeProjectsClient:
    """Stands in for `ProjectsAsyncClient` and records the requested names."""

    def __init__(
        self,
        display_name: str = "Test Project",
        name: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.display_name = display_name
        self.name = name
        self.error = error
        self.calls: list[str] = []

    async def get_project(self, name: str, retry=None) -> resourcemanager_v3.Project:
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return resourcemanager_v3.Project(
            name=self.name or name,
            display_name=self.display_name,
        )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def identity() -> ProjectIdentity:
    return ProjectIdentity(project_id="test-project", source="test")


@pytest.fixture
def fake_client() -> FakeProjectsClient:
    return FakeProjectsClient()


@pytest.fixture
def lookup(fake_client: FakeProjectsClient) -> ProjectsLookup:
    return ProjectsLookup(client=fake_client)  # type: ignore
