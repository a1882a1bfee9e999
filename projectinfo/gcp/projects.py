from typing import TYPE_CHECKING, Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import resourcemanager_v3
from loguru import logger

from ..exceptions import ProjectLookupError
from ..models import ProjectInfo

if TYPE_CHECKING:
    from ..identity import ProjectIdentity


class ProjectsLookup:
    """Looks up projects with a Resource Manager client shared by all requests.

    NOTE
    ----
    The client is created on first use. Creating it runs credential
    discovery, and the async gRPC channel must be created inside the
    running event loop. Missing or malformed credentials are therefore
    reported per request instead of preventing the service from starting.
    """

    def __init__(
        self, client: Optional[resourcemanager_v3.ProjectsAsyncClient] = None
    ) -> None:
        self._client = client

    @property
    def client(self) -> resourcemanager_v3.ProjectsAsyncClient:
        if self._client is None:
            logger.debug("Creating Resource Manager client")
            self._client = resourcemanager_v3.ProjectsAsyncClient()
        return self._client

    async def get_project(self, identity: "ProjectIdentity") -> ProjectInfo:
        """Retrieves the project with the given ID.

        Parameters
        ----------
        identity : `ProjectIdentity`
            The project to look up.

        Returns
        -------
        `ProjectInfo`
            Display name and resource name of the project.

        Raises
        ------
        `ProjectLookupError`
            If the client cannot be created or the request fails.
        """
        name = identity.resource_name
        try:
            # retry=None: a failed lookup is reported as-is
            project = await self.client.get_project(name=name, retry=None)
        except (GoogleAPIError, GoogleAuthError, ValueError) as e:
            raise ProjectLookupError(str(e)) from e
        return ProjectInfo(
            display_name=project.display_name,
            name=project.name,
            project_id=identity.project_id,
        )
