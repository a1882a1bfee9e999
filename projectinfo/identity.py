"""Resolution of the project ID the service runs in.

The project ID is resolved once, before the server starts accepting
connections. Resolvers are tried in order and the first one that produces
a project ID wins:

1. The ``GOOGLE_CLOUD_PROJECT`` environment variable.
2. The metadata server, which is only reachable on GCP.

A resolver returns ``None`` if it does not apply and raises
`IdentityResolutionError` if it applies but fails.
"""

from typing import Callable, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .config import AppConfig
from .exceptions import IdentityResolutionError
from .gcp.metadata import get_project_id_http
from .models import PROJECT_PREFIX

Resolver = Callable[[AppConfig], Optional[str]]


class ProjectIdentity(BaseModel):
    """The resolved project ID. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(..., min_length=1)
    source: str = Field("unknown", description="Resolver that produced the ID.")

    @property
    def resource_name(self) -> str:
        return f"{PROJECT_PREFIX}{self.project_id}"


def from_environment(config: AppConfig) -> Optional[str]:
    """Project ID set explicitly through ``GOOGLE_CLOUD_PROJECT``."""
    return config.project or None


def from_metadata_server(config: AppConfig) -> Optional[str]:
    """Project ID reported by the metadata server."""
    return get_project_id_http(config.metadata_url, timeout=config.timeout_metadata)


DEFAULT_RESOLVERS: Sequence[Resolver] = (from_environment, from_metadata_server)


def resolve_identity(
    config: AppConfig, resolvers: Sequence[Resolver] = DEFAULT_RESOLVERS
) -> ProjectIdentity:
    """Resolves the project ID using the first resolver that applies.

    Parameters
    ----------
    config : `AppConfig`
        The application config.
    resolvers : `Sequence[Resolver]`
        Resolvers to try, in order.

    Returns
    -------
    `ProjectIdentity`
        The resolved project ID.

    Raises
    ------
    `IdentityResolutionError`
        If a resolver fails, or if no resolver produces a project ID.
    """
    for resolver in resolvers:
        name = getattr(resolver, "__name__", repr(resolver))
        project_id = resolver(config)
        if project_id:
            logger.info(f"Resolved project ID '{project_id}' ({name})")
            return ProjectIdentity(project_id=project_id, source=name)
        logger.debug(f"Resolver {name} did not apply")
    raise IdentityResolutionError("Unable to determine the project ID.")
