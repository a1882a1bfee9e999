from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from .exceptions import ProjectLookupError
from .gcp.projects import ProjectsLookup
from .identity import ProjectIdentity
from .models import ServiceStatus, ServiceStatusCode
from .render import render_error, render_greeting, render_project_info


def get_identity(request: Request) -> ProjectIdentity:
    return request.app.state.identity


def get_lookup(request: Request) -> ProjectsLookup:
    return request.app.state.lookup


def create_app(identity: ProjectIdentity, lookup: ProjectsLookup) -> FastAPI:
    """Creates the app.

    Parameters
    ----------
    identity : `ProjectIdentity`
        The resolved project ID. Shared read-only by all requests.
    lookup : `ProjectsLookup`
        Resource Manager lookup shared by all requests.
    """
    app = FastAPI(title="projectinfo")
    app.state.identity = identity
    app.state.lookup = lookup

    app.add_api_route("/", hello, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route(
        "/project", project_info, methods=["GET"], response_class=HTMLResponse
    )
    app.add_api_route(
        "/status", get_service_status, methods=["GET"], response_model=ServiceStatus
    )
    return app


async def hello() -> str:
    """Returns a static greeting."""
    return render_greeting()


async def project_info(
    identity: ProjectIdentity = Depends(get_identity),
    lookup: ProjectsLookup = Depends(get_lookup),
) -> str:
    """Renders information about the project the service runs in.

    Always responds with 200. If the lookup fails, the error is
    rendered in the response body.
    """
    try:
        info = await lookup.get_project(identity)
    except ProjectLookupError as e:
        logger.error(f"Failed to get project {identity.resource_name}: {e}")
        return render_error(e)
    return render_project_info(info)


async def get_service_status(
    request: Request, identity: ProjectIdentity = Depends(get_identity)
) -> ServiceStatus:
    """Get the status of the server."""
    return ServiceStatus(
        status=ServiceStatusCode.OK,
        url=request.url,
        project_id=identity.project_id,
    )
