from typing import Optional

import httpx
from loguru import logger

from ..config import METADATA_PROJECT_ID_URL
from ..exceptions import MetadataServerError


def get_project_id_http(
    url: str = METADATA_PROJECT_ID_URL,
    timeout: Optional[float] = 5.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Get the project ID of a container running on Cloud Run
    from the metadata server.

    Example:
        >>> get_project_id_http()
        'ntnu-student-project'

    Parameters
    ----------
    url : `str`
        URL of the metadata server's project ID endpoint.
    timeout : `Optional[float]`
        Timeout for the request in seconds. `None` disables the timeout.
    transport : `Optional[httpx.BaseTransport]`
        Transport to send the request with. Uses the default transport if omitted.

    Returns
    -------
    `str`
        The project ID.

    Raises
    ------
    `MetadataServerError`
        If the request fails or the metadata server responds with an error.
    """
    logger.debug(f"Querying metadata server at {url}")
    try:
        with httpx.Client(transport=transport, timeout=timeout) as client:
            res = client.get(url, headers={"Metadata-Flavor": "Google"})
    except httpx.HTTPError as e:
        raise MetadataServerError(f"Error querying metadata server: {e}") from e

    if not res.is_success:
        raise MetadataServerError(
            f"Metadata server returned error: {res.status_code} {res.reason_phrase}"
        )

    project_id = res.content.decode("utf-8", errors="replace")
    if not project_id:
        raise MetadataServerError("Metadata server returned an empty project ID")
    return project_id
