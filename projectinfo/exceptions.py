class ProjectInfoError(Exception):
    """Base class for projectinfo exceptions."""


class IdentityResolutionError(ProjectInfoError):
    """Raised when the project ID of the running service cannot be determined.

    Always fatal: the service does not start without a project ID.
    """


class MetadataServerError(IdentityResolutionError):
    """Raised when the metadata server cannot be queried or returns an error."""


class ProjectLookupError(ProjectInfoError):
    """Raised when the Resource Manager lookup for a project fails.

    The message is the text of the underlying error, which is available
    as ``__cause__``.
    """
