from enum import Enum
from typing import Optional, Union

from fastapi.datastructures import URL
from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_PREFIX = "projects/"


class ProjectInfo(BaseModel):
    """Attributes of a project returned by Resource Manager."""

    display_name: str
    name: str = Field(..., description="Resource name of the form `projects/{...}`.")
    project_id: str = Field(..., description="Project ID the service runs in.")

    @property
    def number(self) -> str:
        """The resource name without its `projects/` prefix.

        Resource Manager v3 names projects by number (`projects/415104041262`),
        so this is the project number. Falls back to `"Unknown"` for names
        without the prefix.
        """
        if self.name.startswith(PROJECT_PREFIX):
            return self.name[len(PROJECT_PREFIX) :]
        return "Unknown"


class ServiceStatusCode(Enum):
    OK = "OK"


class ServiceStatus(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "OK",
                "url": "http://localhost:8080/status",
                "project_id": "ntnu-student-project",
            }
        },
    )

    status: ServiceStatusCode = Field(..., description="The status of the service.")
    url: str = Field(..., description="URL of the service.")
    project_id: Optional[str] = Field(
        None, description="Project ID the service runs in."
    )

    @field_validator("url", mode="before")
    @classmethod
    def coerce_url_str(cls, v: Union[str, URL]) -> str:
        if isinstance(v, str):
            return v
        return str(v)
