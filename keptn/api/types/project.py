from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from .common import KeptnModel
from .stage import Stage


class CreateProject(KeptnModel):
    """
    The payload to create or update a project. The shipyard is the base64
    encoded content of the shipyard file.
    """

    name: Optional[str] = None
    shipyard: Optional[str] = None
    git_remote_url: Optional[str] = Field(default=None, alias="gitRemoteURL")
    git_token: Optional[str] = Field(default=None, alias="gitToken")
    git_user: Optional[str] = Field(default=None, alias="gitUser")

    required_fields: ClassVar[Tuple[str, ...]] = ("name", "shipyard")


class Project(KeptnModel):
    project_name: Optional[str] = Field(default=None, alias="projectName")
    creation_date: Optional[str] = Field(default=None, alias="creationDate")
    git_remote_uri: Optional[str] = Field(default=None, alias="gitRemoteURI")
    git_user: Optional[str] = Field(default=None, alias="gitUser")
    shipyard: Optional[str] = None
    shipyard_version: Optional[str] = Field(default=None, alias="shipyardVersion")
    stages: Optional[List[Optional[Stage]]] = None

    required_fields: ClassVar[Tuple[str, ...]] = ("project_name",)


class DeleteProjectResponse(KeptnModel):
    message: Optional[str] = None
