from typing import Optional, Union

from .api_resource import APIResource

from .types.project import CreateProject, DeleteProjectResponse, Project

_PROJECT_PATH = "/shipyard-controller/v1/project"


class ProjectAPI(APIResource):
    def create(self, project: CreateProject) -> Optional[str]:
        """
        Creates a new project. Returns the response body as sent by the server.
        """
        return self.execute("POST", _PROJECT_PATH, request=project, response_type=str)

    def update(self, project: CreateProject) -> Optional[str]:
        return self.execute("PUT", _PROJECT_PATH, request=project, response_type=str)

    def delete(
        self, name_or_project: Union[str, Project]
    ) -> Optional[DeleteProjectResponse]:
        name = (
            name_or_project
            if isinstance(name_or_project, str)
            else name_or_project.project_name
        )
        return self.execute(
            "DELETE",
            self.path(_PROJECT_PATH + "/{}", name),
            response_type=DeleteProjectResponse,
        )
