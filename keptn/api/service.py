from typing import Optional

from .api_resource import APIResource

from .types.service import CreateService, DeleteServiceResponse


class ServiceAPI(APIResource):
    def create(self, project: str, service: CreateService) -> Optional[str]:
        """
        Creates a new service in the given project. Returns the response body as
        sent by the server.
        """
        return self.execute(
            "POST",
            self.path("/shipyard-controller/v1/project/{}/service", project),
            request=service,
            response_type=str,
        )

    def delete(self, project: str, service: str) -> Optional[DeleteServiceResponse]:
        return self.execute(
            "DELETE",
            self.path(
                "/shipyard-controller/v1/project/{}/service/{}", project, service
            ),
            response_type=DeleteServiceResponse,
        )
