from typing import ClassVar, Optional, Tuple

from pydantic import Field

from .common import KeptnModel


class Service(KeptnModel):
    service_name: Optional[str] = Field(default=None, alias="serviceName")
    creation_date: Optional[str] = Field(default=None, alias="creationDate")
    deployed_image: Optional[str] = Field(default=None, alias="deployedImage")

    required_fields: ClassVar[Tuple[str, ...]] = ("service_name",)


class CreateService(KeptnModel):
    service_name: Optional[str] = Field(default=None, alias="serviceName")

    required_fields: ClassVar[Tuple[str, ...]] = ("service_name",)


class DeleteServiceResponse(KeptnModel):
    message: Optional[str] = None
