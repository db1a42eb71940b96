from typing import Optional

from .api_resource import APIResource

from .types.metadata import Metadata


class MetadataAPI(APIResource):
    def get(self) -> Optional[Metadata]:
        """
        Returns version information about the Keptn installation.
        """
        return self.execute("GET", "/v1/metadata", response_type=Metadata)
