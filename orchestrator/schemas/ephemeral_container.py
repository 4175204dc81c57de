"""
Request and response beans for ephemeral container auditing.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from orchestrator.models.ephemeral_container import EphemeralContainer, ContainerAction


class EphemeralContainerBasicData(BaseModel):
    """Basic spec of an ephemeral container."""
    container_name: str = Field(..., min_length=1, max_length=253)
    target_container_name: str = Field("", max_length=253)
    image: str = Field("", description="Container image")


class EphemeralContainerAdvancedData(BaseModel):
    """Full container manifest supplied by the user."""
    manifest: str


class EphemeralContainerRequest(BaseModel):
    """Request identifying an ephemeral container and the user acting on it."""
    cluster_id: int
    namespace: str = Field(..., min_length=1)
    pod_name: str = Field(..., min_length=1)
    user_id: int
    basic_data: EphemeralContainerBasicData
    advanced_data: Optional[EphemeralContainerAdvancedData] = None
    external_argo_application_name: Optional[str] = None

    def get_container_bean(self) -> EphemeralContainer:
        """Build the row persisted for a container seen for the first time."""
        if self.advanced_data is not None:
            container_data = self.advanced_data.manifest
        else:
            container_data = self.basic_data.model_dump_json()
        return EphemeralContainer(
            name=self.basic_data.container_name,
            cluster_id=self.cluster_id,
            namespace=self.namespace,
            pod_name=self.pod_name,
            target_container=self.basic_data.target_container_name,
            config=container_data,
            is_externally_created=False,
        )


class EphemeralContainerAuditResponse(BaseModel):
    """Response model for an audited action."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    ephemeral_container_id: int
    action_type: ContainerAction
    performed_by: int
    performed_at: datetime
