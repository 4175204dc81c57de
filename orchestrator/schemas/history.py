"""
Paginated deployment history request and response types.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class CdPipelineDeploymentHistoryListRequest(BaseModel):
    pipeline_id: int
    app_id: int
    env_id: int
    offset: int = Field(0, ge=0)
    limit: int = Field(20, ge=0)


class CdPipelineDeploymentHistoryConfigListRequest(BaseModel):
    base_configuration_id: int
    pipeline_id: int
    history_component: str
    history_component_name: str = ""


class DeploymentHistoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cd_workflows: List[Dict[str, Any]] = Field(default_factory=list, alias="cdWorkflows")
    tags_editable: bool = Field(False, alias="tagsEditable")
    # unique list of tags existing in the app
    app_release_tag_names: List[str] = Field(default_factory=list, alias="appReleaseTagNames")
    hide_image_tagging_hard_delete: bool = Field(False, alias="hideImageTaggingHardDelete")
