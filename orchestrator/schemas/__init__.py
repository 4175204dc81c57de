"""
Schemas package.
"""

from .cluster import ClusterConfig
from .ephemeral_container import (
    EphemeralContainerBasicData,
    EphemeralContainerAdvancedData,
    EphemeralContainerRequest,
    EphemeralContainerAuditResponse,
)
from .chart import ChartOverride, ChartMetadata, ChartDataInfo, BuildChartRequest, BuildChartResponse
from .history import (
    CdPipelineDeploymentHistoryListRequest,
    CdPipelineDeploymentHistoryConfigListRequest,
    DeploymentHistoryResponse,
)

__all__ = [
    "ClusterConfig",
    "EphemeralContainerBasicData",
    "EphemeralContainerAdvancedData",
    "EphemeralContainerRequest",
    "EphemeralContainerAuditResponse",
    "ChartOverride",
    "ChartMetadata",
    "ChartDataInfo",
    "BuildChartRequest",
    "BuildChartResponse",
    "CdPipelineDeploymentHistoryListRequest",
    "CdPipelineDeploymentHistoryConfigListRequest",
    "DeploymentHistoryResponse",
]
