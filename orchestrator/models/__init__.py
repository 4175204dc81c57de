"""
Models package.
"""

from .base import Base
from .cluster import Cluster
from .ephemeral_container import EphemeralContainer, EphemeralContainerAction, ContainerAction
from .chart import Chart, ChartRef
from .deployment_config import DeploymentConfig, ReleaseMode

__all__ = [
    "Base",
    "Cluster",
    "EphemeralContainer",
    "EphemeralContainerAction",
    "ContainerAction",
    "Chart",
    "ChartRef",
    "DeploymentConfig",
    "ReleaseMode",
]
