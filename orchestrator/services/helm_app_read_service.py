"""
Resolves the connection settings the Helm layer needs to reach a cluster.
"""

from sqlalchemy.exc import SQLAlchemyError

from orchestrator.exceptions import OrchestratorError
from orchestrator.models.cluster import BEARER_TOKEN, TLS_KEY, CERT_DATA, CERTIFICATE_AUTHORITY_DATA
from orchestrator.schemas.cluster import ClusterConfig
from orchestrator.services.cluster_service import ClusterReadService
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


class HelmAppReadService:
    """Service projecting stored clusters into ClusterConfig beans."""

    def __init__(self, cluster_read_service: ClusterReadService):
        self.cluster_read_service = cluster_read_service

    def get_cluster_config(self, cluster_id: int) -> ClusterConfig:
        """
        Build the ClusterConfig of a cluster.

        TLS key, certificate and CA data are only filled in when TLS
        verification is enabled for the cluster.

        Args:
            cluster_id: Cluster identifier

        Returns:
            ClusterConfig: Connection settings of the cluster

        Raises:
            NotFoundError: If the cluster does not exist
        """
        try:
            cluster = self.cluster_read_service.find_by_id(cluster_id)
        except (OrchestratorError, SQLAlchemyError) as exc:
            logger.error("error_in_fetching_cluster_detail", cluster_id=cluster_id, error=str(exc))
            raise

        credentials = cluster.config or {}
        config = ClusterConfig(
            cluster_id=cluster.id,
            cluster_name=cluster.cluster_name,
            api_server_url=cluster.server_url,
            token=credentials.get(BEARER_TOKEN, ""),
            insecure_skip_tls_verify=cluster.insecure_skip_tls_verify,
        )
        if not cluster.insecure_skip_tls_verify:
            config.key_data = credentials.get(TLS_KEY, "")
            config.cert_data = credentials.get(CERT_DATA, "")
            config.ca_data = credentials.get(CERTIFICATE_AUTHORITY_DATA, "")
        return config
