"""
Read access to stored clusters.
"""

from sqlalchemy.orm import Session

from orchestrator.exceptions import NotFoundError
from orchestrator.models.cluster import Cluster


class ClusterReadService:
    """Service for reading cluster rows."""

    def __init__(self, db_session: Session):
        """
        Initialize cluster read service.

        Args:
            db_session: SQLAlchemy database session
        """
        self.db = db_session

    def find_by_id(self, cluster_id: int) -> Cluster:
        """
        Get an active cluster by ID.

        Args:
            cluster_id: Cluster identifier

        Returns:
            Cluster: Cluster entity

        Raises:
            NotFoundError: If no active cluster has this ID
        """
        cluster = (
            self.db.query(Cluster)
            .filter(Cluster.id == cluster_id, Cluster.active.is_(True))
            .first()
        )
        if cluster is None:
            raise NotFoundError("Cluster", cluster_id)
        return cluster
