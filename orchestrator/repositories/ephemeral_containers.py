"""
Persistence for ephemeral containers and their audit trail.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, SessionTransaction

from orchestrator.models.ephemeral_container import EphemeralContainer, EphemeralContainerAction


class EphemeralContainersRepository:
    """Repository for ephemeral container rows and their action audit rows."""

    def __init__(self, db_session: Session):
        """
        Initialize repository.

        Args:
            db_session: SQLAlchemy database session
        """
        self.db = db_session

    def find_container_by_name(
        self,
        cluster_id: int,
        namespace: str,
        pod_name: str,
        container_name: str
    ) -> Optional[EphemeralContainer]:
        """
        Find the container identified by cluster, namespace, pod and name.

        Returns:
            Optional[EphemeralContainer]: Container row or None if not tracked
        """
        stmt = select(EphemeralContainer).where(
            EphemeralContainer.cluster_id == cluster_id,
            EphemeralContainer.namespace == namespace,
            EphemeralContainer.pod_name == pod_name,
            EphemeralContainer.name == container_name,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def start_tx(self) -> SessionTransaction:
        """
        Start (or join) the session's root transaction.

        The lookup above autobegins a transaction on the session, in which case
        that transaction is returned so the writes share it.
        """
        if self.db.in_transaction():
            return self.db.get_transaction()
        return self.db.begin()

    def commit_tx(self, tx: SessionTransaction) -> None:
        tx.commit()

    def rollback_tx(self, tx: SessionTransaction) -> None:
        tx.rollback()

    def save_ephemeral_container_data(self, tx: SessionTransaction, container: EphemeralContainer) -> None:
        """Insert a container row; its generated id is available on return."""
        tx.session.add(container)
        tx.session.flush()

    def save_ephemeral_container_action_audit(self, tx: SessionTransaction, action: EphemeralContainerAction) -> None:
        """Insert an audit row; its generated id is available on return."""
        tx.session.add(action)
        tx.session.flush()
