"""
Ephemeral container SQLAlchemy models.

An ephemeral container is a short-lived debug container attached to a running
pod. Every create/access/terminate performed on one is kept as an append-only
audit row.
"""

from datetime import datetime
from typing import List
from enum import Enum as PyEnum

from sqlalchemy import String, Integer, Boolean, DateTime, Text, Enum, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from orchestrator.models.base import Base


class ContainerAction(str, PyEnum):
    """Actions audited on an ephemeral container."""
    CREATE = "CREATE"
    ACCESS = "ACCESS"
    TERMINATE = "TERMINATE"


class EphemeralContainer(Base):
    """
    EphemeralContainer entity, unique per (cluster, namespace, pod, name).
    """

    __tablename__ = "ephemeral_container"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(253), nullable=False)
    cluster_id: Mapped[int] = mapped_column(Integer, ForeignKey("cluster.id"), nullable=False)
    namespace: Mapped[str] = mapped_column(String(250), nullable=False)
    pod_name: Mapped[str] = mapped_column(String(253), nullable=False)
    target_container: Mapped[str] = mapped_column(String(253), nullable=False, default="")
    config: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_externally_created: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    actions: Mapped[List["EphemeralContainerAction"]] = relationship(
        "EphemeralContainerAction", back_populates="ephemeral_container"
    )

    __table_args__ = (
        UniqueConstraint("cluster_id", "namespace", "pod_name", "name", name="uq_ephemeral_container_pod_name"),
    )

    def __repr__(self) -> str:
        """String representation of EphemeralContainer."""
        return (
            f"<EphemeralContainer(id={self.id}, cluster_id={self.cluster_id}, namespace={self.namespace}, "
            f"pod_name={self.pod_name}, name={self.name})>"
        )


class EphemeralContainerAction(Base):
    """
    Audit record of one action performed on an ephemeral container.
    """

    __tablename__ = "ephemeral_container_actions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ephemeral_container_id: Mapped[int] = mapped_column(Integer, ForeignKey("ephemeral_container.id"), nullable=False)
    action_type: Mapped[ContainerAction] = mapped_column(Enum(ContainerAction), nullable=False)
    performed_by: Mapped[int] = mapped_column(Integer, nullable=False)
    performed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)

    ephemeral_container: Mapped["EphemeralContainer"] = relationship("EphemeralContainer", back_populates="actions")

    __table_args__ = (
        Index("ix_ephemeral_container_actions_container_id", "ephemeral_container_id"),
    )

    def __repr__(self) -> str:
        return f"<EphemeralContainerAction(id={self.id}, ephemeral_container_id={self.ephemeral_container_id}, action_type={self.action_type})>"
