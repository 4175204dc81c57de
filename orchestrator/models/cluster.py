"""
Cluster SQLAlchemy model for Kubernetes cluster connection settings.
"""

from datetime import datetime
from typing import Dict

from sqlalchemy import String, Integer, Boolean, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from orchestrator.models.base import Base


# Keys of the credential mapping stored in Cluster.config
BEARER_TOKEN = "bearer_token"
TLS_KEY = "tls_key"
CERT_DATA = "cert_data"
CERTIFICATE_AUTHORITY_DATA = "cert_auth_data"


class Cluster(Base):
    """
    Cluster entity holding the API server address and its credentials.
    """

    __tablename__ = "cluster"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cluster_name: Mapped[str] = mapped_column(String(250), unique=True, nullable=False)
    server_url: Mapped[str] = mapped_column(String(512), nullable=False)
    config: Mapped[Dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    insecure_skip_tls_verify: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("ix_cluster_active", "active"),
    )

    def __repr__(self) -> str:
        """String representation of Cluster."""
        return f"<Cluster(id={self.id}, cluster_name={self.cluster_name}, server_url={self.server_url})>"
