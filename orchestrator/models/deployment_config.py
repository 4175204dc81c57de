"""
DeploymentConfig SQLAlchemy model.
"""

from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import String, Integer, Boolean, DateTime, Enum, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from orchestrator.models.base import Base


class ReleaseMode(str, PyEnum):
    """How a deployment obtains its chart artifact."""
    CREATE = "create"
    LINK = "link"


class DeploymentConfig(Base):
    """
    Deployment configuration of an app in an environment.
    """

    __tablename__ = "deployment_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    app_id: Mapped[int] = mapped_column(Integer, nullable=False)
    environment_id: Mapped[int] = mapped_column(Integer, nullable=False)
    chart_location: Mapped[str] = mapped_column(String(250), nullable=False, default="")
    release_mode: Mapped[ReleaseMode] = mapped_column(Enum(ReleaseMode), nullable=False, default=ReleaseMode.CREATE)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    updated_by: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    updated_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("app_id", "environment_id", name="uq_deployment_config_app_env"),
    )

    def is_linked_release(self) -> bool:
        """A linked release reuses another release's chart artifact."""
        return self.release_mode == ReleaseMode.LINK

    def get_chart_location(self) -> str:
        return self.chart_location

    def set_chart_location(self, chart_location: str) -> None:
        self.chart_location = chart_location

    def __repr__(self) -> str:
        """String representation of DeploymentConfig."""
        return f"<DeploymentConfig(id={self.id}, app_id={self.app_id}, environment_id={self.environment_id}, release_mode={self.release_mode})>"
