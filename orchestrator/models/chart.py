"""
Chart and ChartRef SQLAlchemy models.

ChartRef is a reference chart template (bundled or user uploaded); Chart is the
per-app chart built on top of a ChartRef at a given version.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, Boolean, DateTime, LargeBinary, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from orchestrator.models.base import Base


class ChartRef(Base):
    """
    ChartRef entity for reference chart templates.
    """

    __tablename__ = "chart_ref"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False, default="")
    version: Mapped[str] = mapped_column(String(250), nullable=False)
    location: Mapped[str] = mapped_column(String(250), nullable=False)
    chart_data: Mapped[Optional[bytes]] = mapped_column(LargeBinary, nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_uploaded: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        """String representation of ChartRef."""
        return f"<ChartRef(id={self.id}, name={self.name}, version={self.version}, location={self.location})>"


class Chart(Base):
    """
    Chart entity: an app's chart at a version, located under its ChartRef.
    """

    __tablename__ = "charts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    app_id: Mapped[int] = mapped_column(Integer, nullable=False)
    chart_name: Mapped[str] = mapped_column(String(250), nullable=False)
    chart_version: Mapped[str] = mapped_column(String(250), nullable=False)
    chart_location: Mapped[str] = mapped_column(String(250), nullable=False)
    chart_ref_id: Mapped[int] = mapped_column(Integer, ForeignKey("chart_ref.id"), nullable=False)
    reference_template: Mapped[str] = mapped_column(String(250), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    updated_on: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    chart_ref: Mapped["ChartRef"] = relationship("ChartRef")

    __table_args__ = (
        Index("ix_charts_app_id", "app_id"),
    )

    def __repr__(self) -> str:
        """String representation of Chart."""
        return f"<Chart(id={self.id}, app_id={self.app_id}, chart_version={self.chart_version}, chart_location={self.chart_location})>"
