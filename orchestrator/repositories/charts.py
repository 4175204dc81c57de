"""
Persistence for charts and reference charts.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from orchestrator.exceptions import NotFoundError
from orchestrator.models.chart import Chart, ChartRef


class ChartRepository:
    """Repository for app chart rows."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_id(self, chart_id: int) -> Chart:
        """
        Get chart by ID.

        Raises:
            NotFoundError: If the chart does not exist
        """
        chart = self.db.get(Chart, chart_id)
        if chart is None:
            raise NotFoundError("Chart", chart_id)
        return chart

    def update(self, chart: Chart, commit: bool = True) -> Chart:
        """
        Persist changes made to a chart row.

        Args:
            chart: Chart row to save
            commit: Commit right away, or only flush and leave the
                transaction to the caller

        Raises:
            SQLAlchemyError: If database operation fails
        """
        chart.updated_on = datetime.utcnow()
        self.db.add(chart)
        if not commit:
            self.db.flush()
            return chart
        self.db.commit()
        self.db.refresh(chart)
        return chart

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


class ChartRefRepository:
    """Repository for reference chart rows."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_id(self, chart_ref_id: int) -> ChartRef:
        """
        Get chart ref by ID.

        Raises:
            NotFoundError: If the chart ref does not exist
        """
        chart_ref = self.db.get(ChartRef, chart_ref_id)
        if chart_ref is None:
            raise NotFoundError("ChartRef", chart_ref_id)
        return chart_ref
