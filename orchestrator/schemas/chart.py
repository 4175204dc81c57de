"""
Chart beans used while building deployment charts.
"""

from pydantic import BaseModel, Field

from orchestrator.models.chart import Chart


class ChartOverride(BaseModel):
    """Chart of an app in an environment, as seen by the deployment pipeline."""
    chart_id: int
    chart_location: str
    chart_version: str
    chart_ref_id: int
    reference_template: str

    @classmethod
    def from_chart(cls, chart: Chart) -> "ChartOverride":
        return cls(
            chart_id=chart.id,
            chart_location=chart.chart_location,
            chart_version=chart.chart_version,
            chart_ref_id=chart.chart_ref_id,
            reference_template=chart.reference_template,
        )


class ChartMetadata(BaseModel):
    """Fields written to the built chart's Chart.yaml."""
    name: str
    version: str
    api_version: str = "v1"


class ChartDataInfo(BaseModel):
    """Outcome of materializing a stored chart archive."""
    chart_name: str = ""
    chart_version: str = ""
    chart_location: str = ""
    temporary_folder: str = ""
    description: str = ""
    message: str = ""


class BuildChartRequest(BaseModel):
    """Request model for building an app's chart."""
    app_name: str = Field(..., min_length=1, description="Name written to Chart.yaml")
    deployment_config_id: int = Field(..., description="Deployment config paired with the chart")


class BuildChartResponse(BaseModel):
    """Response model for a built chart."""
    chart_id: int
    chart_location: str
    chart_path: str = Field(..., description="Temporary directory holding the built chart")
