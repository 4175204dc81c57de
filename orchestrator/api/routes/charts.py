"""
FastAPI routes for deployment charts.
"""

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from orchestrator.database import get_db
from orchestrator.exceptions import NotFoundError, ChartExtractionError
from orchestrator.repositories.charts import ChartRepository, ChartRefRepository
from orchestrator.schemas.chart import BuildChartRequest, BuildChartResponse, ChartOverride
from orchestrator.services.chart_ref_service import ChartRefService
from orchestrator.services.chart_template_service import ChartTemplateService
from orchestrator.services.deployment_config_service import DeploymentConfigService
from orchestrator.services.deployment_template_service import DeploymentTemplateService
from orchestrator.utils.logging import get_logger, set_correlation_id

logger = get_logger(__name__)
router = APIRouter(prefix="/api/charts", tags=["charts"])


@router.post("/{chart_id}/build", response_model=BuildChartResponse)
async def build_chart(
    chart_id: int,
    request: BuildChartRequest,
    db: Session = Depends(get_db)
) -> BuildChartResponse:
    """
    Build an app's chart and return the directory it was built in.

    A chart location that drifted from the chart version is corrected first.
    """
    set_correlation_id()
    logger.info(
        "build_chart_requested",
        chart_id=chart_id,
        app_name=request.app_name,
        deployment_config_id=request.deployment_config_id
    )

    try:
        chart_repository = ChartRepository(db)
        deployment_config_service = DeploymentConfigService(db)
        service = DeploymentTemplateService(
            chart_ref_service=ChartRefService(ChartRefRepository(db)),
            chart_template_service=ChartTemplateService(),
            chart_repository=chart_repository,
            deployment_config_service=deployment_config_service,
        )

        chart_override = ChartOverride.from_chart(chart_repository.find_by_id(chart_id))
        deployment_config = deployment_config_service.get_by_id(request.deployment_config_id)

        chart_path = service.build_chart_and_get_path(request.app_name, chart_override, deployment_config)

        logger.info("build_chart_success", chart_id=chart_id, chart_path=chart_path)
        return BuildChartResponse(
            chart_id=chart_id,
            chart_location=chart_override.chart_location,
            chart_path=chart_path
        )

    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc)
        )
    except ChartExtractionError as exc:
        logger.error("build_chart_extraction_failed", chart_id=chart_id, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )
    except Exception as exc:
        logger.error("build_chart_failed", chart_id=chart_id, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build chart: {str(exc)}"
        )
