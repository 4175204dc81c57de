"""
Deployment template service.

Builds the chart of an app's deployment from its reference template. Before
building, a chart whose stored location no longer ends with its version is
auto-healed: the location is recomputed from the chart ref and saved on both
the chart row and the deployment config in one transaction.
"""

import os
import shutil
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from orchestrator.config.settings import get_chart_config, SYSTEM_USER_ID
from orchestrator.exceptions import ChartExtractionError, OrchestratorError
from orchestrator.models.deployment_config import DeploymentConfig
from orchestrator.repositories.charts import ChartRepository
from orchestrator.schemas.chart import ChartMetadata, ChartOverride
from orchestrator.services.chart_ref_service import ChartRefService
from orchestrator.services.chart_template_service import ChartTemplateService
from orchestrator.services.deployment_config_service import DeploymentConfigService
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


class DeploymentTemplateService:
    """Service building deployment charts."""

    def __init__(
        self,
        chart_ref_service: ChartRefService,
        chart_template_service: ChartTemplateService,
        chart_repository: ChartRepository,
        deployment_config_service: DeploymentConfigService,
        ref_chart_dir: Optional[str] = None
    ):
        """
        Initialize deployment template service.

        Args:
            chart_ref_service: Reference chart service
            chart_template_service: Service building charts from templates
            chart_repository: Chart repository
            deployment_config_service: Deployment config service
            ref_chart_dir: Reference chart directory (defaults to env REF_CHART_DIR_PATH)
        """
        self.chart_ref_service = chart_ref_service
        self.chart_template_service = chart_template_service
        self.chart_repository = chart_repository
        self.deployment_config_service = deployment_config_service
        self.ref_chart_dir = ref_chart_dir or get_chart_config()["ref_chart_dir_path"]

    def build_chart_and_get_path(
        self,
        app_name: str,
        chart_override: ChartOverride,
        deployment_config: DeploymentConfig
    ) -> str:
        """
        Build the chart of an app and return where it was built.

        Args:
            app_name: App name, used as the chart name
            chart_override: Chart of the app in the environment
            deployment_config: Deployment config paired with the chart

        Returns:
            str: Temporary directory holding the built chart

        Raises:
            NotFoundError: If the chart or its chart ref does not exist
            ChartExtractionError: If the reference template cannot be extracted
            SQLAlchemyError: If the auto-healed location cannot be saved
            OSError: If the chart cannot be built
        """
        version_suffix = f"/{chart_override.chart_version}"
        if not deployment_config.is_linked_release() and (
            not chart_override.chart_location.endswith(version_suffix)
            or not deployment_config.get_chart_location().endswith(version_suffix)
        ):
            self._auto_heal_chart_location(chart_override, deployment_config)

        chart_metadata = ChartMetadata(name=app_name, version=chart_override.chart_version)

        reference_template_path = os.path.join(self.ref_chart_dir, chart_override.reference_template)
        # load custom charts into the reference template path if missing
        if not os.path.exists(reference_template_path):
            self._extract_reference_template(chart_override.chart_ref_id)

        return self.chart_template_service.build_chart(chart_metadata, reference_template_path)

    def _auto_heal_chart_location(self, chart_override: ChartOverride, deployment_config: DeploymentConfig) -> None:
        chart_id = chart_override.chart_id
        logger.info(
            "auto_healing_chart_location",
            chart_id=chart_id,
            current_chart_location=chart_override.chart_location,
            current_chart_version=chart_override.chart_version
        )

        # the override only carries part of the row
        try:
            chart = self.chart_repository.find_by_id(chart_id)
        except (OrchestratorError, SQLAlchemyError) as exc:
            logger.error("error_in_fetching_chart", chart_id=chart_id, error=str(exc))
            raise

        try:
            chart_ref = self.chart_ref_service.find_by_id(chart.chart_ref_id)
        except (OrchestratorError, SQLAlchemyError) as exc:
            logger.error("error_in_fetching_chart_ref", chart_ref_id=chart.chart_ref_id, error=str(exc))
            raise

        new_chart_location = os.path.join(chart_ref.location, chart_override.chart_version)
        logger.info("new_chart_location_built", chart_id=chart_id, new_chart_location=new_chart_location)

        # chart row and deployment config are committed together
        try:
            chart.chart_location = new_chart_location
            self.chart_repository.update(chart, commit=False)
            deployment_config.set_chart_location(new_chart_location)
            self.deployment_config_service.create_or_update_config(deployment_config, SYSTEM_USER_ID, commit=False)
            self.chart_repository.commit()
        except SQLAlchemyError as exc:
            logger.error("error_in_saving_healed_chart_location", chart_id=chart_id, app_id=chart.app_id, error=str(exc))
            self._rollback(chart_id)
            raise

        chart_override.chart_location = new_chart_location

    def _rollback(self, chart_id: int) -> None:
        try:
            self.chart_repository.rollback()
        except SQLAlchemyError as exc:
            logger.info("error_in_rolling_back_chart_location", chart_id=chart_id, error=str(exc))

    def _extract_reference_template(self, chart_ref_id: int) -> None:
        try:
            chart_ref = self.chart_ref_service.find_by_id(chart_ref_id)
        except (OrchestratorError, SQLAlchemyError) as exc:
            logger.error("error_in_fetching_chart_ref", chart_ref_id=chart_ref_id, error=str(exc))
            raise

        if chart_ref.chart_data is None:
            return

        try:
            chart_info = self.chart_ref_service.extract_chart_if_missing(
                chart_ref.chart_data, self.ref_chart_dir, chart_ref.location
            )
        except ChartExtractionError as exc:
            self._remove_temporary_folder(exc.temporary_folder)
            raise
        self._remove_temporary_folder(chart_info.temporary_folder)

    def _remove_temporary_folder(self, temporary_folder: Optional[str]) -> None:
        if not temporary_folder:
            return
        try:
            shutil.rmtree(temporary_folder)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.error("error_in_deleting_temp_dir", temporary_folder=temporary_folder, error=str(exc))
