"""
Reference chart lookups and materialization of stored chart archives.
"""

import io
import os
import shutil
import tarfile
from typing import Any, Dict

import yaml

from orchestrator.exceptions import ChartExtractionError
from orchestrator.models.chart import ChartRef
from orchestrator.repositories.charts import ChartRefRepository
from orchestrator.schemas.chart import ChartDataInfo
from orchestrator.services.chart_template_service import ChartTemplateService, CHART_FILE_NAME
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)


class ChartRefService:
    """Service for reference charts."""

    def __init__(self, chart_ref_repository: ChartRefRepository):
        self.chart_ref_repository = chart_ref_repository

    def find_by_id(self, chart_ref_id: int) -> ChartRef:
        return self.chart_ref_repository.find_by_id(chart_ref_id)

    def extract_chart_if_missing(self, chart_data: bytes, ref_chart_dir: str, location: str) -> ChartDataInfo:
        """
        Unpack a gzip'd chart archive into the reference chart directory.

        The archive is extracted into a temporary folder under ``ref_chart_dir``;
        its single top-level directory is the chart. The chart is copied to
        ``ref_chart_dir/location`` unless that directory already exists. With an
        empty location, one is derived from Chart.yaml as ``<name>_<version>``
        (dots removed) and must not exist yet.

        The temporary folder is left in place; callers remove it once done.

        Args:
            chart_data: Gzip'd tar archive of the chart
            ref_chart_dir: Reference chart directory
            location: Directory name of the chart under ref_chart_dir

        Returns:
            ChartDataInfo: Name, version and location of the chart and the temporary folder

        Raises:
            ChartExtractionError: If the archive cannot be materialized
        """
        temporary_folder = os.path.join(ref_chart_dir, ChartTemplateService.get_dir())
        logger.info("extracting_chart_archive", ref_chart_dir=ref_chart_dir, location=location, temporary_folder=temporary_folder)

        try:
            os.makedirs(temporary_folder, exist_ok=True)
            with tarfile.open(fileobj=io.BytesIO(chart_data), mode="r:gz") as archive:
                archive.extractall(temporary_folder, filter="data")
        except (OSError, tarfile.TarError) as exc:
            logger.error("error_in_extracting_chart_archive", error=str(exc), temporary_folder=temporary_folder)
            raise ChartExtractionError(f"failed to extract chart archive: {exc}", temporary_folder) from exc

        chart_dirs = [
            entry for entry in os.listdir(temporary_folder)
            if os.path.isdir(os.path.join(temporary_folder, entry))
        ]
        if len(chart_dirs) != 1:
            raise ChartExtractionError(
                f"chart archive must hold exactly one top-level directory, found {len(chart_dirs)}",
                temporary_folder
            )
        current_chart_dir = os.path.join(temporary_folder, chart_dirs[0])

        chart_file = self._read_chart_file(current_chart_dir, temporary_folder)
        chart_name = str(chart_file.get("name") or "")
        chart_version = str(chart_file.get("version") or "")
        if not chart_name or not chart_version:
            raise ChartExtractionError("Chart.yaml must define name and version", temporary_folder)

        if not location:
            location = f"{chart_name}_{chart_version.replace('.', '')}"
            if os.path.exists(os.path.join(ref_chart_dir, location)):
                raise ChartExtractionError(
                    f"chart {chart_name} version {chart_version} already exists",
                    temporary_folder
                )

        chart_location = os.path.join(ref_chart_dir, location)
        if not os.path.exists(chart_location):
            try:
                shutil.copytree(current_chart_dir, chart_location)
            except OSError as exc:
                logger.error("error_in_copying_chart", error=str(exc), chart_location=chart_location)
                raise ChartExtractionError(f"failed to copy chart to {chart_location}: {exc}", temporary_folder) from exc

        return ChartDataInfo(
            chart_name=chart_name,
            chart_version=chart_version,
            chart_location=location,
            temporary_folder=temporary_folder,
            description=str(chart_file.get("description") or ""),
        )

    def _read_chart_file(self, chart_dir: str, temporary_folder: str) -> Dict[str, Any]:
        chart_file = os.path.join(chart_dir, CHART_FILE_NAME)
        try:
            with open(chart_file) as f:
                content = yaml.safe_load(f)
        except FileNotFoundError as exc:
            raise ChartExtractionError(f"{CHART_FILE_NAME} not found in chart archive", temporary_folder) from exc
        except (OSError, yaml.YAMLError) as exc:
            raise ChartExtractionError(f"invalid {CHART_FILE_NAME}: {exc}", temporary_folder) from exc
        if not isinstance(content, dict):
            raise ChartExtractionError(f"invalid {CHART_FILE_NAME}: expected a mapping", temporary_folder)
        return content
