"""
Builds deployment charts out of reference chart templates.
"""

import os
import shutil
import uuid
from typing import Any, Dict, Optional

import yaml

from orchestrator.config.settings import get_chart_config
from orchestrator.schemas.chart import ChartMetadata
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)

CHART_FILE_NAME = "Chart.yaml"


class ChartTemplateService:
    """Service copying reference templates into per-build working directories."""

    def __init__(self, chart_working_dir: Optional[str] = None):
        """
        Initialize chart template service.

        Args:
            chart_working_dir: Directory charts are built in
                              (defaults to env CHART_WORKING_DIR_PATH)
        """
        self.chart_working_dir = chart_working_dir or get_chart_config()["chart_working_dir_path"]

    @staticmethod
    def get_dir() -> str:
        """Random directory name for a single build or extraction."""
        return uuid.uuid4().hex

    def build_chart(self, chart_metadata: ChartMetadata, reference_template_path: str) -> str:
        """
        Build a chart from a reference template.

        The template directory is copied into a fresh working directory and its
        Chart.yaml rewritten with the chart's name and version.

        Args:
            chart_metadata: Name and version of the chart being built
            reference_template_path: Directory of the reference template

        Returns:
            str: Path of the built chart directory

        Raises:
            FileNotFoundError: If the reference template does not exist
            OSError: If the chart cannot be written
        """
        chart_metadata.api_version = "v1"
        temp_reference_template_dir = os.path.join(self.chart_working_dir, self.get_dir())
        logger.debug("chart_dir", chart=chart_metadata.name, dir=temp_reference_template_dir)

        os.makedirs(self.chart_working_dir, exist_ok=True)
        shutil.copytree(reference_template_path, temp_reference_template_dir)
        try:
            self._write_chart_file(temp_reference_template_dir, chart_metadata)
        except (OSError, yaml.YAMLError):
            shutil.rmtree(temp_reference_template_dir, ignore_errors=True)
            raise

        logger.info(
            "chart_built",
            chart=chart_metadata.name,
            version=chart_metadata.version,
            dir=temp_reference_template_dir
        )
        return temp_reference_template_dir

    def _write_chart_file(self, chart_dir: str, chart_metadata: ChartMetadata) -> None:
        chart_file = os.path.join(chart_dir, CHART_FILE_NAME)
        content: Dict[str, Any] = {}
        if os.path.exists(chart_file):
            with open(chart_file) as f:
                content = yaml.safe_load(f) or {}

        content["apiVersion"] = chart_metadata.api_version
        content["name"] = chart_metadata.name
        content["version"] = chart_metadata.version

        with open(chart_file, "w") as f:
            yaml.safe_dump(content, f, default_flow_style=False, sort_keys=False)
