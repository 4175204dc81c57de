"""
Deployment config persistence.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from orchestrator.exceptions import NotFoundError
from orchestrator.models.deployment_config import DeploymentConfig


class DeploymentConfigService:
    """Service for reading and saving deployment configs."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def get_by_id(self, deployment_config_id: int) -> DeploymentConfig:
        """
        Get an active deployment config by ID.

        Raises:
            NotFoundError: If no active deployment config has this ID
        """
        config = (
            self.db.query(DeploymentConfig)
            .filter(DeploymentConfig.id == deployment_config_id, DeploymentConfig.active.is_(True))
            .first()
        )
        if config is None:
            raise NotFoundError("DeploymentConfig", deployment_config_id)
        return config

    def create_or_update_config(
        self,
        config: DeploymentConfig,
        user_id: int,
        commit: bool = True
    ) -> DeploymentConfig:
        """
        Insert a new deployment config or save changes to an existing one.

        Args:
            config: Deployment config to persist
            user_id: User recorded as the last updater
            commit: Commit right away, or only flush and leave the
                transaction to the caller

        Returns:
            DeploymentConfig: Persisted deployment config

        Raises:
            SQLAlchemyError: If database operation fails
        """
        config.updated_by = user_id
        config.updated_on = datetime.utcnow()
        if config.id is None:
            self.db.add(config)
        else:
            config = self.db.merge(config)
        if not commit:
            self.db.flush()
            return config
        self.db.commit()
        self.db.refresh(config)
        return config
