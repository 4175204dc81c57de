"""
Audit trail of ephemeral debug containers.

Every create, access or terminate performed on an ephemeral container is
recorded as an EphemeralContainerAction. A container seen for the first time
gets its own EphemeralContainer row, written in the same transaction as its
first audit row.
"""

from datetime import datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import SessionTransaction

from orchestrator.exceptions import DuplicateContainerError
from orchestrator.models.ephemeral_container import EphemeralContainerAction, ContainerAction
from orchestrator.repositories.ephemeral_containers import EphemeralContainersRepository
from orchestrator.schemas.ephemeral_container import EphemeralContainerRequest
from orchestrator.utils.logging import get_logger, log_container_event

logger = get_logger(__name__)


class EphemeralContainerService:
    """Service auditing actions on ephemeral containers."""

    def __init__(self, repository: EphemeralContainersRepository):
        """
        Initialize ephemeral container service.

        Args:
            repository: Ephemeral containers repository
        """
        self.repository = repository

    def audit_ephemeral_container_action(
        self,
        request: EphemeralContainerRequest,
        action_type: ContainerAction
    ) -> EphemeralContainerAction:
        """
        Record an action performed on an ephemeral container.

        Args:
            request: Container identity and acting user
            action_type: Action performed

        Returns:
            EphemeralContainerAction: The saved audit record

        Raises:
            DuplicateContainerError: If a CREATE targets an already tracked container
            SQLAlchemyError: If a database operation fails
        """
        fields = {
            "cluster_id": request.cluster_id,
            "namespace": request.namespace,
            "pod_name": request.pod_name,
            "container_name": request.basic_data.container_name,
        }

        try:
            container = self.repository.find_container_by_name(
                request.cluster_id,
                request.namespace,
                request.pod_name,
                request.basic_data.container_name,
            )
        except SQLAlchemyError as exc:
            logger.error("error_in_finding_ephemeral_container", error=str(exc), **fields)
            raise

        if container is not None and action_type == ContainerAction.CREATE:
            logger.error("ephemeral_container_already_present", **fields)
            raise DuplicateContainerError()

        try:
            tx = self.repository.start_tx()
        except SQLAlchemyError as exc:
            logger.error("error_in_creating_transaction", error=str(exc), **fields)
            raise

        committed = False
        try:
            if container is None:
                container = request.get_container_bean()
                if action_type != ContainerAction.CREATE:
                    # not tracked yet but accessed or terminated: it was created outside of us
                    container.is_externally_created = True
                try:
                    self.repository.save_ephemeral_container_data(tx, container)
                except IntegrityError as exc:
                    logger.error("failed_to_save_ephemeral_container", error=str(exc), **fields)
                    if action_type == ContainerAction.CREATE:
                        raise DuplicateContainerError() from exc
                    raise
                except SQLAlchemyError as exc:
                    logger.error("failed_to_save_ephemeral_container", error=str(exc), **fields)
                    raise

            audit = EphemeralContainerAction(
                ephemeral_container_id=container.id,
                action_type=action_type,
                performed_at=datetime.utcnow(),
                performed_by=request.user_id,
            )
            try:
                self.repository.save_ephemeral_container_action_audit(tx, audit)
            except SQLAlchemyError as exc:
                logger.error("failed_to_save_ephemeral_container_action", error=str(exc), **fields)
                raise

            container_id, audit_id = container.id, audit.id
            try:
                self.repository.commit_tx(tx)
            except SQLAlchemyError as exc:
                logger.error("error_in_committing_transaction", error=str(exc), **fields)
                raise
            committed = True
        finally:
            if not committed:
                self._rollback(tx, fields)

        log_container_event(
            logger,
            "transaction_committed_successfully",
            ephemeral_container_id=container_id,
            ephemeral_container_action_id=audit_id,
            action_type=action_type.value,
            **fields
        )
        return audit

    def _rollback(self, tx: SessionTransaction, fields: dict) -> None:
        try:
            self.repository.rollback_tx(tx)
        except SQLAlchemyError as exc:
            logger.info("error_in_rolling_back_transaction", error=str(exc), **fields)
