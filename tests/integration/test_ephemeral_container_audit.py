"""
Integration tests for ephemeral container auditing against a real database.
"""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import SQLAlchemyError

from orchestrator.exceptions import DuplicateContainerError
from orchestrator.models.ephemeral_container import EphemeralContainer, EphemeralContainerAction, ContainerAction
from orchestrator.repositories.ephemeral_containers import EphemeralContainersRepository
from orchestrator.schemas.ephemeral_container import EphemeralContainerRequest, EphemeralContainerBasicData
from orchestrator.services.ephemeral_container_service import EphemeralContainerService


def make_request(cluster_id: int, container_name: str = "debugger-x1") -> EphemeralContainerRequest:
    return EphemeralContainerRequest(
        cluster_id=cluster_id,
        namespace="default",
        pod_name="api-7d9f",
        user_id=42,
        basic_data=EphemeralContainerBasicData(container_name=container_name, target_container_name="api", image="busybox"),
    )


def counts(db_session):
    return (
        db_session.query(EphemeralContainer).count(),
        db_session.query(EphemeralContainerAction).count(),
    )


@pytest.fixture
def repository(db_session):
    return EphemeralContainersRepository(db_session)


@pytest.fixture
def service(repository):
    return EphemeralContainerService(repository)


class TestEphemeralContainerAuditIntegration:
    """Integration tests for audit_ephemeral_container_action."""

    def test_create_persists_container_and_audit(self, db_session, cluster, service):
        """Test that a CREATE writes one container row and one audit row."""
        # Act
        audit = service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        # Assert
        assert counts(db_session) == (1, 1)
        container = db_session.query(EphemeralContainer).one()
        assert container.is_externally_created is False
        assert container.name == "debugger-x1"
        assert audit.ephemeral_container_id == container.id
        assert audit.action_type == ContainerAction.CREATE
        assert audit.performed_by == 42

    def test_duplicate_create_writes_nothing(self, db_session, cluster, service):
        """Test that a second CREATE fails and leaves both tables unchanged."""
        # Arrange
        service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        # Act & Assert
        with pytest.raises(DuplicateContainerError):
            service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)
        assert counts(db_session) == (1, 1)

    @pytest.mark.parametrize("action_type", [ContainerAction.ACCESS, ContainerAction.TERMINATE])
    def test_untracked_container_is_recorded_as_external(self, db_session, cluster, service, action_type):
        """Test that acting on an unknown container records it as externally created."""
        # Act
        audit = service.audit_ephemeral_container_action(make_request(cluster.id), action_type)

        # Assert
        assert counts(db_session) == (1, 1)
        container = db_session.query(EphemeralContainer).one()
        assert container.is_externally_created is True
        assert audit.ephemeral_container_id == container.id

    def test_tracked_container_only_gets_audit_rows(self, db_session, cluster, service):
        """Test that later actions reference the existing container."""
        # Arrange
        first = service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)
        container_id = first.ephemeral_container_id

        # Act
        access = service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.ACCESS)
        terminate = service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.TERMINATE)

        # Assert
        assert counts(db_session) == (1, 3)
        assert access.ephemeral_container_id == container_id
        assert terminate.ephemeral_container_id == container_id
        actions = [a.action_type for a in db_session.query(EphemeralContainerAction).order_by(EphemeralContainerAction.id)]
        assert actions == [ContainerAction.CREATE, ContainerAction.ACCESS, ContainerAction.TERMINATE]

    def test_containers_in_other_pods_are_independent(self, db_session, cluster, service):
        """Test that identity includes the container name."""
        # Act
        service.audit_ephemeral_container_action(make_request(cluster.id, "debugger-a"), ContainerAction.CREATE)
        service.audit_ephemeral_container_action(make_request(cluster.id, "debugger-b"), ContainerAction.CREATE)

        # Assert
        assert counts(db_session) == (2, 2)

    def test_audit_insert_failure_hides_container_row(self, db_session, cluster, repository, service):
        """Test that the container row is rolled back when the audit insert fails."""
        # Arrange
        with patch.object(
            repository,
            "save_ephemeral_container_action_audit",
            side_effect=SQLAlchemyError("insert failed")
        ):
            # Act & Assert
            with pytest.raises(SQLAlchemyError):
                service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        assert counts(db_session) == (0, 0)

    def test_unique_constraint_closes_create_race(self, db_session, cluster, repository, service):
        """Test that a CREATE losing the race to a concurrent insert is a duplicate."""
        # Arrange
        service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        # Act & Assert: the lookup misses the row written by the concurrent request
        with patch.object(repository, "find_container_by_name", return_value=None):
            with pytest.raises(DuplicateContainerError):
                service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        assert counts(db_session) == (1, 1)

    def test_service_usable_after_failed_call(self, db_session, cluster, repository, service):
        """Test that the session is rolled back cleanly after a failure."""
        # Arrange
        with patch.object(
            repository,
            "save_ephemeral_container_action_audit",
            side_effect=SQLAlchemyError("insert failed")
        ):
            with pytest.raises(SQLAlchemyError):
                service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        # Act
        service.audit_ephemeral_container_action(make_request(cluster.id), ContainerAction.CREATE)

        # Assert
        assert counts(db_session) == (1, 1)
