"""
FastAPI routes for cluster access and ephemeral container auditing.
"""

from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from orchestrator.database import get_db
from orchestrator.exceptions import NotFoundError, DuplicateContainerError
from orchestrator.models.ephemeral_container import ContainerAction
from orchestrator.repositories.ephemeral_containers import EphemeralContainersRepository
from orchestrator.schemas.cluster import ClusterConfig
from orchestrator.schemas.ephemeral_container import EphemeralContainerRequest, EphemeralContainerAuditResponse
from orchestrator.services.cluster_service import ClusterReadService
from orchestrator.services.ephemeral_container_service import EphemeralContainerService
from orchestrator.services.helm_app_read_service import HelmAppReadService
from orchestrator.utils.logging import get_logger, set_correlation_id

logger = get_logger(__name__)
router = APIRouter(prefix="/api/clusters", tags=["clusters"])


@router.get("/{cluster_id}/config", response_model=ClusterConfig)
async def get_cluster_config(
    cluster_id: int,
    db: Session = Depends(get_db)
) -> ClusterConfig:
    """
    Get the connection settings of a cluster.
    """
    set_correlation_id()
    logger.info("get_cluster_config_requested", cluster_id=cluster_id)

    try:
        service = HelmAppReadService(ClusterReadService(db))
        return service.get_cluster_config(cluster_id)

    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc)
        )
    except Exception as exc:
        logger.error("get_cluster_config_failed", cluster_id=cluster_id, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to resolve cluster config: {str(exc)}"
        )


@router.post(
    "/ephemeral-containers/{action}",
    response_model=EphemeralContainerAuditResponse,
    status_code=status.HTTP_201_CREATED
)
async def audit_ephemeral_container(
    action: ContainerAction,
    request: EphemeralContainerRequest,
    db: Session = Depends(get_db)
) -> EphemeralContainerAuditResponse:
    """
    Record a create, access or terminate of an ephemeral container.

    A CREATE for a container that is already tracked is rejected with 409.
    """
    set_correlation_id()
    logger.info(
        "audit_ephemeral_container_requested",
        action=action.value,
        cluster_id=request.cluster_id,
        namespace=request.namespace,
        pod_name=request.pod_name,
        container_name=request.basic_data.container_name
    )

    try:
        service = EphemeralContainerService(EphemeralContainersRepository(db))
        audit = service.audit_ephemeral_container_action(request, action)
        return EphemeralContainerAuditResponse.model_validate(audit)

    except DuplicateContainerError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc)
        )
    except Exception as exc:
        logger.error("audit_ephemeral_container_failed", action=action.value, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to audit ephemeral container: {str(exc)}"
        )
