"""
Contract tests for the HTTP API.

Verifies status codes and response shapes of the cluster, ephemeral container
and chart routes against an in-memory database.
"""

import pytest
import yaml
from fastapi.testclient import TestClient

from orchestrator.database import get_db
from orchestrator.main import app
from orchestrator.models.chart import Chart, ChartRef
from orchestrator.models.cluster import Cluster
from orchestrator.models.deployment_config import DeploymentConfig

REFERENCE_TEMPLATE = "reference-chart_4-18-0"


@pytest.fixture
def client(db_session, tmp_path, monkeypatch):
    monkeypatch.setenv("REF_CHART_DIR_PATH", str(tmp_path / "refs"))
    monkeypatch.setenv("CHART_WORKING_DIR_PATH", str(tmp_path / "charts"))
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def container_payload(cluster_id: int) -> dict:
    return {
        "cluster_id": cluster_id,
        "namespace": "default",
        "pod_name": "api-7d9f",
        "user_id": 42,
        "basic_data": {"container_name": "debugger-x1", "target_container_name": "api", "image": "busybox"},
    }


class TestClusterConfigContract:
    """Contract tests for GET /api/clusters/{cluster_id}/config."""

    def test_returns_cluster_config(self, client, cluster):
        response = client.get(f"/api/clusters/{cluster.id}/config")

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "cluster_id": cluster.id,
            "cluster_name": "default_cluster",
            "api_server_url": "https://kubernetes.default.svc",
            "token": "token-abc",
            "insecure_skip_tls_verify": False,
            "key_data": "key-data",
            "cert_data": "cert-data",
            "ca_data": "ca-data",
        }

    def test_skip_verify_cluster_has_no_tls_material(self, client, db_session):
        insecure = Cluster(
            cluster_name="insecure",
            server_url="https://insecure:6443",
            config={"bearer_token": "t", "tls_key": "k", "cert_data": "c", "cert_auth_data": "ca"},
            insecure_skip_tls_verify=True,
        )
        db_session.add(insecure)
        db_session.commit()

        data = client.get(f"/api/clusters/{insecure.id}/config").json()

        assert data["insecure_skip_tls_verify"] is True
        assert data["key_data"] == ""
        assert data["cert_data"] == ""
        assert data["ca_data"] == ""

    def test_unknown_cluster_is_404(self, client):
        response = client.get("/api/clusters/999/config")

        assert response.status_code == 404
        assert response.json()["detail"] == "Cluster 999 not found"


class TestEphemeralContainerContract:
    """Contract tests for POST /api/clusters/ephemeral-containers/{action}."""

    def test_create_returns_audit_record(self, client, cluster):
        response = client.post("/api/clusters/ephemeral-containers/CREATE", json=container_payload(cluster.id))

        assert response.status_code == 201
        data = response.json()
        assert data["action_type"] == "CREATE"
        assert data["performed_by"] == 42
        assert {"id", "ephemeral_container_id", "performed_at"} <= set(data)

    def test_duplicate_create_is_409(self, client, cluster):
        client.post("/api/clusters/ephemeral-containers/CREATE", json=container_payload(cluster.id))

        response = client.post("/api/clusters/ephemeral-containers/CREATE", json=container_payload(cluster.id))

        assert response.status_code == 409
        assert response.json()["detail"] == "container already present in the provided pod"

    def test_access_after_create_references_same_container(self, client, cluster):
        created = client.post("/api/clusters/ephemeral-containers/CREATE", json=container_payload(cluster.id)).json()

        accessed = client.post("/api/clusters/ephemeral-containers/ACCESS", json=container_payload(cluster.id)).json()

        assert accessed["ephemeral_container_id"] == created["ephemeral_container_id"]
        assert accessed["action_type"] == "ACCESS"

    def test_unknown_action_is_422(self, client, cluster):
        response = client.post("/api/clusters/ephemeral-containers/RESTART", json=container_payload(cluster.id))

        assert response.status_code == 422

    def test_missing_container_name_is_422(self, client, cluster):
        payload = container_payload(cluster.id)
        del payload["basic_data"]["container_name"]

        response = client.post("/api/clusters/ephemeral-containers/ACCESS", json=payload)

        assert response.status_code == 422


class TestBuildChartContract:
    """Contract tests for POST /api/charts/{chart_id}/build."""

    def seed(self, db_session, tmp_path, chart_location: str):
        template_dir = tmp_path / "refs" / REFERENCE_TEMPLATE
        template_dir.mkdir(parents=True)
        (template_dir / "Chart.yaml").write_text(yaml.safe_dump({"name": "reference-chart", "version": "4.18.0"}))

        chart_ref = ChartRef(name="reference-chart", version="4.18.0", location=REFERENCE_TEMPLATE)
        db_session.add(chart_ref)
        db_session.flush()
        chart = Chart(
            app_id=9, chart_name="my-app", chart_version="1.0.0", chart_location=chart_location,
            chart_ref_id=chart_ref.id, reference_template=REFERENCE_TEMPLATE,
        )
        deployment_config = DeploymentConfig(app_id=9, environment_id=1, chart_location=chart_location)
        db_session.add_all([chart, deployment_config])
        db_session.commit()
        return chart, deployment_config

    def test_build_heals_and_returns_path(self, client, db_session, tmp_path):
        chart, deployment_config = self.seed(db_session, tmp_path, "charts/foo/old")

        response = client.post(
            f"/api/charts/{chart.id}/build",
            json={"app_name": "my-app", "deployment_config_id": deployment_config.id},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["chart_id"] == chart.id
        assert data["chart_location"] == f"{REFERENCE_TEMPLATE}/1.0.0"
        assert data["chart_path"].startswith(str(tmp_path / "charts"))

    def test_unknown_chart_is_404(self, client):
        response = client.post("/api/charts/999/build", json={"app_name": "my-app", "deployment_config_id": 1})

        assert response.status_code == 404

    def test_unknown_deployment_config_is_404(self, client, db_session, tmp_path):
        chart, _ = self.seed(db_session, tmp_path, f"{REFERENCE_TEMPLATE}/1.0.0")

        response = client.post(f"/api/charts/{chart.id}/build", json={"app_name": "my-app", "deployment_config_id": 999})

        assert response.status_code == 404
