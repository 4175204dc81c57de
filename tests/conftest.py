"""
Shared fixtures: an in-memory SQLite database and chart archives.
"""

import io
import tarfile
from typing import Callable, Dict

import pytest
import yaml
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from orchestrator.models import Base, Cluster


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def cluster(db_session) -> Cluster:
    """A cluster with TLS verification enabled."""
    cluster = Cluster(
        cluster_name="default_cluster",
        server_url="https://kubernetes.default.svc",
        config={
            "bearer_token": "token-abc",
            "tls_key": "key-data",
            "cert_data": "cert-data",
            "cert_auth_data": "ca-data",
        },
        insecure_skip_tls_verify=False,
    )
    db_session.add(cluster)
    db_session.commit()
    db_session.refresh(cluster)
    return cluster


@pytest.fixture
def make_chart_archive() -> Callable[..., bytes]:
    """Factory building gzip'd tar chart archives in memory."""

    def _make(
        chart_dir: str = "mychart",
        chart_file: Dict = None,
        extra_files: Dict[str, str] = None,
        include_chart_file: bool = True
    ) -> bytes:
        if chart_file is None:
            chart_file = {"apiVersion": "v2", "name": "mychart", "version": "1.0.0", "description": "Test chart"}
        files = dict(extra_files or {})
        if include_chart_file:
            files["Chart.yaml"] = yaml.safe_dump(chart_file)

        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
            directory = tarfile.TarInfo(chart_dir)
            directory.type = tarfile.DIRTYPE
            directory.mode = 0o755
            archive.addfile(directory)
            for name, content in files.items():
                data = content.encode()
                info = tarfile.TarInfo(f"{chart_dir}/{name}")
                info.size = len(data)
                info.mode = 0o644
                archive.addfile(info, io.BytesIO(data))
        return buffer.getvalue()

    return _make
