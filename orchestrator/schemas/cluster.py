"""
Cluster connection beans handed to the Helm/gRPC layer.
"""

from pydantic import BaseModel, Field


class ClusterConfig(BaseModel):
    """Wire-level projection of a stored cluster."""
    cluster_id: int = Field(..., description="Cluster identifier")
    cluster_name: str = Field(..., description="Cluster name")
    api_server_url: str = Field(..., description="Kubernetes API server URL")
    token: str = Field("", description="Bearer token")
    insecure_skip_tls_verify: bool = Field(False, description="Skip TLS verification of the API server")
    key_data: str = Field("", description="TLS client key, empty when TLS verification is skipped")
    cert_data: str = Field("", description="TLS client certificate, empty when TLS verification is skipped")
    ca_data: str = Field("", description="Certificate authority data, empty when TLS verification is skipped")
