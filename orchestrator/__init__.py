"""
Deployment orchestrator: cluster access, ephemeral container auditing and chart building.
"""
