"""GKE Demo — minimal FastAPI service for container orchestrator deployments."""

__version__ = "1.0.0"
