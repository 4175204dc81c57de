"""
Main FastAPI application for the deployment orchestrator.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
import uvicorn

from orchestrator.api.routes.charts import router as charts_router
from orchestrator.api.routes.clusters import router as clusters_router
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Orchestrator API",
    description="Cluster access, ephemeral container auditing and chart building",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(clusters_router)
app.include_router(charts_router)


@app.get("/")
async def root():
    return {
        "message": "Orchestrator API",
        "status": "healthy",
        "version": "1.0.0",
        "endpoints": {
            "docs": "/docs",
            "health": "/health",
            "openapi": "/openapi.json",
            "clusters": "/api/clusters",
            "charts": "/api/charts",
        }
    }


@app.get("/health")
async def health_check():
    """Health check including the database."""
    health_status = {
        "api": "healthy",
        "service": "orchestrator",
        "dependencies": {}
    }

    try:
        from orchestrator.database import SessionLocal
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        health_status["dependencies"]["database"] = "healthy"
    except Exception as e:
        health_status["dependencies"]["database"] = f"unhealthy: {str(e)}"

    return health_status


@app.on_event("startup")
async def startup_event():
    logger.info("orchestrator_starting_up")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("orchestrator_shutting_down")


# Development server
if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
