"""Health check routes."""

import os
import platform
import socket
from datetime import datetime, timezone
from pathlib import Path

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from holding.config import Settings

router = APIRouter(prefix="/api/healthcheck", tags=["health"], route_class=DishkaRoute)


class ApplicationInfo(BaseModel):
    """Application identity."""

    name: str
    version: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    application: ApplicationInfo


class ServerInfo(BaseModel):
    """Host the process runs on."""

    machine_name: str
    os_version: str
    processor_count: int
    python_version: str


class ConfigurationInfo(BaseModel):
    """Runtime configuration worth surfacing to operators."""

    port: int
    content_root_path: str


class DetailedHealthResponse(HealthResponse):
    """Health check response with server details."""

    server: ServerInfo
    configuration: ConfigurationInfo


def _basic(settings: Settings) -> dict:
    return {
        "status": "Healthy",
        "timestamp": datetime.now(timezone.utc),
        "environment": settings.environment,
        "application": ApplicationInfo(
            name=settings.app.name, version=settings.app.version
        ),
    }


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(**_basic(settings))


@router.get("/detailed", response_model=DetailedHealthResponse)
async def detailed_health_check(
    settings: FromDishka[Settings],
) -> DetailedHealthResponse:
    """Report service status together with host and configuration details."""
    return DetailedHealthResponse(
        **_basic(settings),
        server=ServerInfo(
            machine_name=socket.gethostname(),
            os_version=platform.platform(),
            processor_count=os.cpu_count() or 1,
            python_version=platform.python_version(),
        ),
        configuration=ConfigurationInfo(
            port=settings.port,
            content_root_path=str(Path.cwd()),
        ),
    )
