from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from movie_catalog.infrastructure.config.dependencies import get_settings
from movie_catalog.infrastructure.config.settings import APP_VERSION, Settings

router = APIRouter(prefix="/v1/healthcheck", tags=["healthcheck"])


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthStatus(BaseModel):
    status: str
    system_info: SystemInfo


@router.get("", response_model=HealthStatus)
async def healthcheck(settings: Annotated[Settings, Depends(get_settings)]):
    return HealthStatus(status="available", system_info=SystemInfo(environment=settings.ENV, version=APP_VERSION))
