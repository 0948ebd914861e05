from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from src.config.settings import Settings, get_settings
from src.rsvp.urls import RSVP_ENV_CHECK_URL

router = APIRouter()


class EnvCheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    env_check: dict[str, bool] = Field(alias="envCheck")


@router.get(RSVP_ENV_CHECK_URL, response_model=EnvCheckResponse)
async def env_check(config: Settings = Depends(get_settings)) -> EnvCheckResponse:
    """Report which notification secrets are configured, as booleans only."""
    return EnvCheckResponse(
        success=True,
        message="RSVP API is running",
        env_check=config.env_check(),
    )
