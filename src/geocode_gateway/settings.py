from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

DEFAULT_SERVICE_URL = "https://photon.komoot.io/api"


class GatewaySettings(BaseSettings):
    service_url: str = DEFAULT_SERVICE_URL
    timeout: float = Field(default=10.0, gt=0)  # seconds
    user_agent: str = f"geocode-gateway/{__version__}"

    model_config = SettingsConfigDict(
        env_prefix="GEOCODING_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

settings = GatewaySettings()
