"""Service configuration: engine variant, intake defaults and server knobs."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "PM_"}

    # Engine
    assign_roles: bool = True

    # Intake
    default_asset_type: str = "Oven / Air House"
    default_quantity: int = 1

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8200


settings = Settings()
