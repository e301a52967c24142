from pydantic_settings import BaseSettings, SettingsConfigDict


class SwaggerConfig(BaseSettings):
    """Process-wide Swagger UI settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="SWAGGER_")

    default_instance_name: str = "swagger"
    """Name of the documentation set used when no instance name is given"""
    strict_validation: bool = False
    """Validate enum and depth values when building a config"""
