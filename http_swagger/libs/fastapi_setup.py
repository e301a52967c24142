from fastapi import FastAPI

from ..models.swagger import DEFAULT_URL, Config
from .logger import Logger

log = Logger.get_logger(__name__)


class FastAPISetup:
    @classmethod
    def setup_swagger_ui(cls, app: FastAPI, swagger: Config) -> None:
        """Attach a built Swagger UI configuration to the FastAPI app

        FastAPI keeps serving the docs route and rendering the page, it only
        receives the bundle parameters to embed. A config still pointing at
        the default `doc.json` loads the app's own OpenAPI schema instead.

        Args:
            app (FastAPI): The FastAPI application instance
            swagger (Config): The finished Swagger UI configuration

        Returns:
            None
        """
        log.info(f"Setting up Swagger UI for instance '{swagger.instance_name}'")

        parameters = swagger.swagger_ui_parameters()
        if swagger.url == DEFAULT_URL:
            # FastAPI already embeds its openapi_url as the page url
            del parameters["url"]
        if app.swagger_ui_parameters:
            log.debug("Replacing previously attached Swagger UI parameters")
        app.swagger_ui_parameters = parameters
