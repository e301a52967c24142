from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

DEFAULT_URL = "doc.json"
"""API definition location used when none is given"""

DEFAULT_SUBMIT_METHODS = ["get", "put", "post", "delete", "options", "head", "patch", "trace"]
"""HTTP methods enabled for Try-It-Out requests by default"""


# --------------------------------------------------------------------------- #


class RawScript(str):
    """Trusted JavaScript text injected into the page without escaping

    The server operator is responsible for the safety of its content.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())

    def __repr__(self) -> str:
        return f"RawScript({str.__repr__(self)})"


class DocExpansion(str, Enum):
    LIST = "list"
    FULL = "full"
    NONE = "none"


class ModelRendering(str, Enum):
    EXAMPLE = "example"
    SCHEMA = "schema"
    MODEL = "model"


# --------------------------------------------------------------------------- #


class URLsConfig(BaseModel):
    """
    One named API definition shown in the Swagger UI spec selector

    Attributes:
        url (str): Location of the API definition
        name (str): Label shown in the selector
    """

    model_config = ConfigDict(frozen=True)

    url: str
    name: str


class ConfigDraft(BaseModel):
    """In-progress Swagger UI configuration handed to each option"""

    url: str = DEFAULT_URL
    """The url pointing to API definition (normally swagger.json or swagger.yaml)"""
    urls: list[URLsConfig] = Field(default_factory=list)
    doc_expansion: str = DocExpansion.LIST.value
    deep_linking: bool = True
    dom_id: str = "swagger-ui"
    persist_authorization: bool = False
    display_operation_id: bool = False
    default_models_expand_depth: int = 1
    """Set to -1 to completely hide the models"""
    default_model_expand_depth: int = 1
    default_model_rendering: str = ModelRendering.EXAMPLE.value
    display_request_duration: bool = False
    show_extensions: bool = False
    show_common_extensions: bool = False
    supported_submit_methods: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUBMIT_METHODS)
    )
    try_it_out_enabled: bool = False

    instance_name: str = ""
    """Left empty to fall back to the process default documentation set"""
    before_script: RawScript = RawScript("")
    after_script: RawScript = RawScript("")
    plugins: list[RawScript] = Field(default_factory=list)
    ui_config: dict[RawScript, RawScript] = Field(default_factory=dict)


class Config(BaseModel):
    """Finished Swagger UI configuration

    Frozen once built, so it can be shared across request handlers.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    urls: tuple[URLsConfig, ...]
    doc_expansion: str
    deep_linking: bool
    dom_id: str
    persist_authorization: bool
    display_operation_id: bool
    default_models_expand_depth: int
    default_model_expand_depth: int
    default_model_rendering: str
    display_request_duration: bool
    show_extensions: bool
    show_common_extensions: bool
    supported_submit_methods: tuple[str, ...]
    try_it_out_enabled: bool

    instance_name: str
    before_script: RawScript
    after_script: RawScript
    plugins: tuple[RawScript, ...]
    ui_config_entries: tuple[tuple[RawScript, RawScript], ...]
    """Additional SwaggerUIBundle properties as (key, value) pairs"""

    @property
    def ui_config(self) -> Mapping[RawScript, RawScript]:
        """Read-only view of the additional SwaggerUIBundle properties"""
        return MappingProxyType(dict(self.ui_config_entries))

    @classmethod
    def from_draft(cls, draft: ConfigDraft) -> "Config":
        """Freeze a draft into a finished configuration

        Values are copied as-is, without validation or coercion.

        Args:
            draft (ConfigDraft): The draft with every option applied

        Returns:
            Config: A copy that shares no containers with the draft
        """
        return cls.model_construct(
            url=draft.url,
            urls=tuple(draft.urls),
            doc_expansion=draft.doc_expansion,
            deep_linking=draft.deep_linking,
            dom_id=draft.dom_id,
            persist_authorization=draft.persist_authorization,
            display_operation_id=draft.display_operation_id,
            default_models_expand_depth=draft.default_models_expand_depth,
            default_model_expand_depth=draft.default_model_expand_depth,
            default_model_rendering=draft.default_model_rendering,
            display_request_duration=draft.display_request_duration,
            show_extensions=draft.show_extensions,
            show_common_extensions=draft.show_common_extensions,
            supported_submit_methods=tuple(draft.supported_submit_methods),
            try_it_out_enabled=draft.try_it_out_enabled,
            instance_name=draft.instance_name,
            before_script=draft.before_script,
            after_script=draft.after_script,
            plugins=tuple(draft.plugins),
            ui_config_entries=tuple(draft.ui_config.items()),
        )

    def swagger_ui_parameters(self) -> dict[str, Any]:
        """Build the SwaggerUIBundle parameters that can be JSON encoded

        Raw script fields are left out, the page template injects them as-is.

        Returns:
            dict: Parameters keyed by their SwaggerUIBundle names
        """
        parameters: dict[str, Any] = {"url": self.url}
        if self.urls:
            parameters["urls"] = [entry.model_dump() for entry in self.urls]
        parameters.update(
            {
                "dom_id": f"#{self.dom_id}",
                "deepLinking": self.deep_linking,
                "docExpansion": self.doc_expansion,
                "persistAuthorization": self.persist_authorization,
                "displayOperationId": self.display_operation_id,
                "defaultModelsExpandDepth": self.default_models_expand_depth,
                "defaultModelExpandDepth": self.default_model_expand_depth,
                "defaultModelRendering": self.default_model_rendering,
                "displayRequestDuration": self.display_request_duration,
                "showExtensions": self.show_extensions,
                "showCommonExtensions": self.show_common_extensions,
                "supportedSubmitMethods": list(self.supported_submit_methods),
                "tryItOutEnabled": self.try_it_out_enabled,
            }
        )
        return parameters
