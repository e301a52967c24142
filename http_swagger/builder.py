from .config import config
from .errors import InvalidDepthError, InvalidEnumValueError
from .libs.logger import Logger
from .models.swagger import (
    DEFAULT_SUBMIT_METHODS,
    Config,
    ConfigDraft,
    DocExpansion,
    ModelRendering,
)
from .options import Option

log = Logger.get_logger(__name__)


def new_config(
    *options: Option,
    default_instance_name: str | None = None,
    strict: bool | None = None,
) -> Config:
    """Build a Swagger UI configuration from the defaults and the given options

    Args:
        *options (Option): Options applied in order, later ones win
        default_instance_name (str | None): Instance name used when none was set,
            defaults to `config.swagger.default_instance_name`
        strict (bool | None): Validate the result, defaults to
            `config.swagger.strict_validation`

    Returns:
        Config: The finished, frozen configuration

    Raises:
        SwaggerConfigError: Only when validation is enabled and a value is rejected
    """
    draft = ConfigDraft()
    for option in options:
        option(draft)

    if not draft.instance_name:
        if default_instance_name is None:
            default_instance_name = config.swagger.default_instance_name
        draft.instance_name = default_instance_name

    swagger = Config.from_draft(draft)
    log.debug(
        f"Built Swagger UI config '{swagger.instance_name}' from {len(options)} options"
    )

    if strict is None:
        strict = config.swagger.strict_validation
    if strict:
        validate_config(swagger)

    return swagger


def validate_config(swagger: Config) -> None:
    """Check the enum and depth fields of a finished configuration

    Args:
        swagger (Config): The configuration to check

    Raises:
        InvalidEnumValueError: An enum field or submit method is not recognised
        InvalidDepthError: An expand depth is below -1
    """
    try:
        _check_enum("doc_expansion", swagger.doc_expansion, [e.value for e in DocExpansion])
        _check_enum(
            "default_model_rendering",
            swagger.default_model_rendering,
            [e.value for e in ModelRendering],
        )
        for method in swagger.supported_submit_methods:
            _check_enum("supported_submit_methods", method, DEFAULT_SUBMIT_METHODS)
        for field in ("default_models_expand_depth", "default_model_expand_depth"):
            depth = getattr(swagger, field)
            if not isinstance(depth, int) or isinstance(depth, bool) or depth < -1:
                raise InvalidDepthError(field, depth)
    except (InvalidEnumValueError, InvalidDepthError) as e:
        log.error(f"Invalid Swagger UI config '{swagger.instance_name}': {e}")
        raise


def _check_enum(field: str, value: str, allowed: list[str]) -> None:
    if value not in allowed:
        raise InvalidEnumValueError(field, value, list(allowed))
