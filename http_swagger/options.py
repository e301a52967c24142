"""Options applied in order to a ConfigDraft by ``new_config``.

Each function returns a deferred mutation; later options win over earlier
ones touching the same field, except ``urls`` which appends.
"""

from typing import Callable

from .models.swagger import ConfigDraft, RawScript, URLsConfig

Option = Callable[[ConfigDraft], None]


def url(url: str) -> Option:
    """The url pointing to API definition (normally swagger.json or swagger.yaml)"""

    def apply(c: ConfigDraft) -> None:
        c.url = url

    return apply


def urls(url: str, name: str) -> Option:
    """Add a named API definition to the list of URLs"""

    def apply(c: ConfigDraft) -> None:
        c.urls.append(URLsConfig.model_construct(url=url, name=name))

    return apply


def deep_linking(deep_linking: bool) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.deep_linking = deep_linking

    return apply


def doc_expansion(doc_expansion: str) -> Option:
    """list, full or none"""

    def apply(c: ConfigDraft) -> None:
        c.doc_expansion = doc_expansion

    return apply


def dom_id(dom_id: str) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.dom_id = dom_id

    return apply


def instance_name(name: str) -> Option:
    """The name the swagger documents were registered under

    Defaults to the process default documentation set ("swagger").
    """

    def apply(c: ConfigDraft) -> None:
        c.instance_name = name

    return apply


def persist_authorization(persist_authorization: bool) -> Option:
    """Keep authorization data over browser close/refresh. Defaults to False."""

    def apply(c: ConfigDraft) -> None:
        c.persist_authorization = persist_authorization

    return apply


def display_operation_id(display_operation_id: bool) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.display_operation_id = display_operation_id

    return apply


def default_models_expand_depth(depth: int) -> Option:
    """Expansion depth for models, -1 hides them completely. Defaults to 1."""

    def apply(c: ConfigDraft) -> None:
        c.default_models_expand_depth = depth

    return apply


def default_model_expand_depth(depth: int) -> Option:
    """Expansion depth for the model on the model-example section. Defaults to 1."""

    def apply(c: ConfigDraft) -> None:
        c.default_model_expand_depth = depth

    return apply


def default_model_rendering(rendering: str) -> Option:
    """example, schema or model. Defaults to example."""

    def apply(c: ConfigDraft) -> None:
        c.default_model_rendering = rendering

    return apply


def display_request_duration(display_request_duration: bool) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.display_request_duration = display_request_duration

    return apply


def show_extensions(show_extensions: bool) -> Option:
    """Show vendor extension (x-) fields for operations, parameters and schema"""

    def apply(c: ConfigDraft) -> None:
        c.show_extensions = show_extensions

    return apply


def show_common_extensions(show_common_extensions: bool) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.show_common_extensions = show_common_extensions

    return apply


def supported_submit_methods(*methods: str) -> Option:
    """HTTP methods that get a Try-It-Out submit button, replacing the defaults"""

    def apply(c: ConfigDraft) -> None:
        c.supported_submit_methods = list(methods)

    return apply


def try_it_out_enabled(enabled: bool) -> Option:
    def apply(c: ConfigDraft) -> None:
        c.try_it_out_enabled = enabled

    return apply


def plugins(plugins: list[str]) -> Option:
    """Additional plugins to load into Swagger UI"""

    def apply(c: ConfigDraft) -> None:
        c.plugins = [RawScript(plugin) for plugin in plugins]

    return apply


def ui_config(props: dict[str, str]) -> Option:
    """Additional SwaggerUIBundle config properties, keys and values unquoted"""

    def apply(c: ConfigDraft) -> None:
        c.ui_config = {RawScript(k): RawScript(v) for k, v in props.items()}

    return apply


def before_script(js: str) -> Option:
    """JavaScript run right before the Swagger UI object is created"""

    def apply(c: ConfigDraft) -> None:
        c.before_script = RawScript(js)

    return apply


def after_script(js: str) -> Option:
    """JavaScript run right after the Swagger UI object is created and set on the window"""

    def apply(c: ConfigDraft) -> None:
        c.after_script = RawScript(js)

    return apply
