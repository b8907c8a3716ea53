from pydantic import BaseModel, ConfigDict, Field
from typing import Callable, Literal

DocExpansion = Literal["list", "full", "none"]


class Config(BaseModel):
    """
    Settings for the Swagger UI bootstrap script.

    url, doc_expansion and dom_id are escaped when rendered. plugins,
    ui_config, before_script and after_script are trusted script source
    and are emitted verbatim.
    """

    model_config = ConfigDict(validate_assignment=True)

    url: str = "doc.json"
    deep_linking: bool = True
    doc_expansion: DocExpansion = "list"
    dom_id: str = "#swagger-ui"
    plugins: list[str] = Field(default_factory=list)
    ui_config: dict[str, str] = Field(default_factory=dict)
    before_script: str = ""
    after_script: str = ""
    instance_name: str = "swagger"


Option = Callable[[Config], None]


def new_config(*options: Option) -> Config:
    """Build a Config from the defaults and apply options in order."""
    config = Config()
    for option in options:
        option(config)
    return config


def url(value: str) -> Option:
    """Location of the spec document, relative to the index page or absolute."""

    def apply(config: Config):
        config.url = value

    return apply


def deep_linking(enabled: bool) -> Option:
    def apply(config: Config):
        config.deep_linking = enabled

    return apply


def doc_expansion(value: str) -> Option:
    """One of "list", "full" or "none"."""

    def apply(config: Config):
        config.doc_expansion = value

    return apply


def dom_id(value: str) -> Option:
    def apply(config: Config):
        config.dom_id = value

    return apply


def plugins(names: list[str]) -> Option:
    """Plugin identifiers appended after the built-in DownloadUrl plugin."""

    def apply(config: Config):
        config.plugins = list(names)

    return apply


def ui_config(entries: dict[str, str]) -> Option:
    """
    Extra SwaggerUIBundle parameters. Keys and values are script source,
    so string values must carry their own quotes, e.g. '"model"'.
    """

    def apply(config: Config):
        config.ui_config = dict(entries)

    return apply


def before_script(script: str) -> Option:
    def apply(config: Config):
        config.before_script = script

    return apply


def after_script(script: str) -> Option:
    def apply(config: Config):
        config.after_script = script

    return apply


def instance_name(name: str) -> Option:
    """Name under which the spec document was registered."""

    def apply(config: Config):
        config.instance_name = name

    return apply
