"""
Renders the Swagger UI index page and its bootstrap script from a Config.

Values reach the template in one of two forms:
- escaped: url, doc_expansion, dom_id and deep_linking are encoded as
  HTML-safe JSON literals, so quotes, angle brackets and ampersands cannot
  break out of the surrounding <script> block;
- raw: plugins, ui_config, before_script and after_script are trusted
  script source and are passed through untouched.

Both forms are Markup by the time the autoescaping environment sees them,
so the choice is made here and never by the template engine.
"""
from jinja2 import Environment, StrictUndefined, Template, TemplateError
from jinja2.utils import htmlsafe_json_dumps
from markupsafe import Markup
from typing import Any
import logging

from .config import Config
from .errors import TemplateRenderError
from .template import BOOTSTRAP_TEMPLATE, INDEX_TEMPLATE

logger = logging.getLogger(__name__)

env = Environment(
    autoescape=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def _compile(source: str, name: str) -> Template:
    try:
        return env.from_string(source)
    except TemplateError as e:
        raise TemplateRenderError(f"Failed to compile {name} template: {e}") from e


bootstrap_template = _compile(BOOTSTRAP_TEMPLATE, "bootstrap")
index_template = _compile(INDEX_TEMPLATE, "index")


def _escaped(value: Any) -> Markup:
    return htmlsafe_json_dumps(value)


def _raw(value: str) -> Markup:
    return Markup(value)


def build_context(config: Config) -> dict:
    """
    Project a Config onto the template context.
    ui_config is sorted by key so the output does not depend on insertion order.
    """
    return {
        "url": _escaped(config.url),
        "deep_linking": _escaped(config.deep_linking),
        "doc_expansion": _escaped(config.doc_expansion),
        "dom_id": _escaped(config.dom_id),
        "plugins": [_raw(plugin) for plugin in config.plugins],
        "ui_config": [
            (_raw(key), _raw(config.ui_config[key])) for key in sorted(config.ui_config)
        ],
        "before_script": _raw(config.before_script),
        "after_script": _raw(config.after_script),
    }


def _render(template: Template, context: dict) -> str:
    try:
        return template.render(context)
    except TemplateError as e:
        logger.exception("Swagger UI template failed to render")
        raise TemplateRenderError(str(e)) from e


def render_bootstrap_script(config: Config) -> str:
    """
    Render the window.onload script that creates the SwaggerUIBundle.
    Pure: the same Config always yields the same text.
    """
    return _render(bootstrap_template, build_context(config))


def render_index(config: Config) -> str:
    """Render the full index.html page with the bootstrap script inlined."""
    script = render_bootstrap_script(config)
    return _render(index_template, {"script": _raw(script)})
