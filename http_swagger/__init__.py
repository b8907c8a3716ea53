from .config import (
    Config,
    Option,
    after_script,
    before_script,
    deep_linking,
    doc_expansion,
    dom_id,
    instance_name,
    new_config,
    plugins,
    ui_config,
    url,
)
from .handler import handler, wrap_handler
from .registry import register, read_doc
from .renderer import render_bootstrap_script, render_index

__all__ = [
    "Config",
    "Option",
    "after_script",
    "before_script",
    "deep_linking",
    "doc_expansion",
    "dom_id",
    "handler",
    "instance_name",
    "new_config",
    "plugins",
    "read_doc",
    "register",
    "render_bootstrap_script",
    "render_index",
    "ui_config",
    "url",
    "wrap_handler",
]
