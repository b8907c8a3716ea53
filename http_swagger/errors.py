class SwaggerError(Exception):
    """Base class for errors raised by http_swagger"""


class TemplateRenderError(SwaggerError):
    """The built-in page template failed to compile or render"""


class DocumentAlreadyRegistered(SwaggerError):
    """A spec document was registered twice under the same name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Spec document already registered: {name}")
