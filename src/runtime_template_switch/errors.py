from typing import Optional


class TemplateError(Exception):
    """Base exception for template parsing and rendering errors."""
    pass


class TemplateSyntaxError(TemplateError):
    def __init__(self, message: str, line: int, column: int, template_name: Optional[str] = None):
        where = f" in template '{template_name}'" if template_name else ""
        super().__init__(f"{message}{where} at line {line}, column {column}")
        self.line = line
        self.column = column
        self.template_name = template_name


class TemplateNotFoundError(TemplateError):
    def __init__(self, template_name: str):
        super().__init__(f"Template not found: '{template_name}'")
        self.template_name = template_name


class RenderError(TemplateError):
    """Raised while rendering a parsed template."""
    pass


class MissingArgumentError(RenderError):
    def __init__(self, helper_name: str, index: int = 0):
        super().__init__(f"Param {index} not found for helper \"{helper_name}\"")
        self.helper_name = helper_name
        self.index = index


class UnknownHelperError(RenderError):
    def __init__(self, helper_name: str):
        super().__init__(f"Helper not defined: \"{helper_name}\"")
        self.helper_name = helper_name


class MissingVariableError(RenderError):
    def __init__(self, path: str):
        super().__init__(f"Variable \"{path}\" not found in strict mode")
        self.path = path


class SecurityError(RenderError):
    def __init__(self, segment: str):
        super().__init__(f"Unsafe path segment: {segment}")
        self.segment = segment
