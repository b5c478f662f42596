"""Custom exceptions for docx_report."""

from typing import Optional


class DocxReportError(Exception):
    """Base exception for docx_report errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(DocxReportError):
    """Exception raised when the render configuration or input contract is invalid."""

    pass


class StyleError(ConfigurationError):
    """Exception raised during style resolution."""

    pass


class StyleNotFoundError(StyleError):
    """Exception raised when a style identifier is not registered."""

    def __init__(self, style_id: str, details: Optional[str] = None):
        super().__init__(f"Unknown style '{style_id}'", details)
        self.style_id = style_id


class GeometryError(ConfigurationError):
    """Exception raised for missing or malformed page geometry."""

    pass


class TableLayoutError(ConfigurationError):
    """Exception raised when a table cannot be laid out (e.g. no columns)."""

    pass


class RenderingError(DocxReportError):
    """Exception raised during WordprocessingML rendering."""

    pass
