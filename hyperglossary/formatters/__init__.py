"""Page renderers."""
from .html_formatter import HtmlPageRenderer, HORIZONTAL_RULE

__all__ = ["HtmlPageRenderer", "HORIZONTAL_RULE"]
