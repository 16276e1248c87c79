from .renderer import TemplateRenderer, format_int64

__all__ = [
    "TemplateRenderer",
    "format_int64",
]
