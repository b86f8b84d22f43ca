from landing_core.render.css import force_important
from landing_core.render.renderer import (
    RenderError,
    RenderMode,
    RenderOptions,
    TemplatePatternNotFoundError,
    TemplateRenderer,
    TemplateSourceMissingError,
)

__all__ = [
    "RenderError",
    "RenderMode",
    "RenderOptions",
    "TemplatePatternNotFoundError",
    "TemplateRenderer",
    "TemplateSourceMissingError",
    "force_important",
]
