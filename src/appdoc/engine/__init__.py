from .jinja2render import Jinja2TemplateRenderer, jinja2renderer
from .locator import TemplateLocator
from . import jinja2filter  # noqa: F401

__all__ = ("Jinja2TemplateRenderer", "TemplateLocator", "jinja2renderer")
