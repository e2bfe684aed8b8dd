import os

from typing import Any, Dict
from urllib.parse import unquote, urljoin, urlparse

import jinja2
import requests

from appdoc import config, logger
from appdoc.error import RenderingError

REMOTE_SCHEMES = ("http", "https")


class Jinja2TemplateRenderer(object):
    ''' Render a template addressed by an absolute location.

        Local locations (plain paths and ``file://`` URIs) are loaded through a
        FileSystemLoader rooted at the template's directory. Remote locations
        are loaded through a FunctionLoader that fetches each template relative
        to the location URL. Either way ``{% extends %}`` and ``{% include %}``
        resolve against sibling templates.
    '''

    def __init__(self, fetch_timeout=None):
        self._fetch_timeout = fetch_timeout or config.TEMPLATE_FETCH_TIMEOUT
        self._filters = {}

    def add_filter(self, name, func):
        self._filters[name] = func

    def create_environment(self, loader=None):
        env = jinja2.Environment(
            loader=loader,
            undefined=jinja2.StrictUndefined,
            autoescape=jinja2.select_autoescape(default_for_string=True, default=True),
        )
        env.filters.update(self._filters)
        return env

    def remote_loader(self, location):
        def fetch(name):
            url = urljoin(location, name)
            logger.debug("Fetching template [%s]", url)
            response = requests.get(url, timeout=self._fetch_timeout)
            response.raise_for_status()
            return response.text

        return jinja2.FunctionLoader(fetch)

    def load_template(self, location):
        parsed = urlparse(location)

        if parsed.scheme in REMOTE_SCHEMES:
            template_name = os.path.basename(parsed.path)
            if not template_name:
                raise RenderingError(f"Template location has no file name: {location}")

            env = self.create_environment(self.remote_loader(location))
            return env.get_template(template_name)

        if parsed.scheme == "file":
            location = unquote(parsed.path)
        elif parsed.scheme and len(parsed.scheme) > 1:
            raise RenderingError(f"Unsupported template location scheme: {location}")

        searchpath, template_name = os.path.split(location)
        env = self.create_environment(jinja2.FileSystemLoader(searchpath=searchpath or "."))
        return env.get_template(template_name)

    def render(self, location, data: Dict[str, Any]):
        try:
            template = self.load_template(location)
            return str(template.render(**data))
        except RenderingError:
            raise
        except Exception as e:
            logger.exception("Cannot render template [%s]", location)
            raise RenderingError(f"Cannot render template: {location}", details=str(e)) from e


jinja2renderer = Jinja2TemplateRenderer()
