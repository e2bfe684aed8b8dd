from appdoc import config
from appdoc.error import ConfigurationError


class TemplateLocator(object):
    ''' Resolve a logical template key to a location relative to the base URI. '''

    def __init__(self, template_paths=None):
        self._template_paths = dict(
            config.TEMPLATE_PATHS if template_paths is None else template_paths
        )

    def resolve(self, template_key):
        try:
            return self._template_paths[template_key]
        except KeyError:
            raise ConfigurationError(
                f"No template path configured for template key [{template_key}]."
            )
