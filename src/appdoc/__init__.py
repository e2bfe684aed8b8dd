import importlib
import logging

from ._meta import defaults

__version__ = "0.1.0"


def setupModule(module_name, *upstreams):
    from appdoc.conf import getConfig
    from appdoc.logs import getLogger

    def _config_name(module):
        if isinstance(module, str):
            for suffix in ('._meta', '.conf', '.cfg'):
                if module.endswith(suffix):
                    return module[:-len(suffix)]

        return module

    config_key = _config_name(module_name)

    if not upstreams:
        try:
            upstreams = (importlib.import_module(f"{module_name}._meta.defaults"),)
        except ImportError as e:
            logging.warning(
                f"Unable to import configuration defaults for module [{module_name}]. {e}"
            )

    config = getConfig(config_key, *upstreams)
    logger = getLogger(config_key, config)
    return config, logger


# Setup the default config and logger
config, logger = setupModule(__name__, defaults)

from .builder import (  # noqa: E402
    DocumentModel,
    build_document_model,
    in_review_message,
    normalize_base_uri,
    portfolio_funds,
    portfolio_total_amount,
    register_state_builder,
)
from .datadef import ApplicationState, DocumentConfig  # noqa: E402
from .generator import ApplicationDocumentGenerator, generate_document  # noqa: E402

__all__ = (
    "config",
    "logger",
    "setupModule",
    "ApplicationDocumentGenerator",
    "ApplicationState",
    "DocumentConfig",
    "DocumentModel",
    "build_document_model",
    "generate_document",
    "in_review_message",
    "normalize_base_uri",
    "portfolio_funds",
    "portfolio_total_amount",
    "register_state_builder",
)
