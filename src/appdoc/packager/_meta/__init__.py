from appdoc import setupModule

from . import defaults

config, logger = setupModule(__name__, defaults)
