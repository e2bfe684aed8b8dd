''' Setup a nice formatter, configurable level, and syslog handler for logging.
    https://github.com/mitodl/flask-log/blob/master/flask_log.py
'''
import logging
import platform
import sys
from logging import handlers
from typing import Any, List, Optional

from appdoc.conf import ModuleConfig, default_config, getConfig


class NoConfigValue(Exception):
    pass


def getLoggerHandler(logspec: Optional[str] = None):
    if logspec is None or logspec == "stderr":
        return logging.StreamHandler(sys.stderr)

    if logspec == "stdout":
        return logging.StreamHandler(sys.stdout)

    if logspec.startswith("file://"):
        return logging.FileHandler(logspec[7:])

    def parse_spec(prefix, cls, defport=None):
        if not logspec.startswith(prefix):
            return None

        hostname, _, port = logspec[len(prefix):].partition(":")
        hostname = hostname or "localhost"
        port = int(port) if port else defport
        return cls(hostname, port)

    def wrap_syslog(host: str, port: int):
        return handlers.SysLogHandler(
            address=(host, port), facility=handlers.SysLogHandler.LOG_LOCAL0
        )

    for prefix, wrapper, defport in (
        ("syslog://", wrap_syslog, 514),
        ("udp://", handlers.DatagramHandler, None),
        ("tcp://", handlers.SocketHandler, None),
    ):
        handler = parse_spec(prefix, wrapper, defport)
        if handler is not None:
            return handler

    raise ValueError("Cannot parse logging spec: %s" % logspec)


def __closure__():  # noqa: C901
    APPDOC_LOGGERS = dict()

    def setupLogger(module_name: Optional[str], log_config: ModuleConfig):
        ''' Setup the logging handlers, level and formatters.
        '''
        module_logger = logging.getLogger(module_name)

        if log_config is None:
            return module_logger

        def get_config_value(name):
            value = log_config.get(name)
            if isinstance(value, str):
                return value

            raise NoConfigValue("Invalid log config value: {} = {}".format(name, value))

        log_level = logging.NOTSET
        try:
            level_str = get_config_value("LOG_LEVEL")
            log_level = getattr(logging, level_str.upper())
        except (NoConfigValue, AttributeError):
            pass

        module_logger.setLevel(log_level)

        log_handlers: List[Any] = []
        try:
            log_output = get_config_value("LOG_OUTPUT")
        except NoConfigValue:
            log_output = None

        for output in log_output.split("|") if log_output else ():
            log_handlers.append(getLoggerHandler(output.strip()))

        try:
            log_formatter = get_config_value("LOG_FORMATTER")
            log_datefmt = get_config_value("LOG_DATEFMT")
        except NoConfigValue:
            pass
        else:
            hostname = platform.node().split(".")[0]
            formatter = log_formatter.format(hostname=hostname)

            for handler in log_handlers:
                handler.setFormatter(logging.Formatter(formatter, log_datefmt))

            if default_config.LOG_COLORED:
                import coloredlogs
                coloredlogs.install(
                    fmt=formatter,
                    level=log_level,
                    logger=module_logger
                )

        # Special case for the root logger
        if module_name is None:
            logging.basicConfig(handlers=log_handlers or None)
        else:
            for handler in log_handlers:
                module_logger.addHandler(handler)

        APPDOC_LOGGERS[module_name] = module_logger
        return module_logger

    def getLogger(module_name, log_config=None):
        if module_name in APPDOC_LOGGERS:
            return APPDOC_LOGGERS[module_name]

        log_config = log_config or getConfig(module_name)
        return setupLogger(module_name, log_config)

    return getLogger, setupLogger(None, default_config)


getLogger, default_logger = __closure__()
