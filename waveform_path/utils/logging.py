""" Methods to setup the logging """

import os
import sys
import yaml
import platform
import logging
import coloredlogs
import logging.config

from waveform_path.definitions import WINDOWS_LOG_CONFIG_FILE, LINUX_LOG_CONFIG_FILE

def create_log_directories(config: dict) -> None:
    """ create all log directories for a log configuration

    Args:
        config (dict): the logging configuration dictionary
    """
    if isinstance(config, dict):
        for k in config.keys():
            create_log_directories(config[k])
            if k == 'filename':
                os.makedirs(os.path.dirname(os.path.abspath(config[k])), exist_ok=True)


def remove_console_handlers(config: dict) -> dict:
    """ Remove all stream handlers from a log configuration

    Args:
        config (dict): the logging configuration dictionary

    Returns:
        dict: the logging configuration without stream handlers
    """
    handlers = config.get('handlers', {})
    console = [k for k in handlers.keys() if handlers[k].get('class') == 'logging.StreamHandler']
    for k in console:
        del handlers[k]

    for logger_config in [config.get('root', {})] + list(config.get('loggers', {}).values()):
        if 'handlers' in logger_config:
            logger_config['handlers'] = [h for h in logger_config['handlers'] if h not in console]

    return config


def get_log_config_path() -> str:
    """ Get the log config file path for current platfrom

    Returns:
        str: the log config file path
    """
    return WINDOWS_LOG_CONFIG_FILE if platform.system() == 'Windows' else LINUX_LOG_CONFIG_FILE


def getLogger(name) -> logging.Logger:
    """ Get logger for python logging.getLogger

    Args:
        name (str): name of the logger instance
    """
    return logging.getLogger(name)


def disable_logging() -> None:
    """ Suppress all log messages """
    logging.disable(logging.CRITICAL)


def setup_logging(
        default_level :int = logging.INFO,
        env_key :str = 'LOG_CFG',
        silent :bool = False) -> None:
    """ Logging Setup

    Args:
        default_level (int): logging level e.g. `logging.INFO` (default is `logging.INFO`).
        env_key (str, optional): env variable name to load a configuration file via environment variable (default is `LOG_CFG`).
        silent (bool): only log to the configured log files
    """
    logging.disable(logging.NOTSET)
    config_path = get_log_config_path()
    value = os.getenv(env_key, None)
    if value: config_path = value
    if os.path.exists(config_path):
        with open(config_path, 'rt') as f:
            try:
                config = yaml.safe_load(f.read())
                if silent: config = remove_console_handlers(config)
                create_log_directories(config)
                logging.config.dictConfig(config)
                if not silent: coloredlogs.install(level=default_level, stream=sys.stderr)
                logging.debug('Loging setup completed')
            except Exception as e:
                print(e, file=sys.stderr)
                print('Error in Logging Configuration. Using default configs', file=sys.stderr)
                logging.basicConfig(level=default_level)
                coloredlogs.install(level=default_level, stream=sys.stderr)
    else:
        logging.basicConfig(level=default_level)
        coloredlogs.install(level=default_level, stream=sys.stderr)
        print('Failed to load configuration file. Using default configs', file=sys.stderr)
