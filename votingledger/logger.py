"""Module for initializing settings related to the built-in ledger logger
Functions:
-get_logger"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'OFF']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = -1 if _LOG_LVL == 'OFF' else getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.INFO

ROOT_NAME = 'votingledger'

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Ledger'))

"""
Custom Log Levels
"""
#   Default levels
# 'CRITICAL': 50,
# 'ERROR': 40,
# 'WARNING': 30,
# 'INFO': 20,
# 'DEBUG' : 10

CUSTOM_LEVELS = {
    'TEST': 14,
    'NOTICE': 22,
    'FATAL': 99
}

for log_name, log_level in CUSTOM_LEVELS.items():
    logging.addLevelName(log_level, log_name)


def apply_custom_level(log, name: str, level: int):
    def _lvl_func(message, *args, **kws):
        if level >= log.getEffectiveLevel():
            log._log(level, message, args, **kws)

    setattr(log, name.lower(), _lvl_func)


"""
Custom Styling
"""

coloredlogs.DEFAULT_LEVEL_STYLES = {
    'fatal': {'color': 'white', 'bold': True, 'background': 'red', 'underline': True},
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'notice': {'color': 'magenta'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
    'test': {'color': 'magenta'},
}
coloredlogs.DEFAULT_FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format)
        )


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def _install_handlers():
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return

    root.addHandler(ColoredStreamHandler())

    filename = os.getenv('LOG_FILE')
    if filename:
        handler = logging.FileHandler(filename, delay=True)
        handler.setFormatter(logging.Formatter(format))
        root.addHandler(handler)

    root.propagate = False


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    _install_handlers()

    if not name.startswith(ROOT_NAME):
        name = '{}.{}'.format(ROOT_NAME, name) if name else ROOT_NAME

    log = logging.getLogger(name)
    log.setLevel(_LOG_LVL)

    for log_name, log_level in CUSTOM_LEVELS.items():
        apply_custom_level(log, log_name, log_level)

    return log