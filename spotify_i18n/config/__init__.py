# This file is part of spotify-i18n.
#
# spotify-i18n is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# spotify-i18n is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with spotify-i18n.  If not, see <https://www.gnu.org/licenses/>.

"""Handling of command line args, Qt settings and logging setup."""

import logging
import logging.config
import os.path

from PyQt6 import QtCore

from spotify_i18n import constants
from spotify_i18n.config.settings import (   # noqa F401
    CommandlineArgs,
    I18nSettings,
)
from spotify_i18n.logging import qt_message_handler


logger = logging.getLogger(__name__)


def logfile_name():
    return os.path.join(
        os.path.dirname(I18nSettings().fileName()), f'{constants.APPNAME}.log')


def logging_conf(loglevel):
    return {
        'version': 1,
        'formatters': {
            'verbose': {
                'format': ('{asctime} {name} {process:d} {thread:d} '
                           '{message}'),
                'style': '{',
            },
            'simple': {
                'format': '{levelname} {name}: {message}',
                'style': '{',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': loglevel,
            },
            'file': {
                'class': 'spotify_i18n.logging.I18nRotatingFileHandler',
                'formatter': 'verbose',
                'filename': logfile_name(),
                'maxBytes': 1024 * 1000,  # 1MB
                'backupCount': 1,
                'level': 'DEBUG',
                'delay': True,
            }
        },
        'loggers': {
            'spotify_i18n': {
                'handlers': ['console', 'file'],
                'level': 'TRACE',
                'propagate': False,
            },
            'Qt': {
                'handlers': ['console', 'file'],
                'level': 'DEBUG',
                'propagate': False,
            },
        },
        'root': {
            'handlers': ['console', 'file'],
            'level': 'DEBUG',
        },
    }


def configure_logging(loglevel):
    logging.config.dictConfig(logging_conf(loglevel))
    # Redirect Qt logging to Python logger:
    QtCore.qInstallMessageHandler(qt_message_handler)
