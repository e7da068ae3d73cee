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

import logging
import logging.handlers
import os

from PyQt6 import QtCore


TRACE = 5
logging.TRACE = TRACE
logging.addLevelName(TRACE, 'TRACE')


class I18nLogger(logging.getLoggerClass()):

    def trace(self, msg, *args, **kwargs):
        self.log(TRACE, msg, *args, **kwargs)


logging.setLoggerClass(I18nLogger)


class I18nRotatingFileHandler(logging.handlers.RotatingFileHandler):
    """Rotating file handler that creates the log directory if needed."""

    def __init__(self, filename, **kwargs):
        os.makedirs(os.path.dirname(filename), exist_ok=True)
        super().__init__(filename, **kwargs)


qtlogger = logging.getLogger('Qt')
qtlogger.setLevel(TRACE)

QT_LOG_LEVELS = {
    QtCore.QtMsgType.QtDebugMsg: 'debug',
    QtCore.QtMsgType.QtInfoMsg: 'info',
    QtCore.QtMsgType.QtWarningMsg: 'warning',
    QtCore.QtMsgType.QtCriticalMsg: 'error',
    QtCore.QtMsgType.QtFatalMsg: 'critical',
}


def qt_message_handler(msg_type, context, msg):
    """Redirect Qt's own messages (e.g. from QTranslator) to Python
    logging."""

    if context and context.file:
        msg = f'{msg}: File {context.file}, line {context.line}, '\
            f'in {context.function}'
    getattr(qtlogger, QT_LOG_LEVELS[msg_type])(msg)
