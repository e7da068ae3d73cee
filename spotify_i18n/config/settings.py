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

"""Handling of command line args and Qt settings."""

import argparse
import logging
import os

from PyQt6 import QtCore

from spotify_i18n import constants


logger = logging.getLogger(__name__)


parser = argparse.ArgumentParser(
    prog=constants.APPNAME,
    description=('Check, query and maintain the translation catalogs '
                 f'of the {constants.APPNAME_FULL}.'))
parser.add_argument(
    '-l', '--loglevel',
    default='WARNING',
    choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
    help='log level for console output')
parser.add_argument(
    '-d', '--directory',
    default=None,
    help='directory containing the .ts files '
    '(default: the bundled translations)')
parser.add_argument(
    '--domain',
    default=None,
    help=f'catalog file prefix (default: {constants.DOMAIN})')
parser.add_argument(
    '--reference',
    default=None,
    help=f'reference locale (default: {constants.REFERENCE_LOCALE})')

subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

subparsers.add_parser(
    'check',
    help='check all catalogs for structural problems')

subparsers.add_parser(
    'stats',
    help='print translation progress per locale')

lookup_parser = subparsers.add_parser(
    'lookup',
    help='look up a translated string')
lookup_parser.add_argument('context', help='translation context')
lookup_parser.add_argument('source', help='source phrase')
lookup_parser.add_argument(
    '--locale',
    default=None,
    help='locale to translate to (default: language setting or system)')

sync_parser = subparsers.add_parser(
    'sync',
    help='update a locale catalog from the reference catalog')
sync_parser.add_argument('locale', help='locale of the catalog to update')

subparsers.add_parser(
    'compile',
    help='compile .ts files to .qm files with lrelease')


class CommandlineArgs:
    """Wrapper around argument parsing.

    This is a singleton so that the command line only gets parsed once.
    Pass ``argv`` to parse an explicit argument list instead of
    ``sys.argv``; this replaces the cached result.
    """

    _instance = None

    def __new__(cls, *args, **kwargs):
        if not cls._instance:
            cls._instance = super().__new__(cls)
            cls._instance._args = None
        return cls._instance

    def __init__(self, with_check=False, argv=None):
        if self._args is None or argv is not None:
            if with_check:
                self._args = parser.parse_args(argv)
            else:
                self._args = parser.parse_known_args(argv)[0]

    def __getattr__(self, name):
        return getattr(self._args, name)


class I18nSettings(QtCore.QSettings):

    DEFAULTS = {
        'General/language': 'system',
        'General/reference': constants.REFERENCE_LOCALE,
        'General/domain': constants.DOMAIN,
    }

    def __init__(self):
        settings_format = QtCore.QSettings.Format.IniFormat
        settings_scope = QtCore.QSettings.Scope.UserScope
        settings_dir = self.get_settings_dir()
        if settings_dir:
            QtCore.QSettings.setPath(
                settings_format, settings_scope, settings_dir)
        super().__init__(
            settings_format,
            settings_scope,
            constants.APPNAME,
            constants.APPNAME)

    @staticmethod
    def get_settings_dir():
        return os.environ.get('SPOTIFY_I18N_SETTINGS_DIR')

    def valueOrDefault(self, key):
        """Get the value for key, or the default value specified in
        DEFAULTS."""

        val = self.value(key)
        if val is None:
            val = self.DEFAULTS.get(key)
        return val

    def value_changed(self, key):
        return self.valueOrDefault(key) != self.DEFAULTS.get(key)

    def restore_defaults(self):
        logger.debug('Restoring settings to defaults')
        for key in self.DEFAULTS.keys():
            self.remove(key)
