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

"""Compilation of .ts files into the binary .qm format via lrelease.

QTranslator.load() only reads .qm files, so hosts that don't use
CatalogTranslator need the compiled files.
"""

import logging
import subprocess
from pathlib import Path

from spotify_i18n import constants


logger = logging.getLogger(__name__)

LRELEASE_CANDIDATES = [
    'pyside6-lrelease',  # pip install pyside6-essentials
    'lrelease',
    'lrelease6',
    '/usr/lib/qt6/bin/lrelease',
]


def find_lrelease():
    """Find lrelease executable."""

    for cmd in LRELEASE_CANDIDATES:
        try:
            # pyside6-lrelease doesn't support --version
            result = subprocess.run(
                [cmd, '-help'],
                capture_output=True,
                text=True
            )
        except OSError as e:
            logger.debug(f'Skipping {cmd}: {e}')
            continue
        if ('lrelease' in result.stdout.lower()
                or 'lrelease' in result.stderr.lower()):
            return cmd

    return None


def compile_translations(directory, domain=constants.DOMAIN,
                         include_unfinished=True):
    """Compile all catalogs of a domain in directory to .qm.

    Returns 0 on success, 1 otherwise.
    """

    ts_files = sorted(Path(directory).glob(f'{domain}_*{constants.TS_SUFFIX}'))
    if not ts_files:
        logger.error(f'No .ts files found in: {directory}')
        return 1

    lrelease = find_lrelease()
    if not lrelease:
        logger.error('lrelease not found. Install one of: '
                     'pyside6-essentials (pip), qt6-tools-dev-tools (apt)')
        return 1

    logger.info(f'Using: {lrelease}')
    for ts_file in ts_files:
        qm_file = ts_file.with_suffix(constants.QM_SUFFIX)
        logger.info(f'Compiling: {ts_file.name}')
        command = [lrelease, str(ts_file), '-qm', str(qm_file)]
        if not include_unfinished:
            command.insert(1, '-nounfinished')

        result = subprocess.run(command, capture_output=True, text=True)
        if result.returncode != 0:
            logger.error(f'Compiling {ts_file.name} failed: {result.stderr}')
            return 1
        if result.stdout:
            logger.debug(result.stdout.strip())
        logger.info(f'Output: {qm_file.name}')

    logger.info(f'Compiled {len(ts_files)} file(s)')
    return 0
