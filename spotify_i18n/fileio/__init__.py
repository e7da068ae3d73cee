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
import os.path
from pathlib import Path

from spotify_i18n import constants
from spotify_i18n.catalog import CatalogSet
from spotify_i18n.fileio.errors import TSFileError
from spotify_i18n.fileio.reader import read_ts
from spotify_i18n.fileio.writer import dumps_ts, write_ts


__all__ = [
    'load_ts',
    'loads_ts',
    'save_ts',
    'dumps_ts',
    'load_catalogs',
    'catalog_filename',
    'TSFileError',
]

logger = logging.getLogger(__name__)


def catalog_filename(directory, locale, domain=constants.DOMAIN):
    return os.path.join(directory, f'{domain}_{locale}{constants.TS_SUFFIX}')


def load_ts(filename):
    """Load a TS file into a Catalog."""
    logger.info(f'Loading translations from {filename}...')
    try:
        with open(filename, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise TSFileError(str(e), filename)
    return read_ts(data, filename=str(filename))


def loads_ts(data, filename=None):
    """Load a TS document given as str or bytes."""
    return read_ts(data, filename=filename)


def save_ts(catalog, filename):
    """Save a Catalog as TS file."""
    logger.info(f'Saving translations to {filename}...')
    write_ts(catalog, filename)
    catalog.filename = str(filename)


def load_catalogs(directory, domain=constants.DOMAIN,
                  reference=constants.REFERENCE_LOCALE):
    """Load all catalogs of a translation domain found in directory.

    Files are expected to be named ``<domain>_<locale>.ts``. A file
    without ``language`` attribute gets its locale from the filename.
    """

    prefix = f'{domain}_'
    filenames = sorted(Path(directory).glob(f'{prefix}*{constants.TS_SUFFIX}'))
    if not filenames:
        raise TSFileError(f'No {prefix}*.ts files found', str(directory))

    catalogs = []
    for filename in filenames:
        catalog = load_ts(filename)
        if not catalog.language:
            catalog.language = filename.stem[len(prefix):]
            logger.debug(f'{filename.name} has no language attribute, '
                         f'using {catalog.language}')
        catalogs.append(catalog)

    try:
        return CatalogSet(catalogs, reference=reference, domain=domain)
    except KeyError:
        raise TSFileError(
            f'Reference catalog for {reference} not found', str(directory))
