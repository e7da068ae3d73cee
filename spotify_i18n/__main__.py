#!/usr/bin/env python3

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
import platform
import sys

from spotify_i18n import constants
from spotify_i18n.catalog import Catalog, normalize_locale
from spotify_i18n.checks import check_catalogs
from spotify_i18n.config import (
    CommandlineArgs,
    I18nSettings,
    configure_logging,
    logfile_name,
)
from spotify_i18n.config.settings import parser
from spotify_i18n.fileio import (
    TSFileError,
    catalog_filename,
    load_catalogs,
    save_ts,
)
from spotify_i18n.release import compile_translations
from spotify_i18n.sync import sync_catalog
from spotify_i18n.translations import TRANSLATIONS_PATH
from spotify_i18n.translator import current_locale


logger = logging.getLogger(__name__)


def run_check(args, catalogs, settings):
    results = check_catalogs(catalogs)
    errors = 0
    for locale, problems in results.items():
        for problem in problems:
            print(problem)
            if problem.is_error:
                errors += 1
    warnings = sum(len(p) for p in results.values()) - errors
    print(f'Checked {len(results)} catalog(s): '
          f'{errors} error(s), {warnings} warning(s)')
    return 1 if errors else 0


def run_stats(args, catalogs, settings):
    for locale in catalogs.locales():
        stats = catalogs.get(locale).stats()
        marker = ' (reference)' if locale == catalogs.reference_locale else ''
        print(f'{locale}{marker}: '
              f'{stats["finished"]}/{stats["total"]} finished, '
              f'{stats["unfinished"]} unfinished, '
              f'{stats["untranslated"]} untranslated, '
              f'{stats["vanished"]} vanished')
    return 0


def run_lookup(args, catalogs, settings):
    locale = args.locale or current_locale(settings)
    logger.debug(f'Looking up {args.context}/{args.source!r} for {locale}')
    print(catalogs.translate(args.context, args.source, locale))
    return 0


def run_sync(args, catalogs, settings):
    locale = normalize_locale(args.locale)
    directory = args.directory or TRANSLATIONS_PATH
    filename = catalog_filename(directory, locale, domain=catalogs.domain)
    # Exact locale match, or the catalog stored under the locale's name
    catalog = catalogs.get(locale, exact=True)
    if catalog is None:
        catalog = next(
            (c for c in catalogs if c.filename
             and os.path.abspath(c.filename) == os.path.abspath(filename)),
            None)
    if catalog is catalogs.reference:
        logger.error(f'{args.locale} is the reference locale')
        return 1
    if catalog is None:
        logger.info(f'Creating new catalog for {locale}')
        catalog = Catalog(language=locale, filename=filename)

    result = sync_catalog(catalog, catalogs.reference)
    save_ts(catalog, catalog.filename)
    print(f'{catalog.filename}: {result.added} added, '
          f'{result.vanished} vanished, {result.revived} revived')
    return 0


COMMANDS = {
    'check': run_check,
    'stats': run_stats,
    'lookup': run_lookup,
    'sync': run_sync,
}


def main(argv=None):
    args = CommandlineArgs(with_check=True, argv=argv)
    configure_logging(args.loglevel)
    logger.info(f'Starting {constants.APPNAME} version {constants.VERSION}')
    logger.debug('Python: %s', platform.python_version())
    settings = I18nSettings()
    logger.info(f'Using settings: {settings.fileName()}')
    logger.info(f'Logging to: {logfile_name()}')

    if args.command is None:
        parser.print_help()
        return 2

    directory = args.directory or TRANSLATIONS_PATH
    domain = args.domain or settings.valueOrDefault('General/domain')
    reference = (args.reference
                 or settings.valueOrDefault('General/reference'))

    if args.command == 'compile':
        return compile_translations(directory, domain=domain)

    try:
        catalogs = load_catalogs(directory, domain=domain, reference=reference)
        return COMMANDS[args.command](args, catalogs, settings)
    except TSFileError as e:
        logger.error(f'Problem with file {e.filename}: {e.msg}')
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())  # pragma: no cover
