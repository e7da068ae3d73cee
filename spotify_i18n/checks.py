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

"""Structural checks over translation catalogs.

Missing or empty translations are not errors: lookups fall back to the
source phrase. These checks find inconsistencies between a locale file
and the reference catalog instead.
"""

import logging


logger = logging.getLogger(__name__)

ERROR = 'error'
WARNING = 'warning'


class Problem:

    def __init__(self, code, language, context, source, message,
                 severity=ERROR):
        self.code = code
        self.language = language
        self.context = context
        self.source = source
        self.message = message
        self.severity = severity

    @property
    def is_error(self):
        return self.severity == ERROR

    def __str__(self):
        return (f'{self.severity.upper()} [{self.language}] {self.code}: '
                f'{self.context}/{self.source!r}: {self.message}')

    def __repr__(self):
        return f'<Problem {self.code} {self.context!r} {self.source!r}>'


def check_duplicates(catalog):
    for entry in catalog.duplicates:
        yield Problem(
            'duplicate', catalog.language, entry.context, entry.source,
            'Message appears more than once in this context')


def check_unfinished_empty(catalog):
    for entry in catalog.entries():
        if entry.is_unfinished and not entry.translation:
            yield Problem(
                'unfinished-empty', catalog.language,
                entry.context, entry.source,
                'Unfinished translation has no draft text')


def check_against_reference(catalog, reference):
    live_reference = reference.pairs(include_vanished=False)

    for entry in catalog.entries():
        if entry.is_vanished:
            if entry.key in live_reference:
                yield Problem(
                    'vanished-in-reference', catalog.language,
                    entry.context, entry.source,
                    'Marked as vanished but still used in the reference '
                    f'catalog {reference.language}')
        elif entry.key not in live_reference:
            yield Problem(
                'not-in-reference', catalog.language,
                entry.context, entry.source,
                f'Not part of the reference catalog {reference.language}')

    live = catalog.pairs(include_vanished=False)
    for entry in reference.entries():
        if not entry.is_vanished and entry.key not in live:
            yield Problem(
                'missing', catalog.language, entry.context, entry.source,
                'No entry for this reference message', severity=WARNING)


def check_catalog(catalog, reference=None):
    """Check one catalog, against ``reference`` if given.

    Returns a list of :class:`Problem` objects, errors and warnings.
    """

    problems = list(check_duplicates(catalog))
    problems.extend(check_unfinished_empty(catalog))
    if reference is not None and reference is not catalog:
        problems.extend(check_against_reference(catalog, reference))
    logger.debug(f'{catalog.language}: {len(problems)} problem(s)')
    return problems


def check_catalogs(catalog_set):
    """Check every catalog of a CatalogSet against its reference."""

    reference = catalog_set.reference
    results = {}
    for locale in catalog_set.locales():
        catalog = catalog_set.get(locale)
        results[locale] = check_catalog(catalog, reference=reference)
    return results
