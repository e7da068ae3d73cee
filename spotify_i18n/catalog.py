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

"""In-memory translation catalogs and the lookup with locale fallback."""

import logging

from spotify_i18n import constants
from spotify_i18n.entries import TranslationStatus


logger = logging.getLogger(__name__)


class DuplicateEntryError(Exception):
    def __init__(self, entry):
        self.entry = entry
        super().__init__(
            f'Duplicate entry {entry.source!r} in context {entry.context!r}')


def normalize_locale(locale):
    """Turn ``de-DE``, ``de_DE.UTF-8`` or ``de_DE@euro`` into ``de_DE``."""

    if not locale:
        return None
    locale = locale.split('.')[0].split('@')[0].strip()
    return locale.replace('-', '_') or None


def language_code(locale):
    locale = normalize_locale(locale)
    return locale.split('_')[0].lower() if locale else None


class Catalog:
    """All translation entries of one TS file, i.e. one locale."""

    def __init__(self, language=None, version=constants.TS_VERSION,
                 source_language=None, filename=None):
        self.language = language
        self.version = version
        self.source_language = source_language
        self.filename = filename
        # Entries that were rejected by add() while reading the file
        self.duplicates = []
        self._contexts = {}

    def __len__(self):
        return sum(len(c) for c in self._contexts.values())

    def __iter__(self):
        return self.entries()

    def __contains__(self, key):
        return self.get(*key) is not None

    def __eq__(self, other):
        if not isinstance(other, Catalog):
            return NotImplemented
        return (self.language == other.language
                and self.version == other.version
                and self.source_language == other.source_language
                and self.contexts() == other.contexts()
                and list(self.entries()) == list(other.entries()))

    def __repr__(self):
        return f'<Catalog {self.language} ({len(self)} entries)>'

    def add_context(self, name):
        return self._contexts.setdefault(name, {})

    def add(self, entry):
        messages = self.add_context(entry.context)
        if entry.source in messages:
            raise DuplicateEntryError(entry)
        messages[entry.source] = entry
        return entry

    def insert(self, entry, after=None):
        """Add entry right behind the message ``after`` of its context, or
        first in the context if ``after`` is None."""

        messages = self.add_context(entry.context)
        if entry.source in messages:
            raise DuplicateEntryError(entry)
        if after is not None and after not in messages:
            raise KeyError(after)
        items = list(messages.items())
        messages.clear()
        if after is None:
            messages[entry.source] = entry
        for source, existing in items:
            messages[source] = existing
            if source == after:
                messages[entry.source] = entry
        return entry

    def remove(self, context, source):
        del self._contexts[context][source]

    def get(self, context, source):
        return self._contexts.get(context, {}).get(source)

    def contexts(self):
        return list(self._contexts.keys())

    def entries(self, context=None):
        if context is not None:
            yield from self._contexts.get(context, {}).values()
            return
        for messages in self._contexts.values():
            yield from messages.values()

    def pairs(self, include_vanished=True):
        """The set of (context, source) keys in this catalog."""
        return {entry.key for entry in self.entries()
                if include_vanished or not entry.is_vanished}

    def translate(self, context, source, include_unfinished=True):
        """Return the translation for a source phrase, or None.

        Vanished entries and empty translations never count as
        translated. Unfinished drafts are used unless
        ``include_unfinished`` is false, which matches what lrelease
        does with its ``-nounfinished`` switch.
        """

        entry = self.get(context, source)
        if entry is None or not entry.is_translated:
            return None
        if entry.is_unfinished and not include_unfinished:
            return None
        return entry.translation

    def stats(self):
        stats = {
            'total': 0,
            'finished': 0,
            'unfinished': 0,
            'untranslated': 0,
            'vanished': 0,
        }
        for entry in self.entries():
            if entry.is_vanished:
                stats['vanished'] += 1
                continue
            stats['total'] += 1
            if not entry.translation:
                stats['untranslated'] += 1
            elif entry.status is TranslationStatus.UNFINISHED:
                stats['unfinished'] += 1
            else:
                stats['finished'] += 1
        return stats


class CatalogSet:
    """The catalogs of all locales of one translation domain."""

    def __init__(self, catalogs, reference=constants.REFERENCE_LOCALE,
                 domain=constants.DOMAIN):
        self.domain = domain
        self._catalogs = {}
        for catalog in catalogs:
            self._catalogs[normalize_locale(catalog.language)] = catalog
        self.reference_locale = self.resolve_locale(reference)
        if self.reference_locale is None:
            raise KeyError(f'No catalog for reference locale {reference}')

    def __len__(self):
        return len(self._catalogs)

    def __iter__(self):
        return iter(self._catalogs.values())

    @property
    def reference(self):
        return self._catalogs[self.reference_locale]

    def locales(self):
        return sorted(self._catalogs.keys())

    def get(self, locale, exact=False):
        """The catalog serving ``locale``. With ``exact`` only a catalog
        for exactly that (normalized) locale counts, no language
        fallback."""

        if exact:
            return self._catalogs.get(normalize_locale(locale))
        resolved = self.resolve_locale(locale)
        return self._catalogs[resolved] if resolved else None

    def resolve_locale(self, locale):
        """Find the catalog locale that serves ``locale``.

        Tries the exact locale (``de_DE``) first, then a catalog for the
        bare language (``de``), then any other catalog of the same
        language (``de_AT`` is served by ``de_DE``).
        """

        locale = normalize_locale(locale)
        if not locale:
            return None
        if locale in self._catalogs:
            return locale

        lang = language_code(locale)
        if lang in self._catalogs:
            return lang
        for candidate in self.locales():
            if language_code(candidate) == lang:
                logger.trace(f'Using catalog {candidate} for {locale}')
                return candidate
        return None

    def translate(self, context, source, locale, include_unfinished=True):
        """Return the best available translation of ``source`` for
        ``locale``, or ``source`` itself if there is none."""

        catalog = self.get(locale)
        if catalog is None:
            logger.debug(f'No catalog for locale {locale}')
            return source
        translation = catalog.translate(
            context, source, include_unfinished=include_unfinished)
        if translation is None:
            logger.trace(
                f'No translation for {context}/{source!r} in {locale}')
            return source
        return translation
