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

"""Translation entries as found in the <message> elements of TS files."""

import enum


class TranslationStatus(enum.Enum):
    FINISHED = 'finished'
    UNFINISHED = 'unfinished'
    VANISHED = 'vanished'

    @classmethod
    def from_type_attribute(cls, value):
        """Map the ``type`` attribute of a <translation> element to a
        status. Qt 4 wrote ``obsolete`` for what is now ``vanished``."""

        if not value:
            return cls.FINISHED
        if value == 'obsolete':
            return cls.VANISHED
        return cls(value)

    @property
    def type_attribute(self):
        if self is TranslationStatus.FINISHED:
            return None
        return self.value


class TranslationEntry:
    """A single source phrase and its translation in one locale."""

    def __init__(self, context, source, translation='',
                 status=TranslationStatus.FINISHED, extracomment=None,
                 comment=None, translatorcomment=None, locations=None,
                 numerus_forms=None):
        self.context = context
        self.source = source
        self.translation = translation or ''
        self.status = status
        self.extracomment = extracomment
        self.comment = comment
        self.translatorcomment = translatorcomment
        self.locations = list(locations or [])
        # Plural forms of a numerus="yes" message, None for plain ones.
        # translation mirrors the first form.
        self.numerus_forms = None
        if numerus_forms is not None:
            self.numerus_forms = list(numerus_forms)
            self.translation = self.numerus_forms[0] if numerus_forms else ''

    @property
    def key(self):
        return (self.context, self.source)

    @property
    def is_numerus(self):
        return self.numerus_forms is not None

    @property
    def is_vanished(self):
        return self.status is TranslationStatus.VANISHED

    @property
    def is_unfinished(self):
        return self.status is TranslationStatus.UNFINISHED

    @property
    def is_translated(self):
        return bool(self.translation) and not self.is_vanished

    def copy(self):
        return TranslationEntry(
            self.context,
            self.source,
            translation=self.translation,
            status=self.status,
            extracomment=self.extracomment,
            comment=self.comment,
            translatorcomment=self.translatorcomment,
            locations=self.locations,
            numerus_forms=self.numerus_forms)

    def __eq__(self, other):
        if not isinstance(other, TranslationEntry):
            return NotImplemented
        return (self.key == other.key
                and self.translation == other.translation
                and self.status is other.status
                and self.extracomment == other.extracomment
                and self.comment == other.comment
                and self.translatorcomment == other.translatorcomment
                and self.locations == other.locations
                and self.numerus_forms == other.numerus_forms)

    def __repr__(self):
        return (f'<TranslationEntry {self.context!r} {self.source!r} '
                f'-> {self.translation!r} ({self.status.value})>')
