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

"""Reader for Qt Linguist translation source (.ts) files."""

import logging

from PyQt6 import QtCore

from spotify_i18n import constants
from spotify_i18n.catalog import Catalog, DuplicateEntryError
from spotify_i18n.entries import TranslationEntry, TranslationStatus
from spotify_i18n.fileio.errors import TSFileError


logger = logging.getLogger(__name__)

COMMENT_ELEMENTS = ('comment', 'extracomment', 'translatorcomment')


class TSReader:
    """Parses one TS document into a :class:`Catalog`.

    Plural forms of numerus messages are kept as a list. Elements this
    reader doesn't know about (``oldsource``, ``byte``,
    ``userdata``, ...) are skipped. Duplicate messages don't abort
    reading; they are collected in ``Catalog.duplicates``.
    """

    def __init__(self, data, filename=None):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.reader = QtCore.QXmlStreamReader(QtCore.QByteArray(bytes(data)))
        self.filename = filename

    def error(self, msg):
        line = self.reader.lineNumber()
        return TSFileError(f'{msg} (line {line})', self.filename)

    def read(self):
        reader = self.reader
        if not reader.readNextStartElement():
            raise self.error(reader.errorString() or 'Empty document')
        if reader.name() != 'TS':
            raise self.error(f'Expected <TS> root element, got '
                             f'<{reader.name()}>')

        attrs = reader.attributes()
        catalog = Catalog(
            language=attrs.value('language') or None,
            version=attrs.value('version') or constants.TS_VERSION,
            source_language=attrs.value('sourcelanguage') or None,
            filename=self.filename)

        while reader.readNextStartElement():
            if reader.name() == 'context':
                self.read_context(catalog)
            else:
                logger.trace(f'Skipping element <{reader.name()}>')
                reader.skipCurrentElement()

        if reader.hasError():
            raise self.error(reader.errorString())

        logger.debug(f'Read {len(catalog)} entries for {catalog.language}')
        return catalog

    def read_context(self, catalog):
        reader = self.reader
        name = None
        messages = []
        while reader.readNextStartElement():
            tag = reader.name()
            if tag == 'name':
                name = reader.readElementText()
            elif tag == 'message':
                messages.append(self.read_message())
            else:
                reader.skipCurrentElement()

        if reader.hasError():
            raise self.error(reader.errorString())
        if name is None:
            raise self.error('Context without <name>')

        catalog.add_context(name)
        for fields in messages:
            entry = TranslationEntry(name, **fields)
            try:
                catalog.add(entry)
            except DuplicateEntryError:
                logger.warning(
                    f'Duplicate message {entry.source!r} in context {name}')
                catalog.duplicates.append(entry)

    def read_message(self):
        reader = self.reader
        numerus = reader.attributes().value('numerus') == 'yes'
        fields = {'locations': []}
        while reader.readNextStartElement():
            tag = reader.name()
            if tag == 'source':
                fields['source'] = reader.readElementText()
            elif tag == 'translation':
                type_attr = reader.attributes().value('type')
                try:
                    fields['status'] = TranslationStatus.from_type_attribute(
                        type_attr)
                except ValueError:
                    raise self.error(
                        f'Unknown translation type {type_attr!r}')
                if numerus:
                    fields['numerus_forms'] = self.read_numerus_forms()
                else:
                    fields['translation'] = reader.readElementText(
                        QtCore.QXmlStreamReader.ReadElementTextBehaviour
                        .IncludeChildElements)
            elif tag in COMMENT_ELEMENTS:
                fields[tag] = reader.readElementText()
            elif tag == 'location':
                attrs = reader.attributes()
                fields['locations'].append(
                    (attrs.value('filename'), attrs.value('line')))
                reader.skipCurrentElement()
            else:
                reader.skipCurrentElement()

        if reader.hasError():
            raise self.error(reader.errorString())
        if 'source' not in fields:
            raise self.error('Message without <source>')
        if numerus and 'numerus_forms' not in fields:
            fields['numerus_forms'] = []
        return fields

    def read_numerus_forms(self):
        reader = self.reader
        forms = []
        while reader.readNextStartElement():
            if reader.name() == 'numerusform':
                forms.append(reader.readElementText(
                    QtCore.QXmlStreamReader.ReadElementTextBehaviour
                    .IncludeChildElements))
            else:
                reader.skipCurrentElement()
        return forms


def read_ts(data, filename=None):
    return TSReader(data, filename=filename).read()
