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

"""Writer for Qt Linguist translation source (.ts) files.

Output follows the layout lupdate writes, so files written here
produce minimal diffs against files maintained with Qt Linguist.
"""

import logging

from spotify_i18n.fileio.errors import TSFileError


logger = logging.getLogger(__name__)

ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
}


def escape(text):
    return ''.join(ESCAPES.get(char, char) for char in str(text))


def _element(indent, tag, text, **attrs):
    return f'{" " * indent}<{tag}{_attributes(attrs)}>{escape(text)}</{tag}>'


def _attributes(attrs):
    return ''.join(f' {name}="{escape(value)}"'
                   for name, value in attrs.items() if value)


def _translation_lines(entry):
    attributes = _attributes({'type': entry.status.type_attribute})
    if not entry.numerus_forms:
        return [_element(8, 'translation', entry.translation,
                         type=entry.status.type_attribute)]
    lines = [f'        <translation{attributes}>']
    for form in entry.numerus_forms:
        lines.append(_element(12, 'numerusform', form))
    lines.append('        </translation>')
    return lines


def _message_lines(entry):
    lines = ['    <message numerus="yes">' if entry.is_numerus
             else '    <message>']
    for filename, line in entry.locations:
        attrs = f'filename="{escape(filename)}"'
        if line is not None and line != '':
            attrs += f' line="{escape(line)}"'
        lines.append(f'        <location {attrs}/>')
    lines.append(_element(8, 'source', entry.source))
    for tag in ('comment', 'extracomment', 'translatorcomment'):
        text = getattr(entry, tag)
        if text is not None:
            lines.append(_element(8, tag, text))
    lines.extend(_translation_lines(entry))
    lines.append('    </message>')
    return lines


def dumps_ts(catalog):
    """Serialize a catalog to a TS document string."""

    header = f'<TS version="{escape(catalog.version)}"'
    if catalog.language:
        header += f' language="{escape(catalog.language)}"'
    if catalog.source_language:
        header += f' sourcelanguage="{escape(catalog.source_language)}"'
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<!DOCTYPE TS>',
        header + '>',
    ]
    for context in catalog.contexts():
        lines.append('<context>')
        lines.append(_element(4, 'name', context))
        for entry in catalog.entries(context):
            lines.extend(_message_lines(entry))
        lines.append('</context>')
    lines.append('</TS>')
    return '\n'.join(lines) + '\n'


def write_ts(catalog, filename):
    logger.debug(f'Writing {len(catalog)} entries to {filename}')
    # Only open (and truncate) the file once serialization succeeded
    try:
        data = dumps_ts(catalog)
    except (TypeError, ValueError) as e:
        raise TSFileError(f'Cannot serialize catalog: {e}', filename)
    try:
        with open(filename, 'w', encoding='utf-8', newline='\n') as f:
            f.write(data)
    except OSError as e:
        raise TSFileError(str(e), filename)
