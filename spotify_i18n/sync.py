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

"""Bring locale catalogs in line with the reference catalog."""

import logging

from spotify_i18n.entries import TranslationEntry, TranslationStatus


logger = logging.getLogger(__name__)


class SyncResult:

    def __init__(self):
        self.added = 0
        self.vanished = 0
        self.revived = 0

    @property
    def changed(self):
        return bool(self.added or self.vanished or self.revived)

    def __repr__(self):
        return (f'<SyncResult added={self.added} vanished={self.vanished} '
                f'revived={self.revived}>')


def sync_catalog(catalog, reference):
    """Update ``catalog`` in place from ``reference``.

    Reference messages the catalog lacks are added as unfinished, at
    their position in the reference, with the reference text (or the
    source phrase) as draft. Live messages the reference no longer has
    are marked vanished; vanished messages the reference uses again
    become unfinished. Developer comments are taken over from the
    reference. The reference itself is not modified.
    """

    result = SyncResult()
    live_reference = reference.pairs(include_vanished=False)

    for entry in catalog.entries():
        if not entry.is_vanished and entry.key not in live_reference:
            logger.debug(f'Vanished: {entry.context}/{entry.source!r}')
            entry.status = TranslationStatus.VANISHED
            result.vanished += 1

    # Last live reference message seen per context
    previous = {}
    for ref_entry in reference.entries():
        if ref_entry.is_vanished:
            continue
        after = previous.get(ref_entry.context)
        previous[ref_entry.context] = ref_entry.source
        draft = ref_entry.translation or ref_entry.source

        entry = catalog.get(ref_entry.context, ref_entry.source)
        if entry is None:
            logger.debug(f'Added: {ref_entry.context}/{ref_entry.source!r}')
            catalog.insert(TranslationEntry(
                ref_entry.context,
                ref_entry.source,
                translation=draft,
                status=TranslationStatus.UNFINISHED,
                extracomment=ref_entry.extracomment,
                comment=ref_entry.comment,
                locations=ref_entry.locations,
                numerus_forms=[draft] if ref_entry.is_numerus else None),
                after=after)
            result.added += 1
            continue
        if entry.is_vanished:
            logger.debug(f'Revived: {entry.context}/{entry.source!r}')
            entry.status = TranslationStatus.UNFINISHED
            if not entry.translation:
                entry.translation = draft
                if entry.is_numerus:
                    entry.numerus_forms = [draft]
            result.revived += 1
        entry.extracomment = ref_entry.extracomment
        entry.comment = ref_entry.comment

    logger.info(f'Synced {catalog.language} with {reference.language}: '
                f'{result.added} added, {result.vanished} vanished, '
                f'{result.revived} revived')
    return result
