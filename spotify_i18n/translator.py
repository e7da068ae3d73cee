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

"""Serve catalogs to Qt's translation machinery without compiling
them to .qm files first."""

import logging

from PyQt6 import QtCore

from spotify_i18n.config import I18nSettings


logger = logging.getLogger(__name__)


class CatalogTranslator(QtCore.QTranslator):
    """A QTranslator answering from an in-memory Catalog.

    Returns None (a null string) for unknown messages, which makes Qt
    fall back to the next installed translator or the source text.
    """

    def __init__(self, catalog, parent=None, include_unfinished=True):
        super().__init__(parent)
        self.catalog = catalog
        self.include_unfinished = include_unfinished

    def translate(self, context, source_text, disambiguation=None, n=-1):
        translation = self.catalog.translate(
            context, source_text, include_unfinished=self.include_unfinished)
        return translation or None

    def isEmpty(self):
        return len(self.catalog) == 0

    def language(self):
        return self.catalog.language or ''


def current_locale(settings=None):
    """The locale to translate to: the user's language setting, or the
    system locale if that is set to ``system``."""

    settings = settings or I18nSettings()
    lang_setting = settings.valueOrDefault('General/language')
    if lang_setting and lang_setting != 'system':
        return lang_setting
    return QtCore.QLocale.system().name()  # e.g., de_DE


def install_translator(app, catalog_set, locale=None, settings=None):
    """Install a CatalogTranslator for ``locale`` into ``app``.

    Returns the translator, or None if no catalog serves the locale.
    """

    if locale is None:
        locale = current_locale(settings)

    catalog = catalog_set.get(locale)
    if catalog is None:
        logger.info(f'No translation for locale: {locale}')
        return None

    translator = CatalogTranslator(catalog, parent=app)
    app.installTranslator(translator)
    logger.info(f'Loaded translation for locale: {locale} '
                f'({catalog.language})')
    return translator
