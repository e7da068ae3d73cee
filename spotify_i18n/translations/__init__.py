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

"""Translation catalogs for the Spotify plugin.

This package contains the .ts (source) translation files, one per
locale, and the compiled .qm files once they have been built.

Supported languages:
- en (English, reference skeleton)
- de (German / Deutsch)

To add a new language:
1. Create spotify_{lang}.ts (python -m spotify_i18n sync {lang})
2. Translate strings in the .ts file
3. Compile: python -m spotify_i18n compile
"""

import os

TRANSLATIONS_PATH = os.path.dirname(__file__)
