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

APPNAME = 'spotify-i18n'
APPNAME_FULL = 'Spotify plugin translations'
VERSION = '0.3.0'

# Translation domain: catalogs are named <domain>_<language>.ts
DOMAIN = 'spotify'
REFERENCE_LOCALE = 'en_US'

TS_VERSION = '2.1'
TS_SUFFIX = '.ts'
QM_SUFFIX = '.qm'
