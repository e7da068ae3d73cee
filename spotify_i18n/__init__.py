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

"""Translation catalogs of the Spotify plugin and tools to maintain them."""

# Install the logger class with TRACE support before any module
# creates its logger.
from spotify_i18n import logging  # noqa: F401
from spotify_i18n.constants import VERSION as __version__  # noqa: F401
