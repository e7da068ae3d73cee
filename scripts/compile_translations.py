#!/usr/bin/env python3
"""
Spotify plugin translation compiler
===================================

Compiles the Qt translation sources (.ts) into binary files (.qm).
QTranslator.load() only reads .qm files, so hosts that load the
translations through Qt need the compiled files.

File formats
------------
- .ts : XML source file (edited by translators)
- .qm : compiled binary (loaded by the application)

Directory layout
----------------
spotify_i18n/translations/
├── __init__.py          # package marker, TRANSLATIONS_PATH
├── spotify_en.ts        # English reference skeleton
├── spotify_de.ts        # German translations
└── spotify_de.qm        # German compiled file (generated)

Usage
-----

1. Compile all .ts files:

    python scripts/compile_translations.py

2. Compile a single file:

    pyside6-lrelease spotify_i18n/translations/spotify_de.ts

Dependencies
------------

This script needs the lrelease tool:

    pip install pyside6-essentials
or
    sudo apt install qt6-tools-dev-tools

Adding a new language
---------------------

1. Create the catalog from the reference skeleton:
    python -m spotify_i18n sync fr_FR

2. Translate the <translation> elements (or use Qt Linguist):
    linguist spotify_i18n/translations/spotify_fr_FR.ts

3. Check and compile:
    python -m spotify_i18n check
    python scripts/compile_translations.py

Notes
-----

- The English file is the reference: new strings go there first, then
  `python -m spotify_i18n sync <locale>` carries them into every locale
  as unfinished entries.
- Recompile after every change to a .ts file.
"""

import logging
import sys

from spotify_i18n.release import compile_translations
from spotify_i18n.translations import TRANSLATIONS_PATH


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    sys.exit(compile_translations(TRANSLATIONS_PATH))
