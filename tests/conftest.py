import os.path
import pytest
import uuid

from unittest.mock import MagicMock, patch


def pytest_configure(config):
    # Ignore logging configuration during test runs. This avoids
    # logging to the regular log file and spamming test output with
    # debug messages.
    import logging.config
    logging.config.dictConfig = MagicMock

    # Keep the system locale out of lookups that default to it
    import os
    os.environ['LANGUAGE'] = 'C'
    os.environ['LC_ALL'] = 'C'
    os.environ['LANG'] = 'C'

    # Run Qt headless when no display is available
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture(autouse=True)
def settings(tmpdir):
    from spotify_i18n.config import I18nSettings
    dir_patcher = patch(
        'spotify_i18n.config.I18nSettings.get_settings_dir',
        return_value=tmpdir.dirname)
    dir_patcher.start()
    settings = I18nSettings()
    yield settings
    settings.clear()
    dir_patcher.stop()


@pytest.fixture(autouse=True)
def reset_commandline_args():
    from spotify_i18n.config import CommandlineArgs
    CommandlineArgs._instance = None
    yield
    CommandlineArgs._instance = None


@pytest.fixture
def translations_dir():
    from spotify_i18n.translations import TRANSLATIONS_PATH
    yield TRANSLATIONS_PATH


@pytest.fixture
def ts_en(translations_dir):
    yield os.path.join(translations_dir, 'spotify_en.ts')


@pytest.fixture
def ts_de(translations_dir):
    yield os.path.join(translations_dir, 'spotify_de.ts')


@pytest.fixture
def catalogs(translations_dir):
    from spotify_i18n.fileio import load_catalogs
    yield load_catalogs(translations_dir)


@pytest.fixture
def tmpfile(tmpdir):
    yield os.path.join(tmpdir, str(uuid.uuid4()))


@pytest.fixture
def make_catalog():
    from spotify_i18n.catalog import Catalog
    from spotify_i18n.entries import TranslationEntry, TranslationStatus

    def _make(language, *messages):
        """Build a catalog from (context, source, translation[, status])
        tuples."""
        catalog = Catalog(language=language)
        for message in messages:
            context, source, translation = message[:3]
            status = message[3] if len(message) > 3 else \
                TranslationStatus.FINISHED
            catalog.add(TranslationEntry(
                context, source, translation, status=status))
        return catalog

    yield _make


@pytest.fixture
def ts_data():
    def _ts(body, language='de_DE'):
        return (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            '<!DOCTYPE TS>\n'
            f'<TS version="2.1" language="{language}">\n'
            f'{body}\n'
            '</TS>\n')
    yield _ts
