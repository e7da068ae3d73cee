import os.path
import shutil
from unittest.mock import patch

import pytest

from spotify_i18n.__main__ import main
from spotify_i18n.fileio import load_ts


@pytest.fixture
def ts_dir(tmpdir, ts_en, ts_de):
    shutil.copy(ts_en, os.path.join(tmpdir, 'spotify_en.ts'))
    shutil.copy(ts_de, os.path.join(tmpdir, 'spotify_de.ts'))
    yield str(tmpdir)


@patch('spotify_i18n.__main__.configure_logging')
def test_main_configures_logging(logging_mock, capsys):
    assert main(['--loglevel', 'DEBUG', 'stats']) == 0
    logging_mock.assert_called_once_with('DEBUG')


def test_main_without_command(capsys):
    assert main([]) == 2
    assert 'usage:' in capsys.readouterr().out


def test_main_check(capsys):
    assert main(['check']) == 0
    out = capsys.readouterr().out
    assert "WARNING [de_DE] missing: Plugin/'Open settings'" in out
    assert 'Checked 2 catalog(s): 0 error(s), 1 warning(s)' in out


def test_main_check_with_errors(ts_dir, capsys):
    with open(os.path.join(ts_dir, 'spotify_fr.ts'), 'w') as f:
        f.write('<TS version="2.1" language="fr_FR"><context>'
                '<name>spotify</name><message><source>podcast</source>'
                '<translation type="unfinished"></translation></message>'
                '</context></TS>')
    assert main(['--directory', ts_dir, 'check']) == 1
    out = capsys.readouterr().out
    assert 'ERROR [fr_FR] not-in-reference' in out
    assert 'ERROR [fr_FR] unfinished-empty' in out


def test_main_stats(capsys):
    assert main(['stats']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'de_DE: 21/25 finished, 4 unfinished, 0 untranslated, 7 vanished',
        'en_US (reference): 7/26 finished, 0 unfinished, '
        '19 untranslated, 0 vanished',
    ]


def test_main_lookup(capsys):
    assert main(['lookup', 'spotify', 'audiobook', '--locale', 'de']) == 0
    assert capsys.readouterr().out == 'Hörbuch\n'


def test_main_lookup_falls_back_to_source(capsys):
    assert main(['lookup', 'spotify', 'audiobook', '--locale', 'ja']) == 0
    assert capsys.readouterr().out == 'audiobook\n'


def test_main_lookup_uses_language_setting(settings, capsys):
    settings.setValue('General/language', 'de_DE')
    settings.sync()
    assert main(['lookup', 'Plugin', 'Spotify shows']) == 0
    assert capsys.readouterr().out == 'Spotify Podcasts\n'


def test_main_sync_existing(ts_dir, capsys):
    assert main(['--directory', ts_dir, 'sync', 'de']) == 0
    assert '1 added, 0 vanished, 0 revived' in capsys.readouterr().out
    catalog = load_ts(os.path.join(ts_dir, 'spotify_de.ts'))
    assert catalog.language == 'de_DE'
    assert catalog.get('Plugin', 'Open settings').is_unfinished


def test_main_sync_new_locale(ts_dir, capsys):
    assert main(['--directory', ts_dir, 'sync', 'fr_FR']) == 0
    catalog = load_ts(os.path.join(ts_dir, 'spotify_fr_FR.ts'))
    assert catalog.language == 'fr_FR'
    assert len(catalog) == 26
    assert all(e.is_unfinished for e in catalog.entries())


def test_main_sync_reference(ts_dir):
    assert main(['--directory', ts_dir, 'sync', 'en_US']) == 1


def test_main_sync_regional_locale_creates_own_file(ts_dir):
    de_file = os.path.join(ts_dir, 'spotify_de.ts')
    with open(de_file, 'rb') as f:
        before = f.read()

    assert main(['--directory', ts_dir, 'sync', 'de_AT']) == 0

    with open(de_file, 'rb') as f:
        assert f.read() == before
    catalog = load_ts(os.path.join(ts_dir, 'spotify_de_AT.ts'))
    assert catalog.language == 'de_AT'
    assert len(catalog) == 26


def test_main_sync_other_variant_of_reference_language(ts_dir):
    assert main(['--directory', ts_dir, 'sync', 'en_GB']) == 0
    catalog = load_ts(os.path.join(ts_dir, 'spotify_en_GB.ts'))
    assert catalog.language == 'en_GB'
    assert len(catalog) == 26


def test_main_synced_new_locale_passes_check(ts_dir, capsys):
    assert main(['--directory', ts_dir, 'sync', 'fr_FR']) == 0
    assert main(['--directory', ts_dir, 'check']) == 0
    out = capsys.readouterr().out
    assert 'Checked 3 catalog(s): 0 error(s), 1 warning(s)' in out


def test_main_missing_directory(tmpdir, capsys):
    assert main(['--directory', str(tmpdir), 'stats']) == 1
    assert 'Error:' in capsys.readouterr().err


def test_main_broken_file(ts_dir, capsys):
    with open(os.path.join(ts_dir, 'spotify_de.ts'), 'w') as f:
        f.write('<TS version="2.1" language="de_DE"><context>')
    assert main(['--directory', ts_dir, 'check']) == 1
    assert 'spotify_de.ts' in capsys.readouterr().err


@patch('spotify_i18n.__main__.compile_translations', return_value=0)
def test_main_compile(compile_mock, ts_dir):
    assert main(['--directory', ts_dir, 'compile']) == 0
    compile_mock.assert_called_once_with(ts_dir, domain='spotify')
