import pytest

from spotify_i18n.entries import TranslationEntry, TranslationStatus


def test_status_from_type_attribute():
    assert TranslationStatus.from_type_attribute('') \
        is TranslationStatus.FINISHED
    assert TranslationStatus.from_type_attribute(None) \
        is TranslationStatus.FINISHED
    assert TranslationStatus.from_type_attribute('unfinished') \
        is TranslationStatus.UNFINISHED
    assert TranslationStatus.from_type_attribute('vanished') \
        is TranslationStatus.VANISHED


def test_status_from_type_attribute_reads_obsolete_as_vanished():
    assert TranslationStatus.from_type_attribute('obsolete') \
        is TranslationStatus.VANISHED


def test_status_from_type_attribute_unknown():
    with pytest.raises(ValueError):
        TranslationStatus.from_type_attribute('bogus')


def test_status_type_attribute():
    assert TranslationStatus.FINISHED.type_attribute is None
    assert TranslationStatus.UNFINISHED.type_attribute == 'unfinished'
    assert TranslationStatus.VANISHED.type_attribute == 'vanished'


def test_entry_key():
    entry = TranslationEntry('spotify', 'track', 'Song')
    assert entry.key == ('spotify', 'track')


def test_entry_is_translated():
    assert TranslationEntry('spotify', 'track', 'Song').is_translated
    assert not TranslationEntry('spotify', 'track', '').is_translated
    assert not TranslationEntry('spotify', 'track', None).is_translated
    assert not TranslationEntry(
        'spotify', 'track', 'Song',
        status=TranslationStatus.VANISHED).is_translated
    assert TranslationEntry(
        'spotify', 'track', 'Song',
        status=TranslationStatus.UNFINISHED).is_translated


def test_entry_copy_is_equal_but_independent():
    entry = TranslationEntry(
        'spotify', 'track', 'Song', extracomment='Not literally',
        locations=[('../src/spotify.cpp', '30')])
    copy = entry.copy()
    assert copy == entry
    copy.locations.append(('foo.cpp', '1'))
    assert copy != entry
    assert entry.locations == [('../src/spotify.cpp', '30')]


def test_entry_equality_includes_status():
    entry = TranslationEntry('spotify', 'track', 'Song')
    other = TranslationEntry(
        'spotify', 'track', 'Song', status=TranslationStatus.UNFINISHED)
    assert entry != other


def test_entry_numerus_forms():
    entry = TranslationEntry(
        'Plugin', '%n track(s)', numerus_forms=['%n Song', '%n Songs'])
    assert entry.is_numerus
    assert entry.translation == '%n Song'
    assert not TranslationEntry('Plugin', 'track').is_numerus
    assert TranslationEntry('Plugin', '%n', numerus_forms=[]).translation \
        == ''


def test_entry_copy_keeps_numerus_forms():
    entry = TranslationEntry(
        'Plugin', '%n track(s)', numerus_forms=['%n Song', '%n Songs'])
    copy = entry.copy()
    assert copy == entry
    copy.numerus_forms.append('%n Songs?')
    assert copy != entry
    assert entry.numerus_forms == ['%n Song', '%n Songs']
    assert entry != TranslationEntry('Plugin', '%n track(s)', '%n Song')
