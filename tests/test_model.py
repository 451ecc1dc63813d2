"""Tests for IniSection and IniDocument."""

import pytest

from plainini import IniDocument, IniSection


@pytest.fixture
def doc():
    ret = IniDocument()
    ret.global_section()['a'] = '1'
    ret.get_or_create_section('S')['b'] = '2'
    return ret


class TestIniSection:
    def test_missing_key_reads_empty(self):
        section = IniSection('S')
        assert section['nope'] == ''
        assert 'nope' not in section
        assert len(section) == 0

    def test_get_keeps_default(self):
        section = IniSection('S', {'k': 'v'})
        assert section.get('k') == 'v'
        assert section.get('nope') is None
        assert section.get('nope', 'x') == 'x'

    def test_values_stored_as_str(self):
        section = IniSection('S')
        section['n'] = 42
        assert section['n'] == '42'

    def test_insertion_order(self):
        section = IniSection('S')
        for k in ('z', 'a', 'm'):
            section[k] = k
        assert list(section) == ['z', 'a', 'm']

    def test_overwrite_keeps_single_key(self):
        section = IniSection('S')
        section['k'] = '1'
        section['k'] = '2'
        assert section.to_dict() == {'k': '2'}

    def test_pop_and_setdefault(self):
        section = IniSection('S', {'k': 'v'})
        assert section.pop('nope', 'd') == 'd'
        assert section.pop('k') == 'v'
        with pytest.raises(KeyError):
            section.pop('k')
        assert section.setdefault('k', 'w') == 'w'
        assert section['k'] == 'w'

    def test_del_missing_raises(self):
        with pytest.raises(KeyError):
            del IniSection('S')['nope']

    def test_str_and_repr(self):
        section = IniSection('S', {'k': 'v'})
        assert str(section) == '[S]'
        assert repr(section) == '[S] { .cnt = 1 }'


class TestIniDocument:
    def test_empty(self):
        doc = IniDocument()
        assert len(doc) == 0
        assert doc.enumerate_sections() == []
        assert len(doc.global_section()) == 0
        assert doc.global_section().name == ''

    def test_get_or_create_is_idempotent(self):
        doc = IniDocument()
        first = doc.get_or_create_section('S')
        second = doc.get_or_create_section('S')
        assert first is second
        assert len(doc) == 1

    def test_get_or_create_accepts_empty_name(self):
        doc = IniDocument()
        section = doc.get_or_create_section('')
        assert section is not doc.global_section()
        assert list(doc) == ['']

    def test_read_access_creates_section(self):
        doc = IniDocument()
        assert doc.get_or_create_section('S')['k'] == ''
        assert 'S' in doc

    def test_indexing_does_not_create(self):
        doc = IniDocument()
        with pytest.raises(KeyError):
            doc['S']
        assert 'S' not in doc

    def test_global_section_is_stable(self, doc):
        assert doc.global_section() is doc.global_section()
        assert doc.header is doc.global_section()
        assert doc.global_section()['a'] == '1'

    def test_set_section_replaces(self, doc):
        replacement = IniSection('S', {'c': '3'})
        doc.set_section('S', replacement)
        assert doc['S'] is replacement
        assert doc['S']['b'] == ''
        assert doc['S']['c'] == '3'

    def test_set_section_from_mapping(self, doc):
        doc['T'] = {'x': '1'}
        assert isinstance(doc['T'], IniSection)
        assert doc['T'].name == 'T'
        assert doc['T']['x'] == '1'

    def test_set_section_renames_foreign_section(self):
        doc = IniDocument()
        other = IniSection('Other', {'x': '1'})
        doc.set_section('S', other)
        assert doc['S'].name == 'S'
        assert doc['S'] is not other
        assert other.name == 'Other'

    def test_enumeration_order_and_snapshot(self):
        doc = IniDocument()
        for name in ('B', 'A', 'C'):
            doc.get_or_create_section(name)
        sections = doc.enumerate_sections()
        assert [i.name for i in sections] == ['B', 'A', 'C']
        doc.get_or_create_section('D')
        assert len(sections) == 3
        assert [i.name for i in doc.enumerate_sections()] == [
            'B', 'A', 'C', 'D']

    def test_remove_section(self, doc):
        assert doc.remove_section('S')
        assert not doc.remove_section('S')
        with pytest.raises(KeyError):
            del doc['S']

    def test_rename_section_keeps_position(self):
        doc = IniDocument()
        for name in ('A', 'B', 'C'):
            doc.get_or_create_section(name)['k'] = name
        assert doc.rename_section('B', 'X')
        assert list(doc) == ['A', 'X', 'C']
        assert doc['X'].name == 'X'
        assert doc['X']['k'] == 'B'

    def test_rename_section_keeps_references(self):
        doc = IniDocument()
        section = doc.get_or_create_section('Old')
        assert doc.rename_section('Old', 'New')
        assert doc['New'] is section
        assert section.name == 'New'
        section['k'] = 'v'
        assert doc['New']['k'] == 'v'
        assert doc.to_text() == '\n[New]\nk = v\n'

    def test_rename_section_rejects(self):
        doc = IniDocument()
        doc.get_or_create_section('A')
        doc.get_or_create_section('B')
        assert not doc.rename_section('nope', 'C')
        assert not doc.rename_section('A', 'B')
        assert list(doc) == ['A', 'B']

    def test_clear(self, doc):
        doc.clear()
        assert len(doc) == 0
        assert len(doc.global_section()) == 0

    def test_to_dict(self, doc):
        assert doc.to_dict() == {'S': {'b': '2'}}

    def test_repr(self, doc):
        assert repr(doc) == '<IniDocument { .global = 1, .sections = 1 }>'

    def test_equality_covers_global_section(self, doc):
        other = IniDocument.load('a = 1\n[S]\nb = 2')
        assert other == doc
        other.global_section()['a'] = '2'
        assert other != doc
        assert IniDocument() != doc
        assert IniDocument() == IniDocument()

    def test_equality_needs_document(self, doc):
        assert doc != {'S': {'b': '2'}}
