import pytest

from pyinistore.ini import IniDocument, IniEntry, parse, serialize, set_value
from pyinistore.ini.serializer import render_entry


def contents(doc):
    return {name: dict(section) for name, section in doc.items()}


def test_update_in_place():
    doc = parse('[A]\nx = 1 ; note\ny=2\n')
    set_value(doc, 'A', 'x', '5')
    assert serialize(doc) == '[A]\nx=5 ; note\ny=2\n'


def test_update_keeps_key_spelling():
    doc = parse('[A]\nWidth=1\n')
    set_value(doc, 'a', 'WIDTH', '2')
    assert serialize(doc) == '[A]\nWidth=2\n'


def test_new_key_after_last_entry():
    doc = parse('[A]\nx=1\n\n[B]\ny=2\n')
    set_value(doc, 'A', 'z', '3')
    assert serialize(doc) == '[A]\nx=1\nz=3\n\n[B]\ny=2\n'


def test_new_key_in_empty_section():
    doc = parse('[A]\n; nothing yet\n[B]\n')
    set_value(doc, 'A', 'k', 'v')
    assert serialize(doc) == '[A]\nk=v\n; nothing yet\n[B]\n'


def test_new_key_in_last_block_of_duplicate_section():
    doc = parse('[A]\nx=1\n[B]\n[A]\ny=2\n')
    set_value(doc, 'A', 'z', '3')
    assert serialize(doc) == '[A]\nx=1\n[B]\n[A]\ny=2\nz=3\n'


def test_new_section_appended():
    doc = parse('[A]\nx=1\n')
    set_value(doc, 'B', 'y', '2')
    assert serialize(doc) == '[A]\nx=1\n[B]\ny=2\n'


def test_new_section_keeps_crlf():
    doc = parse('[A]\r\nx=1\r\n')
    set_value(doc, 'B', 'y', '2')
    assert serialize(doc) == '[A]\r\nx=1\r\n[B]\r\ny=2\r\n'


def test_same_value_twice_is_identical():
    doc = parse('[A]\nx = 1   ; spaced\n')
    set_value(doc, 'A', 'x', '1')
    assert serialize(doc) == '[A]\nx = 1   ; spaced\n'

    doc = IniDocument(newline='\n')
    set_value(doc, 'A', 'x', '2')
    once = serialize(doc)
    set_value(doc, 'A', 'x', '2')
    assert serialize(doc) == once


def test_round_trip_of_set_document():
    doc = IniDocument(newline='\n')
    set_value(doc, 'Apple', 'Name', 'iPhone')
    set_value(doc, 'Apple', 'Version', '15')
    set_value(doc, 'Sony', 'Name', 'Xperia')
    set_value(doc, 'Sony', 'Path', r'C:\a\;b')
    set_value(doc, 'Sony', 'Empty', '')
    text = serialize(doc)
    assert text == (
        '[Apple]\nName=iPhone\nVersion=15\n'
        '[Sony]\nName=Xperia\nPath=C:\\a\\;b\nEmpty=\n')
    assert contents(parse(text)) == contents(doc)


def test_header_pairs_come_first():
    doc = parse('[A]\nx=1\n')
    doc.header['root'] = 'yes'
    assert serialize(doc) == 'root=yes\n[A]\nx=1\n'


def test_del_key_drops_shadowed_lines():
    doc = parse('[A]\nx=1\nx=2\ny=3\n')
    with pytest.warns(UserWarning):
        del doc['A']['x']
    assert serialize(doc) == '[A]\ny=3\n'
    assert 'x' not in parse(serialize(doc))['A']


def test_del_section_drops_all_blocks():
    doc = parse('[A]\nx=1\n[B]\ny=2\n[A]\nz=3\n')
    del doc['a']
    assert serialize(doc) == '[B]\ny=2\n'


def test_assign_section_mapping():
    doc = parse('[A]\nx=1\n; tail\n')
    doc['A'] = {'y': '2'}
    assert serialize(doc) == '[A]\ny=2\n; tail\n'
    doc['A'] = doc['A']
    assert dict(doc['A']) == {'y': '2'}


def test_render_entry():
    assert render_entry(IniEntry(key='k', value='v')) == 'k=v'
    assert render_entry(
        IniEntry(key='k', value='', comment='# c')) == 'k= # c'
