from pyinistore.ini import parse, serialize
from pyinistore.ini.parser import detect_newline, split_comment

SAMPLE = (
    '; global comment\n'
    'version = 3\n'
    '\n'
    '[Apple]\n'
    'Name = iPhone ; flagship\n'
    'Version=15\n'
    'garbage line\n'
    '\n'
    '[Sony] # vendor\n'
    'Name=Xperia\n'
    'name=Xperia 1\n'
    '[apple]\n'
    'Color=black\n'
)


def test_parse_sections_and_pairs():
    doc = parse(SAMPLE)
    assert list(doc) == ['Apple', 'Sony']
    assert doc.header['version'] == '3'
    assert doc['Apple']['Name'] == 'iPhone'
    assert doc['Apple']['Version'] == '15'


def test_parse_inline_comment_kept_apart():
    entry = parse(SAMPLE)['Apple'].entry('Name')
    assert entry.value == 'iPhone'
    assert entry.comment == '; flagship'


def test_parse_duplicate_key_last_wins():
    sony = parse(SAMPLE)['Sony']
    assert sony['Name'] == 'Xperia 1'
    assert list(sony) == ['Name']
    assert len(sony) == 1


def test_parse_duplicate_sections_coalesce():
    doc = parse(SAMPLE)
    assert len(doc) == 2
    assert doc['APPLE']['color'] == 'black'
    assert list(doc['Apple']) == ['Name', 'Version', 'Color']


def test_parse_round_trip():
    assert serialize(parse(SAMPLE)) == SAMPLE


def test_parse_round_trip_crlf():
    text = SAMPLE.replace('\n', '\r\n')
    doc = parse(text)
    assert doc.newline == '\r\n'
    assert serialize(doc) == text


def test_parse_without_trailing_newline():
    doc = parse('a=1\n[B]\nb=2')
    assert doc.header['a'] == '1'
    assert doc['B']['b'] == '2'
    assert doc.trailing_newline is False
    assert serialize(doc) == 'a=1\n[B]\nb=2'


def test_parse_empty():
    doc = parse('')
    assert len(doc) == 0
    assert len(doc.header) == 0
    assert serialize(doc) == ''


def test_parse_malformed_lines_kept():
    text = '[]\n[ ]\n=nokey\n[A\n[A]\nk = \n'
    doc = parse(text)
    assert list(doc) == ['A']
    assert doc['A']['k'] == ''
    assert len(doc.header) == 0
    assert serialize(doc) == text


def test_parse_case_sensitive():
    doc = parse('[A]\nk=1\n[a]\nK=2\n', case_sensitive=True)
    assert list(doc) == ['A', 'a']
    assert doc['a']['K'] == '2'
    assert 'k' not in doc['a']
    assert 'A' in doc and 'a' in doc


def test_split_comment_escaped():
    assert split_comment(r'C:\new\;x ; c') == (r'C:\new\;x', '; c')
    assert split_comment('a#b') == ('a', '#b')
    assert split_comment('plain  ') == ('plain', None)
    assert split_comment('') == ('', None)


def test_detect_newline():
    assert detect_newline('a\r\nb\n') == '\r\n'
    assert detect_newline('a\nb') == '\n'
    assert detect_newline('a\rb') == '\r'
    assert detect_newline('ab') is None


def test_parse_blank_key_kept_as_line():
    text = '[A]\n  =x\n\t = y\nk=v\n'
    doc = parse(text)
    assert list(doc['A']) == ['k']
    assert serialize(doc) == text


def test_parse_key_is_trimmed():
    doc = parse('[A]\n  spaced key   = v\n')
    assert list(doc['A']) == ['spaced key']
