import asyncio
from io import BytesIO, StringIO

import pytest

from pyinidoc import (
    IniDocument,
    InvalidArgument,
    Property,
    Section,
    dump,
    dump_async,
    dumps,
    loads,
)
from pyinidoc.writer import iter_lines


@pytest.mark.parametrize('name', [
    'Players.ini',
    'MultilinePropertyValue.ini',
    'TypedProperties.ini',
    'EmptyProperties.ini',
    'EmptySections.ini',
    'Unformatted.ini',
])
def test_round_trip_is_identity(read_data, name):
    text = read_data(name)
    assert loads(text).dumps() == text


def test_players_scenario():
    text = '[Players]\nPlayer1=Ryan\nPlayer2=Emma\n'
    doc = loads(text)
    assert len(doc) == 1
    players = doc['Players']
    assert players.name == 'Players'
    assert [(i.name, str(i.value)) for i in players] == \
        [('Player1', 'Ryan'), ('Player2', 'Emma')]
    assert dumps(doc) == text
    assert str(doc) == text


def test_edits_keep_the_rest_untouched(read_data):
    text = read_data('Players.ini')
    doc = loads(text)
    doc['Game State']['Player2'] = 'Mia'
    assert doc.dumps() == text.replace('Player2 = Emma', 'Player2 = Mia')


def test_read_multiline_value(read_data):
    doc = loads(read_data('MultilinePropertyValue.ini'))
    assert doc['Section']['Multiline'] == 'This is a \nmultiline\n value.'
    assert doc['Section']['After'] == 'done'


def test_multiline_value_survives_save_and_load():
    doc = IniDocument()
    section = doc.add(Section('Superman'))
    section['MultiLine'] = 'line1\nline2\nline3'
    text = doc.dumps()
    assert text == '[Superman]\nMultiLine = <<EOT\nline1\nline2\nline3\nEOT\n'
    assert loads(text)['Superman']['MultiLine'] == 'line1\nline2\nline3'


def test_multiline_line_breaks_are_normalized():
    section = Section('S')
    section['v'] = 'a\r\nb\rc'
    doc = IniDocument()
    doc.add(section)
    assert loads(doc.dumps())['S']['v'] == 'a\nb\nc'


def test_custom_and_blank_end_of_text_marker():
    prop = Property('v', 'a\nb')
    prop.multiline_eot = 'END'
    assert prop.render_lines() == ['v = <<END', 'a', 'b', 'END']
    prop.multiline_eot = '   '
    assert prop.render_lines() == ['v = <<EOT', 'a', 'b', 'EOT']


def test_value_looking_like_heredoc_start_is_protected():
    doc = IniDocument()
    doc.add(Section('S'))['v'] = '<<FOO'
    assert loads(doc.dumps())['S']['v'] == '<<FOO'


def test_value_containing_its_marker_warns():
    prop = Property('v', 'x\nEOT\ny')
    with pytest.warns(UserWarning):
        prop.render_lines()


@pytest.mark.parametrize('text', [
    '[S]\na = <<EOT\nonly\nEOT\n',
    '[S]\na = <<EOT\nEOT\n',
    '[S]\n  a=<<END  \n  indented\n\nEND\nb = 1\n',
    '[S]\na=<<EOT\n\nEOT\n',
    '[S]\na=<<EOT\nx\n  EOT\n',
    '[S]\na = <<END\nx\n\tEND  \nb=1\n',
])
def test_heredoc_round_trip(text):
    assert loads(text).dumps() == text


def test_heredoc_with_one_empty_line_vs_no_lines():
    doc = loads('[S]\na=<<EOT\n\nEOT\nb=<<EOT\nEOT\n')
    assert doc['S']['a'] == ''
    assert doc['S']['b'] == ''
    assert doc['S'][0].render_lines() == ['a=<<EOT', '', 'EOT']
    assert doc['S'][1].render_lines() == ['b=<<EOT', 'EOT']

    # a new value forgets the parsed body shape.
    doc['S']['a'] = ''
    assert doc['S'][0].render_lines() == ['a=<<EOT', 'EOT']


def test_crlf_input_is_written_with_lf():
    assert loads('[S]\r\na=1\r\n').dumps() == '[S]\na=1\n'


def test_iter_lines_order():
    doc = loads('; c1\n[S]\n; c2\na=1\n; tail\n')
    assert list(iter_lines(doc)) == ['; c1', '[S]', '; c2', 'a=1', '; tail']


def test_dump_to_text_stream():
    doc = loads('[S]\na=1\n')
    buf = StringIO()
    dump(doc, buf)
    assert buf.getvalue() == '[S]\na=1\n'


def test_dump_to_binary_stream():
    doc = IniDocument()
    doc.add(Section('Sección'))['clave'] = 'año'
    buf = BytesIO()
    dump(doc, buf, encoding='latin-1')
    assert buf.getvalue() == '[Sección]\nclave = año\n'.encode('latin-1')


def test_dump_to_path(tmp_path):
    path = tmp_path / 'out.ini'
    doc = loads('[S]\na=1\n')
    doc.save(path)
    assert path.read_bytes() == b'[S]\na=1\n'


def test_dump_refuses_unusable_targets(tmp_path):
    doc = loads('[S]\n')
    with pytest.raises(InvalidArgument):
        dump(doc, None)

    path = tmp_path / 'read_only.ini'
    path.write_text('')
    with open(path, 'rb') as fp, pytest.raises(InvalidArgument):
        dump(doc, fp)

    closed = StringIO()
    closed.close()
    with pytest.raises(InvalidArgument):
        dump(doc, closed)


class AsyncWriter:
    def __init__(self):
        self.chunks = []
        self.flushed = False

    async def write(self, data):
        self.chunks.append(data)

    async def flush(self):
        self.flushed = True


def test_async_save(read_data):
    doc = loads(read_data('Players.ini'))
    writer = AsyncWriter()
    asyncio.run(doc.save_async(writer))
    assert ''.join(writer.chunks) == doc.dumps()
    assert writer.flushed


def test_async_save_with_plain_writer():
    doc = loads('[S]\na=1\n')
    buf = StringIO()
    asyncio.run(dump_async(doc, buf))
    assert buf.getvalue() == '[S]\na=1\n'


def test_async_save_refuses_none():
    with pytest.raises(InvalidArgument):
        asyncio.run(dump_async(loads('[S]\n'), None))


class ReadOnlyAsyncWriter(AsyncWriter):
    async def writable(self):
        return False


def test_async_save_awaits_writable():
    writer = ReadOnlyAsyncWriter()
    with pytest.raises(InvalidArgument):
        asyncio.run(dump_async(loads('[S]\n'), writer))
    assert writer.chunks == []


def test_async_save_refuses_closed_stream():
    closed = StringIO()
    closed.close()
    with pytest.raises(InvalidArgument):
        asyncio.run(dump_async(loads('[S]\n'), closed))
