# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for NtrWriter."""

import io
import logging
import tempfile

import pytest

from ntr_treestore import NtrIOError, NtrNode, NtrStore, NtrWriter, parse_ntr


@pytest.fixture
def store():
    welcome = NtrNode('welcome')
    welcome.add_child(NtrNode('title', 'Hello'))
    welcome.add_child(NtrNode('message', 'Welcome!'))
    error = NtrNode('error').add_child(
        NtrNode('404').add_child(NtrNode('title', 'Not found'))
    )
    return NtrStore([welcome, error])


class TestNtrWriterOutput:
    """Tests for rendered text."""

    def test_write_to_string(self, store):
        """Test indentation, separators and blank lines between roots."""
        assert NtrWriter(store).write_to_string() == (
            "welcome\n"
            "  title>Hello\n"
            "  message>Welcome!\n"
            "\n"
            "error\n"
            "  404\n"
            "    title>Not found\n"
        )

    def test_comment_header(self, store):
        """Test the header comment is followed by one blank line."""
        lines = list(NtrWriter(store, comment='Messages').iter_lines())
        assert lines[:3] == ['@Messages', '', 'welcome']

    def test_set_comment_is_fluent(self, store):
        """Test set_comment returns the writer."""
        writer = NtrWriter(store)
        assert writer.set_comment('Header') is writer
        assert writer.write_to_string().startswith('@Header\n\n')

    def test_empty_comment_is_skipped(self, store):
        """Test an empty comment emits nothing."""
        text = NtrWriter(store, comment='').write_to_string()
        assert text.startswith('welcome\n')

    @pytest.mark.parametrize('comment', ['\n', '\r\n\n'])
    def test_line_break_only_comment_is_skipped(self, comment):
        """Test a comment with no text emits no header."""
        text = NtrWriter([NtrNode('a')], comment=comment).write_to_string()
        assert text == "a\n"

    def test_multiline_comment(self):
        """Test each comment line gets its own marker."""
        lines = list(NtrWriter([NtrNode('a')], comment='one\ntwo').iter_lines())
        assert lines == ['@one', '@two', '', 'a']

    def test_empty_value_omits_separator(self):
        """Test a node without value is written as a bare key."""
        text = NtrWriter([NtrNode('a', ''), NtrNode('b', 'x')]).write_to_string()
        assert text == "a\n\nb>x\n"

    def test_empty_forest(self):
        """Test writing nothing gives an empty string."""
        assert NtrWriter(NtrStore()).write_to_string() == ''

    def test_accepts_mapping(self):
        """Test a dict of key to root node is accepted."""
        text = NtrWriter({'a': NtrNode('a', '1')}).write_to_string()
        assert text == "a>1\n"

    def test_custom_indent(self, store):
        """Test a custom indent string."""
        writer = NtrWriter(store, indent='\t')
        assert '\ttitle>Hello' in list(writer.iter_lines())


class TestNtrWriterRoundTrip:
    """Tests for parse(write(forest)) == forest."""

    def test_round_trip(self, store):
        """Test writing then parsing restores the forest."""
        text = NtrWriter(store, comment='Generated').write_to_string()
        assert parse_ntr(text) == store

    def test_round_trip_preserves_root_order(self):
        """Test root order survives a round trip."""
        store = NtrStore([NtrNode('zeta'), NtrNode('alpha'), NtrNode('mid', 'x')])
        assert parse_ntr(NtrWriter(store).write_to_string()).keys() == ['zeta', 'alpha', 'mid']

    def test_parse_write_is_canonical(self):
        """Test irregular but valid input is rewritten canonically."""
        text = "@c\na\n  b >  1\n\n\n  c\n    d>2\n"
        rewritten = NtrWriter(parse_ntr(text)).write_to_string()
        assert rewritten == "a\n  b>1\n  c\n    d>2\n"


class TestNtrWriterTargets:
    """Tests for stream and file output."""

    def test_write_to_text_stream(self, store):
        """Test writing to a text stream."""
        stream = io.StringIO()
        NtrWriter(store).write_to_stream(stream)
        assert stream.getvalue().startswith('welcome\n')

    def test_write_to_binary_stream(self):
        """Test binary streams receive UTF-8 bytes."""
        stream = io.BytesIO()
        NtrWriter([NtrNode('a', 'Schön')]).write_to_stream(stream)
        assert stream.getvalue() == "a>Schön\n".encode('utf-8')

    def test_write_to_named_temporary_file(self, store):
        """Test text-mode file wrappers receive str."""
        with tempfile.NamedTemporaryFile('w+', encoding='utf-8') as stream:
            NtrWriter(store).write_to_stream(stream)
            stream.seek(0)
            assert parse_ntr(stream.read()) == store

    def test_write_to_spooled_text_file(self, store):
        """Test a text-mode spooled file receives str."""
        with tempfile.SpooledTemporaryFile(mode='w+') as stream:
            NtrWriter(store).write_to_stream(stream)
            stream.seek(0)
            assert stream.read().startswith('welcome\n')

    def test_write_to_binary_temporary_file(self):
        """Test binary-mode file wrappers receive UTF-8 bytes."""
        with tempfile.NamedTemporaryFile('w+b') as stream:
            NtrWriter([NtrNode('a', 'Schön')]).write_to_stream(stream)
            stream.seek(0)
            assert stream.read() == "a>Schön\n".encode('utf-8')

    def test_failing_stream_raises(self, store):
        """Test a stream raising OSError is reported as NtrIOError."""
        class BrokenStream(io.RawIOBase):
            def writable(self):
                return True

            def write(self, data):
                raise OSError("disk full")

        with pytest.raises(NtrIOError) as exc_info:
            NtrWriter(store).write_to_stream(BrokenStream(), target='broken')
        assert exc_info.value.operation == 'write'
        assert exc_info.value.target == 'broken'

    def test_write_to_file(self, store, tmp_path, caplog):
        """Test writing a file and reading it back."""
        path = tmp_path / 'out.ntr'
        with caplog.at_level(logging.INFO, logger='ntr_treestore'):
            NtrWriter(store).write_to_file(path)
        assert 'Writing NTR file' in caplog.text
        assert parse_ntr(path.read_text(encoding='utf-8')) == store

    def test_write_to_missing_directory(self, store, tmp_path):
        """Test an unwritable path raises NtrIOError."""
        path = tmp_path / 'missing' / 'out.ntr'
        with pytest.raises(NtrIOError) as exc_info:
            NtrWriter(store).write_to_file(path)
        assert exc_info.value.operation == 'write'
        assert exc_info.value.target == str(path)
