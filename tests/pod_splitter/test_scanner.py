"""Tests for the POD scan driver."""

from pathlib import Path

import pytest

from src.pod_splitter.pieces import CommandPiece, NonPodPiece, ParagraphPiece, PieceKind
from src.pod_splitter.scanner import PodScanner, scan


def _kinds(pieces):
    return [piece.kind for piece in pieces]


def _assert_covers(text, pieces):
    """Pieces must tile the whole buffer in order."""
    assert "".join(piece.raw for piece in pieces) == text
    pos = 0
    for piece in pieces:
        assert piece.start_pos == pos
        assert piece.end_pos > piece.start_pos
        assert text[piece.start_pos : piece.end_pos] == piece.raw
        pos = piece.end_pos
    assert pos == len(text)


class TestPodScanner:
    """Test the PodScanner component."""

    def test_terminator_without_blank_line(self):
        """Test that =cut closes the block even when text follows directly."""
        text = "=pod\nHello\n=cut\nworld\n"

        pieces = scan(text)

        assert _kinds(pieces) == [
            PieceKind.COMMAND,
            PieceKind.PARAGRAPH,
            PieceKind.COMMAND,
            PieceKind.NON_POD,
        ]
        assert pieces[0].directive == "pod"
        assert pieces[0].raw == "=pod\n"
        assert pieces[1].raw == "Hello\n"
        assert pieces[1].paragraph == "Hello"
        assert pieces[2].directive == "cut"
        assert pieces[2].raw == "=cut\n"
        assert pieces[3].raw == "world\n"
        _assert_covers(text, pieces)

    def test_directive_level_split(self):
        """Test splitting head1 into directive and level."""
        pieces = scan("=head1 Title\n\n")

        assert len(pieces) == 1
        command = pieces[0]
        assert isinstance(command, CommandPiece)
        assert command.directive == "head"
        assert command.level == 1
        assert command.text == "Title"
        assert command.raw == "=head1 Title\n\n"

    def test_directive_without_level(self):
        """Test that a directive without digits has no level."""
        pieces = scan("=over 4\n\n")

        assert pieces[0].directive == "over"
        assert pieces[0].level is None
        assert pieces[0].text == "4"

    def test_commands_separated_by_lookahead(self):
        """Test two commands without a blank line between them."""
        text = "=item One\n=item Two\n\n"

        pieces = scan(text)

        assert _kinds(pieces) == [PieceKind.COMMAND, PieceKind.COMMAND]
        assert [p.text for p in pieces] == ["One", "Two"]
        assert pieces[0].raw == "=item One\n"
        assert pieces[1].raw == "=item Two\n\n"

    def test_no_pod(self):
        """Test input without any command marker."""
        text = "use strict;\nmy $x = 1;\nprint $x;\n"

        pieces = scan(text)

        assert len(pieces) == 1
        assert isinstance(pieces[0], NonPodPiece)
        assert pieces[0].raw == text
        assert pieces[0].start_pos == 0
        assert pieces[0].end_pos == len(text)

    def test_empty_input(self):
        """Test that empty input yields no pieces."""
        assert scan("") == []

    def test_missing_input(self):
        """Test that a missing buffer is rejected."""
        with pytest.raises(ValueError):
            scan(None)

    def test_unsupported_input_type(self):
        """Test that non-text input is rejected."""
        with pytest.raises(TypeError):
            scan(42)

    def test_multiline_command_text(self):
        """Test that command text continues until the paragraph ends."""
        pieces = scan("=for comment\ninternal helper\n=cut\ncode\n")

        assert pieces[0].directive == "for"
        assert pieces[0].text == "comment\ninternal helper"
        assert pieces[1].directive == "cut"
        assert pieces[2].raw == "code\n"

    def test_multiline_paragraphs(self):
        """Test body paragraphs separated by blank lines."""
        text = "=pod\n\nfirst line\nsecond line\n\nthird\n"

        pieces = scan(text)

        paragraphs = [p for p in pieces if isinstance(p, ParagraphPiece)]
        assert [p.paragraph for p in paragraphs] == ["first line\nsecond line", "third\n"]
        assert paragraphs[0].raw == "first line\nsecond line\n\n"
        _assert_covers(text, pieces)

    def test_verbatim_paragraph(self):
        """Test indented paragraphs are body paragraphs."""
        text = "=head1 SYNOPSIS\n\n  use Foo;\n  Foo->bar;\n\n=cut\n"

        pieces = scan(text)

        assert _kinds(pieces) == [PieceKind.COMMAND, PieceKind.PARAGRAPH, PieceKind.COMMAND]
        assert pieces[1].paragraph == "  use Foo;\n  Foo->bar;"

    def test_marker_line_ends_body_paragraph(self):
        """Test any =word line ends the current paragraph."""
        text = "=pod\n\nsome text\n=notreally a directive\n"

        pieces = scan(text)

        assert pieces[1].paragraph == "some text"
        assert pieces[2].directive == "notreally"
        assert pieces[2].text == "a directive\n"

    def test_marker_not_at_line_start(self):
        """Test that = inside a line is not a command."""
        text = "my $a = 1;\nmy $b =pod;\n"

        pieces = scan(text)

        assert len(pieces) == 1
        assert not pieces[0].is_pod

    def test_marker_without_word_is_not_command(self):
        """Test a lone = at line start stays non-POD."""
        text = "code\n= not pod\n"

        assert _kinds(scan(text)) == [PieceKind.NON_POD]

    def test_cut_with_text(self):
        """Test text after =cut is captured."""
        pieces = scan("=pod\n\n=cut some note\nmore code\n")

        cut = pieces[1]
        assert cut.directive == "cut"
        assert cut.text == "some note"
        assert cut.raw == "=cut some note\n"
        assert pieces[2].raw == "more code\n"

    def test_cut_swallows_one_blank_line(self):
        """Test =cut consumes at most one extra line break."""
        pieces = scan("=pod\n\n=cut\n\n\ncode\n")

        assert pieces[1].raw == "=cut\n\n"
        assert pieces[2].raw == "\ncode\n"
        assert not pieces[2].is_pod

    def test_cut_without_newline_at_end(self):
        """Test a trailing =cut with no line break is left as non-POD."""
        pieces = scan("=pod\n\n=cut")

        assert _kinds(pieces) == [PieceKind.COMMAND, PieceKind.NON_POD]
        assert pieces[1].raw == "=cut"

    def test_pod_until_end_of_input(self):
        """Test a block without =cut runs to the end of the input."""
        text = "code\n\n=head1 NAME\n\nFoo - bar"

        pieces = scan(text)

        assert _kinds(pieces) == [PieceKind.NON_POD, PieceKind.COMMAND, PieceKind.PARAGRAPH]
        assert pieces[2].paragraph == "Foo - bar"
        _assert_covers(text, pieces)

    def test_command_at_end_without_newline(self):
        """Test a command ending at end of input."""
        pieces = scan("=head2 Methods")

        assert pieces[0].text == "Methods"
        assert pieces[0].level == 2

    def test_no_paragraph_after_terminator(self):
        """Test that text after =cut is never a body paragraph."""
        pieces = scan("=pod\n\ndoc\n\n=cut\nnot doc\n\nstill not doc\n")

        cut_index = next(i for i, p in enumerate(pieces) if getattr(p, "directive", None) == "cut")
        assert all(not p.is_pod for p in pieces[cut_index + 1 :])

    def test_scan_is_idempotent(self):
        """Test scanning twice gives identical pieces."""
        text = "x\n=head1 A\n\nbody\n\n=cut\ny\n=pod\n\nz\n"

        assert scan(text) == scan(text)

    def test_bytes_input(self):
        """Test scanning bytes uses byte offsets."""
        text = "=head1 Café\n\nbody\n".encode("utf-8")

        pieces = scan(text)

        assert pieces[0].directive == "head"
        assert pieces[0].text == "Café".encode("utf-8")
        assert pieces[1].raw == b"body\n"
        assert pieces[1].start_pos == len("=head1 Café\n\n".encode("utf-8"))
        assert pieces[-1].end_pos == len(text)

    def test_bytearray_input_is_not_modified(self):
        """Test scanning a bytearray leaves it untouched."""
        buffer = bytearray(b"=pod\n\ndoc\n")

        pieces = scan(buffer)

        assert bytes(buffer) == b"=pod\n\ndoc\n"
        assert isinstance(pieces[0].raw, bytes)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "\n",
            "\n\n\n",
            "=",
            "=\n",
            "=x",
            "=cut\n",
            "=cutter\n",
            "code\n=head1\nTitle\n\n=over\n\n=item 1\n=item 2\n=back\n",
            "=pod\n\n\n\n=cut\n\n\n\nend",
            "a\n=begin html\n\n<p>x</p>\n\n=end html\n\n=cut\n",
        ],
    )
    def test_pieces_cover_input(self, text):
        """Test pieces tile the input exactly for awkward inputs."""
        _assert_covers(text, scan(text))

    def test_scan_sample_file(self):
        """Test scanning the sample Perl module."""
        sample_file = Path(__file__).parent.parent.parent / "samples" / "Greeter.pm"
        text = sample_file.read_text(encoding="utf-8")

        pieces = PodScanner().scan(text)

        commands = [p for p in pieces if isinstance(p, CommandPiece)]
        assert [(c.directive, c.level) for c in commands] == [
            ("head", 1),
            ("head", 1),
            ("cut", None),
            ("head", 2),
            ("cut", None),
            ("for", None),
            ("cut", None),
            ("head", 1),
            ("over", None),
            ("item", None),
            ("item", None),
            ("back", None),
        ]
        assert len([p for p in pieces if isinstance(p, ParagraphPiece)]) == 3
        assert any("sub greet" in p.raw for p in pieces if not p.is_pod)
        _assert_covers(text, pieces)
