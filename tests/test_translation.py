"""Tests for the translation engine."""

import io

import pytest

from ribokit import (
    GeneticCode,
    InvalidNucleotide,
    ReadingFrame,
    iter_translation,
    translate,
    translate_dna,
    translate_frames,
)


class TestTranslate:
    def test_frame_zero(self):
        assert translate("AUGGCCUAG") == "MA*"

    def test_frame_one_drops_partial_codon(self):
        assert translate("AUGGCCUAG", frame=ReadingFrame.SECOND) == "WP"
        assert translate("AUGGCCUAG", frame=1) == "WP"

    def test_frame_two(self):
        assert translate("AUGGCCUAG", frame=ReadingFrame.THIRD) == "GL"

    def test_stop_at_termination(self):
        assert translate("AUGUAAGGG", stop_at_termination=True) == "M"

    def test_read_through_stop(self):
        assert translate("AUGUAAGGG", stop_at_termination=False) == "M*G"

    def test_stop_as_first_codon(self):
        assert translate("UAGAUG", stop_at_termination=True) == ""

    @pytest.mark.parametrize("code,expected", [
        (GeneticCode.UNIVERSAL, "M*RI"),
        (GeneticCode.MITOCHONDRIAL, "MW*M"),
        (GeneticCode.SECIS, "MURI"),
    ])
    def test_codes(self, code, expected):
        assert translate("AUGUGAAGAAUA", code=code) == expected

    def test_mitochondrial_stops_at_aga(self):
        assert translate("AUGAGAGGG", code=GeneticCode.MITOCHONDRIAL,
                         stop_at_termination=True) == "M"

    def test_secis_reads_through_uga(self):
        assert translate("AUGUGAGGGUAA", code=GeneticCode.SECIS,
                         stop_at_termination=True) == "MUG"

    def test_normalizes_case_and_whitespace(self):
        assert translate("aug gcc\nuag\n") == "MA*"

    def test_file_object_input(self):
        assert translate(io.StringIO("AUG\nGCC\nUAG\n"), stop_at_termination=True) == "MA"

    def test_chunked_input(self):
        assert translate(["AU", "GG", "CC"]) == "MA"

    @pytest.mark.parametrize("sequence", ["", "  \n", "AU", "\nA\nU\n"])
    def test_short_or_empty_input(self, sequence):
        assert translate(sequence) == ""

    def test_invalid_nucleotide(self):
        with pytest.raises(InvalidNucleotide) as excinfo:
            translate("AUGXCC")
        assert excinfo.value.character == "X"
        assert excinfo.value.position == 3

    def test_invalid_nucleotide_in_partial_codon(self):
        with pytest.raises(InvalidNucleotide):
            translate("AUGGX")

    @pytest.mark.parametrize("sequence,character,position", [
        ("AUGUAAX", "X", 6),
        ("AUGUAAGGGN", "N", 9),
        ("AUG UAA\nG-", "-", 9),
    ])
    def test_invalid_nucleotide_after_stop(self, sequence, character, position):
        with pytest.raises(InvalidNucleotide) as excinfo:
            translate(sequence, stop_at_termination=True)
        assert excinfo.value.character == character
        assert excinfo.value.position == position

    def test_invalid_nucleotide_after_stop_in_later_frame(self):
        with pytest.raises(InvalidNucleotide):
            translate("GAUGUAAX", frame=1, stop_at_termination=True)

    def test_invalid_nucleotide_in_skipped_offset(self):
        with pytest.raises(InvalidNucleotide):
            translate("XAUG", frame=1)

    @pytest.mark.parametrize("frame", [3, -1, True, "0"])
    def test_invalid_frame(self, frame):
        with pytest.raises(ValueError, match="Invalid reading frame"):
            translate("AUG", frame=frame)


class TestIterTranslation:
    def test_yields_units(self):
        units = list(iter_translation("AUGUGA"))
        assert [u.codon for u in units] == ["AUG", "UGA"]
        assert units[1].is_release

    def test_consumes_single_pass_stream(self):
        stream = iter("AUGUAAGGG")
        units = list(iter_translation(stream, stop_at_termination=True))
        assert [u.symbol for u in units] == ["M"]
        # the rest of the stream is still read for validation
        assert "".join(stream) == ""


class TestTranslateDna:
    def test_universal(self):
        assert translate_dna("ATGGCCTAG") == "MA*"

    def test_mitochondrial(self):
        assert translate_dna("ATGTGGTGA", code=GeneticCode.MITOCHONDRIAL) == "MWW"

    def test_invalid_nucleotide_after_stop(self):
        with pytest.raises(InvalidNucleotide) as excinfo:
            translate_dna("ATGTAAX", stop_at_termination=True)
        assert excinfo.value.character == "X"
        assert excinfo.value.position == 6

    def test_rejects_uracil(self):
        with pytest.raises(InvalidNucleotide) as excinfo:
            translate_dna("AUG")
        assert excinfo.value.character == "U"


class TestTranslateFrames:
    def test_all_frames(self):
        frames = translate_frames("AUGGCCUAG")
        assert frames == {
            ReadingFrame.FIRST: "MA*",
            ReadingFrame.SECOND: "WP",
            ReadingFrame.THIRD: "GL",
        }

    def test_single_pass_source(self):
        frames = translate_frames(iter(["AUGG", "CCUAG"]), stop_at_termination=True)
        assert frames[ReadingFrame.FIRST] == "MA"
        assert frames[ReadingFrame.SECOND] == "WP"

    def test_dna(self):
        frames = translate_frames("ATGGCCTAG", dna=True)
        assert frames[ReadingFrame.FIRST] == "MA*"

    def test_invalid(self):
        with pytest.raises(InvalidNucleotide):
            translate_frames("AUGGCN")


def test_reading_frame_offsets():
    assert [f.offset for f in ReadingFrame] == [0, 1, 2]
    assert ReadingFrame.of(2) is ReadingFrame.THIRD
    assert ReadingFrame.of(ReadingFrame.FIRST) is ReadingFrame.FIRST
