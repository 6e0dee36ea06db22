"""
Tests for LawID parsing, formatting and URL building.

Run with: pytest tests/test_law_id.py -v
"""

import dataclasses

import pytest

from pillarcandy.riksdagen.errors import LawIDFormatError, NotAnIntegerError
from pillarcandy.riksdagen.law_id import LawID, law_id_valid


class TestLawIDParse:
    def test_parses_year_and_number(self):
        law_id = LawID.parse("1998:899")

        assert law_id.year == 1998
        assert law_id.number == 899

    @pytest.mark.parametrize("text", ["1998:899", "2010:1", "1962:700", "2024:1234", "1736:0"])
    def test_round_trip_canonical(self, text):
        assert str(LawID.parse(text)) == text

    def test_leading_zeros_serialize_canonically(self):
        law_id = LawID.parse("1998:0899")

        assert law_id.number == 899
        assert str(law_id) == "1998:899"

    def test_surrounding_whitespace_is_ignored(self):
        assert LawID.parse("  1998:899\n") == LawID(1998, 899)

    @pytest.mark.parametrize("text", ["", "1998", "1998899", "1998:899:1", "::", "1998::899"])
    def test_wrong_colon_count_is_format_error(self, text):
        with pytest.raises(LawIDFormatError):
            LawID.parse(text)

    @pytest.mark.parametrize("text", ["98:899", "19988:1", "1998:12345", "1998:", ":899"])
    def test_wrong_lengths_are_format_errors(self, text):
        with pytest.raises(LawIDFormatError):
            LawID.parse(text)

    @pytest.mark.parametrize("text,part", [("abcd:899", "abcd"), ("1998:8a9", "8a9"), ("1998:-1", "-1")])
    def test_non_digit_part_is_not_an_integer(self, text, part):
        with pytest.raises(NotAnIntegerError) as exc:
            LawID.parse(text)

        assert exc.value.part == part
        # still a format error for callers that only care about that
        assert isinstance(exc.value, LawIDFormatError)

    def test_never_raises_bare_value_error(self):
        for text in ["x:y", "1998:½", "１９９８:899", "1998 :899"]:
            with pytest.raises(LawIDFormatError):
                LawID.parse(text)

    def test_is_immutable(self):
        law_id = LawID.parse("1998:899")

        with pytest.raises(dataclasses.FrozenInstanceError):
            law_id.year = 2000


class TestLawIDValid:
    def test_matches_exact_pattern(self):
        assert law_id_valid("1998:899")
        assert not law_id_valid("1998:899 ")
        assert not law_id_valid("sfs 1998:899")

    def test_trailing_newline_is_rejected(self):
        assert not law_id_valid("1998:899\n")

    def test_parse_rejects_newline_inside_part(self):
        with pytest.raises(NotAnIntegerError):
            LawID.parse("1998\n:899")


class TestLawIDConstructor:
    @pytest.mark.parametrize("year,number", [(-1, 899), (1998, -1), (10000, 1), (1998, 12345)])
    def test_out_of_range_parts_rejected(self, year, number):
        with pytest.raises(LawIDFormatError):
            LawID(year, number)

    def test_non_integer_parts_rejected(self):
        with pytest.raises(LawIDFormatError):
            LawID("1998", 899)

    @pytest.mark.parametrize("year,number", [(0, 0), (1998, 899), (9999, 9999)])
    def test_programmatic_ids_round_trip(self, year, number):
        law_id = LawID(year, number)

        assert LawID.parse(str(law_id)) == law_id
        assert law_id.to_url().endswith(f"sfs-{year:04d}-{number}")


class TestLawIDUrl:
    def test_default_url(self):
        url = LawID.parse("1998:899").to_url()

        assert url == "http://data.riksdagen.se/dokument/sfs-1998-899"
        assert "sfs-1998-899" in url

    def test_document_id(self):
        assert LawID(2010, 1).document_id == "sfs-2010-1"

    def test_custom_base_url_trailing_slash(self):
        url = LawID(1998, 899).to_url("https://example.test/dokument/")

        assert url == "https://example.test/dokument/sfs-1998-899"
