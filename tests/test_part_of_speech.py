import json

import pytest

from eszett.part_of_speech import (
    InvalidPartOfSpeechCode,
    PartOfSpeech,
    PartOfSpeechDto,
)


def test_display_as_string():
    assert str(PartOfSpeechDto.parse("noun")) == "noun"
    assert str(PartOfSpeechDto.parse("adjective")) == "adj"
    assert str(PartOfSpeechDto.NOUN) == "noun"
    assert str(PartOfSpeechDto.ADJECTIVE) == "adj"


def test_serialize_as_string():
    assert json.loads(PartOfSpeechDto.NOUN.to_json()) == "noun"
    assert json.loads(PartOfSpeechDto.ADJECTIVE.to_json()) == "adj"
    assert PartOfSpeechDto.NOUN.to_json() == '"noun"'


@pytest.mark.parametrize(
    "code",
    ["adj", "adje", "adjec", "adject", "adjecti", "adjectiv", "adjective"],
)
def test_can_match_adj_any_prefix(code):
    assert PartOfSpeechDto.parse(code) is PartOfSpeechDto.ADJECTIVE


@pytest.mark.parametrize("code", ["ad", " adj", "adjectives"])
def test_no_invalid_adj_prefix(code):
    with pytest.raises(InvalidPartOfSpeechCode):
        PartOfSpeechDto.parse(code)


@pytest.mark.parametrize("code", ["adv", "adve", "adver", "adverb"])
def test_can_match_adv_any_prefix(code):
    assert PartOfSpeechDto.parse(code) is PartOfSpeechDto.ADVERB


def test_noun_and_verb_exact():
    assert PartOfSpeechDto.parse("noun") is PartOfSpeechDto.NOUN
    assert PartOfSpeechDto.parse("verb") is PartOfSpeechDto.VERB
    with pytest.raises(InvalidPartOfSpeechCode):
        PartOfSpeechDto.parse("nou")


def test_error_message():
    with pytest.raises(InvalidPartOfSpeechCode) as info:
        PartOfSpeechDto.parse("xyz")
    assert str(info.value) == "Invalid part-of-speech: xyz"
    assert info.value.code == "xyz"


@pytest.mark.parametrize("dto", list(PartOfSpeechDto))
def test_display_parse_round_trip(dto):
    assert PartOfSpeechDto.parse(str(dto)) is dto


def test_base_part_of_speech_members():
    assert [p.name for p in PartOfSpeech] == ["NOUN", "VERB", "ADJECTIVE"]
    assert PartOfSpeech(PartOfSpeech.NOUN.value) is PartOfSpeech.NOUN
    assert PartOfSpeech(PartOfSpeech.ADJECTIVE.value) is PartOfSpeech.ADJECTIVE