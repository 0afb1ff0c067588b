import pytest
from config.grammar_patterns import GRAMMAR_PATTERNS
from core.grammar import analyze_structure, get_grammar_point_details, identify_grammar_points
from models.internal import StructureType
from utils.exceptions import InputValidationError


CATALOGUE_ORDER = [p.name for p in GRAMMAR_PATTERNS]


def test_catalogue_has_fifteen_patterns():
    assert len(CATALOGUE_ORDER) == 15
    assert CATALOGUE_ORDER[0] == "present_simple"
    assert CATALOGUE_ORDER[-1] == "infinitives"


def test_present_perfect_continuous_is_found():
    assert "present_perfect_continuous" in identify_grammar_points("I have been working all day.")


@pytest.mark.parametrize("sentence,expected", [
    ("They are playing football.", "present_continuous"),
    ("I was working at 5 PM.", "past_continuous"),
    ("I will call you later.", "future_simple"),
    ("I am going to study tonight.", "be_going_to"),
    ("You should exercise more.", "modal_verbs"),
    ("The book was written by her.", "passive_voice"),
    ("If it rains, I will stay home.", "conditionals"),
    ("She said that she was busy.", "reported_speech"),
    ("Swimming is good exercise.", "gerunds"),
    ("I want to learn English.", "infinitives"),
])
def test_catalogue_examples_match(sentence, expected):
    assert expected in identify_grammar_points(sentence)


def test_results_follow_catalogue_order_without_duplicates():
    points = identify_grammar_points("If it rains, I will stay home to read the books that she wanted.")

    assert len(points) == len(set(points))
    assert points == sorted(points, key=CATALOGUE_ORDER.index)


def test_matching_is_case_insensitive():
    assert "future_simple" in identify_grammar_points("I WILL CALL YOU.")


def test_empty_sentence_matches_nothing():
    assert identify_grammar_points("") == []


def test_grammar_point_details():
    details = get_grammar_point_details("passive_voice")

    assert details is not None
    assert details.name == "passive_voice"
    assert "The book was written by her." in details.examples
    assert get_grammar_point_details("no_such_pattern") is None


def test_simple_sentence_structure():
    analysis = analyze_structure("I like apples.")

    assert analysis.type is StructureType.SIMPLE
    assert analysis.clauses == 1
    assert analysis.structure == "simple sentence (subject + verb + object)"
    assert analysis.complexity_score == 1
    assert analysis.subjects == [] and analysis.verbs == [] and analysis.objects == []


def test_compound_sentence_structure():
    analysis = analyze_structure("I like tea and she likes coffee.")

    assert analysis.type is StructureType.COMPOUND
    assert analysis.clauses == 2
    assert analysis.structure == "compound sentence"
    # 1 + and(0.5) = 1.5 -> 2
    assert analysis.complexity_score == 2


def test_relative_clause_structure():
    analysis = analyze_structure("The man who called is my teacher.")

    assert analysis.type is StructureType.COMPLEX
    assert analysis.structure == "complex sentence (relative clause)"
    assert analysis.complexity_score == 2


def test_clause_count_is_capped_by_punctuation():
    analysis = analyze_structure("I think that he knows who she is and why.")

    assert analysis.clauses == 2
    assert analysis.type is StructureType.COMPOUND_COMPLEX


@pytest.mark.parametrize("sentence,label", [
    ("She is a doctor.", "subject + be + complement"),
    ("He has a car.", "subject + have + object"),
    ("Can you help me?", "subject + modal + verb + object/complement"),
    ("Do you like tea?", "question (yes/no)"),
    ("Call me when you arrive.", "complex sentence (condition/time/concession)"),
])
def test_structure_labels(sentence, label):
    assert analyze_structure(sentence).structure == label


def test_complexity_score_is_clamped():
    sentence = " ".join(["who which that when where why how if unless although"] * 3)
    assert analyze_structure(sentence).complexity_score == 10


def test_none_is_rejected():
    with pytest.raises(InputValidationError):
        analyze_structure(None)


def test_word_characters_are_ascii_only():
    # "é" 는 단어 문자가 아니므로 "flambéing" 은 -ing 동사로 보지 않음
    assert "present_continuous" not in identify_grammar_points("The chef is flambéing the dessert.")
    assert "present_continuous" in identify_grammar_points("The chef is cooking the dessert.")
