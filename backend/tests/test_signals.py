"""Tests for question and entity extraction heuristics."""

from reasoner.services.reasoning.signals import (
    FALLBACK_QUESTION,
    RegexSignalExtractor,
    extract_entities,
    extract_unresolved_questions,
)


class TestQuestionExtraction:
    def test_single_question_followed_by_statement(self) -> None:
        questions = extract_unresolved_questions("What films did she do? I know the years.")

        assert len(questions) == 1
        assert questions[0]
        assert questions[0].endswith("?")
        assert questions[0] == "What films did she do?"

    def test_fallback_when_information_is_missing(self) -> None:
        assert extract_unresolved_questions("Some info is missing here.") == [FALLBACK_QUESTION]

    def test_fallback_markers_are_case_insensitive(self) -> None:
        assert extract_unresolved_questions("The release date is UNKNOWN.") == [FALLBACK_QUESTION]

    def test_no_question_and_no_marker(self) -> None:
        assert extract_unresolved_questions("Everything is established now.") == []

    def test_takes_last_sentence_before_question_mark(self) -> None:
        questions = extract_unresolved_questions("She started in theatre. Which year was her debut?")

        assert questions == ["Which year was her debut?"]

    def test_multiple_questions_keep_order(self) -> None:
        thought = "Who directed it? When was it released?\nWhat was the budget?"

        assert extract_unresolved_questions(thought) == [
            "Who directed it?",
            "When was it released?",
            "What was the budget?",
        ]

    def test_no_fallback_when_question_mark_present(self) -> None:
        # Text after the last '?' is not a question, and markers no longer apply
        assert extract_unresolved_questions("Is it? we still need data") == ["Is it?"]

    def test_filters_short_fragments(self) -> None:
        assert extract_unresolved_questions("Ok? Who? What is her best film?") == ["What is her best film?"]

    def test_deduplicates(self) -> None:
        assert extract_unresolved_questions("Who won? Who won?") == ["Who won?"]

    def test_caps_at_five(self) -> None:
        thought = " ".join(f"Is claim number {i} true?" for i in range(8))

        questions = extract_unresolved_questions(thought)

        assert len(questions) == 5
        assert questions[0] == "Is claim number 0 true?"

    def test_blank_thought(self) -> None:
        assert extract_unresolved_questions("   ") == []


class TestEntityExtraction:
    def test_names_and_places_in_order(self) -> None:
        assert extract_entities("John Smith met Jane Doe in Paris.") == ["John Smith", "Jane Doe", "Paris"]

    def test_deduplicates_preserving_first_seen(self) -> None:
        thought = "Paris is lovely. Later John Smith returned to Paris."

        assert extract_entities(thought) == ["Paris", "Later John Smith"]

    def test_run_longer_than_four_words_is_split(self) -> None:
        entities = extract_entities("Alpha Beta Gamma Delta Epsilon")

        assert entities == ["Alpha Beta Gamma Delta", "Epsilon"]

    def test_caps_at_ten(self) -> None:
        names = ["Anna", "Boris", "Clara", "Dmitri", "Elena", "Fedor", "Galina", "Igor", "Katya", "Lev", "Mila"]
        thought = ", ".join(f"{name} x" for name in names)

        entities = extract_entities(thought)

        assert len(entities) == 10
        assert entities == names[:10]

    def test_all_caps_and_single_letters_ignored(self) -> None:
        assert extract_entities("NASA and I went to the moon") == []


def test_regex_extractor_delegates() -> None:
    extractor = RegexSignalExtractor()

    assert extractor.extract_questions("Who is Jane Doe?") == ["Who is Jane Doe?"]
    assert extractor.extract_entities("Who is Jane Doe?") == ["Who", "Jane Doe"]
