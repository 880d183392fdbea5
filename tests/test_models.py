import pytest
from datetime import date

from pydantic import ValidationError

from flashdeck.models import CardMetadata, DeckStats, Difficulty, Flashcard


# --- CardMetadata Model Tests ---

class TestCardMetadataModel:
    def test_defaults(self):
        metadata = CardMetadata()
        assert metadata.difficulty == Difficulty.Medium
        assert metadata.times_reviewed == 0
        assert metadata.correct_count == 0
        assert metadata.last_reviewed is None

    @pytest.mark.parametrize("field", ["times_reviewed", "correct_count"])
    def test_counters_reject_negative(self, field):
        with pytest.raises(ValidationError):
            CardMetadata(**{field: -1})

    def test_correct_count_above_times_reviewed_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            CardMetadata(times_reviewed=1, correct_count=2)
        assert "cannot exceed" in str(excinfo.value)

    def test_assignment_breaking_invariant_rejected(self):
        """validate_assignment re-checks correct_count <= times_reviewed."""
        metadata = CardMetadata()
        with pytest.raises(ValidationError):
            metadata.correct_count = 1

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            CardMetadata(difficulty="Impossible")

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            CardMetadata(streak=3)

    @pytest.mark.parametrize("reviewed, correct, expected", [
        (0, 0, 0.0),
        (4, 4, 1.0),
        (4, 1, 0.25),
        (3, 0, 0.0),
    ])
    def test_success_rate(self, reviewed, correct, expected):
        metadata = CardMetadata(times_reviewed=reviewed, correct_count=correct)
        assert metadata.success_rate == pytest.approx(expected)

    def test_last_reviewed_parses_iso_date_string_from_json(self):
        metadata = CardMetadata.model_validate_json(
            '{"times_reviewed": 1, "last_reviewed": "2024-05-17"}'
        )
        assert metadata.last_reviewed == date(2024, 5, 17)

    @pytest.mark.parametrize("value", ["2", 2.0, True])
    def test_counters_reject_coercible_values(self, value):
        with pytest.raises(ValidationError):
            CardMetadata(times_reviewed=value)


# --- Flashcard Model Tests ---

class TestFlashcardModel:
    def test_creation_gets_default_metadata(self):
        card = Flashcard(id=1, question="Q?", answer="A.")
        assert card.metadata == CardMetadata()

    def test_metadata_instances_not_shared(self):
        card1 = Flashcard(id=1, question="Q1", answer="A1")
        card2 = Flashcard(id=2, question="Q2", answer="A2")
        assert card1.metadata is not card2.metadata

    @pytest.mark.parametrize("field, value", [
        ("id", 99),
        ("question", "Changed?"),
        ("answer", "Changed."),
    ])
    def test_identity_and_content_are_frozen(self, field, value):
        card = Flashcard(id=1, question="Q?", answer="A.")
        with pytest.raises(ValidationError):
            setattr(card, field, value)

    def test_metadata_can_be_replaced(self):
        card = Flashcard(id=1, question="Q?", answer="A.")
        card.metadata = CardMetadata(difficulty=Difficulty.Hard)
        assert card.metadata.difficulty == Difficulty.Hard

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError):
            Flashcard(id=-1, question="Q?", answer="A.")

    def test_missing_answer_rejected(self):
        with pytest.raises(ValidationError):
            Flashcard(id=1, question="Q?")


# --- DeckStats Model Tests ---

def test_deck_stats_overall_success_rate():
    stats = DeckStats(total_cards=2, total_reviews=4, total_correct=3)
    assert stats.overall_success_rate == pytest.approx(0.75)


def test_deck_stats_without_reviews_is_zero():
    assert DeckStats(total_cards=5).overall_success_rate == 0.0
