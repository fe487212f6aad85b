# tests/test_stages.py
from datetime import timedelta

from vocab_srs.schemas import Familiarity, ReviewStage
from vocab_srs.sm2.stages import classify_stage, get_stage_counts


def test_ignored_is_suspended(make_item):
    item = make_item(familiarity=Familiarity.IGNORED, review_count=10, interval_days=40, consecutive_correct=8)
    assert classify_stage(item) == ReviewStage.SUSPENDED


def test_never_reviewed_is_new(make_item):
    assert classify_stage(make_item(review_count=0)) == ReviewStage.NEW


def test_zero_interval_is_learning(make_item):
    assert classify_stage(make_item(review_count=2, interval_days=0)) == ReviewStage.LEARNING


def test_long_interval_and_streak_is_mature(make_item):
    item = make_item(review_count=9, interval_days=21, consecutive_correct=5)
    assert classify_stage(item) == ReviewStage.MATURE


def test_short_of_mature_is_young(make_item):
    assert classify_stage(make_item(review_count=9, interval_days=20, consecutive_correct=5)) == ReviewStage.YOUNG
    assert classify_stage(make_item(review_count=9, interval_days=40, consecutive_correct=4)) == ReviewStage.YOUNG
    assert classify_stage(make_item(review_count=1, interval_days=1, consecutive_correct=1)) == ReviewStage.YOUNG


def test_stage_depends_only_on_four_fields(make_item, now):
    """Items matching on familiarity/review_count/interval/streak share a stage."""
    shared = {"familiarity": Familiarity.LEARNING, "review_count": 4, "interval_days": 6, "consecutive_correct": 2}
    a = make_item(ease_factor=1.3, frequency_rank=5, root="a", next_review_date=now, **shared)
    b = make_item(ease_factor=2.5, frequency_rank=9000, difficulty_score=0.9,
                  last_reviewed=now - timedelta(days=3), **shared)
    assert classify_stage(a) == classify_stage(b)


def test_get_stage_counts(make_item):
    items = [
        make_item(review_count=0),
        make_item(review_count=0),
        make_item(review_count=3, interval_days=6, consecutive_correct=2),
        make_item(review_count=8, interval_days=30, consecutive_correct=6),
        make_item(familiarity=Familiarity.IGNORED),
    ]
    counts = get_stage_counts(items)
    assert counts == {
        ReviewStage.NEW: 2,
        ReviewStage.LEARNING: 0,
        ReviewStage.YOUNG: 1,
        ReviewStage.MATURE: 1,
        ReviewStage.SUSPENDED: 1,
    }


def test_get_stage_counts_empty():
    counts = get_stage_counts([])
    assert set(counts) == set(ReviewStage)
    assert sum(counts.values()) == 0
