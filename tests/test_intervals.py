# tests/test_intervals.py
from datetime import timedelta

import pytest

from vocab_srs.sm2.intervals import (
    calculate_root_family_bonus,
    compute_next_review,
    get_frequency_multiplier,
    is_valid_review_quality,
    root_family_bonus_for,
    validate_quality,
)
from vocab_srs.schemas import Familiarity


def test_first_review_correct(make_item, now):
    """First correct answer: interval=1, streak=1, ease unchanged at q=4."""
    item = make_item(ease_factor=2.5, interval_days=0, consecutive_correct=0)
    result = compute_next_review(item, 4, now=now)
    assert result.new_interval_days == 1
    assert result.new_consecutive_correct == 1
    assert result.new_ease_factor == pytest.approx(2.5)
    assert result.next_review_date == now + timedelta(days=1)


def test_second_review_correct(make_item, now):
    """Second correct answer on an unranked word: 6 days."""
    item = make_item(interval_days=1, consecutive_correct=1, frequency_rank=0)
    result = compute_next_review(item, 4, now=now)
    assert 5 <= result.new_interval_days <= 8
    assert result.new_interval_days == 6
    assert result.new_consecutive_correct == 2


def test_third_review_uses_ease_factor(make_item, now):
    """Third+ correct: interval = round(old_interval * ease_factor)."""
    item = make_item(interval_days=6, consecutive_correct=2, ease_factor=2.5)
    result = compute_next_review(item, 4, now=now)
    assert result.new_interval_days == 15
    assert result.new_consecutive_correct == 3


def test_root_family_bonus_stretches_interval(make_item, now):
    item = make_item(interval_days=6, consecutive_correct=2, ease_factor=2.5)
    result = compute_next_review(item, 4, root_family_bonus=0.5, now=now)
    assert result.new_interval_days == 18  # round(6 * (2.5 + 0.5))


@pytest.mark.parametrize("rank,expected", [
    (50, 8),     # 6 * 1.3 = 7.8
    (300, 7),    # 6 * 1.15 = 6.9
    (800, 6),    # 6 * 1.0
    (2000, 5),   # 6 * 0.9 = 5.4
    (0, 6),      # unranked
])
def test_frequency_multiplier_applied(make_item, now, rank, expected):
    item = make_item(interval_days=1, consecutive_correct=1, frequency_rank=rank)
    result = compute_next_review(item, 4, now=now)
    assert result.new_interval_days == expected


def test_perfect_answer_bonus(make_item, now):
    """q=5 lengthens the interval by 10% and raises ease (clamped at 2.5)."""
    item = make_item(interval_days=1, consecutive_correct=1, ease_factor=2.5)
    result = compute_next_review(item, 5, now=now)
    assert result.new_interval_days == 7  # round(6 * 1.1)
    assert result.new_ease_factor == pytest.approx(2.5)


def test_hard_answer_penalty(make_item, now):
    """q=3 shortens the interval by 10% and lowers ease."""
    item = make_item(interval_days=1, consecutive_correct=1, ease_factor=2.5)
    result = compute_next_review(item, 3, now=now)
    assert result.new_interval_days == 5  # round(6 * 0.9)
    assert result.new_ease_factor == pytest.approx(2.36)


@pytest.mark.parametrize("quality", [0, 1, 2])
def test_failure_resets_streak_and_interval(make_item, now, quality):
    item = make_item(interval_days=30, consecutive_correct=5)
    result = compute_next_review(item, quality, now=now)
    assert result.new_consecutive_correct == 0
    assert result.new_interval_days == 1
    assert result.next_review_date == now + timedelta(days=1)


def test_failure_penalizes_ease_beyond_sm2(make_item, now):
    item = make_item(ease_factor=2.5)
    assert compute_next_review(item, 0, now=now).new_ease_factor == pytest.approx(1.5)
    assert compute_next_review(item, 2, now=now).new_ease_factor == pytest.approx(1.98)


def test_ease_factor_minimum(make_item, now):
    """Ease factor never drops below 1.3."""
    item = make_item(ease_factor=1.3)
    result = compute_next_review(item, 0, now=now)
    assert result.new_ease_factor == pytest.approx(1.3)


def test_interval_capped_at_one_year(make_item, now):
    item = make_item(interval_days=300, consecutive_correct=5, ease_factor=2.5)
    result = compute_next_review(item, 4, now=now)
    assert result.new_interval_days == 365


def test_ease_and_interval_bounds_hold_over_sequences(make_item, now):
    """Any run of answers keeps ease in [1.3, 2.5] and interval in [1, 365]."""
    sequences = [
        [5, 5, 5, 5, 5, 5, 5, 5],
        [0, 0, 0, 0, 0],
        [4, 3, 5, 1, 4, 4, 5, 2, 3, 5],
        [3, 3, 3, 3, 3, 3, 3],
    ]
    for rank in (0, 10, 400, 900, 5000):
        for sequence in sequences:
            item = make_item(frequency_rank=rank)
            for quality in sequence:
                result = compute_next_review(item, quality, root_family_bonus=0.5, now=now)
                assert 1.3 <= result.new_ease_factor <= 2.5
                assert 1 <= result.new_interval_days <= 365
                item = item.model_copy(update={
                    "ease_factor": result.new_ease_factor,
                    "interval_days": result.new_interval_days,
                    "consecutive_correct": result.new_consecutive_correct,
                })


def test_negative_bonus_rejected(make_item, now):
    with pytest.raises(ValueError):
        compute_next_review(make_item(), 4, root_family_bonus=-0.1, now=now)


@pytest.mark.parametrize("quality", [-1, 6, 7, 2.5, True])
def test_out_of_range_quality_rejected(make_item, now, quality):
    item = make_item(interval_days=6, consecutive_correct=2)
    with pytest.raises(ValueError):
        compute_next_review(item, quality, now=now)


def test_input_item_not_modified(make_item, now):
    item = make_item(interval_days=6, consecutive_correct=2)
    before = item.model_dump()
    compute_next_review(item, 1, now=now)
    assert item.model_dump() == before


@pytest.mark.parametrize("value", [-1, 6, 3.0, True, "4", None])
def test_validate_quality_rejects_bad_values(value):
    assert not is_valid_review_quality(value)
    with pytest.raises(ValueError):
        validate_quality(value)


def test_validate_quality_accepts_scale():
    assert [validate_quality(q) for q in range(6)] == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("rank,multiplier", [
    (0, 1.0), (1, 1.3), (100, 1.3), (101, 1.15), (500, 1.15),
    (501, 1.0), (1000, 1.0), (1001, 0.9),
])
def test_get_frequency_multiplier(rank, multiplier):
    assert get_frequency_multiplier(rank) == multiplier


def test_root_family_bonus():
    assert calculate_root_family_bonus(2, 4) == pytest.approx(0.25)
    assert calculate_root_family_bonus(5, 5) == pytest.approx(0.5)
    assert calculate_root_family_bonus(1, 1) == 0.0
    assert calculate_root_family_bonus(0, 5) == 0.0


def test_root_family_bonus_rejects_bad_counts():
    with pytest.raises(ValueError):
        calculate_root_family_bonus(3, 2)
    with pytest.raises(ValueError):
        calculate_root_family_bonus(-1, 2)


def test_root_family_bonus_from_snapshot(make_item):
    item = make_item(root="k-t-b")
    family = [
        item,
        make_item(root="k-t-b", familiarity=Familiarity.KNOWN),
        make_item(root="k-t-b", familiarity=Familiarity.KNOWN),
        make_item(root="k-t-b"),
        make_item(root="q-r-a", familiarity=Familiarity.KNOWN),
    ]
    assert root_family_bonus_for(item, family) == pytest.approx(0.25)
    assert root_family_bonus_for(make_item(root=None), family) == 0.0
