"""Test accuracy and speed computation."""

import pytest

from typetest.results import GameResults, compare_typed, compute_results


def make_results(**overrides):
    fields = dict(
        total_words=10,
        total_chars_typed=50,
        total_chars_in_text=50,
        total_char_errors=0,
        final_chars_typed_correctly=50,
        final_uncorrected_errors=0,
        started_at=100.0,
        ended_at=130.0,
    )
    fields.update(overrides)
    return GameResults(**fields)


def test_compare_typed_only_overlapping_prefix():
    assert compare_typed("abxd", "abcdef") == (3, 1)
    assert compare_typed("", "abc") == (0, 0)


def test_compute_results_backspace_scenario():
    results = compute_results(list("abcd"), "abcd", total_words=1,
                              chars_typed=4, errors=1,
                              started_at=5.0, ended_at=8.0)
    assert results.total_chars_typed == 4
    assert results.total_char_errors == 1
    assert results.total_chars_in_text == 4
    assert results.final_chars_typed_correctly == 4
    assert results.final_uncorrected_errors == 0
    assert results.accuracy == 1.0
    assert results.duration == 3.0


def test_accuracy_with_uncorrected_errors():
    results = compute_results(list("abxy"), "abcd", total_words=1,
                              chars_typed=4, errors=2,
                              started_at=0.0, ended_at=1.0)
    assert results.final_uncorrected_errors == 2
    assert results.accuracy == pytest.approx(0.5)


def test_accuracy_zero_for_empty_buffer():
    results = make_results(total_chars_in_text=0, final_chars_typed_correctly=0)
    assert results.accuracy == 0.0


@pytest.mark.parametrize("typed,target", [
    ("abc", "abc"),
    ("abd", "abc"),
    ("xyz", "abc"),
    ("a", "a"),
])
def test_accuracy_bounds(typed, target):
    results = compute_results(list(typed), target, total_words=1, chars_typed=len(typed),
                              errors=0, started_at=0.0, ended_at=1.0)
    assert 0.0 <= results.accuracy <= 1.0
    assert (results.accuracy == 1.0) == (results.final_uncorrected_errors == 0)


def test_wpm_uses_word_count():
    assert make_results(total_words=30, started_at=0.0, ended_at=60.0).wpm == pytest.approx(30.0)
    assert make_results(total_words=10, started_at=0.0, ended_at=30.0).wpm == pytest.approx(20.0)


def test_wpm_zero_duration():
    assert make_results(started_at=5.0, ended_at=5.0).wpm == 0.0


def test_results_are_immutable():
    results = make_results()
    with pytest.raises(AttributeError):
        results.total_words = 3


def test_summary_lines():
    results = make_results(total_words=10, total_chars_in_text=50, total_char_errors=3,
                           final_chars_typed_correctly=45, started_at=0.0, ended_at=30.0)
    text = ["".join(f.text for f in line) for line in results.summary_lines()]
    assert text == [
        "Took 30s for 10 words",
        "Accuracy: 90.0%",
        "Mistakes: 3 out of 50 characters",
        "Speed: 20.0 wpm (words per minute)",
    ]
