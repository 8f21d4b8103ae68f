"""Tests for test count phrases."""

from buildchat.notify.deltas import delta, describe_tests
from buildchat.snapshot import TestSummary


def summary(total, failed=0, skipped=0, previous=None):
    return TestSummary.model_validate({
        "total": total,
        "failed": failed,
        "skipped": skipped,
        "previous": previous,
    })


def test_no_tests_contributes_nothing():
    assert describe_tests(None) == ""


def test_delta_sign():
    assert delta(10, 7, "total tests") == " (-3 total tests)"
    assert delta(7, 10, "total tests") == " (+3 total tests)"
    assert delta(7, 7, "total tests") == ""


def test_all_passed_without_previous():
    assert describe_tests(summary(50)) == " 50 tests passed."


def test_all_passed_with_skipped_without_previous():
    assert describe_tests(summary(50, skipped=2)) == (
        " 50 tests passed (2 tests skipped)."
    )


def test_total_decreased():
    phrase = describe_tests(summary(7, previous={"total": 10}))
    assert "(-3 total tests)" in phrase


def test_total_increased():
    phrase = describe_tests(summary(10, previous={"total": 7}))
    assert phrase == " 10 tests passed (+3 total tests)."


def test_equal_totals_have_no_delta():
    phrase = describe_tests(summary(10, previous={"total": 10}))
    assert phrase == " 10 tests passed."
    assert "total tests" not in phrase


def test_skipped_delta():
    phrase = describe_tests(
        summary(10, skipped=3, previous={"total": 10, "skipped": 1})
    )
    assert phrase == " 10 tests passed (3 tests skipped) (+2 skipped tests)."


def test_skipped_delta_omitted_when_none_skipped():
    phrase = describe_tests(summary(10, previous={"total": 10, "skipped": 4}))
    assert phrase == " 10 tests passed."


def test_failures_with_all_deltas():
    phrase = describe_tests(summary(
        12, failed=3, skipped=1,
        previous={"total": 10, "failed": 5, "skipped": 2},
    ))
    assert phrase == (
        " 3 of 12 tests failed (-2 failed tests) (+2 total tests)"
        " (1 tests skipped) (-1 skipped tests)."
    )


def test_failures_without_previous():
    assert describe_tests(summary(12, failed=3)) == " 3 of 12 tests failed."


def test_same_input_same_phrase():
    tests = summary(50, skipped=2, previous={"total": 48, "skipped": 2})
    assert describe_tests(tests) == describe_tests(tests)


def test_equal_failures_have_no_delta():
    phrase = describe_tests(summary(12, failed=3, previous={
        "total": 12, "failed": 3,
    }))
    assert phrase == " 3 of 12 tests failed."
    assert "failed tests" not in phrase
