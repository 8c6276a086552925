"""Tests for spam likelihood scoring."""
import pytest

from callerid.services.spam_score import is_spam, spam_likelihood

pytestmark = pytest.mark.unit


class TestSpamLikelihood:

    def test_zero_reports_scores_zero(self):
        assert spam_likelihood(0) == 0

    @pytest.mark.parametrize("count,expected", [(1, 10), (3, 30), (6, 60), (10, 100)])
    def test_ten_points_per_report(self, count, expected):
        assert spam_likelihood(count) == expected

    def test_capped_at_one_hundred(self):
        assert spam_likelihood(11) == 100
        assert spam_likelihood(10_000) == 100

    def test_monotonic_non_decreasing(self):
        scores = [spam_likelihood(c) for c in range(0, 30)]
        assert scores == sorted(scores)
        assert all(0 <= s <= 100 for s in scores)


class TestIsSpam:

    def test_fifty_is_not_spam(self):
        assert is_spam(50) is False

    def test_above_fifty_is_spam(self):
        assert is_spam(60) is True

    def test_three_reports_not_spam_six_reports_spam(self):
        assert is_spam(spam_likelihood(3)) is False
        assert is_spam(spam_likelihood(6)) is True
