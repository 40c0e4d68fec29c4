"""Tests for the Complex model and the overlap score."""

import pickle

import pytest

from complex_eval.model.complex import Complex, overlap_score


class TestComplex:
    def test_members_are_unique(self):
        one = Complex.from_members(["A", "B", "A", "C"])
        assert one.size() == 3
        assert len(one) == 3
        assert "A" in one
        assert "Z" not in one

    def test_order_is_irrelevant(self):
        assert Complex(["C", "B", "A"]) == Complex(["A", "B", "C"])
        assert hash(Complex(["C", "B", "A"])) == hash(Complex(["A", "B", "C"]))

    def test_immutable(self, complex_abc):
        with pytest.raises(AttributeError):
            complex_abc.proteins = frozenset(["X"])
        assert isinstance(complex_abc.proteins, frozenset)

    def test_str_is_complex_file_line(self):
        assert str(Complex(["C", "A", "B"])) == "A B C"

    def test_empty(self):
        assert Complex().is_empty()
        assert Complex().size() == 0

    def test_restrict_to(self, complex_abd):
        assert complex_abd.restrict_to({"A", "D", "X"}) == Complex(["A", "D"])

    def test_pickle(self, complex_abc):
        assert pickle.loads(pickle.dumps(complex_abc)) == complex_abc


class TestOverlapScore:
    def test_shared_two_of_three(self, complex_abc, complex_abd):
        score, shared = complex_abc.os(complex_abd)
        assert shared == 2
        assert score == pytest.approx(4 / 9)

    def test_self_match_is_perfect(self, complex_abc):
        assert complex_abc.os(complex_abc) == (1.0, 3)

    def test_symmetric(self):
        a = Complex(["A", "B", "C", "D", "E"])
        b = Complex(["D", "E", "F"])
        assert a.os(b) == b.os(a)
        assert overlap_score(a, b) == overlap_score(b, a)

    def test_empty_scores_zero(self, complex_abc):
        assert complex_abc.os(Complex()) == (0.0, 0)
        assert Complex().os(complex_abc) == (0.0, 0)
        assert Complex().os(Complex()) == (0.0, 0)

    def test_disjoint(self, complex_abc):
        assert complex_abc.os(Complex(["X", "Y"])) == (0.0, 0)

    @pytest.mark.parametrize(
        "members_a, members_b",
        [
            (["A"], ["A", "B", "C", "D"]),
            (["A", "B"], ["B", "C"]),
            (["A", "B", "C", "D"], ["A", "B", "C", "D", "E", "F"]),
            (["A", "B", "C"], ["X"]),
        ],
    )
    def test_bounded(self, members_a, members_b):
        score, shared = Complex(members_a).os(Complex(members_b))
        assert 0.0 <= score <= 1.0
        assert 0 <= shared <= min(len(members_a), len(members_b))
