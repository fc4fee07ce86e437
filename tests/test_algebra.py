"""Tests for difference, union and intersection of ranges."""

import pytest

from discrange import IntDiscrete, Range, characters, integers, natural


def r(start: int, end: int) -> Range[int]:
    return integers.range(start, end)


class TestDifference:
    def test_full_overlap_removes_everything(self) -> None:
        assert r(1, 10) - r(1, 10) is None

    def test_covering_range_removes_everything(self) -> None:
        assert r(3, 5) - r(1, 10) is None

    def test_interior_cut_leaves_two_ranges(self) -> None:
        assert r(1, 10) - r(4, 6) == (Range(1, 3), Range(7, 10))

    def test_lower_overlap_keeps_upper_part(self) -> None:
        assert r(1, 10) - r(-5, 4) == (Range(5, 10), None)

    def test_same_start_shorter_other(self) -> None:
        assert r(1, 10) - r(1, 4) == (Range(5, 10), None)

    def test_upper_overlap_keeps_lower_part(self) -> None:
        assert r(1, 10) - r(6, 20) == (Range(1, 5), None)

    def test_same_end_keeps_lower_part(self) -> None:
        assert r(1, 10) - r(6, 10) == (Range(1, 5), None)

    def test_disjoint_left_is_unchanged(self) -> None:
        assert r(5, 10) - r(1, 4) == (Range(5, 10), None)

    def test_disjoint_right_is_unchanged(self) -> None:
        assert r(5, 10) - r(11, 20) == (Range(5, 10), None)

    def test_single_element_hole(self) -> None:
        assert r(1, 3) - r(2, 2) == (Range(1, 1), Range(3, 3))

    def test_partition_reconstructs_self(self) -> None:
        source = r(0, 30)
        for lo in range(-5, 36, 3):
            for hi in range(lo, 40, 4):
                other = r(lo, hi)
                remainder = source - other
                kept: list[int] = []
                if remainder is not None:
                    first, second = remainder
                    kept.extend(first.to_list())
                    if second is not None:
                        kept.extend(second.to_list())
                overlap = source & other
                removed = overlap.to_list() if overlap is not None else []
                assert sorted(kept + removed) == source.to_list()
                assert not set(kept) & set(removed)

    def test_results_keep_domain(self) -> None:
        result = r(1, 10) - r(4, 6)
        assert result is not None
        lower, upper = result
        assert lower.domain is integers
        assert upper is not None and upper.domain is integers

    def test_explicit_capabilities_on_unbound_range(self) -> None:
        result = Range(1, 10).difference(
            Range(4, 6), discrete=IntDiscrete(), order=natural
        )
        assert result == (Range(1, 3), Range(7, 10))

    def test_characters(self) -> None:
        result = characters.range("a", "z") - characters.range("m", "p")
        assert result == (Range("a", "l"), Range("q", "z"))


class TestUnion:
    def test_idempotent(self) -> None:
        assert r(1, 5) + r(1, 5) == (Range(1, 5), None)

    def test_adjacent_ranges_merge(self) -> None:
        assert r(1, 3) + r(4, 6) == (Range(1, 6), None)

    def test_adjacent_ranges_merge_in_either_order(self) -> None:
        assert r(4, 6) + r(1, 3) == (Range(1, 6), None)

    def test_gap_keeps_both_ordered(self) -> None:
        assert r(1, 3) + r(5, 7) == (Range(1, 3), Range(5, 7))
        assert r(5, 7) + r(1, 3) == (Range(1, 3), Range(5, 7))

    def test_overlap_merges(self) -> None:
        assert r(1, 5) + r(3, 9) == (Range(1, 9), None)

    def test_contained_range_merges_into_outer(self) -> None:
        assert r(1, 10) + r(3, 4) == (Range(1, 10), None)
        assert r(3, 4) + r(1, 10) == (Range(1, 10), None)

    def test_adjacency_uses_discrete_step(self) -> None:
        evens = IntDiscrete(step=2)
        merged = Range(0, 4).union(Range(6, 8), order=natural, discrete=evens)
        assert merged == (Range(0, 8), None)

    def test_adjacent_characters_merge(self) -> None:
        assert characters.range("a", "c") + characters.range("d", "f") == (
            Range("a", "f"),
            None,
        )


class TestIntersection:
    def test_overlap(self) -> None:
        assert r(1, 10) & r(5, 15) == Range(5, 10)

    def test_disjoint(self) -> None:
        assert r(1, 3) & r(5, 7) is None

    def test_touching_endpoints(self) -> None:
        assert r(1, 5) & r(5, 9) == Range(5, 5)

    def test_adjacent_is_empty(self) -> None:
        assert r(1, 3) & r(4, 6) is None

    def test_commutative(self) -> None:
        assert r(5, 15) & r(1, 10) == r(1, 10) & r(5, 15)

    def test_explicit_order(self) -> None:
        assert Range(1, 10).intersection(Range(5, 15), order=natural) == Range(5, 10)


def test_operators_reject_non_ranges() -> None:
    with pytest.raises(TypeError):
        r(1, 5) - 3  # pyright: ignore[reportOperatorIssue, reportUnusedExpression]
    with pytest.raises(TypeError):
        r(1, 5) + (1, 2)  # pyright: ignore[reportOperatorIssue, reportUnusedExpression]
    with pytest.raises(TypeError):
        r(1, 5) & "x"  # pyright: ignore[reportOperatorIssue, reportUnusedExpression]


def test_operators_on_unbound_range_explain_binding() -> None:
    with pytest.raises(TypeError, match="not bound to a domain"):
        Range(1, 5) & Range(3, 7)  # pyright: ignore[reportUnusedExpression]
    with pytest.raises(TypeError, match="'discrete' capability"):
        Range(1, 5).union(Range(3, 7), order=natural)
