from __future__ import annotations

import unittest

from shotpick.candidates import DEFAULT_PROJECTS
from shotpick.filtering import filter_candidates, substring_index


def _is_subsequence(sub: list[str], full: list[str]) -> bool:
    it = iter(full)
    return all(any(item == candidate for candidate in it) for item in sub)


class FilterBehaviorTests(unittest.TestCase):
    def test_empty_query_returns_all_candidates_in_order(self) -> None:
        candidates = ["b", "a", "c", "a"]
        self.assertEqual(filter_candidates("", candidates), candidates)

    def test_matches_contiguous_substring_only(self) -> None:
        candidates = ["project_001", "p_r_o_j", "man_vs_bee"]
        self.assertEqual(filter_candidates("proj", candidates), ["project_001"])

    def test_matching_is_case_sensitive(self) -> None:
        candidates = ["Project_A", "project_b"]
        self.assertEqual(filter_candidates("proj", candidates), ["project_b"])
        self.assertEqual(filter_candidates("Proj", candidates), ["Project_A"])

    def test_result_preserves_candidate_order_without_ranking(self) -> None:
        candidates = ["zz_2024", "2024", "a_2024_long_name"]
        self.assertEqual(filter_candidates("2024", candidates), candidates)

    def test_no_match_returns_empty_list(self) -> None:
        self.assertEqual(filter_candidates("xyz", list(DEFAULT_PROJECTS)), [])

    def test_every_match_contains_query_and_is_ordered_subsequence(self) -> None:
        candidates = list(DEFAULT_PROJECTS)
        for query in ("", "p", "_20", "sandbox", "o", "long", "e_"):
            with self.subTest(query=query):
                result = filter_candidates(query, candidates)
                self.assertTrue(all(query in item for item in result))
                self.assertTrue(_is_subsequence(result, candidates))

    def test_filter_is_idempotent(self) -> None:
        candidates = list(DEFAULT_PROJECTS)
        for query in ("p", "asset", "2024", "nothing"):
            with self.subTest(query=query):
                once = filter_candidates(query, candidates)
                self.assertEqual(filter_candidates(query, once), once)

    def test_filter_does_not_mutate_input(self) -> None:
        candidates = ["a", "b"]
        result = filter_candidates("", candidates)
        result.append("c")
        self.assertEqual(candidates, ["a", "b"])

    def test_substring_index(self) -> None:
        self.assertEqual(substring_index("", "abc"), 0)
        self.assertEqual(substring_index("bc", "abc"), 1)
        self.assertIsNone(substring_index("B", "abc"))


if __name__ == "__main__":
    unittest.main()
