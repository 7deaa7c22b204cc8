"""Tests for string similarity and skill comparison helpers."""

import pytest


class TestNormalizeSkill:
    """Test normalize_skill and canonical_skill."""

    def test_normalize_skill_lowercases_and_strips(self):
        """normalize_skill should lowercase and trim skill names."""
        from src.matching.similarity import normalize_skill

        assert normalize_skill("  Python  ") == "python"

    def test_normalize_skill_collapses_whitespace(self):
        """Inner whitespace should collapse to single spaces."""
        from src.matching.similarity import normalize_skill

        assert normalize_skill("Machine   Learning") == "machine learning"

    def test_normalize_skill_preserves_special_characters(self):
        """Characters like '+', '#' and '.' should survive."""
        from src.matching.similarity import normalize_skill

        assert normalize_skill("C++") == "c++"
        assert normalize_skill("C#") == "c#"
        assert normalize_skill("Node.js") == "node.js"

    def test_canonical_skill_maps_aliases(self):
        """Common aliases should map onto one canonical name."""
        from src.matching.similarity import canonical_skill

        assert canonical_skill("JS") == "javascript"
        assert canonical_skill("Golang") == "go"
        assert canonical_skill("JS", aliases=False) == "js"


class TestLevenshtein:
    """Test levenshtein_distance and string_similarity."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("", "", 0),
            ("abc", "", 3),
            ("", "abc", 3),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("same", "same", 0),
        ],
    )
    def test_levenshtein_distance_known_values(self, a, b, expected):
        """Distance should match textbook values."""
        from src.matching.similarity import levenshtein_distance

        assert levenshtein_distance(a, b) == expected

    def test_levenshtein_distance_is_symmetric(self):
        """Argument order should not matter."""
        from src.matching.similarity import levenshtein_distance

        assert levenshtein_distance("postgres", "postgresql") == levenshtein_distance(
            "postgresql", "postgres"
        )

    def test_string_similarity_normalizes_by_longest(self):
        """Similarity is 1 - distance / longest length."""
        from src.matching.similarity import string_similarity

        assert string_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_string_similarity_of_empty_strings_is_one(self):
        """Two empty strings are identical."""
        from src.matching.similarity import string_similarity

        assert string_similarity("", "") == 1.0

    def test_string_similarity_bounds(self):
        """Similarity stays within [0, 1]."""
        from src.matching.similarity import string_similarity

        assert string_similarity("abc", "xyz") == 0.0
        assert string_similarity("abc", "abc") == 1.0


class TestCompareSkills:
    """Test compare_skills classification."""

    def test_exact_matches_are_case_insensitive(self):
        """Exact membership should ignore case."""
        from src.matching.similarity import compare_skills

        result = compare_skills(["Go", "SQL"], ["go", "sql", "python"])

        assert result.exact == ["Go", "SQL"]
        assert result.fuzzy == []
        assert result.missing == []

    def test_similar_skill_counts_as_fuzzy(self):
        """A near-miss above the threshold is a fuzzy match."""
        from src.matching.similarity import compare_skills

        # "typescript" vs "typescripts": similarity 10/11 > 0.7
        result = compare_skills(["TypeScripts"], ["typescript"])

        assert result.exact == []
        assert result.fuzzy == ["TypeScripts"]

    def test_dissimilar_skill_is_missing(self):
        """Unrelated skills should be reported missing."""
        from src.matching.similarity import compare_skills

        result = compare_skills(["Rust"], ["python"])

        assert result.missing == ["Rust"]

    def test_threshold_is_strict(self):
        """Similarity equal to the threshold does not count."""
        from src.matching.similarity import compare_skills, string_similarity

        similarity = string_similarity("abcdefghij", "abcdefgxyz")
        assert similarity == pytest.approx(0.7)

        result = compare_skills(["abcdefghij"], ["abcdefgxyz"], threshold=similarity)

        assert result.missing == ["abcdefghij"]

    def test_duplicate_required_skills_count_once(self):
        """Required skills behave as a set."""
        from src.matching.similarity import compare_skills

        result = compare_skills(["Python", "python", " PYTHON "], ["python"])

        assert result.exact == ["Python"]
        assert result.total == 1

    def test_aliases_produce_exact_matches(self):
        """Aliases resolve before comparison."""
        from src.matching.similarity import compare_skills

        assert compare_skills(["JavaScript"], ["JS"]).exact == ["JavaScript"]
        assert compare_skills(["JavaScript"], ["JS"], aliases=False).exact == []


class TestTextContainsEither:
    """Test text_contains_either."""

    def test_containment_in_either_direction(self):
        """Either string may contain the other."""
        from src.matching.similarity import text_contains_either

        assert text_contains_either("Bachelor", "Bachelor of Science") is True
        assert text_contains_either("Bachelor of Science", "bachelor") is True

    def test_blank_values_never_match(self):
        """Blank strings should not match everything."""
        from src.matching.similarity import text_contains_either

        assert text_contains_either("", "anything") is False
        assert text_contains_either("anything", "   ") is False
