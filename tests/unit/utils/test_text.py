"""Unit tests for slug generation."""

import re

from qrmenu.core.constants import MAX_SLUG_LENGTH, SLUG_PATTERN
from qrmenu.core.utils.text import generate_slug


class TestGenerateSlug:
    """Tests for generate_slug."""

    def test_simple_name(self):
        assert generate_slug("Coffee Kings") == "coffee-kings"

    def test_punctuation_removed(self):
        assert generate_slug("Espresso Shot's") == "espresso-shots"

    def test_accents_folded(self):
        assert generate_slug("Café Crème #2") == "cafe-creme-2"

    def test_separators_collapsed(self):
        assert generate_slug("  The__Daily -- Grind  ") == "the-daily-grind"

    def test_truncated_without_trailing_hyphen(self):
        slug = generate_slug("a" * 62 + " bcd")

        assert len(slug) <= MAX_SLUG_LENGTH
        assert not slug.endswith("-")

    def test_result_matches_slug_pattern(self):
        for name in ["Coffee Kings", "Bäckerei Müller", "24/7 Diner!"]:
            assert re.fullmatch(SLUG_PATTERN, generate_slug(name))

    def test_no_usable_characters(self):
        assert generate_slug("☕☕☕") == ""
