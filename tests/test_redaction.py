"""Tests for the redaction engine and its rule set."""

import pytest

from threadle.redaction import (
    DEFAULT_RULES,
    PLACEHOLDER,
    RedactionEngine,
    RedactionRule,
    redact,
    restore,
)
from threadle.pipeline.fallback import fallback_puzzle


SAMPLE_COMMENTS = [
    "",
    "Quick brown fox jumps",
    "The cat sat on the mat",
    "I have 3 cats and 2 dogs, AMA.",
    "OP should post this on r/tifu, it's the best thread I've read all week!!",
    "u/spez gave me 1,000 karma???",
    "Edge [___] case with a literal placeholder",
    "🎉 the 💥 émigré naïve café",
    "\n\n   \t",
    "[___][___]",
]


class TestRedactionEngine:
    """Tests for RedactionEngine.redact."""

    def test_empty_text(self):
        record = redact("")

        assert record.masked_text == ""
        assert record.removed_tokens == []
        assert record.original_text == ""

    def test_text_without_matches(self):
        record = redact("Quick brown fox jumps")

        assert record.masked_text == "Quick brown fox jumps"
        assert record.removed_tokens == []

    def test_basic_redaction(self):
        record = redact("The cat sat on the mat")

        assert record.masked_text == "[___] cat sat [___] [___] mat"
        assert record.removed_tokens == ["The", "on", "the"]
        assert record.original_text == "The cat sat on the mat"

    def test_tokens_ordered_by_position_across_categories(self):
        # number, auxiliary verb and function word are different rules
        record = redact("I have 3 cats")

        assert record.removed_tokens == ["I", "have", "3"]
        assert record.masked_text == "[___] [___] [___] cats"

    def test_earlier_rule_wins_over_longer_span(self):
        # "the" is claimed by the function-word rule before "r/the" is considered
        record = redact("see r/the")

        assert record.removed_tokens == ["the"]
        assert record.masked_text == "see r/[___]"

    def test_cross_reference_mentions(self):
        record = redact("Ask u/spez about r/AskReddit")

        assert record.removed_tokens == ["u/spez", "about", "r/AskReddit"]

    def test_literal_placeholder_in_source_is_masked(self):
        record = redact("Edge [___] case")

        assert record.removed_tokens == ["[___]"]
        assert record.masked_text == "Edge [___] case"
        assert restore(record.masked_text, record.removed_tokens) == "Edge [___] case"

    def test_contraction_keeps_suffix(self):
        record = redact("it's fine")

        assert record.masked_text == "[___]'s fine"
        assert record.removed_tokens == ["it"]

    def test_irregular_characters_pass_through(self):
        record = redact("🎉 the 💥")

        assert record.masked_text == "🎉 [___] 💥"
        assert record.removed_tokens == ["the"]

    def test_matching_is_case_insensitive(self):
        record = redact("THE Reddit MOD")

        assert record.removed_tokens == ["THE", "Reddit", "MOD"]

    def test_placeholder_count_matches_tokens(self):
        for text in SAMPLE_COMMENTS:
            record = redact(text)
            assert record.masked_text.count(PLACEHOLDER) == len(record.removed_tokens)

    def test_round_trip(self):
        texts = SAMPLE_COMMENTS + fallback_puzzle().original_comments
        for text in texts:
            record = redact(text)
            assert restore(record.masked_text, record.removed_tokens) == text

    def test_redaction_is_deterministic(self):
        text = "OP should post this on r/tifu, it's the best thread I've read all week!!"

        assert redact(text) == redact(text)

    def test_redact_all_preserves_order(self):
        engine = RedactionEngine()
        records = engine.redact_all(["the first", "a second"])

        assert [r.original_text for r in records] == ["the first", "a second"]

    def test_custom_rule_list(self):
        engine = RedactionEngine(rules=[RedactionRule("numbers", r"\b\d+\b", 0)])
        record = engine.redact("the 12 apostles")

        assert record.removed_tokens == ["12"]
        assert record.masked_text == "the [___] apostles"

    def test_custom_placeholder(self):
        engine = RedactionEngine(placeholder="<?>")
        record = engine.redact("the end")

        assert record.masked_text == "<?> end"


class TestRedactionRules:
    """Each category can be exercised on its own."""

    RULES = {rule.name: rule for rule in DEFAULT_RULES}

    @pytest.mark.parametrize("name,text,expected", [
        ("placeholder", "x [___] y", ["[___]"]),
        ("function_words", "She and they", ["She", "they"]),
        ("prepositions_conjunctions", "Walk into town after lunch", ["into", "after"]),
        ("auxiliary_verbs", "We should have gone", ["should", "have"]),
        ("generic_nouns", "My friend bought a car", ["friend", "car"]),
        ("cross_references", "Ask u/spez on r/help", ["u/spez", "r/help"]),
        ("numbers", "Top 10 of 2024", ["10", "2024"]),
        ("platform_jargon", "OP deserves karma for this post", ["OP", "karma", "post"]),
    ])
    def test_rule_matches_its_category(self, name, text, expected):
        rule = self.RULES[name]
        tokens = [text[start:end] for start, end in rule.spans(text)]

        assert tokens == expected

    def test_rules_ignore_partial_words(self):
        rule = self.RULES["function_words"]

        assert list(rule.spans("theatre anthem")) == []

    def test_placeholder_rule_runs_first(self):
        assert DEFAULT_RULES[0].name == "placeholder"

    def test_placeholder_is_inert_for_word_rules(self):
        for rule in DEFAULT_RULES[1:]:
            assert list(rule.spans(PLACEHOLDER)) == []
