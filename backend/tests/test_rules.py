"""
Unit tests for the lint rules.

Each rule is exercised on its own; cross-rule behavior lives in test_engine.py.
"""

import pytest

from xlf_checker.rules.encoding_rule import EncodingRule
from xlf_checker.rules.models import RuleName
from xlf_checker.rules.patterns import (
    count_percent_variables,
    count_plural_forms,
    has_bare_brace_variable,
    has_malformed_plural_bars,
)
from xlf_checker.rules.plural_bar_rule import PluralBarRule
from xlf_checker.rules.plural_count_rule import PluralCountRule
from xlf_checker.rules.unprefixed_variable_rule import UnprefixedVariableRule
from xlf_checker.rules.variable_count_rule import VariableCountRule


# --- Encoding Rule ---

class TestEncodingRule:
    """Tests for leaked HTML entities."""

    @pytest.fixture
    def rule(self):
        return EncodingRule()

    def test_name(self, rule):
        assert rule.name == RuleName.ENCODING_ERRORS

    def test_amp_in_source(self, rule, unit):
        assert rule.check([unit("Tom &amp; Jerry", "Tom et Jerry")]) == {"u1"}

    def test_nbsp_in_target(self, rule, unit):
        assert rule.check([unit("Hello world", "Bonjour&nbsp;monde")]) == {"u1"}

    def test_bare_nbsp_fragment(self, rule, unit):
        assert rule.check([unit("a nbsp; b", "a b")]) == {"u1"}

    def test_clean_unit(self, rule, unit):
        assert rule.check([unit("Tom & Jerry", "Tom et Jerry")]) == set()

    def test_case_sensitive(self, rule, unit):
        assert rule.check([unit("&AMP;", "NBSP;")]) == set()

    def test_only_violators_reported(self, rule, unit):
        units = [
            unit("clean", "propre", unit_id="a"),
            unit("&amp;", "&", unit_id="b"),
        ]
        assert rule.check(units) == {"b"}

    def test_empty_input(self, rule):
        assert rule.check([]) == set()


# --- Variable Count Rule ---

class TestVariableCountRule:
    """Tests for %{...} count comparison."""

    @pytest.fixture
    def rule(self):
        return VariableCountRule()

    def test_missing_variable(self, rule, unit):
        assert rule.check([unit("Hello %{name}", "Bonjour")]) == {"u1"}

    def test_extra_variable(self, rule, unit):
        assert rule.check([unit("Hello", "Bonjour %{name}")]) == {"u1"}

    def test_reordered_variables_pass(self, rule, unit):
        assert rule.check([unit("%{a} and %{b}", "%{b} et %{a}")]) == set()

    def test_renamed_variable_passes(self, rule, unit):
        assert rule.check([unit("Hello %{name}", "Bonjour %{nom}")]) == set()

    def test_repeated_variable_counts_each_occurrence(self, rule, unit):
        assert rule.check([unit("%{n} of %{n}", "%{n}")]) == {"u1"}

    def test_bare_brace_not_counted(self, rule, unit):
        assert rule.check([unit("Hello {name}", "Bonjour")]) == set()

    def test_count_helper_is_non_greedy(self):
        assert count_percent_variables("%{a}-%{b}") == 2
        assert count_percent_variables("%{}") == 1
        assert count_percent_variables("% {a}") == 0


# --- Unprefixed Variable Rule ---

class TestUnprefixedVariableRule:
    """Tests for brace tokens missing their % prefix."""

    @pytest.fixture
    def rule(self):
        return UnprefixedVariableRule()

    def test_bare_brace_in_source(self, rule, unit):
        assert rule.check([unit("Hello {name}", "Bonjour %{name}")]) == {"u1"}

    def test_bare_brace_in_target(self, rule, unit):
        assert rule.check([unit("Hello %{name}", "Bonjour {name}")]) == {"u1"}

    def test_prefixed_variables_pass(self, rule, unit):
        assert rule.check([unit("Hello %{name}", "Bonjour %{name}")]) == set()

    def test_no_braces_pass(self, rule, unit):
        assert rule.check([unit("Hello", "Bonjour")]) == set()

    def test_helper(self):
        assert has_bare_brace_variable("x {y}")
        assert has_bare_brace_variable("%{a} {b}")
        assert not has_bare_brace_variable("%{a} %{b}")
        assert not has_bare_brace_variable("only { open")


# --- Plural Bar Rule ---

class TestPluralBarRule:
    """Tests for malformed plural delimiters."""

    @pytest.fixture
    def rule(self):
        return PluralBarRule()

    @pytest.mark.parametrize("text", [
        "one|other",
        "one||other",
        "one|||other",
        "one|||||other",
        "one||||||||other",
        "one||||two|three",
    ])
    def test_malformed(self, rule, unit, text):
        assert rule.check([unit(text, "ok")]) == {"u1"}
        assert rule.check([unit("ok", text)]) == {"u1"}

    @pytest.mark.parametrize("text", [
        "no plural",
        "one||||other",
        "one||||two||||three",
        "||||leading",
    ])
    def test_well_formed(self, rule, unit, text):
        assert rule.check([unit(text, text)]) == set()

    def test_helper(self):
        assert has_malformed_plural_bars("a|b")
        assert not has_malformed_plural_bars("a||||b")


# --- Plural Count Rule ---

class TestPluralCountRule:
    """Tests for plural form count comparison."""

    @pytest.fixture
    def rule(self):
        return PluralCountRule()

    def test_matching_forms(self, rule, unit):
        assert rule.check([unit("one||||many", "un seul||||plusieurs")]) == set()

    def test_missing_form(self, rule, unit):
        assert rule.check([unit("one||||many", "un seul")]) == {"u1"}

    def test_blank_forms_ignored(self, rule, unit):
        assert rule.check([unit("one||||many||||", "un||||   ||||plusieurs")]) == set()

    def test_malformed_unit_excluded(self, rule, unit):
        assert rule.check([unit("one|||other", "un||||deux||||trois")]) == set()

    def test_malformed_target_excluded(self, rule, unit):
        assert rule.check([unit("one||||many", "un|||||plusieurs")]) == set()

    def test_count_helper(self):
        assert count_plural_forms("a||||b||||c") == 3
        assert count_plural_forms("") == 0
        assert count_plural_forms("   ") == 0
        assert count_plural_forms("single") == 1
