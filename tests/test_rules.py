"""
tests/test_rules.py
===================
Tests for the individual rules in password_policy.rules.
"""
import pytest

from password_policy.rules import (
    RULES, RuleContext, RuleName, UserInfo, list_rules, get_rule_description,
    validate_case_sensitivity, validate_numeric_character, validate_special_character,
    validate_length, validate_user_info, validate_white_spaces, validate_particular_words,
    validate_old_password, validate_characters_sequence,
    UPPER_CASE_MESSAGE, LOWER_CASE_MESSAGE, NUMERIC_MESSAGE, SPECIAL_CHARACTER_MESSAGE,
    TOO_SHORT_MESSAGE, TOO_LONG_MESSAGE, EMAIL_MESSAGE, FIRST_NAME_MESSAGE,
    LAST_NAME_MESSAGE, USER_NAME_MESSAGE, WHITE_SPACE_MESSAGE, PARTICULAR_WORD_MESSAGE,
    OLD_PASSWORD_MESSAGE, SEQUENCE_MESSAGE,
)


def ctx(password, old_password=None, **user_info):
    return RuleContext(password=password, user_info=UserInfo(**user_info), old_password=old_password)


class TestCaseSensitivity:

    def test_mixed_case_passes(self):
        assert validate_case_sensitivity(ctx("aB")) == []

    def test_missing_upper(self):
        assert validate_case_sensitivity(ctx("abc1!")) == [UPPER_CASE_MESSAGE]

    def test_missing_lower(self):
        assert validate_case_sensitivity(ctx("ABC1!")) == [LOWER_CASE_MESSAGE]

    def test_both_missing(self):
        assert validate_case_sensitivity(ctx("123!")) == [UPPER_CASE_MESSAGE, LOWER_CASE_MESSAGE]

    def test_non_ascii_letters_do_not_count(self):
        assert validate_case_sensitivity(ctx("ÄÖÜäöü")) == [UPPER_CASE_MESSAGE, LOWER_CASE_MESSAGE]


class TestNumericAndSpecial:

    def test_digit_present(self):
        assert validate_numeric_character(ctx("abc7")) == []

    def test_digit_missing(self):
        assert validate_numeric_character(ctx("abc")) == [NUMERIC_MESSAGE]

    @pytest.mark.parametrize("password", ["abc!", "abc_", "ab#c", "abc\t", "abcé"])
    def test_special_present(self, password):
        assert validate_special_character(ctx(password)) == []

    @pytest.mark.parametrize("password", ["abc", "Abc 123", "", " "])
    def test_special_missing(self, password):
        # a plain space is not a special character
        assert validate_special_character(ctx(password)) == [SPECIAL_CHARACTER_MESSAGE]


class TestLength:

    @pytest.mark.parametrize("password", ["a" * 6, "a" * 12, "a" * 18])
    def test_within_bounds(self, password):
        assert validate_length(ctx(password)) == []

    def test_too_short(self):
        assert validate_length(ctx("a" * 5)) == [TOO_SHORT_MESSAGE]

    def test_empty_is_too_short(self):
        assert validate_length(ctx("")) == [TOO_SHORT_MESSAGE]

    def test_too_long(self):
        assert validate_length(ctx("a" * 19)) == [TOO_LONG_MESSAGE]

    def test_messages_text(self):
        assert TOO_SHORT_MESSAGE == "Password should be at least 6 characters long."
        assert TOO_LONG_MESSAGE == "Password should be maximum 18 characters long."


class TestUserInfo:

    def test_no_user_info(self):
        assert validate_user_info(ctx("johnsmith99")) == []

    def test_email_local_part(self):
        assert validate_user_info(ctx("Jdoe#123", email="jdoe@example.com")) == [EMAIL_MESSAGE]

    def test_email_domain_is_ignored(self):
        assert validate_user_info(ctx("example#123", email="jdoe@example.com")) == []

    def test_email_without_at_sign(self):
        assert validate_user_info(ctx("xJDOEx", email="jdoe")) == [EMAIL_MESSAGE]

    def test_first_name_case_insensitive(self):
        assert validate_user_info(ctx("johnsmith99", first_name="John")) == [FIRST_NAME_MESSAGE]

    def test_first_name_any_token_reported_once(self):
        result = validate_user_info(ctx("maryjane#1", first_name="Mary Jane"))
        assert result == [FIRST_NAME_MESSAGE]

    def test_single_token_last_name_reported_twice(self):
        result = validate_user_info(ctx("xSmith9!", last_name="Smith"))
        assert result == [LAST_NAME_MESSAGE, LAST_NAME_MESSAGE]

    def test_last_name_token_only(self):
        result = validate_user_info(ctx("Dyke#2024x", last_name="van Dyke"))
        assert result == [LAST_NAME_MESSAGE]

    def test_whole_multi_token_last_name(self):
        result = validate_user_info(ctx("van dyke!1", last_name="van Dyke"))
        assert result == [LAST_NAME_MESSAGE, LAST_NAME_MESSAGE]

    def test_user_name(self):
        assert validate_user_info(ctx("MyAdmin#1", user_name="admin")) == [USER_NAME_MESSAGE]

    def test_all_fields_in_order(self):
        result = validate_user_info(ctx(
            "jd-john-smith-root",
            email="jd@example.com",
            first_name="John",
            last_name="Smith",
            user_name="root",
        ))
        assert result == [
            EMAIL_MESSAGE, FIRST_NAME_MESSAGE, LAST_NAME_MESSAGE, LAST_NAME_MESSAGE, USER_NAME_MESSAGE,
        ]

    def test_empty_fields_never_match(self):
        assert validate_user_info(ctx("anything", email="@example.com", first_name=" ")) == []


class TestUserInfoModel:

    def test_defaults_are_empty(self):
        info = UserInfo()
        assert (info.email, info.first_name, info.last_name, info.user_name) == ("", "", "", "")

    def test_from_mapping_ignores_unknown_keys(self):
        info = UserInfo.from_mapping({"first_name": "John", "phone": "555"})
        assert info == UserInfo(first_name="John")

    def test_from_mapping_treats_none_as_empty(self):
        assert UserInfo.from_mapping({"email": None}) == UserInfo()

    def test_from_mapping_none(self):
        assert UserInfo.from_mapping(None) == UserInfo()

    def test_from_mapping_converts_non_string_values(self):
        info = UserInfo.from_mapping({"first_name": 123, "user_name": 0})
        assert info == UserInfo(first_name="123", user_name="0")

    def test_non_string_name_is_checked(self):
        info = UserInfo.from_mapping({"first_name": 2024})
        assert validate_user_info(RuleContext("Ab!2024x", info)) == [FIRST_NAME_MESSAGE]


class TestWhiteSpacesAndWords:

    @pytest.mark.parametrize("password", ["a b", "a\tb", "a\nb", " "])
    def test_white_space(self, password):
        assert validate_white_spaces(ctx(password)) == [WHITE_SPACE_MESSAGE]

    def test_no_white_space(self):
        assert validate_white_spaces(ctx("a_b")) == []

    def test_particular_word_case_insensitive(self):
        assert validate_particular_words(ctx("MyMonkey#7")) == [PARTICULAR_WORD_MESSAGE]

    def test_particular_word_reported_once(self):
        assert validate_particular_words(ctx("Password123456")) == [PARTICULAR_WORD_MESSAGE]

    def test_no_particular_word(self):
        assert validate_particular_words(ctx("Ab1!ef")) == []


class TestOldPassword:

    def test_too_similar(self):
        assert validate_old_password(ctx("abcdef", old_password="abcdeg")) == [OLD_PASSWORD_MESSAGE]

    def test_not_similar(self):
        assert validate_old_password(ctx("abcdef", old_password="zzzzzz")) == []

    def test_exactly_fifty_percent_passes(self):
        # "ab" of 4 + 4 characters = 50%
        assert validate_old_password(ctx("abxy", old_password="abzw")) == []

    @pytest.mark.parametrize("old_password", [None, ""])
    def test_skipped_without_old_password(self, old_password):
        assert validate_old_password(ctx("", old_password=old_password)) == []


class TestCharactersSequence:

    def test_sequence_case_insensitive(self):
        assert validate_characters_sequence(ctx("xxASDFxx")) == [SEQUENCE_MESSAGE]

    def test_several_sequences_reported_once(self):
        assert validate_characters_sequence(ctx("qwer1234")) == [SEQUENCE_MESSAGE]

    def test_no_sequence(self):
        assert validate_characters_sequence(ctx("Ab1!ef")) == []


class TestRegistry:

    def test_every_rule_registered(self):
        assert set(RULES) == set(RuleName)

    def test_wire_names(self):
        assert RuleName("validateLength") is RuleName.LENGTH
        assert RuleName.OLD_PASSWORD.value == "validateOldPassword"

    def test_list_rules_ordered_by_number(self):
        rules = list_rules()
        assert [r["number"] for r in rules] == list(range(1, 10))
        assert rules[0]["rule"] == "validateCaseSensitivity"
        assert rules[7]["rule"] == "validateOldPassword"
        assert rules[8]["rule"] == "validateCharactersSequence"

    def test_every_rule_has_description(self):
        for rule in RuleName:
            assert get_rule_description(rule) != rule.value

    @pytest.mark.parametrize("rule", list(RuleName))
    def test_every_rule_function_is_documented(self, rule):
        assert RULES[rule].__doc__
