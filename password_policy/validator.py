"""
Password Strength Validation
Runs the password rules and reports every violation, not just the first
"""
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Union
import logging

from .exceptions import UnknownRuleError
from .rules import DEFAULT_RULE_ORDER, RULES, RuleContext, RuleName, UserInfo

logger = logging.getLogger(__name__)

RuleSelector = Union[RuleName, str]


@dataclass(frozen=True)
class Violation:
    """A single rule violation"""
    rule: RuleName
    message: str


def resolve_rule(rule: RuleSelector) -> RuleName:
    """
    Resolve a rule from its enum member or its wire name

    Raises:
        UnknownRuleError: If no rule has that name
    """
    if isinstance(rule, RuleName):
        return rule
    try:
        return RuleName(rule)
    except ValueError:
        raise UnknownRuleError(rule) from None


class PasswordValidator:
    """
    Validate a password against the password rules

    1 - at least one upper and one lower case letter
    2 - at least one numerical digit
    3 - at least one special character (other than a-z, A-Z, 0-9 and space)
    4 - between 6 and 18 characters long
    5 - must not contain the user's email, first name, last name or user name
    6 - must not contain white spaces
    7 - must not contain particular well known passwords
    8 - must not be more than 50% similar to the old password
    9 - must not contain 4 sequential keyboard characters

    -- EXAMPLE --
    validator = PasswordValidator("monkey ", old_password="nilkey")
    validator.validate_subset(["validateCaseSensitivity", "validateOldPassword"])
    -- RESULT --
    ["Password should include at least one upper case letter.",
     "New password is too similar with old one. Please enter another password."]
    """

    def __init__(
        self,
        password: str,
        user_info: Optional[Union[UserInfo, Mapping[str, Optional[str]]]] = None,
        old_password: Optional[str] = None
    ):
        """
        Initialize password validator

        Args:
            password: New password to validate
            user_info: Account identity fields ('email', 'first_name',
                'last_name', 'user_name'); missing fields are skipped
            old_password: Previous password, required for rule #8
        """
        if not isinstance(user_info, UserInfo):
            user_info = UserInfo.from_mapping(user_info)
        self.context = RuleContext(
            password=password,
            user_info=user_info,
            old_password=old_password
        )

    def check(self, rules: Optional[Iterable[RuleSelector]] = None) -> List[Violation]:
        """
        Run rules and return violations tagged with the rule that raised them

        Args:
            rules: Rules to run in the given order; all rules when None

        Returns:
            Ordered list of violations, empty if the password is accepted
        """
        if isinstance(rules, (str, RuleName)):
            rules = [rules]
        selected = DEFAULT_RULE_ORDER if rules is None else [resolve_rule(rule) for rule in rules]

        violations = []
        for rule in selected:
            for message in RULES[rule](self.context):
                violations.append(Violation(rule=rule, message=message))

        logger.debug(f"Password checked against {len(selected)} rules: {len(violations)} violations")
        return violations

    def validate(self) -> List[str]:
        """Validate all rules and return error messages"""
        return [violation.message for violation in self.check()]

    def validate_subset(self, rules: Iterable[RuleSelector]) -> List[str]:
        """
        Validate only the given rules, in the given order

        Args:
            rules: RuleName members or their names (e.g. "validateLength")

        Returns:
            List of error messages

        Raises:
            UnknownRuleError: If a rule name does not exist
        """
        return [violation.message for violation in self.check(rules)]

    def is_valid(self) -> bool:
        """True when the password passes every rule"""
        return not self.validate()


def validate_password(
    password: str,
    user_info: Optional[Union[UserInfo, Mapping[str, Optional[str]]]] = None,
    old_password: Optional[str] = None,
    rules: Optional[Iterable[RuleSelector]] = None
) -> List[str]:
    """
    Convenience function to validate a password

    Args:
        password: Password to validate
        user_info: Optional account identity fields
        old_password: Optional previous password
        rules: Optional subset of rules to run

    Returns:
        List of error messages, empty if the password is accepted
    """
    validator = PasswordValidator(password, user_info, old_password)
    if rules is None:
        return validator.validate()
    return validator.validate_subset(rules)
