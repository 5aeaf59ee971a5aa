"""
Password Rules
The nine independent password strength rules and their registry
"""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional
import re

from .keyboard import find_sequence
from .similarity import similarity_percent

MIN_LENGTH = 6
MAX_LENGTH = 18
# Highest allowed similarity (percent) between old and new passwords
MAX_SIMILARITY = 50

# Known weak passwords, rejected anywhere inside a password
PARTICULAR_WORDS = (
    'password', 'password1',
    '123456', '1234567',
    '12345678', '123123',
    'abc123', 'qwerty',
    'monkey', 'letmein',
    'dragon', '111111',
    'baseball', 'iloveyou',
    'trustno1', 'sunshine',
    'master', 'welcome',
    'shadow', 'ashley',
    'football', 'jesus',
    'michael', 'ninja',
    'mustang',
)

UPPER_CASE_MESSAGE = "Password should include at least one upper case letter."
LOWER_CASE_MESSAGE = "Password should include at least one lower case letter."
NUMERIC_MESSAGE = "Password should have at least one numerical digit."
SPECIAL_CHARACTER_MESSAGE = "Password should have at least 1 special character."
TOO_SHORT_MESSAGE = f"Password should be at least {MIN_LENGTH} characters long."
TOO_LONG_MESSAGE = f"Password should be maximum {MAX_LENGTH} characters long."
EMAIL_MESSAGE = "Password must not contains the user's account email."
FIRST_NAME_MESSAGE = "Password must not contains the user's entire account first name."
LAST_NAME_MESSAGE = "Password must not contains the user's entire account last name."
USER_NAME_MESSAGE = "Password must not contains the user's entire account user name."
WHITE_SPACE_MESSAGE = "Password cannot contain white spaces."
PARTICULAR_WORD_MESSAGE = "You are using a word or sequence that is not allowed, please try another password."
OLD_PASSWORD_MESSAGE = "New password is too similar with old one. Please enter another password."
SEQUENCE_MESSAGE = "Password cannot contain 4 sequenced characters."

_UPPER_CASE = re.compile(r'[A-Z]')
_LOWER_CASE = re.compile(r'[a-z]')
_DIGIT = re.compile(r'[0-9]')
_SPECIAL_CHARACTER = re.compile(r'[^a-zA-Z0-9 ]')
_WHITE_SPACE = re.compile(r'\s')


class RuleName(Enum):
    """Password rules, valued by their stable wire names"""
    CASE_SENSITIVITY = "validateCaseSensitivity"
    NUMERIC_CHARACTER = "validateNumericCharacter"
    SPECIAL_CHARACTER = "validateSpecialCharacter"
    LENGTH = "validateLength"
    USER_INFO = "validateUserInfo"
    WHITE_SPACES = "validateWhiteSpaces"
    PARTICULAR_WORDS = "validateParticularWords"
    OLD_PASSWORD = "validateOldPassword"
    CHARACTERS_SEQUENCE = "validateCharactersSequence"


@dataclass(frozen=True)
class UserInfo:
    """Account identity fields a password must not contain"""
    email: str = ''
    first_name: str = ''
    last_name: str = ''
    user_name: str = ''

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "UserInfo":
        """
        Build user info from a mapping such as a profile record

        Unknown keys are ignored. None counts as empty; any other value
        is converted with str().
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{
            key: '' if value is None else str(value)
            for key, value in data.items() if key in known
        })


@dataclass(frozen=True)
class RuleContext:
    """Inputs shared by every rule for one validation call"""
    password: str
    user_info: UserInfo = UserInfo()
    old_password: Optional[str] = None


def _contains(password: str, part: str) -> bool:
    """Case-insensitive substring check; an empty part never matches"""
    return bool(part) and part.lower() in password.lower()


# rule #1
def validate_case_sensitivity(context: RuleContext) -> List[str]:
    """Require at least one upper case and one lower case letter"""
    errors = []
    if not _UPPER_CASE.search(context.password):
        errors.append(UPPER_CASE_MESSAGE)
    if not _LOWER_CASE.search(context.password):
        errors.append(LOWER_CASE_MESSAGE)
    return errors


# rule #2
def validate_numeric_character(context: RuleContext) -> List[str]:
    """Require at least one digit"""
    if not _DIGIT.search(context.password):
        return [NUMERIC_MESSAGE]
    return []


# rule #3 - a plain space is not a special character
def validate_special_character(context: RuleContext) -> List[str]:
    """Require at least one character that is not a letter, digit or space"""
    if not _SPECIAL_CHARACTER.search(context.password):
        return [SPECIAL_CHARACTER_MESSAGE]
    return []


# rule #4
def validate_length(context: RuleContext) -> List[str]:
    """Require a length between MIN_LENGTH and MAX_LENGTH"""
    errors = []
    if len(context.password) < MIN_LENGTH:
        errors.append(TOO_SHORT_MESSAGE)
    if len(context.password) > MAX_LENGTH:
        errors.append(TOO_LONG_MESSAGE)
    return errors


# rule #5
def validate_user_info(context: RuleContext) -> List[str]:
    """
    Reject passwords containing the user's email, names or user name

    The last name is checked token by token and then as a whole, so a
    single-word last name found in the password is reported twice.
    """
    password = context.password
    user_info = context.user_info
    errors = []

    email_local_part = user_info.email.split('@', 1)[0]
    if _contains(password, email_local_part):
        errors.append(EMAIL_MESSAGE)

    if any(_contains(password, part) for part in user_info.first_name.split()):
        errors.append(FIRST_NAME_MESSAGE)

    if any(_contains(password, part) for part in user_info.last_name.split()):
        errors.append(LAST_NAME_MESSAGE)
    if _contains(password, user_info.last_name):
        errors.append(LAST_NAME_MESSAGE)

    # user name (for admins)
    if _contains(password, user_info.user_name):
        errors.append(USER_NAME_MESSAGE)

    return errors


# rule #6
def validate_white_spaces(context: RuleContext) -> List[str]:
    """Reject passwords containing any whitespace"""
    if _WHITE_SPACE.search(context.password):
        return [WHITE_SPACE_MESSAGE]
    return []


# rule #7
def validate_particular_words(context: RuleContext) -> List[str]:
    """Reject passwords containing a commonly used password"""
    if any(_contains(context.password, word) for word in PARTICULAR_WORDS):
        return [PARTICULAR_WORD_MESSAGE]
    return []


# rule #8 - skipped unless an old password was given; "" counts as not given
def validate_old_password(context: RuleContext) -> List[str]:
    """Reject passwords too similar to the previous one"""
    if not context.old_password:
        return []
    if similarity_percent(context.password, context.old_password) > MAX_SIMILARITY:
        return [OLD_PASSWORD_MESSAGE]
    return []


# rule #9
def validate_characters_sequence(context: RuleContext) -> List[str]:
    """Reject passwords containing a run of neighbouring keyboard keys"""
    if find_sequence(context.password) is not None:
        return [SEQUENCE_MESSAGE]
    return []


RULES: Dict[RuleName, Callable[[RuleContext], List[str]]] = {
    RuleName.CASE_SENSITIVITY: validate_case_sensitivity,
    RuleName.NUMERIC_CHARACTER: validate_numeric_character,
    RuleName.SPECIAL_CHARACTER: validate_special_character,
    RuleName.LENGTH: validate_length,
    RuleName.USER_INFO: validate_user_info,
    RuleName.WHITE_SPACES: validate_white_spaces,
    RuleName.PARTICULAR_WORDS: validate_particular_words,
    RuleName.OLD_PASSWORD: validate_old_password,
    RuleName.CHARACTERS_SEQUENCE: validate_characters_sequence,
}

# Order of the full battery; the old password rule runs last
DEFAULT_RULE_ORDER = (
    RuleName.CASE_SENSITIVITY,
    RuleName.NUMERIC_CHARACTER,
    RuleName.SPECIAL_CHARACTER,
    RuleName.LENGTH,
    RuleName.USER_INFO,
    RuleName.WHITE_SPACES,
    RuleName.PARTICULAR_WORDS,
    RuleName.CHARACTERS_SEQUENCE,
    RuleName.OLD_PASSWORD,
)

# Rule numbers as published in the password policy
RULE_NUMBERS: Dict[RuleName, int] = {
    RuleName.CASE_SENSITIVITY: 1,
    RuleName.NUMERIC_CHARACTER: 2,
    RuleName.SPECIAL_CHARACTER: 3,
    RuleName.LENGTH: 4,
    RuleName.USER_INFO: 5,
    RuleName.WHITE_SPACES: 6,
    RuleName.PARTICULAR_WORDS: 7,
    RuleName.OLD_PASSWORD: 8,
    RuleName.CHARACTERS_SEQUENCE: 9,
}


def get_rule_description(rule: RuleName) -> str:
    """
    Get human-readable description of a rule

    Args:
        rule: Rule enum

    Returns:
        Description string
    """
    descriptions = {
        RuleName.CASE_SENSITIVITY: "Password should include at least one upper and one lower case letter",
        RuleName.NUMERIC_CHARACTER: "Password should have at least one numerical digit",
        RuleName.SPECIAL_CHARACTER: "Password should have at least 1 special character (other than a-z, A-Z, 0-9 and space)",
        RuleName.LENGTH: f"Password should be {MIN_LENGTH} to {MAX_LENGTH} characters long",
        RuleName.USER_INFO: "Password must not contain the user's email, first name, last name or user name",
        RuleName.WHITE_SPACES: "Password must not contain any white spaces",
        RuleName.PARTICULAR_WORDS: "Password must not contain commonly used passwords",
        RuleName.OLD_PASSWORD: f"Old and new passwords must not be more than {MAX_SIMILARITY}% similar",
        RuleName.CHARACTERS_SEQUENCE: "Password must not contain 4 sequential keyboard characters",
    }

    return descriptions.get(rule, rule.value)


def list_rules() -> List[Dict[str, object]]:
    """
    List all rules with their numbers and descriptions

    Returns:
        List of dicts ordered by rule number
    """
    return [
        {
            "rule": rule.value,
            "number": RULE_NUMBERS[rule],
            "description": get_rule_description(rule),
        }
        for rule in sorted(RuleName, key=RULE_NUMBERS.get)
    ]
