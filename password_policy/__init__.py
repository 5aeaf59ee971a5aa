"""
Password policy package initialization
"""
from .exceptions import PasswordPolicyError, UnknownRuleError, ConfigurationError
from .keyboard import KEYBOARD_MAP, SEQUENTIAL_WORDS, sequential_words, find_sequence
from .similarity import similar_text, similarity_percent
from .rules import RuleName, UserInfo, PARTICULAR_WORDS, MIN_LENGTH, MAX_LENGTH, list_rules
from .validator import PasswordValidator, Violation, validate_password
from .generator import generate_password, default_alphabet, DEFAULT_EXCLUDE

__all__ = [
    'PasswordPolicyError',
    'UnknownRuleError',
    'ConfigurationError',
    'KEYBOARD_MAP',
    'SEQUENTIAL_WORDS',
    'sequential_words',
    'find_sequence',
    'similar_text',
    'similarity_percent',
    'RuleName',
    'UserInfo',
    'PARTICULAR_WORDS',
    'MIN_LENGTH',
    'MAX_LENGTH',
    'list_rules',
    'PasswordValidator',
    'Violation',
    'validate_password',
    'generate_password',
    'default_alphabet',
    'DEFAULT_EXCLUDE',
]
