"""
Password policy exceptions
"""


class PasswordPolicyError(Exception):
    """Base class for password policy errors"""


class UnknownRuleError(PasswordPolicyError, ValueError):
    """Raised when a rule is requested by a name that does not exist"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown password rule: {name}")


class ConfigurationError(PasswordPolicyError, ValueError):
    """Raised when no valid password can be generated with the given settings"""
