# core/errors.py

"""
Exception types raised by roster models.
"""


class ValidationError(ValueError):
    """
    Raised when a `Student` field or score fails its format rule.

    Attributes:
        field (str): The name of the offending field (e.g. "id", "phone", "score").
        reason (str): A human-readable description of the violated rule.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
