# models/student.py

"""
Represents a single student record held in a roster.

Stores identifying information (a 10-digit student id, name, gender, and class),
optional contact details (phone and email), and a mapping of subject names to scores.

Includes functionality for:
- Validating every field eagerly, on construction and on each property assignment
- Recording, reading, and averaging per-subject scores
- Rendering a human-readable summary of the record
- Serializing to a single line of the roster file format

Validation failures raise `ValidationError`, naming the offending field and the rule
it violated. A record built through the constructor or setters therefore always holds
well-formed values; the only way to obtain an invalid record is `Student.blank()`.
"""

from __future__ import annotations

import math
import re
from enum import Enum

import core.formatters as formatters
from core.errors import ValidationError
from core.row_format import format_row

ID_PATTERN = re.compile(r"\d{10}", re.ASCII)
PHONE_PATTERN = re.compile(r"1[3-9]\d{9}", re.ASCII)
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20
CLASS_ID_MIN_LENGTH = 3

SCORE_MIN = 0.0
SCORE_MAX = 100.0


class Gender(str, Enum):
    MALE = "男"
    FEMALE = "女"


class Student:

    def __init__(
        self,
        id: str,
        name: str,
        gender: str,
        class_id: str,
        phone: str = "",
        email: str = "",
    ):
        self._id: str = Student.validate_id(id)
        self._name: str = Student.validate_name(name)
        self._gender: str = Student.validate_gender(gender)
        self._class_id: str = Student.validate_class_id(class_id)
        self._phone: str = Student.validate_phone(phone) if phone else ""
        self._email: str = Student.validate_email(email) if email else ""
        self._scores: dict[str, float] = {}

    @classmethod
    def blank(cls) -> Student:
        """
        Returns a record with every field empty and no scores.

        Notes:
            - Bypasses validation; the result is never `is_valid()` and will be rejected by `Roster.add()`.
        """
        student = cls.__new__(cls)
        student._id = ""
        student._name = ""
        student._gender = ""
        student._class_id = ""
        student._phone = ""
        student._email = ""
        student._scores = {}
        return student

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, id: str) -> None:
        self._id = Student.validate_id(id)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = Student.validate_name(name)

    @property
    def gender(self) -> str:
        return self._gender

    @gender.setter
    def gender(self, gender: str) -> None:
        self._gender = Student.validate_gender(gender)

    @property
    def class_id(self) -> str:
        return self._class_id

    @class_id.setter
    def class_id(self, class_id: str) -> None:
        self._class_id = Student.validate_class_id(class_id)

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, phone: str) -> None:
        self._phone = Student.validate_phone(phone) if phone else ""

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, email: str) -> None:
        self._email = Student.validate_email(email) if email else ""

    @property
    def scores(self) -> dict[str, float]:
        return self._scores.copy()

    def is_valid(self) -> bool:
        return all((self._id, self._name, self._gender, self._class_id))

    # === persistence ===

    def to_row(self) -> str:
        fields = [
            self._id,
            self._name,
            self._gender,
            self._class_id,
            self._phone,
            self._email,
        ]
        return format_row(fields, self._scores)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._gender}, {self._class_id}, {self._phone}, {self._email})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._id}, class: {self._class_id})"

    # === data accessors ===

    # --- score methods ---

    def get_score(self, subject: str) -> float | None:
        return self._scores.get(subject)

    def has_score(self, subject: str) -> bool:
        return subject in self._scores

    def average_score(self) -> float:
        if not self._scores:
            return 0.0

        return sum(self._scores.values()) / len(self._scores)

    def render_text(self) -> str:
        lines = [
            f"ID: {self._id}",
            f"Name: {self._name}",
            f"Gender: {self._gender}",
            f"Class: {self._class_id}",
            f"Phone: {formatters.format_optional(self._phone)}",
            f"Email: {formatters.format_optional(self._email)}",
        ]

        if self._scores:
            lines.append("Scores:")
            lines.extend(formatters.format_score_lines(self._scores))

        return "\n".join(lines)

    # === data manipulators ===

    # --- score methods ---

    def set_score(self, subject: str, score: float | str) -> None:
        """
        Records a score for a subject, overwriting any existing score for it.

        Args:
            subject (str): The subject name. Must be non-empty.
            score (float | str): The score, within the inclusive range [0, 100]. Decimal text is converted.

        Raises:
            ValidationError: If the subject is empty or the score is out of range. The record is left unchanged.
        """
        if not subject:
            raise ValidationError("subject", "Subject name must not be empty.")

        score = Student.validate_score(score)

        self._scores[subject] = score

    # === data validators ===

    @staticmethod
    def validate_id(id: str) -> str:
        """
        Validates a student id.

        Args:
            id: The candidate id.

        Returns:
            The id, unchanged, if valid.

        Raises:
            ValidationError: If the id is empty or is not exactly 10 decimal digits.
        """
        if not id:
            raise ValidationError("id", "Student id must not be empty.")

        if not ID_PATTERN.fullmatch(id):
            raise ValidationError("id", "Student id must be exactly 10 digits.")

        return id

    @staticmethod
    def validate_name(name: str) -> str:
        """
        Validates a student name.

        Length is counted in characters (Unicode code points), so "张三" has a length of 2.

        Raises:
            ValidationError: If the name is empty or not between 2 and 20 characters long.
        """
        if not name:
            raise ValidationError("name", "Name must not be empty.")

        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            raise ValidationError(
                "name",
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long.",
            )

        return name

    @staticmethod
    def validate_gender(gender: str) -> str:
        if gender not in {g.value for g in Gender}:
            raise ValidationError(
                "gender",
                f"Gender must be '{Gender.MALE.value}' or '{Gender.FEMALE.value}'.",
            )

        return gender

    @staticmethod
    def validate_class_id(class_id: str) -> str:
        if not class_id:
            raise ValidationError("class_id", "Class id must not be empty.")

        if len(class_id) < CLASS_ID_MIN_LENGTH:
            raise ValidationError(
                "class_id",
                f"Class id must be at least {CLASS_ID_MIN_LENGTH} characters long.",
            )

        return class_id

    @staticmethod
    def validate_phone(phone: str) -> str:
        if not PHONE_PATTERN.fullmatch(phone):
            raise ValidationError(
                "phone",
                "Phone number must be 11 digits, starting with 1 followed by a digit from 3 to 9.",
            )

        return phone

    @staticmethod
    def validate_email(email: str) -> str:
        if not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(
                "email",
                "Invalid input. Email must be a valid address with one @ and a domain.",
            )

        return email

    @staticmethod
    def validate_score(score: float | str) -> float:
        """
        Validates a score value.

        Args:
            score (float | str): A number, or its decimal text as typed or read from a roster file.

        Raises:
            ValidationError: If the score is not a number or lies outside [0, 100]. NaN is rejected.

        Notes:
            - Text with digit-grouping underscores (e.g. "1_0") is rejected even though `float()` accepts it.
        """
        if isinstance(score, str) and "_" in score:
            raise ValidationError("score", f"Score must be a number, got '{score}'.")

        try:
            score = float(score)

        except (TypeError, ValueError):
            raise ValidationError("score", f"Score must be a number, got '{score}'.")

        if math.isnan(score) or not SCORE_MIN <= score <= SCORE_MAX:
            raise ValidationError("score", "Score must be between 0 and 100.")

        return score
