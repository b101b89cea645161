# tests/conftest.py

import pytest

from core.logging_config import get_logger
from models.roster import Roster
from models.student import Student


@pytest.fixture
def sample_roster():
    return Roster(logger=get_logger("TestRoster"))


@pytest.fixture
def sample_student():
    return Student("1000000001", "张三", "男", "CS01")


@pytest.fixture
def second_student():
    return Student("1000000002", "李四", "女", "CS01")


@pytest.fixture
def full_student():
    student = Student(
        "1000000003",
        "Wang Wu",
        "男",
        "MATH02",
        phone="13812345678",
        email="wangwu@example.com",
    )
    student.set_score("Math", 95)
    student.set_score("English", 88.5)
    return student


@pytest.fixture
def populated_roster(sample_roster, sample_student, second_student, full_student):
    sample_roster.add(full_student)
    sample_roster.add(second_student)
    sample_roster.add(sample_student)
    return sample_roster


@pytest.fixture
def roster_file(tmp_path):
    return str(tmp_path / "students.csv")
