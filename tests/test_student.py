# tests/test_student.py

import math

import pytest

from core.errors import ValidationError
from models.student import Gender, Student


def test_student_fields(full_student):
    assert full_student.id == "1000000003"
    assert full_student.name == "Wang Wu"
    assert full_student.gender == "男"
    assert full_student.class_id == "MATH02"
    assert full_student.phone == "13812345678"
    assert full_student.email == "wangwu@example.com"


def test_student_optional_fields_default_empty(sample_student):
    assert sample_student.phone == ""
    assert sample_student.email == ""
    assert sample_student.scores == {}
    assert sample_student.is_valid()


def test_gender_values():
    assert Student("1000000001", "Ann", Gender.FEMALE.value, "CS01").gender == "女"


# === id validation ===


def test_id_with_ten_digits_is_accepted():
    assert Student("0123456789", "张三", "男", "CS01").id == "0123456789"


@pytest.mark.parametrize("bad_id", ["", "123456789", "12345678901", "12345abcde", " 123456789"])
def test_invalid_id_is_rejected(bad_id):
    with pytest.raises(ValidationError) as exc_info:
        Student(bad_id, "张三", "男", "CS01")

    assert exc_info.value.field == "id"


def test_non_ascii_digits_are_rejected():
    with pytest.raises(ValidationError):
        Student("١٢٣٤٥٦٧٨٩٠", "张三", "男", "CS01")


# === name validation ===


def test_name_length_counts_characters():
    assert Student("1000000001", "张三", "男", "CS01").name == "张三"
    assert Student("1000000001", "a" * 20, "男", "CS01").name == "a" * 20


@pytest.mark.parametrize("bad_name", ["", "张", "a" * 21])
def test_invalid_name_is_rejected(bad_name):
    with pytest.raises(ValidationError) as exc_info:
        Student("1000000001", bad_name, "男", "CS01")

    assert exc_info.value.field == "name"


# === remaining field validation ===


def test_invalid_gender_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Student("1000000001", "张三", "M", "CS01")

    assert exc_info.value.field == "gender"


@pytest.mark.parametrize("bad_class", ["", "CS"])
def test_invalid_class_id_is_rejected(bad_class):
    with pytest.raises(ValidationError) as exc_info:
        Student("1000000001", "张三", "男", bad_class)

    assert exc_info.value.field == "class_id"


@pytest.mark.parametrize("bad_phone", ["12345678901", "1381234567", "138123456789", "23812345678"])
def test_invalid_phone_is_rejected(bad_phone):
    with pytest.raises(ValidationError) as exc_info:
        Student("1000000001", "张三", "男", "CS01", phone=bad_phone)

    assert exc_info.value.field == "phone"


@pytest.mark.parametrize("bad_email", ["plainaddress", "a@b", "a@b.c", "@example.com", "a b@example.com"])
def test_invalid_email_is_rejected(bad_email):
    with pytest.raises(ValidationError) as exc_info:
        Student("1000000001", "张三", "男", "CS01", email=bad_email)

    assert exc_info.value.field == "email"


def test_validation_order_reports_first_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        Student("bad", "x", "?", "")

    assert exc_info.value.field == "id"


def test_validation_error_message_names_field():
    error = ValidationError("phone", "bad format")

    assert str(error) == "phone: bad format"
    assert error.reason == "bad format"
    assert isinstance(error, ValueError)


# === setters ===


def test_setters_validate_and_overwrite(full_student):
    full_student.name = "Zhao Liu"
    full_student.class_id = "PHY03"
    full_student.gender = "女"

    assert full_student.name == "Zhao Liu"
    assert full_student.class_id == "PHY03"
    assert full_student.gender == "女"
    assert full_student.get_score("Math") == 95


def test_failed_setter_leaves_value_unchanged(sample_student):
    with pytest.raises(ValidationError):
        sample_student.id = "123"

    assert sample_student.id == "1000000001"


def test_empty_phone_and_email_clear_the_field(full_student):
    full_student.phone = ""
    full_student.email = ""

    assert full_student.phone == ""
    assert full_student.email == ""


# === scores ===


def test_set_and_get_score(sample_student):
    sample_student.set_score("Math", 95)

    assert sample_student.get_score("Math") == 95
    assert sample_student.has_score("Math")


def test_get_missing_score_returns_none(sample_student):
    assert sample_student.get_score("History") is None


def test_zero_score_is_distinct_from_missing(sample_student):
    sample_student.set_score("Art", 0)

    assert sample_student.get_score("Art") == 0
    assert sample_student.get_score("Art") is not None


def test_set_score_is_idempotent(sample_student):
    sample_student.set_score("Math", 80)
    sample_student.set_score("Math", 80)

    assert sample_student.scores == {"Math": 80}
    assert sample_student.average_score() == 80


def test_set_score_overwrites(sample_student):
    sample_student.set_score("Math", 80)
    sample_student.set_score("Math", 60)

    assert sample_student.get_score("Math") == 60


@pytest.mark.parametrize("score", [0, 100, 59.5])
def test_boundary_scores_are_accepted(sample_student, score):
    sample_student.set_score("Math", score)

    assert sample_student.get_score("Math") == score


@pytest.mark.parametrize("score", [-0.1, 100.5, math.nan])
def test_out_of_range_score_is_rejected(sample_student, score):
    with pytest.raises(ValidationError) as exc_info:
        sample_student.set_score("Math", score)

    assert exc_info.value.field == "score"
    assert sample_student.scores == {}


def test_empty_subject_is_rejected(sample_student):
    with pytest.raises(ValidationError) as exc_info:
        sample_student.set_score("", 90)

    assert exc_info.value.field == "subject"


def test_average_score_of_no_scores_is_zero(sample_student):
    assert sample_student.average_score() == 0


def test_average_score(sample_student):
    sample_student.set_score("A", 80)
    sample_student.set_score("B", 90)

    assert sample_student.average_score() == 85


def test_scores_property_is_a_copy(sample_student):
    sample_student.scores["Math"] = 50

    assert sample_student.scores == {}


@pytest.mark.parametrize("text", ["1_0", "9_5.5"])
def test_score_text_with_underscores_is_rejected(sample_student, text):
    with pytest.raises(ValidationError) as exc_info:
        sample_student.set_score("Math", text)

    assert exc_info.value.field == "score"
    assert sample_student.scores == {}


def test_score_text_is_converted(sample_student):
    sample_student.set_score("Math", "88.5")

    assert sample_student.get_score("Math") == 88.5


# === validity and rendering ===


def test_blank_student_is_not_valid():
    assert not Student.blank().is_valid()


def test_render_text_with_placeholders(sample_student):
    assert sample_student.render_text() == (
        "ID: 1000000001\n"
        "Name: 张三\n"
        "Gender: 男\n"
        "Class: CS01\n"
        "Phone: [NOT SET]\n"
        "Email: [NOT SET]"
    )


def test_render_text_with_scores(full_student):
    text = full_student.render_text()

    assert "Phone: 13812345678" in text
    assert "Email: wangwu@example.com" in text
    assert text.endswith("Scores:\n  - Math: 95\n  - English: 88.5")


def test_student_to_row(full_student, sample_student):
    assert full_student.to_row() == (
        "1000000003,Wang Wu,男,MATH02,13812345678,wangwu@example.com,Math:95;English:88.5"
    )
    assert sample_student.to_row() == "1000000001,张三,男,CS01,,,no-scores"


def test_student_to_str(sample_student):
    assert str(sample_student) == "STUDENT: 张三 - (ID: 1000000001, class: CS01)"
