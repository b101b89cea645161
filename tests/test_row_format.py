# tests/test_row_format.py

import core.row_format as row_format


def test_format_header():
    assert row_format.format_header() == "id,name,gender,class_id,phone,email,scores"


def test_is_header():
    assert row_format.is_header("id,name,gender,class_id,phone,email,scores")
    assert row_format.is_header("学号,姓名,性别,班级,电话,邮箱,成绩信息")
    assert not row_format.is_header("1000000001,David,男,CS01,,,no-scores")


def test_format_row():
    fields = ["1000000001", "张三", "男", "CS01", "", ""]

    assert row_format.format_row(fields, {}) == "1000000001,张三,男,CS01,,,no-scores"
    assert row_format.format_row(fields, {"Math": 95.0}) == "1000000001,张三,男,CS01,,,Math:95"


def test_split_row():
    fields, blob = row_format.split_row("1000000001,张三,男,CS01,,,Math:95;English:88")

    assert fields == ["1000000001", "张三", "男", "CS01", "", ""]
    assert blob == "Math:95;English:88"


def test_split_row_keeps_extra_commas_in_scores_blob():
    _, blob = row_format.split_row("1000000001,张三,男,CS01,,,Math:95,extra")

    assert blob == "Math:95,extra"


def test_split_short_row_is_none():
    assert row_format.split_row("1000000001,张三,男,CS01,,") is None


def test_format_score():
    assert row_format.format_score(95.0) == "95"
    assert row_format.format_score(88.5) == "88.5"
    assert row_format.format_score(0.0) == "0"


def test_no_scores_markers():
    assert row_format.is_no_scores("no-scores")
    assert row_format.is_no_scores("无成绩")
    assert row_format.is_no_scores("")
    assert not row_format.is_no_scores("Math:95")


def test_split_score_entries():
    assert row_format.split_score_entries("Math:95;English:abc;Art;;") == [
        ("Math", "95"),
        ("English", "abc"),
        ("Art", None),
    ]


def test_split_score_entries_on_first_colon_only():
    assert row_format.split_score_entries("Lab:1:2") == [("Lab", "1:2")]


def test_split_score_entries_with_marker_is_empty():
    assert row_format.split_score_entries("no-scores") == []


def test_format_score_keeps_full_precision():
    assert row_format.format_score(100 / 3) == "33.333333333333336"
    assert float(row_format.format_score(100 / 3)) == 100 / 3


def test_is_decodable():
    assert row_format.is_decodable("1000000001,张三,男,CS01,,,no-scores")
    assert not row_format.is_decodable(b"\xff\xfe".decode("utf-8", "surrogateescape"))
