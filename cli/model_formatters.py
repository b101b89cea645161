# cli/model_formatters.py

# anything that renders domain objects for the console

import core.formatters as formatters
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.id} | {student.name:<20} | {student.gender} | {student.class_id}"


def format_student_multiline(student: Student) -> str:
    return student.render_text()


def format_student_summary(student: Student) -> str:
    average = (
        formatters.format_average(student.average_score())
        if student.scores
        else "[NO SCORES]"
    )

    return f"{format_student_oneline(student)} | Average: {average}"
