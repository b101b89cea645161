# models/roster.py

"""
The Roster model is the in-memory "source of truth" for all student records.

Students are kept in a list in insertion order. The student id is the unique key and is
checked by a linear scan on every insertion. Lookups return live references to the stored
`Student` objects; a reference stays attached to the roster only until the next structural
mutation (add, delete, update, clear, or load), after which the caller should look it up again.

Provides functions for adding, removing, updating, and finding students, recording scores,
sorting by id, and saving and loading the roster as a delimited text file.

Every outcome is reported as a `Response`; expected failures never raise. Audit messages are
written to the injected logger: INFO for successful mutations, WARNING for rejected operations
and skipped data, ERROR for files that cannot be opened.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

import core.formatters as formatters
import core.row_format as row_format
from core.errors import ValidationError
from core.logging_config import get_logger
from core.response import ErrorCode, Response
from models.student import Student


class Roster:

    def __init__(self, logger: logging.Logger | None = None):
        self._students: list[Student] = []
        self._logger: logging.Logger = logger or get_logger("Roster")

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    def count(self) -> int:
        return len(self._students)

    # === persistence and import ===

    def save(self, path: str, include_header: bool = True) -> Response:
        """
        Writes every student to disk in the roster text format, in current roster order.

        Args:
            path (str): The target file path. Existing content is overwritten.
            include_header (bool): If True, a header line precedes the data. Defaults to True.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was written.
                    - False if the file could not be opened or written.
                - detail (str | None):
                    - On success, a confirmation message naming the file.
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.IO_ERROR` if an OSError is raised.
                - status_code (int | None):
                    - 200 on success
                    - 500 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "saved" (int): The number of records written.
                    - On failure:
                        - None

        Notes:
            - This method does not reorder the roster; see `save_sorted()`.
        """
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                if include_header:
                    f.write(row_format.format_header() + "\n")

                for student in self._students:
                    f.write(student.to_row() + "\n")

        except OSError as e:
            self._logger.error(f"Could not open file for saving: {path} ({e})")

            return Response.fail(
                detail=f"Failed to write roster to disk: {e}",
                error=ErrorCode.IO_ERROR,
                status_code=500,
            )

        else:
            self._logger.info(f"Saved {len(self._students)} students to file: {path}")

            return Response.succeed(
                detail=f"Roster successfully saved to {path}.",
                data={
                    "saved": len(self._students),
                },
            )

    def save_sorted(self, path: str) -> Response:
        """
        Sorts the roster by student id and then saves it with a header line.

        Args:
            path (str): The target file path.

        Returns:
            Response: The response from `save()`.

        Notes:
            - The sort is applied to the live roster before writing, so the in-memory order changes even if the write fails.
        """
        self.sort_by_id()

        return self.save(path, include_header=True)

    def load(self, path: str) -> Response:
        """
        Replaces the roster with the records read from a roster text file.

        Args:
            path (str): The file path to read.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if at least one record was loaded.
                    - False if the file could not be read, or if it contained no valid records.
                - detail (str | None):
                    - A summary of the load, or a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the file does not exist.
                    - `ErrorCode.IO_ERROR` if the file exists but could not be read.
                    - `ErrorCode.INVALID_INPUT` if the file was read but no record was valid.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the file does not exist
                    - 500 if the file could not be read
                    - 400 if no record was valid
                - data (dict | None): Payload with the following keys:
                    - "loaded" (int): The number of records loaded.
                    - "skipped" (int): The number of malformed, invalid, or duplicate lines skipped.
                    - On an unreadable file, None.

        Notes:
            - The roster is only cleared once the file has been read; if it cannot be read, the current roster is untouched.
            - Loading is best-effort: a bad line is skipped and counted, and never aborts the rest of the file.
            - Bytes that are not valid UTF-8 only invalidate the line they appear on.
            - A score entry that cannot be parsed is skipped with a warning; the rest of that record is still loaded.
            - A header line is detected and skipped if present; otherwise the first line is treated as data.
        """
        try:
            with open(path, "r", encoding="utf-8-sig", errors="surrogateescape") as f:
                lines = f.read().splitlines()

        except FileNotFoundError as e:
            self._logger.error(f"Could not open file for loading: {path} ({e})")

            return Response.fail(
                detail=f"Roster file not found: {path}",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        except OSError as e:
            self._logger.error(f"Could not open file for loading: {path} ({e})")

            return Response.fail(
                detail=f"Failed to read roster from disk: {e}",
                error=ErrorCode.IO_ERROR,
                status_code=500,
            )

        self.clear()

        if lines and row_format.is_header(lines[0]):
            self._logger.info("Header line detected and skipped.")
            lines = lines[1:]

        loaded = 0
        skipped = 0

        for line in lines:
            if not line.strip():
                continue

            student = self._parse_line(line)

            if student is None:
                skipped += 1
                continue

            self._students.append(student)
            loaded += 1

        data = {
            "loaded": loaded,
            "skipped": skipped,
        }

        if skipped:
            self._logger.warning(
                f"Loaded {loaded} students from file, skipped {skipped} invalid lines: {path}"
            )
        else:
            self._logger.info(f"Loaded {loaded} students from file: {path}")

        if loaded == 0:
            return Response.fail(
                detail=f"No valid student records found in {path}.",
                error=ErrorCode.INVALID_INPUT,
                data=data,
            )

        return Response.succeed(
            detail=f"Loaded {loaded} students ({skipped} skipped) from {path}.",
            data=data,
        )

    def _parse_line(self, line: str) -> Student | None:
        """
        Builds a `Student` from one data line of a roster file.

        Args:
            line (str): A non-blank data line.

        Returns:
            The parsed `Student`, or None if the line must be skipped (undecodable, malformed, invalid, or a duplicate id).

        Notes:
            - Warnings are logged for every skipped line and score entry.
        """
        if not row_format.is_decodable(line):
            self._logger.warning(f"Skipping line that is not valid UTF-8: {line!r}")
            return None

        split = row_format.split_row(line)

        if split is None:
            self._logger.warning(f"Skipping malformed line: {line}")
            return None

        fields, scores_blob = split

        try:
            student = Student(*fields)

        except ValidationError as e:
            self._logger.warning(
                f"Skipping line that failed validation: {fields[0]} - {fields[1]} ({e})"
            )
            return None

        for subject, score_text in row_format.split_score_entries(scores_blob):
            self._parse_score_entry(student, subject, score_text)

        if not student.is_valid():
            self._logger.warning(f"Skipping invalid student: {fields[0]} - {fields[1]}")
            return None

        if self._index_of(student.id) is not None:
            self._logger.warning(f"Skipping duplicate student id: {student.id}")
            return None

        return student

    def _parse_score_entry(
        self, student: Student, subject: str, score_text: str | None
    ) -> None:
        if score_text is None:
            self._logger.warning(
                f"Skipping score entry without a value for {student.id}: {subject}"
            )
            return

        try:
            student.set_score(subject, score_text)

        except ValidationError:
            self._logger.warning(f"Skipping invalid score: {subject}={score_text}")

    # === data accessors ===

    def _index_of(self, student_id: str) -> int | None:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index

        return None

    def get_records(self, predicate: Callable[[Student], bool] | None = None) -> Response:
        """
        Fetches students in roster order, optionally filtered by a predicate.

        Args:
            predicate (Callable[[Student], bool]): Optional filter function. If omitted, all students are returned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True, even if no records were found.
                - data (dict): Payload with the following keys:
                    - "records" (list[Student]): The matching students (may be empty).

        Notes:
            - This method is read-only and does not raise.
        """
        if predicate:
            records = [s for s in self._students if predicate(s)]
        else:
            records = list(self._students)

        return Response.succeed(
            data={
                "records": records,
            }
        )

    def find_by_id(self, student_id: str) -> Response:
        """
        Finds a `Student` by id.

        Args:
            student_id (str): The 10-digit student id.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was found.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The returned record is a live reference, valid until the next structural mutation of the roster.
        """
        index = self._index_of(student_id)

        if index is None:
            return Response.fail(
                detail=f"No student found with id {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": self._students[index],
            },
        )

    def find_by_name_substring(self, name: str) -> Response:
        """
        Finds every `Student` whose name contains the given text.

        Args:
            name (str): The text to search for. An empty string matches every student.

        Returns:
            Response: Always successful, with the following payload:
                - "records" (list[Student]): The matching students in roster order (may be empty).

        Notes:
            - Matching is case-sensitive and performs no normalization.
        """
        return self.get_records(lambda s: name in s.name)

    def find_by_name_exact(self, name: str) -> Response:
        """
        Finds every `Student` whose name equals the given name exactly.

        Returns:
            Response: Always successful, with the following payload:
                - "records" (list[Student]): The matching students in roster order (may be empty).
        """
        return self.get_records(lambda s: s.name == name)

    def scores_report(self, student_id: str) -> str:
        index = self._index_of(student_id)

        if index is None:
            return "Student not found."

        student = self._students[index]

        lines = [
            f"ID: {student.id}",
            f"Name: {student.name}",
        ]

        if not student.scores:
            lines.append("No scores recorded.")
        else:
            lines.append("Scores:")
            lines.extend(formatters.format_score_lines(student.scores))
            lines.append(f"Average: {formatters.format_average(student.average_score())}")

        return "\n".join(lines)

    # === data manipulators ===

    # --- student manipulation ---

    def add(self, student: Student) -> Response:
        """
        Appends a `Student` to the end of the roster.

        Args:
            student (Student): The student to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if the record is incomplete or its id is already in use.
                - detail (str | None):
                    - A human-readable description of the outcome.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if `student.is_valid()` is False.
                    - `ErrorCode.DUPLICATE_RECORD` if another student has the same id.
                - status_code (int | None):
                    - 200 on success
                    - 400 if the record is incomplete
                    - 409 if the id is already in use
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                    - On failure:
                        - None

        Notes:
            - The uniqueness check is a linear scan of the roster.
        """
        if not student.is_valid():
            self._logger.warning("Failed to add student: student record is incomplete.")

            return Response.fail(
                detail="Student record is incomplete.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        if self._index_of(student.id) is not None:
            self._logger.warning(
                f"Failed to add student: id {student.id} already exists."
            )

            return Response.fail(
                detail=f"A student with the id '{student.id}' already exists.",
                error=ErrorCode.DUPLICATE_RECORD,
                status_code=409,
            )

        self._students.append(student)
        self._logger.info(f"Added student: {student.id} - {student.name}")

        return Response.succeed(
            detail="Student successfully added to the roster.",
            data={
                "record": student,
            },
        )

    def delete_by_id(self, student_id: str) -> Response:
        """
        Removes the `Student` with the given id.

        Args:
            student_id (str): The id of the student to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed.
                    - False if no student has that id.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has that id.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student` object.
                    - On failure:
                        - None

        Notes:
            - The relative order of the remaining students is unchanged.
        """
        index = self._index_of(student_id)

        if index is None:
            self._logger.warning(
                f"Failed to delete student: id {student_id} does not exist."
            )

            return Response.fail(
                detail=f"No student found with id {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        removed = self._students.pop(index)
        self._logger.info(f"Deleted student: {student_id}")

        return Response.succeed(
            detail="Student successfully removed from the roster.",
            data={
                "record": removed,
            },
        )

    def delete_by_name(self, name: str, selection: int | None = None) -> Response:
        """
        Removes a `Student` by exact name, asking the caller to disambiguate duplicate names.

        Args:
            name (str): The exact name of the student to remove.
            selection (int | None): A 1-based index into the candidate list, used only when several students share the name.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a student was removed.
                    - False if no student matches, if several match and no selection was given, or if the selection is out of range.
                - detail (str | None):
                    - A human-readable description of the outcome.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has that name.
                    - `ErrorCode.AMBIGUOUS_MATCH` if several students match and `selection` is None.
                    - `ErrorCode.INVALID_INPUT` if `selection` is out of range.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 409 if a selection is required
                    - 400 if the selection is out of range
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student` object.
                    - On `AMBIGUOUS_MATCH`:
                        - "candidates" (list[Student]): The matching students in roster order.
                    - Otherwise:
                        - None

        Notes:
            - With a single match, `selection` is ignored and the student is removed directly.
            - This method never prompts; the caller presents the candidates and calls again with a selection.
        """
        candidates = self.find_by_name_exact(name).data["records"]

        if not candidates:
            self._logger.warning(f"Failed to delete student: name {name} does not exist.")

            return Response.fail(
                detail=f"No student found with the name {name}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if len(candidates) == 1:
            target = candidates[0]

        elif selection is None:
            return Response.fail(
                detail=f"Found {len(candidates)} students named {name}; a selection is required.",
                error=ErrorCode.AMBIGUOUS_MATCH,
                status_code=409,
                data={
                    "candidates": candidates,
                },
            )

        elif not 1 <= selection <= len(candidates):
            self._logger.warning("Failed to delete student: invalid selection.")

            return Response.fail(
                detail=f"Selection must be between 1 and {len(candidates)}.",
                error=ErrorCode.INVALID_INPUT,
            )

        else:
            target = candidates[selection - 1]

        self._students.remove(target)

        suffix = f" (selection {selection})" if len(candidates) > 1 else ""
        self._logger.info(f"Deleted student: {name}{suffix}")

        return Response.succeed(
            detail="Student successfully removed from the roster.",
            data={
                "record": target,
            },
        )

    def update(self, student_id: str, new_student: Student) -> Response:
        """
        Replaces the `Student` with the given id by a new record.

        Args:
            student_id (str): The id of the student to replace.
            new_student (Student): The replacement record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was replaced.
                    - False if no student has that id, if the replacement is incomplete, or if its id belongs to another student.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has `student_id`.
                    - `ErrorCode.VALIDATION_FAILED` if `new_student.is_valid()` is False.
                    - `ErrorCode.DUPLICATE_RECORD` if `new_student.id` is used by a different student.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 409 on a duplicate id
                    - 400 otherwise
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The new `Student` object.
                    - On failure:
                        - None

        Notes:
            - The whole record is replaced in place, scores included; nothing is merged from the old record.
        """
        index = self._index_of(student_id)

        if index is None:
            self._logger.warning(
                f"Failed to update student: id {student_id} does not exist."
            )

            return Response.fail(
                detail=f"No student found with id {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if not new_student.is_valid():
            self._logger.warning(
                "Failed to update student: new student record is incomplete."
            )

            return Response.fail(
                detail="Student record is incomplete.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        other_index = self._index_of(new_student.id)

        if other_index is not None and other_index != index:
            self._logger.warning(
                f"Failed to update student: id {new_student.id} already exists."
            )

            return Response.fail(
                detail=f"A student with the id '{new_student.id}' already exists.",
                error=ErrorCode.DUPLICATE_RECORD,
                status_code=409,
            )

        self._students[index] = new_student
        self._logger.info(f"Updated student: {student_id}")

        return Response.succeed(
            detail="Student successfully updated.",
            data={
                "record": new_student,
            },
        )

    def clear(self) -> None:
        self._students.clear()
        self._logger.info("Cleared all students.")

    def sort_by_id(self) -> None:
        # ids are fixed-width digit strings, so string order equals numeric order
        self._students.sort(key=lambda s: s.id)
        self._logger.info("Sorted students by id.")

    # --- score manipulation ---

    def set_score(self, student_id: str, subject: str, score: float) -> Response:
        """
        Records a score for the `Student` with the given id.

        Args:
            student_id (str): The id of the student.
            subject (str): The subject name.
            score (float): The score, within [0, 100].

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the score was recorded.
                    - False if no student has that id or the score is rejected.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has that id.
                    - `ErrorCode.VALIDATION_FAILED` if the subject or score is invalid.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 if the score is rejected
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student` object.
                    - On failure:
                        - None
        """
        index = self._index_of(student_id)

        if index is None:
            self._logger.warning(
                f"Failed to set score: id {student_id} does not exist."
            )

            return Response.fail(
                detail=f"No student found with id {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        student = self._students[index]

        try:
            student.set_score(subject, score)

        except ValidationError as e:
            self._logger.warning(
                f"Failed to set score: {student_id} - {subject} ({e.reason})"
            )

            return Response.fail(
                detail=f"Invalid score: {e.reason}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        self._logger.info(f"Set score: {student_id} - {subject} = {score}")

        return Response.succeed(
            detail=f"Score recorded for {student.name}.",
            data={
                "record": student,
            },
        )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(tuple(self._students))

    def __repr__(self) -> str:
        return f"Roster({len(self._students)} students)"
