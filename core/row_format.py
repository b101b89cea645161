# core/row_format.py

"""
Line-oriented text format used to persist a roster.

One record per line, fields joined by commas in a fixed order:

    id,name,gender,class_id,phone,email,scores

The trailing `scores` field is itself a delimited list (`Math:95;English:88`)
or the `no-scores` marker. Values are never escaped, so a delimiter inside a
field corrupts the row.

Pure string helpers only; this module must never import from models.
"""

FIELD_DELIMITER = ","
SCORE_DELIMITER = ";"
SUBJECT_DELIMITER = ":"

NO_SCORES_MARKER = "no-scores"
# markers written by older releases of the roster file
LEGACY_NO_SCORES_MARKERS = ("无成绩",)

HEADER_FIELDS = ("id", "name", "gender", "class_id", "phone", "email", "scores")
HEADER_ID_TOKENS = ("id", "学号")

SCALAR_FIELD_COUNT = 6


# === header ===


def format_header() -> str:
    return FIELD_DELIMITER.join(HEADER_FIELDS)


def is_header(line: str) -> bool:
    """
    Checks whether a line is a roster header.

    Args:
        line (str): The first line read from a roster file.

    Returns:
        True if the first field is one of the known "id" column labels.

    Notes:
        - Only the first field is inspected, so a data line whose name happens to contain "id" is not mistaken for a header.
    """
    first_field = line.split(FIELD_DELIMITER, 1)[0].strip()
    return first_field in HEADER_ID_TOKENS


# === rows ===


def format_row(fields: list[str], scores: dict[str, float]) -> str:
    return FIELD_DELIMITER.join([*fields, format_scores(scores)])


def is_decodable(line: str) -> bool:
    # lines are read with errors="surrogateescape"; undecodable bytes become lone surrogates
    try:
        line.encode("utf-8")

    except UnicodeEncodeError:
        return False

    return True


def split_row(line: str) -> tuple[list[str], str] | None:
    """
    Splits a data line into its six scalar fields and the raw scores blob.

    Args:
        line (str): A single data line, without the trailing newline.

    Returns:
        A `(fields, scores_blob)` tuple, or None if the line has fewer than seven fields.

    Notes:
        - Everything after the sixth comma belongs to the scores blob.
    """
    parts = line.split(FIELD_DELIMITER, SCALAR_FIELD_COUNT)

    if len(parts) <= SCALAR_FIELD_COUNT:
        return None

    return parts[:SCALAR_FIELD_COUNT], parts[SCALAR_FIELD_COUNT]


# === scores ===


def format_score(score: float) -> str:
    # shortest text that reads back to the same float; whole numbers drop ".0"
    text = repr(float(score))
    return text[:-2] if text.endswith(".0") else text


def format_scores(scores: dict[str, float]) -> str:
    if not scores:
        return NO_SCORES_MARKER

    return SCORE_DELIMITER.join(
        f"{subject}{SUBJECT_DELIMITER}{format_score(score)}"
        for subject, score in scores.items()
    )


def is_no_scores(blob: str) -> bool:
    blob = blob.strip()
    return blob == "" or blob == NO_SCORES_MARKER or blob in LEGACY_NO_SCORES_MARKERS


def split_score_entries(blob: str) -> list[tuple[str, str | None]]:
    """
    Splits a scores blob into `(subject, score_text)` pairs.

    Args:
        blob (str): The raw scores field of a data line.

    Returns:
        A list of pairs in the order they appear. `score_text` is None when the entry has no `:` separator.

    Notes:
        - Entries are split on the first `:` only.
        - Empty entries (e.g. from a trailing `;`) are dropped.
        - Numeric parsing is left to the caller so that a bad entry can be skipped on its own.
    """
    if is_no_scores(blob):
        return []

    entries = []

    for entry in blob.strip().split(SCORE_DELIMITER):
        if not entry:
            continue

        subject, separator, score_text = entry.partition(SUBJECT_DELIMITER)
        entries.append((subject, score_text if separator else None))

    return entries
