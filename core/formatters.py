# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_divider(width: int = 20) -> str:
    return "-" * width


# === field formatters ===


def format_optional(value: str, placeholder: str = "[NOT SET]") -> str:
    return value if value else placeholder


# === score formatters ===


def format_score(score: float) -> str:
    return format(score, "g")


def format_score_lines(scores: dict[str, float], indent: str = "  ") -> list[str]:
    return [
        f"{indent}- {subject}: {format_score(score)}"
        for subject, score in scores.items()
    ]


def format_average(average: float) -> str:
    return f"{average:.2f}"
