"""Turns raw catalog lines into normalized course records"""

from pydantic import BaseModel, Field

from .models import Course, Diagnostic, DiagnosticKind

DELIMITER = ','


class ParsedLine(BaseModel):
    """
    Result of parsing one non-blank line.

    `course` is None when the line was rejected; the rejection is then the
    first entry of `diagnostics`.
    """

    line_number: int
    course: Course | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def rejected(self) -> bool:
        return self.course is None


def normalize_identifier(text: str) -> str:
    """Trim and uppercase a course identifier."""
    return text.strip().upper()


def split_fields(line: str) -> list[str]:
    """Split on the delimiter, keeping empty fields (`'a,,b'` has three)."""
    return line.split(DELIMITER)


def _reject(line_number: int, kind: DiagnosticKind, message: str) -> ParsedLine:
    return ParsedLine(
        line_number=line_number,
        diagnostics=[
            Diagnostic(
                kind=kind,
                message=f'Format warning (line {line_number}): {message}.',
                line_number=line_number,
            )
        ],
    )


def parse_line(line: str, line_number: int, *, strict: bool = False) -> ParsedLine | None:
    """
    Parse one line of the catalog source.

    Parameters
    ----------
    line : str
        Raw line, with or without its trailing newline.
    line_number : int
        1-based position of the line in the source, used in diagnostics.
    strict : bool, default=False
        Reject lines with empty prerequisite fields instead of dropping them.

    Returns
    -------
    ParsedLine | None
        None for blank lines, otherwise the parsed course or its rejection.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    fields = split_fields(trimmed)
    if len(fields) < 2:
        return _reject(line_number, DiagnosticKind.INSUFFICIENT_FIELDS, 'fewer than 2 fields')

    identifier = normalize_identifier(fields[0])
    title = fields[1].strip()
    if not identifier or not title:
        return _reject(
            line_number,
            DiagnosticKind.EMPTY_IDENTIFIER_OR_TITLE,
            'empty course number or title',
        )

    prerequisites = [normalize_identifier(field) for field in fields[2:]]
    empty_count = prerequisites.count('')
    diagnostics: list[Diagnostic] = []

    if empty_count:
        if strict:
            return _reject(
                line_number,
                DiagnosticKind.EMPTY_PREREQUISITE,
                f'{empty_count} empty prerequisite field(s) for course {identifier}',
            )
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.EMPTY_PREREQUISITE,
                message=(
                    f'Format note (line {line_number}): dropped {empty_count} '
                    f'empty prerequisite field(s) for course {identifier}.'
                ),
                line_number=line_number,
                course=identifier,
            )
        )

    return ParsedLine(
        line_number=line_number,
        course=Course(
            identifier=identifier,
            title=title,
            prerequisites=[p for p in prerequisites if p],
        ),
        diagnostics=diagnostics,
    )
