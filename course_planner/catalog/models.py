from enum import StrEnum

from pydantic import BaseModel, Field, computed_field


class Course(BaseModel):
    """
    A single course in the catalog.

    Identifiers (the course's own and its prerequisites') are stored in
    normalized form: trimmed and uppercased. The prerequisite list keeps
    the declared order, duplicates and self-references included.
    """

    identifier: str = Field(min_length=1)
    title: str = Field(min_length=1)
    prerequisites: list[str] = Field(default_factory=list)


class DiagnosticKind(StrEnum):
    INSUFFICIENT_FIELDS = 'insufficient fields'
    EMPTY_IDENTIFIER_OR_TITLE = 'empty identifier or title'
    EMPTY_PREREQUISITE = 'empty prerequisite field'
    PREREQUISITE_NOT_FOUND = 'prerequisite not found'


class Diagnostic(BaseModel):
    """Non-fatal finding reported while loading or validating a catalog"""

    kind: DiagnosticKind
    message: str
    line_number: int | None = None
    course: str | None = None
    prerequisite: str | None = None


class LoadResult(BaseModel):
    """Outcome of a successful load"""

    course_count: int
    dangling_count: int
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def summary(self) -> str:
        message = f'Loaded {self.course_count} courses'
        if self.dangling_count:
            message += f' with {self.dangling_count} missing prerequisite reference(s)'
        return f'{message}.'


class CourseSummary(BaseModel):
    identifier: str
    title: str


class PrerequisiteView(BaseModel):
    """A prerequisite reference resolved against the catalog; `title` is None when dangling"""

    identifier: str
    title: str | None = None

    @computed_field
    @property
    def missing(self) -> bool:
        return self.title is None


class CourseDetail(BaseModel):
    """
    Resolved view of one course.

    Prerequisites appear in the order they were declared in the source,
    never reordered or deduplicated.
    """

    identifier: str
    title: str
    prerequisites: list[PrerequisiteView]

    @property
    def prerequisite_identifiers(self) -> list[str]:
        return [p.identifier for p in self.prerequisites]
