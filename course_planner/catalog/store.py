import logging
import os
import threading
from collections.abc import Callable, Iterable
from typing import TypeAlias

from course_planner.log import diagnostics_logger

from .errors import (
    CatalogNotLoadedError,
    CourseNotFoundError,
    EmptyCatalogError,
    EmptyIdentifierError,
    SourceUnavailableError,
)
from .models import (
    Course,
    CourseDetail,
    CourseSummary,
    Diagnostic,
    DiagnosticKind,
    LoadResult,
    PrerequisiteView,
)
from .parser import normalize_identifier, parse_line

logger = logging.getLogger(__name__)

CatalogSource: TypeAlias = str | os.PathLike[str] | Iterable[str]
DiagnosticsSink: TypeAlias = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default diagnostics sink"""
    if diagnostic.kind is DiagnosticKind.EMPTY_PREREQUISITE:
        diagnostics_logger.debug(diagnostic.message)
    else:
        diagnostics_logger.warning(diagnostic.message)


class CatalogStore:
    """
    In-memory course catalog keyed by normalized identifier.

    A new store is empty and unloaded. `load` replaces the whole dataset:
    it resets the store first and only installs the new records once the
    whole source has been parsed and validated, so a failed load leaves the
    store empty. All public operations hold the same lock, which serializes
    a load against concurrent queries.
    """

    def __init__(self, diagnostics_sink: DiagnosticsSink | None = None, strict: bool = False):
        self._courses: dict[str, Course] = {}
        self._loaded: bool = False
        self._lock = threading.Lock()
        self._sink: DiagnosticsSink = diagnostics_sink or log_diagnostic
        self._strict: bool = strict

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        """Number of stored courses; 0 whenever the store is not loaded."""
        with self._lock:
            return len(self._courses)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return isinstance(identifier, str) and normalize_identifier(identifier) in self._courses

    def get(self, identifier: str) -> Course | None:
        """Stored record for `identifier`, or None; raises CatalogNotLoadedError before a load."""
        with self._lock:
            self._require_loaded()
            return self._courses.get(normalize_identifier(identifier))

    def load(self, source: CatalogSource) -> LoadResult:
        """
        Clear the store and repopulate it from `source`.

        Parameters
        ----------
        source : str | os.PathLike | Iterable[str]
            Path to a catalog file, or any iterable of text lines.

        Returns
        -------
        LoadResult
            Number of courses stored, number of dangling prerequisite
            references, and every diagnostic reported along the way.

        Raises
        ------
        SourceUnavailableError
            The path could not be opened or read.
        EmptyCatalogError
            No line produced a valid course record.

        Anything raised by an iterable source or by the diagnostics sink
        propagates unchanged; the store is left empty in every failure case.
        """
        with self._lock:
            self._reset()
            diagnostics: list[Diagnostic] = []

            if isinstance(source, (str, os.PathLike)):
                path = os.fspath(source)
                try:
                    with open(path, encoding='utf-8-sig') as file:
                        courses = self._ingest(file, diagnostics)
                except (OSError, UnicodeDecodeError) as e:
                    error = SourceUnavailableError(path, getattr(e, 'strerror', None) or str(e))
                    diagnostics_logger.error('Error: %s', error)
                    raise error from e
            else:
                courses = self._ingest(source, diagnostics)

            if not courses:
                error = EmptyCatalogError()
                diagnostics_logger.error('Warning: %s', error)
                raise error

            dangling = self._validate(courses)
            diagnostics.extend(dangling)
            self._courses = courses
            self._loaded = True

            result = LoadResult(
                course_count=len(courses),
                dangling_count=len(dangling),
                diagnostics=diagnostics,
            )
            logger.info(result.summary)
            return result

    def validate(self) -> list[Diagnostic]:
        """Re-run the dangling reference check on a loaded store."""
        with self._lock:
            self._require_loaded()
            return self._validate(self._courses)

    def list_sorted(self) -> list[CourseSummary]:
        """All courses ordered by identifier (plain lexicographic order)."""
        with self._lock:
            self._require_loaded()
            return [
                CourseSummary(identifier=identifier, title=self._courses[identifier].title)
                for identifier in sorted(self._courses)
            ]

    def detail(self, identifier: str) -> CourseDetail:
        """Look up one course and resolve its prerequisites' titles."""
        with self._lock:
            self._require_loaded()
            code = normalize_identifier(identifier)
            if not code:
                raise EmptyIdentifierError()

            course = self._courses.get(code)
            if course is None:
                raise CourseNotFoundError(code)

            prerequisites = []
            for prereq in course.prerequisites:
                found = self._courses.get(prereq)
                prerequisites.append(
                    PrerequisiteView(identifier=prereq, title=found.title if found else None)
                )

            return CourseDetail(
                identifier=course.identifier, title=course.title, prerequisites=prerequisites
            )

    def _reset(self) -> None:
        self._courses = {}
        self._loaded = False

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise CatalogNotLoadedError()

    def _report(self, diagnostic: Diagnostic, collected: list[Diagnostic]) -> None:
        collected.append(diagnostic)
        self._sink(diagnostic)

    def _ingest(self, lines: Iterable[str], diagnostics: list[Diagnostic]) -> dict[str, Course]:
        courses: dict[str, Course] = {}
        for line_number, line in enumerate(lines, start=1):
            parsed = parse_line(line, line_number, strict=self._strict)
            if parsed is None:
                continue

            for diagnostic in parsed.diagnostics:
                self._report(diagnostic, diagnostics)

            if not parsed.rejected:
                # last record with a given identifier wins
                courses[parsed.course.identifier] = parsed.course
        return courses

    def _validate(self, courses: dict[str, Course]) -> list[Diagnostic]:
        found: list[Diagnostic] = []
        for course in courses.values():
            for prereq in course.prerequisites:
                if prereq not in courses:
                    diagnostic = Diagnostic(
                        kind=DiagnosticKind.PREREQUISITE_NOT_FOUND,
                        message=(
                            f'Validation warning: prerequisite "{prereq}" '
                            f'not found for course {course.identifier}.'
                        ),
                        course=course.identifier,
                        prerequisite=prereq,
                    )
                    self._report(diagnostic, found)
        return found
