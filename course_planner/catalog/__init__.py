"""Course catalog: record parsing, storage and prerequisite validation"""

from .errors import (
    CatalogError,
    CatalogLoadError,
    CatalogNotLoadedError,
    CatalogQueryError,
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
from .store import CatalogStore

__all__ = [
    'CatalogError',
    'CatalogLoadError',
    'CatalogNotLoadedError',
    'CatalogQueryError',
    'CatalogStore',
    'Course',
    'CourseDetail',
    'CourseNotFoundError',
    'CourseSummary',
    'Diagnostic',
    'DiagnosticKind',
    'EmptyCatalogError',
    'EmptyIdentifierError',
    'LoadResult',
    'PrerequisiteView',
    'SourceUnavailableError',
    'normalize_identifier',
    'parse_line',
]
