"""Load and query failures raised by the catalog store"""


class CatalogError(Exception):
    """Base class for catalog failures; `reason` is a short machine-friendly label."""

    reason = 'catalog error'


class CatalogLoadError(CatalogError):
    """The load as a whole failed; the store is left empty and unloaded."""


class SourceUnavailableError(CatalogLoadError):
    reason = 'source unavailable'

    def __init__(self, source: str, cause: str | None = None):
        self.source = source
        message = f'Could not open file "{source}"'
        if cause:
            message = f'{message}: {cause}'
        super().__init__(message)


class EmptyCatalogError(CatalogLoadError):
    reason = 'empty catalog'

    def __init__(self):
        super().__init__('No valid course records were loaded.')


class CatalogQueryError(CatalogError):
    """A query could not be answered; never fatal to the caller's session."""


class CatalogNotLoadedError(CatalogQueryError):
    reason = 'not loaded'

    def __init__(self):
        super().__init__('Please load data first.')


class CourseNotFoundError(CatalogQueryError):
    reason = 'not found'

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'Course {identifier} not found.')


class EmptyIdentifierError(CatalogQueryError):
    reason = 'no identifier given'

    def __init__(self):
        super().__init__('Please enter a course number.')
