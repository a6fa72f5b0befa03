"""Text rendering of catalog listings and course details"""

import pathlib

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from course_planner.catalog import CatalogStore, CourseDetail, CourseSummary, PrerequisiteView

here = pathlib.Path(__file__).parent.resolve()
jinja_env = Environment(
    loader=FileSystemLoader(str(here / 'templates')),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def prerequisite_label(prereq: PrerequisiteView) -> str:
    """Resolved title, or a missing marker naming the dangling identifier."""
    if prereq.missing:
        return f'(missing: {prereq.identifier})'
    return prereq.title or ''


jinja_env.filters['prerequisite_label'] = prerequisite_label


def format_listing(courses: list[CourseSummary]) -> list[str]:
    """Render `IDENTIFIER, Title` lines."""
    template = jinja_env.get_template('listing.txt.jinja')
    return template.render(courses=courses).splitlines()


def format_detail(course: CourseDetail) -> list[str]:
    """
    Render a course detail view.

    The first line is `IDENTIFIER, Title`. Then either `Prerequisites: None`,
    or a line of prerequisite identifiers followed by a line of their titles,
    where dangling references read `(missing: IDENTIFIER)`.
    """
    template = jinja_env.get_template('detail.txt.jinja')
    return template.render(course=course).splitlines()


def render_course_list(store: CatalogStore) -> list[str]:
    """Sorted listing of a loaded store; raises CatalogNotLoadedError otherwise."""
    return format_listing(store.list_sorted())


def render_course_detail(store: CatalogStore, identifier: str) -> list[str]:
    return format_detail(store.detail(identifier))


__all__ = [
    'format_detail',
    'format_listing',
    'prerequisite_label',
    'render_course_detail',
    'render_course_list',
]
