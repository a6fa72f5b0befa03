import pytest

from course_planner.catalog import CatalogStore, Diagnostic

WORKED_EXAMPLE = [
    'CSCI101, Introduction to Programming',
    'CSCI200, Data Structures, CSCI101',
    'MATH201, Discrete Math',
    'CSCI300, Algorithms, CSCI200, MATH999',
]


@pytest.fixture
def worked_example() -> list[str]:
    return list(WORKED_EXAMPLE)


@pytest.fixture
def reported() -> list[Diagnostic]:
    """Diagnostics delivered to the store's sink, in order."""
    return []


@pytest.fixture
def store(reported) -> CatalogStore:
    return CatalogStore(diagnostics_sink=reported.append)


@pytest.fixture
def loaded_store(store, worked_example) -> CatalogStore:
    store.load(worked_example)
    return store


@pytest.fixture
def catalog_file(tmp_path, worked_example):
    path = tmp_path / 'courses.txt'
    path.write_text('\n'.join(worked_example) + '\n', encoding='utf-8')
    return path
