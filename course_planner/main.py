from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from course_planner.catalog import (
    CatalogError,
    CatalogLoadError,
    CatalogNotLoadedError,
    CatalogStore,
    CourseDetail,
    CourseNotFoundError,
    CourseSummary,
    EmptyCatalogError,
    EmptyIdentifierError,
    LoadResult,
    SourceUnavailableError,
)
from course_planner.log import configure_logging
from course_planner.models import LoadRequest
from course_planner.settings import settings

from .utils import read_catalog_upload, resolve_catalog_path

configure_logging(settings.log_level)

store = CatalogStore(strict=settings.strict_prerequisites)

ERROR_STATUS: dict[type[CatalogError], int] = {
    SourceUnavailableError: 404,
    EmptyCatalogError: 422,
    CatalogNotLoadedError: 409,
    EmptyIdentifierError: 400,
    CourseNotFoundError: 404,
}


def to_http_error(error: CatalogError) -> HTTPException:
    status_code = next(
        (code for kind, code in ERROR_STATUS.items() if isinstance(error, kind)), 400
    )
    return HTTPException(status_code=status_code, detail=str(error))


def get_store() -> CatalogStore:
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Preload the configured catalog, if any"""
    if settings.catalog_path:
        try:
            store.load(settings.catalog_path)
        except CatalogLoadError:
            # reported by the diagnostics logger; the app starts unloaded
            pass
    yield


app = FastAPI(
    title='Course Planner API',
    description=(
        'Course catalog with prerequisite lookup:\n'
        '1) POST /catalog/load or /catalog/upload: replace the catalog from a text file.\n'
        '2) GET /catalog/courses: all courses sorted by identifier.\n'
        '3) GET /catalog/courses/{identifier}: one course with resolved prerequisites.'
    ),
    version='1.0.0',
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=False,
    allow_methods=['*'],
    allow_headers=['*'],
)

StoreDep = Annotated[CatalogStore, Depends(get_store)]


@app.post('/catalog/load', response_model=LoadResult)
def load_catalog(request: LoadRequest, catalog: StoreDep):
    """Load the catalog from a file under the configured catalog directory"""
    path = resolve_catalog_path(request.path, settings.catalog_dir)
    try:
        return catalog.load(path)
    except CatalogError as e:
        raise to_http_error(e) from e


@app.post('/catalog/upload', response_model=LoadResult)
async def upload_catalog(
    file: Annotated[UploadFile, File(..., description='Catalog text file, one course per line')],
    catalog: StoreDep,
):
    """Load the catalog from an uploaded file"""
    lines = await read_catalog_upload(file, max_bytes=settings.max_upload_bytes)
    try:
        return await run_in_threadpool(catalog.load, lines)
    except CatalogError as e:
        raise to_http_error(e) from e


@app.get('/catalog/courses', response_model=list[CourseSummary])
def list_courses(catalog: StoreDep):
    try:
        return catalog.list_sorted()
    except CatalogError as e:
        raise to_http_error(e) from e


@app.get('/catalog/courses/{identifier}', response_model=CourseDetail)
def course_detail(identifier: str, catalog: StoreDep):
    """Course title and prerequisites; dangling prerequisites come back with `missing: true`"""
    try:
        return catalog.detail(identifier)
    except CatalogError as e:
        raise to_http_error(e) from e


@app.get('/', include_in_schema=False)
async def root():
    """Redirect to docs on root"""
    return {'ok': True, 'see': '/docs'}
