from pathlib import Path

from fastapi import HTTPException, UploadFile, status


def resolve_catalog_path(name: str, base: Path) -> Path:
    """
    Resolve a client-supplied catalog file name inside `base`.

    Absolute paths and names that escape `base` (`..`, symlinks) are
    rejected with 400.
    """
    name = name.strip()
    root = base.resolve()
    if not name or Path(name).is_absolute():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Catalog path must be relative to the catalog directory.',
        )

    path = (root / name).resolve()
    if not path.is_relative_to(root):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f'Catalog path {name} is outside the catalog directory.',
        )
    return path


async def read_catalog_upload(file: UploadFile, max_bytes: int) -> list[str]:
    """
    Read an uploaded catalog file into text lines.

    The upload must be at most `max_bytes` long and UTF-8 encoded.
    """
    content = await file.read()
    await file.close()

    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f'File {file.filename} exceeds the {max_bytes} byte limit.',
        )

    try:
        text = content.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f'File {file.filename} is not UTF-8 text.',
        ) from e

    return text.splitlines()
