from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App configuration"""

    model_config = SettingsConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        env_file='.env', env_file_encoding='utf-8', env_prefix='COURSE_PLANNER_', extra='ignore'
    )

    catalog_path: Path | None = None
    # POST /catalog/load only opens files below this directory
    catalog_dir: Path = Path('.')
    strict_prerequisites: bool = False
    log_level: str = 'INFO'
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MB


settings = Settings()
