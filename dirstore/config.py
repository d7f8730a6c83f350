from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

class Settings(BaseSettings):
    app_env: str = Field("dev", alias="APP_ENV")
    app_host: str = Field("0.0.0.0", alias="APP_HOST")
    app_port: int = Field(8080, alias="APP_PORT")

    # Store layout. A relative FILES_DIR is resolved against the working
    # directory on every request, not once at startup.
    files_dir: str = Field("./files", alias="FILES_DIR")
    path_prefix: str = Field("/", alias="PATH_PREFIX")
    content_extension: str = Field(".txt", alias="CONTENT_EXTENSION")

    # Put exception text and traceback into 500 responses (dev only).
    output_errors: bool = Field(False, alias="OUTPUT_ERRORS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("files_dir")
    @classmethod
    def _files_dir_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("FILES_DIR should not be empty")
        return v

    @field_validator("path_prefix")
    @classmethod
    def _leading_slash(cls, v: str) -> str:
        v = v.strip() or "/"
        return v if v.startswith("/") else "/" + v

    class Config:
        env_file = ".env"
        case_sensitive = True
        populate_by_name = True
        extra = "ignore"

settings = Settings()
