from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Table rendering defaults backed by environment variables."""

    max_column_width: int = Field(
        default=40,
        gt=0,
        validation_alias="ASCII_TABLE_MAX_COLUMN_WIDTH",
        description="Maximum width of a display cell before it is wrapped.",
    )
    number_locale: str = Field(
        default="en_US",
        validation_alias="ASCII_TABLE_LOCALE",
        description="Babel locale identifier used to format decimal cells.",
    )
    table_format: str = Field(
        default="psql",
        validation_alias="ASCII_TABLE_FORMAT",
        description="tabulate table format used by the renderer.",
    )
    log_level: str = Field(default="INFO", validation_alias="ASCII_TABLE_LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="ASCII_TABLE_LOG_JSON")

    model_config = SettingsConfigDict(extra="ignore")


settings = Settings()
