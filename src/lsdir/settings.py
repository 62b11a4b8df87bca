from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-level defaults for the lsdir CLI.

    Listing options come from the command line; these only cover logging.
    """

    model_config = SettingsConfigDict(env_prefix="LSDIR_")

    log_level: str = Field(default="WARNING")
    log_file: str | None = Field(default=None)


settings = Settings()
