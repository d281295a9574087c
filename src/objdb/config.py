"""Settings via env vars (OBJDB_ prefix)"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Repository metadata directory, relative to the working tree
    metadata_dir: str = ".objdb"

    # zlib level used for stored objects
    compression_level: int = Field(default=1, ge=0, le=9)

    # Working-tree paths never committed; metadata_dir is always added
    ignore: list[str] = [".git", "target"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OBJDB_", case_sensitive=False)

    def ignore_set(self) -> set[str]:
        return set(self.ignore) | {self.metadata_dir}
