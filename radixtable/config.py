# radixtable/config.py
from pathlib import Path
from typing import Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    # workspace，默认位于当前工作目录而非安装目录
    workspace_root: Path = Field(default_factory=lambda: Path.cwd() / "work")

    # logs
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    log_filename: str = "radixtable.log"
    log_console: bool = True

    # tables
    table_file: Optional[Path] = None
    history_file: Optional[Path] = None

    # model config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RADIXTABLE_",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _derive_paths(self) -> "Config":
        """Place unset paths under workspace_root."""
        if self.log_dir is None:
            self.log_dir = self.workspace_root / "logs"
        if self.table_file is None:
            self.table_file = self.workspace_root / "table.json"
        if self.history_file is None:
            self.history_file = self.workspace_root / ".history" / "history"
        return self

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_filename

    def ensure_exists(self) -> None:
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.table_file.parent.mkdir(parents=True, exist_ok=True)
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
        except (OSError, IOError) as e:
            raise RuntimeError(f"Failed to initialize workspace: {e}")


CONFIG = Config()
