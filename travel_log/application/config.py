"""Configuration management using Pydantic."""

from pathlib import Path
from typing import Optional, Any
from pydantic import BaseModel, Field, ConfigDict
from pydantic_settings import BaseSettings


class SearchConfig(BaseModel):
    """Configuration for search and the search session."""
    results_limit: int = 10
    debounce_delay_ms: int = 200
    history_limit: int = 5
    details_preview_length: int = 50

    @property
    def debounce_delay(self) -> float:
        """Debounce delay in seconds."""
        return self.debounce_delay_ms / 1000


class StorageConfig(BaseModel):
    """Configuration for storage."""
    data_file: Path = Path("storage/travel_log.json")
    history_file: Path = Path("storage/search_history.json")


class Config(BaseSettings):
    """Main configuration class."""

    storage_path: Path = Field(default=Path("storage"), description="Directory for data files")

    # Component configurations
    search: SearchConfig = Field(default_factory=SearchConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Development
    debug: bool = False

    model_config = ConfigDict(
        env_prefix="TRAVEL_LOG_",
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False
    )

    def model_post_init(self, __context: Any) -> None:
        """Post-initialization processing."""
        self.storage_path.mkdir(parents=True, exist_ok=True)

        # Keep data files under the storage directory
        self.storage.data_file = self.storage_path / self.storage.data_file.name
        self.storage.history_file = self.storage_path / self.storage.history_file.name

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a file."""
        if config_path.suffix.lower() == '.json':
            import json
            with open(config_path) as f:
                data = json.load(f)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path) as f:
                data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls(**(data or {}))

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() == '.json':
            import json
            with open(config_path, 'w') as f:
                json.dump(self.model_dump(mode="json"), f, indent=2)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path, 'w') as f:
                yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")
