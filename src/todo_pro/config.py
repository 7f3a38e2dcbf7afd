"""
Configuration for the todo-pro service.

Related:
  - src.server.app.create_app: builds the FastAPI app from this config
  - src.server.run.main: reads the server section to launch uvicorn
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """uvicorn settings"""

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class CorsConfig:
    """CORS settings"""

    allow_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore
    cors: CorsConfig = None  # type: ignore

    # Number of todos a user on the free plan may hold before creation is refused
    free_plan_todo_limit: int = 10

    log_level: str = "INFO"
    log_file: Optional[str] = "logs/todo_pro.log"

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.cors is None:
            self.cors = CorsConfig()

    @classmethod
    def load(cls) -> "Config":
        """Pick the configuration source for the running service.

        ``$TODO_PRO_CONFIG`` or the bundled ``config/app_config.yaml`` wins
        when present; otherwise settings come from environment variables.
        """
        if os.getenv("TODO_PRO_CONFIG") or DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml()
        return cls.from_env()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file.

        Args:
            config_path: path of the YAML file. Defaults to ``$TODO_PRO_CONFIG``
                or ``config/app_config.yaml``.

        Returns:
            Config: the loaded settings, or defaults when the file is missing
        """
        if config_path is None:
            env_path = os.getenv("TODO_PRO_CONFIG")
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        cors_data = yaml_data.get("cors", {})
        plan_data = yaml_data.get("plan", {})
        log_data = yaml_data.get("log", {})

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 8000)),
                reload=bool(server_data.get("reload", False)),
            ),
            cors=CorsConfig(
                allow_origins=list(cors_data.get("allow_origins", ["*"])),
            ),
            free_plan_todo_limit=int(plan_data.get("free_todo_limit", 10)),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo_pro.log"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from environment variables"""
        origins = os.getenv("TODO_PRO_CORS_ORIGINS", "*")
        return cls(
            server=ServerConfig(
                host=os.getenv("TODO_PRO_HOST", "0.0.0.0"),
                port=int(os.getenv("TODO_PRO_PORT", "8000")),
                reload=os.getenv("TODO_PRO_RELOAD", "false").lower() in ("1", "true", "yes"),
            ),
            cors=CorsConfig(
                allow_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            ),
            free_plan_todo_limit=int(os.getenv("TODO_PRO_FREE_PLAN_LIMIT", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/todo_pro.log"),
        )
