"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from src.todo_pro.config import Config


def main() -> None:
    """Run the server with the host/port from the configuration."""
    config = Config.load()
    uvicorn.run(
        "src.server.app:build_app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        reload_dirs=["src"] if config.server.reload else None,
        factory=True,
    )


if __name__ == "__main__":
    main()
