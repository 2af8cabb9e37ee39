"""Crypto treasury sweeper - main application entry point."""

import uvicorn

from treasury.api.app import create_app
from treasury.config import get_settings

# Create the app instance
app = create_app()


def main() -> None:
    """Run the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "treasury.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
