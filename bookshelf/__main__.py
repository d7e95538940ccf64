"""Run the API with uvicorn: ``python -m bookshelf``."""

import uvicorn

from bookshelf.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
