"""Run the API with uvicorn: ``python -m spendwarden``."""

import uvicorn

from spendwarden.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "spendwarden.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env.lower() == "development",
    )
