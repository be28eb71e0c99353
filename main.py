import uvicorn

from marketing_site.config import settings
from marketing_site.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
