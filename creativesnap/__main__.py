import uvicorn

from creativesnap.core.config import settings


if __name__ == "__main__":
    uvicorn.run("creativesnap:app", host="0.0.0.0", port=settings.PORT)
