# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import backend.config
backend.config.load_env()

from backend.api.analysis import router as analysis_router
from backend.api.chat import router as chat_router
from backend.api.settings import router as settings_router

app = FastAPI(title="AI Dashboard API", version="0.1.0")
app.include_router(chat_router)
app.include_router(analysis_router)
app.include_router(settings_router)

@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "AI Dashboard API is running",
        "docs": "/docs",
        "health": "/health",
        "config": "/config",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import os
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
