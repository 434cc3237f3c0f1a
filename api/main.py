from fastapi import FastAPI

from api.routes.analyze import router as analyze_router

app = FastAPI(title="Wavemaker")

app.include_router(analyze_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
