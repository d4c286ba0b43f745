from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.chords import router as chords_router
from api.routes.tools import router as tools_router

app = FastAPI(title="Harmonic Analysis")

# CORS: allow a local front-end dev server to call the API
# Include both localhost and 127.0.0.1 variants, browsers treat them as different origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chords_router)
app.include_router(tools_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
