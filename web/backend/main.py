from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from music_shelf import __version__
from music_shelf.core.config import load_config

app = FastAPI(title="Music Shelf API", version=__version__)

# CORS: ALLOWED_ORIGINS env overrides [web] allowed_origins
allowed_origins = load_config().web.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD"],
    allow_headers=["Range"],
    expose_headers=["Content-Range", "Content-Length", "Accept-Ranges"],
)

# Include routers
from web.backend.routers import artwork, songs, stream

app.include_router(songs.router, prefix="/api", tags=["songs"])
app.include_router(stream.router, tags=["stream"])
app.include_router(artwork.router, tags=["artwork"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
