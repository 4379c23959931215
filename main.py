from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config.settings import HOST, PORT, SERVICE_STATUS, SERVICE_VERSION, DOCS_PATH
from search.models import HealthStatus
from search.router import router as search_router
# Import the functions directly from the upstream.client module
from upstream.client import open_upstream_client, close_upstream_client

WELL_KNOWN_DIR = Path(__file__).parent / ".well-known"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1. Logic to run on startup (before the app starts)
    print("Application Startup: Opening RadioFM client...")
    await open_upstream_client()
    yield # <-- Application is now running and serving requests
    # 2. Logic to run on shutdown (after in-flight requests are drained)
    print("Application Shutdown: Closing RadioFM client...")
    await close_upstream_client()


app = FastAPI(
    title="RadioFM ChatGPT Plugin",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # The plugin is called from the ChatGPT origin
    allow_methods=["*"],
    allow_headers=["*"],
)

# Serve .well-known (ai-plugin.json & openapi.yaml)
app.mount("/.well-known", StaticFiles(directory=WELL_KNOWN_DIR), name="well-known")


# Health check
@app.get("/", response_model=HealthStatus)
async def health():
    return {
        "status": SERVICE_STATUS,
        "version": SERVICE_VERSION,
        "docs": DOCS_PATH,
    }


app.include_router(search_router)


if __name__ == "__main__":
    import uvicorn

    print(f"✅ RadioFM ChatGPT Plugin running on http://localhost:{PORT}")
    print(f"📡 Manifest: http://localhost:{PORT}/.well-known/ai-plugin.json")
    uvicorn.run(app, host=HOST, port=PORT)
