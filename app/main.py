from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates
from pathlib import Path

from core.config import settings
from core.logging_config import get_logger
from .ui_routes import router as ui_router

logger = get_logger(__name__)

app = FastAPI(
    title=f"Tools That Supercharge {settings.platform_name}",
    description="HTMX front end for AI-powered integration tool recommendations",
    version="1.0.0"
)

templates_dir = Path(__file__).parent / "templates"
if not templates_dir.is_dir():
    raise RuntimeError(f"Templates directory {templates_dir} does not exist. Cannot start application.")
templates = Jinja2Templates(directory=str(templates_dir))


@app.on_event("startup")
async def startup_event():
    logger.info(f"🎨 Recommender UI for {settings.platform_name} starting")
    logger.info(f"🔗 Recommendations served by {settings.ui_api_base}")


# Make templates available to all requests
@app.middleware("http")
async def add_templates_to_request(request: Request, call_next):
    request.app.state.templates = templates
    return await call_next(request)


app.include_router(ui_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "recommender-ui"}
