from fastapi import APIRouter, Request, Form
from fastapi.responses import HTMLResponse
import httpx
import logging

from core.config import settings
from core.exceptions import RecommenderError
from .services.ui_client import UIClient

logger = logging.getLogger(__name__)

router = APIRouter()
ui_client = UIClient(api_base=settings.ui_api_base, catalog_url=settings.catalog_url)

EXAMPLE_QUERIES = [
    "find qualified prospects for my startup",
    "automate LinkedIn outreach",
    "verify email addresses",
    "enrich leads with company data",
    "set up automated email sequences",
]


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Home page - tool count, search box and example queries"""
    tool_count = None
    load_error = None
    try:
        tool_count = await ui_client.get_tool_count()
    except RecommenderError as e:
        logger.error(f"Failed to load tools: {e}")
        load_error = f"Failed to load tools: {e.message}"

    context = {
        "platform": settings.platform_name,
        "tool_count": tool_count,
        "load_error": load_error,
        "example_queries": EXAMPLE_QUERIES,
    }
    return request.app.state.templates.TemplateResponse(request, "pages/home.html", context)


@router.post("/partials/recommendations", response_class=HTMLResponse)
async def recommendations_partial(request: Request, query: str = Form("")):
    """Recommendation cards for a query, swapped in by HTMX"""
    context = {
        "query": query,
        "recommendations": [],
        "message": None,
        "error": None,
    }

    if not query.strip():
        context["error"] = "Please describe what you want to do."
        return request.app.state.templates.TemplateResponse(request, "partials/recommendations.html", context)

    try:
        data = await ui_client.get_recommendations(query)
        context["recommendations"] = data.get("recommendations") or []
        context["message"] = data.get("message")
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Failed to get recommendations: {e}")
        context["error"] = "Failed to get recommendations. Please try again."

    return request.app.state.templates.TemplateResponse(request, "partials/recommendations.html", context)
