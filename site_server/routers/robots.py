"""GET /robots.txt: crawl rules and sitemap locations."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from site_server.config import SITE_URL
from site_utils.robots import build_robots_txt

router = APIRouter()


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt():
    return PlainTextResponse(
        build_robots_txt(SITE_URL),
        media_type="text/plain; charset=utf-8",
    )
