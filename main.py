import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Annotated, List

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from config import Settings
from errors import BadgeError
from github_auth import GithubGraphqlTransport, build_github
from schema import Badge, Example
from services import GithubGistStars

logger = logging.getLogger(__name__)


@lru_cache
def get_settings():
    return Settings()


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_gist_stars_service(settings: SettingsDep) -> GithubGistStars:
    return GithubGistStars(GithubGraphqlTransport(build_github(settings)))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


app = FastAPI(lifespan=lifespan)
app.add_middleware(GZipMiddleware, minimum_size=1000, compresslevel=5)


@app.exception_handler(BadgeError)
async def badge_error_handler(request: Request, exc: BadgeError):
    logger.info("%s %s -> %s", request.method, request.url.path, exc)
    badge = GithubGistStars.error_badge(exc)
    return JSONResponse(status_code=exc.status_code, content=badge.model_dump(by_alias=True))


@app.get("/github/stars/gists", response_model=List[Example])
def get_gist_stars_examples():
    return list(GithubGistStars.examples)


@app.get(
    "/github/stars/gists/{gist_id}",
    response_model=Badge,
    responses={
        status.HTTP_403_FORBIDDEN: {
            "model": Badge,
            "description": "Invalid GitHub API secret",
        },
        status.HTTP_404_NOT_FOUND: {
            "model": Badge,
            "description": "Gist not found",
        },
        status.HTTP_502_BAD_GATEWAY: {
            "model": Badge,
            "description": "Invalid response from the GitHub API",
        },
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": Badge,
            "description": "GitHub API unreachable",
        },
    },
)
async def get_gist_stars(
    gist_id: str,
    service: Annotated[GithubGistStars, Depends(get_gist_stars_service)],
):
    render = await service.handle(gist_id)
    return GithubGistStars.badge(render)
