import logging
from typing import Any, Dict, Protocol, Type, TypeVar

from pydantic import BaseModel

from errors import BadgeError, NotFound
from schema import (
    Badge,
    BadgeRender,
    DefaultBadgeData,
    Example,
    GistStars,
    GistStarsResponse,
    Route,
    StaticPreview,
)
from text_formatters import metric

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

GITHUB_DOCUMENTATION = """
<p>
  If your GitHub badge errors, it might be because you hit GitHub's rate limits.
</p>
"""

GIST_STARS_DOCUMENTATION = f"""{GITHUB_DOCUMENTATION}
<p>This badge shows the number of stargazers for a gist. Gist id is accepted as input and 'gist not found' is returned if the gist is not found for the given gist id.
</p>"""

GIST_STARS_QUERY = """
query ($gistId: String!) {
  viewer {
    gist(name: $gistId) {
      stargazerCount
      url
      name
      owner {
        login
      }
    }
  }
}
"""


class GraphqlTransport(Protocol):
    async def execute_query(
        self, query: str, variables: Dict[str, Any], schema: Type[ModelT]
    ) -> ModelT: ...


class GithubGistStars:
    """Stargazer count badge for a gist owned by the authenticated viewer."""

    category = "social"
    route = Route(base="github/stars/gists", pattern=":gistId")
    default_badge_data = DefaultBadgeData(label="Stars", color="blue", named_logo="github")
    examples = (
        Example(
            title="Github Gist stars",
            named_params=(("gistId", "47a4d00457a92aa426dbd48a18776322"),),
            static_preview=StaticPreview(
                label=default_badge_data.label, message=metric(29), style="social"
            ),
            documentation=GIST_STARS_DOCUMENTATION,
        ),
    )

    def __init__(self, transport: GraphqlTransport):
        self.transport = transport

    async def fetch(self, gist_id: str) -> GistStarsResponse:
        return await self.transport.execute_query(
            GIST_STARS_QUERY, {"gistId": gist_id}, GistStarsResponse
        )

    @staticmethod
    def transform(data: GistStarsResponse) -> GistStars:
        """
        Extracts the star count and builds the stargazers page URL.

        Raises:
            NotFound: The viewer has no gist with the requested id.
        """
        gist = data.data.viewer.gist
        if gist is None:
            raise NotFound(pretty_message="gist not found")
        stargazers = f"https://gist.github.com/{gist.owner.login}/{gist.name}/stargazers"
        return GistStars(
            stargazer_count=gist.stargazer_count, url=gist.url, stargazers=stargazers
        )

    @staticmethod
    def render(stargazer_count: int, url: str, stargazers: str) -> BadgeRender:
        return BadgeRender(message=metric(stargazer_count), link=[url, stargazers])

    async def handle(self, gist_id: str) -> BadgeRender:
        data = await self.fetch(gist_id)
        gist_stars = self.transform(data)
        logger.info(
            "Gist %s has %s stargazers", gist_id, gist_stars.stargazer_count
        )
        return self.render(**gist_stars.model_dump())

    @classmethod
    def badge(cls, render: BadgeRender) -> Badge:
        return Badge(
            label=cls.default_badge_data.label,
            message=render.message,
            color=cls.default_badge_data.color,
            named_logo=cls.default_badge_data.named_logo,
            link=render.link,
        )

    @classmethod
    def error_badge(cls, error: BadgeError) -> Badge:
        """Error badges are red when the target is missing, lightgrey otherwise."""
        return Badge(
            label=cls.default_badge_data.label,
            message=error.pretty_message,
            color="red" if isinstance(error, NotFound) else "lightgrey",
            named_logo=cls.default_badge_data.named_logo,
            is_error=True,
        )
