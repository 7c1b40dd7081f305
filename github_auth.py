import logging
from typing import Any, Dict, Type, TypeVar

from githubkit import GitHub
from githubkit.exception import (
    AuthCredentialError,
    GraphQLFailed,
    RequestError,
    RequestFailed,
)
from pydantic import BaseModel, ValidationError

from config import Settings
from errors import AuthFailed, Inaccessible, InvalidResponse, NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_github(settings: Settings) -> GitHub:
    return GitHub(settings.github_api_secret, timeout=settings.github_timeout)


class GithubGraphqlTransport:
    """
    Authenticated access to the GitHub v4 (GraphQL) API.

    Owns the client, translates githubkit failures into badge errors and
    validates the response document against a pydantic schema.
    """

    def __init__(self, github: GitHub):
        self.github = github

    async def execute_query(
        self, query: str, variables: Dict[str, Any], schema: Type[ModelT]
    ) -> ModelT:
        """
        Runs a GraphQL query and validates the full response document.

        githubkit strips the `data` envelope and raises on GraphQL errors, so
        the payload is wrapped back as `{"data": ...}` before validation.

        Args:
            query (str): The GraphQL query.
            variables (dict): The query variables.
            schema (Type[BaseModel]): Model describing the response document.

        Returns:
            BaseModel: The validated response.

        Raises:
            NotFound: GitHub reported a NOT_FOUND error.
            AuthFailed: The API secret was rejected.
            Inaccessible: The API could not be reached or answered with an error status.
            InvalidResponse: The response did not match the schema.
        """
        logger.debug("GraphQL request with variables %s", variables)
        try:
            data = await self.github.async_graphql(query, variables=variables)
        except GraphQLFailed as e:
            for error in e.response.errors:
                if error.type == "NOT_FOUND":
                    logger.warning("GraphQL NOT_FOUND: %s", error.message)
                    raise NotFound(pretty_message=error.message, underlying_error=e)
            logger.warning("GraphQL request failed: %s", e)
            raise InvalidResponse(underlying_error=e)
        except AuthCredentialError as e:
            logger.warning("GitHub rejected the API secret")
            raise AuthFailed(underlying_error=e)
        except RequestFailed as e:
            status_code = e.response.status_code
            logger.warning("GitHub responded with status %s", status_code)
            if status_code == 401:
                raise AuthFailed(underlying_error=e)
            raise Inaccessible(underlying_error=e)
        except RequestError as e:
            logger.warning("GitHub API unreachable: %s", e)
            raise Inaccessible(underlying_error=e)

        try:
            return schema.model_validate({"data": data})
        except ValidationError as e:
            logger.warning("Response failed %s validation: %s", schema.__name__, e)
            raise InvalidResponse(pretty_message="invalid response data", underlying_error=e)
