from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class GistOwner(BaseModel):
    login: str


class Gist(BaseModel):
    stargazer_count: int = Field(alias="stargazerCount")
    url: str
    name: str
    owner: GistOwner


class Viewer(BaseModel):
    # Missing or null when the viewer owns no gist with that id.
    gist: Optional[Gist] = None


class GistStarsData(BaseModel):
    viewer: Viewer


class GistStarsResponse(BaseModel):
    data: GistStarsData


class GistStars(BaseModel):
    stargazer_count: int
    url: str
    stargazers: str


class BadgeRender(BaseModel):
    message: str
    link: List[str]


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: str
    pattern: str


class DefaultBadgeData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    color: str
    named_logo: str = Field(alias="namedLogo")


class StaticPreview(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    message: str
    style: str


class Example(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    named_params: Tuple[Tuple[str, str], ...] = Field(alias="namedParams")
    static_preview: StaticPreview = Field(alias="staticPreview")
    documentation: str

    @field_serializer("named_params")
    def serialize_named_params(self, named_params):
        return dict(named_params)


class Badge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_version: int = Field(default=1, alias="schemaVersion")
    label: str
    message: str
    color: str
    named_logo: str = Field(alias="namedLogo")
    link: List[str] = []
    is_error: bool = Field(default=False, alias="isError")
