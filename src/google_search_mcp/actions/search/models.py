from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from ...errors import InvalidArgumentsError, SchemaValidationError

DEFAULT_RESULTS = 5

class MetaTags(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    og_title: Optional[str] = Field(default=None, alias="og:title")
    og_description: Optional[str] = Field(default=None, alias="og:description")
    og_image: Optional[str] = Field(default=None, alias="og:image")

class PageMap(BaseModel):
    metatags: Optional[List[MetaTags]] = None

class SearchItem(BaseModel):
    title: str
    link: str
    snippet: Optional[str] = None
    pagemap: Optional[PageMap] = None

    @property
    def first_metatags(self) -> Optional[MetaTags]:
        if self.pagemap and self.pagemap.metatags:
            return self.pagemap.metatags[0]
        return None

class SearchResponse(BaseModel):
    items: Optional[List[SearchItem]] = None

class SearchArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")

    query: StrictStr
    num: StrictInt = DEFAULT_RESULTS

    @field_validator("num", mode="before")
    @classmethod
    def null_means_default(cls, v: Any) -> Any:
        return DEFAULT_RESULTS if v is None else v


@dataclass(frozen=True)
class ParseResult:
    success: bool
    data: Optional[SearchResponse] = None
    error: Optional[SchemaValidationError] = None


def parse_search_arguments(arguments: Any) -> SearchArguments:
    try:
        return SearchArguments.model_validate(arguments or {})
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid arguments: {e}") from e


def parse_search_response(payload: Any) -> ParseResult:
    """Validate a decoded provider payload against `SearchResponse`."""
    try:
        return ParseResult(success=True, data=SearchResponse.model_validate(payload))
    except ValidationError as e:
        return ParseResult(success=False, error=SchemaValidationError(str(e)))
