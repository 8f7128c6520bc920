"""Schemas for the search endpoint."""

from __future__ import annotations

import json
from typing import Any, List, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

RESULT_TYPE_ALIASES = {
    "merge": "merged_by_type",
}

LIST_FIELDS = ("channels", "plugins", "cloud_types")
FLAG_VALUES = {"1", "true", "yes", "on"}


class SearchRequest(BaseModel):
    """Search parameters, identical whether sent as a query string or a body."""

    model_config = ConfigDict(populate_by_name=True)

    keyword: str = Field(alias="kw", description="Search keyword")
    channels: List[str] = Field(default_factory=list, description="Telegram channels to search")
    concurrency: int = Field(alias="conc", default=0, ge=0, description="Concurrent lookups, 0 = backend default")
    force_refresh: bool = Field(alias="refresh", default=False, description="Bypass the backend cache")
    result_type: Literal["all", "results", "merge", "merged_by_type"] = Field(alias="res", default="merge")
    source_type: Literal["all", "tg", "plugin"] = Field(alias="src", default="all")
    plugins: List[str] | None = Field(default=None, description="Restrict search to these plugins")
    cloud_types: List[str] = Field(default_factory=list, description="Filter results by cloud drive type")
    ext: dict[str, Any] = Field(default_factory=dict, description="Extra parameters passed to plugins")

    @field_validator("keyword")
    @classmethod
    def keyword_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("keyword must not be empty")
        return value

    @field_validator("channels", "cloud_types", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def normalized(self, default_channels: Sequence[str]) -> SearchRequest:
        """Apply server-side defaults before the request reaches the backend."""
        update: dict[str, Any] = {}
        if not self.channels:
            update["channels"] = list(default_channels)
        update["result_type"] = RESULT_TYPE_ALIASES.get(self.result_type, self.result_type)

        if self.source_type == "tg":
            update["plugins"] = None
        elif self.source_type == "plugin":
            update["channels"] = []
        return self.model_copy(update=update)


def parse_query_params(params: Mapping[str, str]) -> dict[str, Any]:
    """Translate query-string parameters into :class:`SearchRequest` input.

    List parameters are comma-separated, ``ext`` is a JSON object and
    ``refresh`` accepts the usual truthy spellings.
    """
    data: dict[str, Any] = {}
    for key, value in params.items():
        if key in LIST_FIELDS:
            data[key] = [item.strip() for item in value.split(",") if item.strip()]
        elif key == "refresh":
            data[key] = value.strip().lower() in FLAG_VALUES
        elif key == "ext":
            data[key] = json.loads(value) if value.strip() else {}
        elif key == "conc":
            data[key] = value or 0
        else:
            data[key] = value
    return data


class ApiResponse(BaseModel):
    """Envelope returned by the search endpoint."""

    code: int
    message: str
    data: Any | None = None
