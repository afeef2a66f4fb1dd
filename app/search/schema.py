"""
Purpose:
- Pydantic models for search in/out so the API is self-documenting and stable.
- ApiSite mirrors one entry of the resource site config file.
"""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, StrictBool
from typing import List, Optional

class ApiSite(BaseModel):
    key: str
    api: str
    name: str
    detail: Optional[str] = None
    is_adult: bool = False

class SearchResult(BaseModel):
    # "class" is a keyword in Python; serialize with by_alias=True
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    poster: str = ""
    episodes: List[str] = []
    episodes_titles: List[str] = []
    source: str
    source_name: str
    class_: Optional[str] = Field(default=None, alias="class")
    year: str = "unknown"
    desc: str = ""
    type_name: str = ""
    douban_id: Optional[int] = None

class SearchResponse(BaseModel):
    regular_results: List[SearchResult] = []
    adult_results: List[SearchResult] = []
    error: Optional[str] = None

    def to_payload(self) -> dict:
        """JSON body; `error` only appears when set."""
        payload = self.model_dump(mode="json", by_alias=True)
        if payload.get("error") is None:
            payload.pop("error", None)
        return payload

class UserSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # strict: only a real JSON boolean counts; "false", 0, "no" are malformed
    filter_adult_content: Optional[StrictBool] = None
