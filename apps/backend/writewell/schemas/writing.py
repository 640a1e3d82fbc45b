# apps/backend/writewell/schemas/writing.py

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SuggestionKind = Literal["grammar", "clarity", "tone", "improvement"]
VALID_KINDS = ("grammar", "clarity", "tone", "improvement")

DEFAULT_TONE = "neutral"


class WritingRequest(BaseModel):
    # text is checked by the route (400, not 422) so it stays optional here
    text: Optional[str] = None
    tone: Optional[str] = DEFAULT_TONE


class RewriteRequest(WritingRequest):
    pass


class AnalyzeRequest(WritingRequest):
    pass


class Suggestion(BaseModel):
    """One issue found in the text. Serialized with the keys the editor UI reads."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    kind: SuggestionKind = Field("improvement", alias="type")
    title: str = ""
    description: str = ""
    original_snippet: str = Field("", alias="original")
    suggested_snippet: str = Field("", alias="suggested")


class SuggestResponse(BaseModel):
    suggestion: str


class AnalyzeResponse(BaseModel):
    suggestions: List[Suggestion] = Field(default_factory=list)
