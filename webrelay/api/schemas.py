"""Request/response transport contracts for the HTTP adapter."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Search the web for a question."""

    question: str = Field(..., min_length=1, examples=["What is the capital of France?"])


class SearchResponse(BaseModel):
    content: str = Field(..., examples=["The capital of France is Paris..."])
    question: str = Field(..., examples=["What is the capital of France?"])


class ScrapeRequest(BaseModel):
    """Scrape one webpage into clean text."""

    url: str = Field(..., min_length=1, examples=["https://example.com"])


class ScrapeResponse(BaseModel):
    content: str = Field(..., examples=["This is the main content of the page..."])
    url: str = Field(..., examples=["https://example.com"])


class ErrorResponse(BaseModel):
    error: str
