"""
Data models for extracted markdown links
"""
from pydantic import BaseModel


class LinkRecord(BaseModel):
    """A single hyperlink found in a markdown document."""

    description: str = ""
    url: str = ""
    source_file: str = ""

    def to_dict(self) -> dict:
        """Convert LinkRecord to dictionary format for JSON serialization."""
        return self.model_dump()
