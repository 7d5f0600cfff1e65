"""Article persistence models."""
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SavedArticleFiles(BaseModel):
    """
    Files written for one article record.

    Attributes:
        json_file: Full record as JSON
        markdown_file: Markdown body, if the record had one
        html_file: HTML body, if the record had one
    """

    json_file: Path
    markdown_file: Path | None = None
    html_file: Path | None = None

    model_config = ConfigDict(frozen=True)
