"""Pydantic schemas for mdcode results."""

from pydantic import BaseModel, Field


class ExtractionResult(BaseModel):
    """Outcome of extracting one output file from markdown."""
    output_path: str = Field(description="Path of the generated file")
    language: str = Field(description="Code block language tag that was extracted (go, javascript, css)")
    block_count: int = Field(description="Number of matching code blocks found")
    written: bool = Field(description="False when the file already held identical content")
    bytes_written: int = Field(0, description="Size of the content written (0 when skipped)")

    class Config:
        json_schema_extra = {
            "example": {
                "output_path": "web/main.go",
                "language": "go",
                "block_count": 2,
                "written": True,
                "bytes_written": 22
            }
        }
