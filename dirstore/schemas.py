from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

class ContentBody(BaseModel):
    """Request body for create/modify. Unknown keys reject the whole body."""

    model_config = ConfigDict(extra="forbid", strict=True)

    content: str = Field(alias="Content")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        # "content", "CONTENT", ... all name the same field; the last one wins
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            folded["Content" if isinstance(key, str) and key.lower() == "content" else key] = value
        return folded

class ContentResponse(BaseModel):
    content: str = Field(serialization_alias="Content")

class ErrorResponse(BaseModel):
    error: str = Field(serialization_alias="Error")

class DirectoryStatistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_count: int = Field(0, alias="NumFiles")
    avg_alpha_chars_per_file: float = Field(0.0, alias="AvgNumAlphaCharsPerFile")
    std_alpha_chars_per_file: float = Field(0.0, alias="StdNumAlphaCharsPerFile")
    avg_word_length: float = Field(0.0, alias="AvgWordLength")
    std_word_length: float = Field(0.0, alias="StdWordLength")
    total_bytes: int = Field(0, alias="TotalBytes")
