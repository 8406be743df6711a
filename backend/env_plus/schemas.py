# Pydantic models for loader configuration and activation results.
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_FILE = ".env_plus"
DEFAULT_COMMENT = "//"
DEFAULT_DELIMITER = "="


# Immutable snapshot consumed by a single activation.
class LoaderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str = DEFAULT_FILE
    comment: str = Field(DEFAULT_COMMENT, min_length=1)
    delimiter: str = Field(DEFAULT_DELIMITER, min_length=1)
    overwrite: bool = False
    strict: bool = False
    inline_comments: bool = False

    @model_validator(mode="after")
    def check_markers_distinct(self) -> "LoaderConfig":
        if self.comment == self.delimiter:
            raise ValueError("delimiter must differ from the comment marker")
        return self


# A parsed key/value pair and the 1-based line it came from.
class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    value: str
    line: int = Field(..., ge=1)


# What an activation applied, kept and skipped.
class LoadReport(BaseModel):
    applied: Dict[str, str] = Field(default_factory=dict)
    kept: List[str] = Field(default_factory=list)
    skipped_lines: List[int] = Field(default_factory=list)
