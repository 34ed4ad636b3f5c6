from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class ErrorReport(BaseModel):
    type: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    position: Optional[int] = Field(None, ge=0)
    model_config = ConfigDict(extra="forbid")


class EncodeReport(BaseModel):
    text:          str
    reading:       Optional[str] = None
    encodings:     List[str] = Field(default_factory=list)
    abbreviations: List[str] = Field(default_factory=list)
    error:         Optional[ErrorReport] = None
    model_config = ConfigDict(extra="forbid")


class DecodeReport(BaseModel):
    digits: str
    text:   Optional[str] = None
    error:  Optional[ErrorReport] = None
    model_config = ConfigDict(extra="forbid")
