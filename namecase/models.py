from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class NameCaseOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    lazy: bool = True
    irish: bool = True
    spanish: bool = True


class OptionsOverride(BaseModel):
    """Per-request options; unset fields fall back to the service defaults."""

    model_config = ConfigDict(extra="forbid")

    lazy: Optional[bool] = None
    irish: Optional[bool] = None
    spanish: Optional[bool] = None

    def overrides(self) -> Dict[str, bool]:
        return self.model_dump(exclude_none=True)


class NameCaseRequest(BaseModel):
    name: str = Field(examples=["mary o'brien"])
    options: Optional[OptionsOverride] = None


class NameCaseResponse(BaseModel):
    original: str
    formatted: str
    options: NameCaseOptions


class BatchRequest(BaseModel):
    names: List[str] = Field(examples=[["john smith", "LOUIS XIV"]])
    options: Optional[OptionsOverride] = None


class NameCaseResult(BaseModel):
    original: str
    formatted: str


class BatchResponse(BaseModel):
    results: List[NameCaseResult] = Field(default_factory=list)
    options: NameCaseOptions
    count: int = 0


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False


class FileUploadResponse(BatchResponse):
    encoding: EncodingReport
    source: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
