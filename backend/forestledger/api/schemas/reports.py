from __future__ import annotations

from pydantic import BaseModel, Field


class ReportFileRequest(BaseModel):
    filename: str = Field(examples=["forest.txt"])


class ReportFileResponse(BaseModel):
    path: str
    message: str
