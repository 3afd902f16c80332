from pydantic import BaseModel
from typing import Optional


# Fields are optional so missing values get a 400 from the handler instead of a 422


class PresignedUrlRequest(BaseModel):
    filename: Optional[str] = None
    contentType: Optional[str] = None


class PresignedUrlResponse(BaseModel):
    url: str
    filePath: str


class AnalyzeResumeRequest(BaseModel):
    userId: Optional[str] = None
    type: Optional[str] = None
    filePath: Optional[str] = None
    contentType: Optional[str] = None
    resumeText: Optional[str] = None
    mode: Optional[str] = None


class ChatRequest(BaseModel):
    userId: Optional[str] = None
    message: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
