from pydantic import BaseModel, Field


class AssistRequest(BaseModel):
    query: str = Field(..., min_length=1)


class AssistResponse(BaseModel):
    advice: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    response: str
    success: bool = True
