from typing import Any
from pydantic import BaseModel, Field

class InsightRequest(BaseModel):
    # Transaction record as stored by the client; forwarded verbatim
    object: Any = Field(...)

class InsightResponse(BaseModel):
    res: str
