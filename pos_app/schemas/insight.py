from pydantic import BaseModel


class InsightResponse(BaseModel):
    model: str
    insight: str
