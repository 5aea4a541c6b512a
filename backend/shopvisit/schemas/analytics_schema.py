from typing import List

from pydantic import BaseModel


class AnalyticsResponse(BaseModel):
    labels: List[str]
    values: List[int]
