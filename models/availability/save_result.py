from typing import Literal
from pydantic import BaseModel


class SaveResult(BaseModel):
    result: Literal["saved", "rejected", "failure"]
    error: str | None = None
