from pydantic import BaseModel


class CheckReport(BaseModel):
    directories: int = 0
    notes: int = 0
    stamped: list[str] = []
    duration: float = 0.0
