from pydantic import BaseModel


class BuildReport(BaseModel):
    docs: int = 0
    image_entries: int = 0
    sidebar_items: int = 0
    duration: float = 0.0
