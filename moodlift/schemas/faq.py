from pydantic import BaseModel, ConfigDict


class FaqRead(BaseModel):
    id: str
    page: str
    question: str
    answer: str
    sort_order: int
    active: bool

    model_config = ConfigDict(from_attributes=True)
