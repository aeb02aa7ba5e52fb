from pydantic import BaseModel


class TodoBase(BaseModel):
    name: str


class TodoCreate(TodoBase):
    pass


class TodoRead(BaseModel):
    id: int
    name: str


class ErrorResponse(BaseModel):
    error: str
