from pydantic import BaseModel


class LoadRequest(BaseModel):
    path: str
