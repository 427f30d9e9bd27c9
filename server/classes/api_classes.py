from typing import List

from pydantic import BaseModel


class User(BaseModel):
    id: int
    name: str


class UsersRead(BaseModel):
    users: List[User]


class HealthRead(BaseModel):
    status: str
