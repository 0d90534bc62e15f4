from typing import Literal, Union

from pydantic import BaseModel

from app.models.user import Admin, User


class ResolvedPrincipal(BaseModel):
    role: Literal["user", "admin"]
    identity: Union[User, Admin]

    @property
    def id(self) -> str:
        return self.identity.id
