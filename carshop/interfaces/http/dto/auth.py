from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from carshop.domain.users.entities import User


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class SignupRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)
    fullname: str = Field(min_length=1, max_length=128)


class ScoreUpdateRequestDTO(BaseModel):
    diff: int


class UserDTO(BaseModel):
    """Public view of a user; the password hash never leaves the service."""

    id: str = Field(alias="_id")
    username: str
    fullname: str
    score: int
    is_admin: bool = Field(False, alias="isAdmin")

    model_config = ConfigDict(validate_by_name=True)

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            username=user.username,
            fullname=user.fullname,
            score=user.score,
            is_admin=user.is_admin,
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
