from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field


T = TypeVar("T", bound=str)


class MiddlewareConfigModel(BaseModel, Generic[T]):
    type: T

    def to_runtime_args(self) -> dict[str, Any]:
        return {}


class SimpleMiddlewareModel(MiddlewareConfigModel):
    """Middleware that takes no arguments"""
    type: Literal[
            "logging",
            "timing",
            "recover",
    ]

    def to_runtime_args(self) -> dict[str, Any]:
        return super().to_runtime_args()


class HeaderMiddlewareModel(MiddlewareConfigModel):
    """Sets one request header"""
    type: Literal["header"] = "header"
    key: str = Field(..., min_length=1)
    value: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}


class BasicAuthMiddlewareModel(MiddlewareConfigModel):
    type: Literal["basic_auth"] = "basic_auth"
    username: str
    password: str

    def to_runtime_args(self) -> dict[str, Any]:
        return {"username": self.username, "password": self.password}


class BearerTokenMiddlewareModel(MiddlewareConfigModel):
    type: Literal["bearer"] = "bearer"
    token: str = Field(..., min_length=1)

    def to_runtime_args(self) -> dict[str, Any]:
        return {"token": self.token}


MiddlewareConfigUnion = Annotated[
    Union[
        SimpleMiddlewareModel,
        HeaderMiddlewareModel,
        BasicAuthMiddlewareModel,
        BearerTokenMiddlewareModel,
    ],
    Field(discriminator="type"),
]
