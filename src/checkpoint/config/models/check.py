from pydantic import BaseModel, Field, field_validator

from checkpoint.config.models.middleware import MiddlewareConfigUnion


class CheckConfigModel(BaseModel):
    """A single check described in a config file"""
    name: str | None = Field(default=None, description="Check identifier")
    path: str = Field(..., min_length=1, description="Concrete request target")
    pattern: str | None = Field(default=None, description="Route pattern, defaults to path")
    method: str | None = Field(default=None, description="HTTP method, defaults to GET")
    body: str | None = Field(default=None, description="Request body")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    middleware: list[MiddlewareConfigUnion] = Field(
        default_factory=list,
        description="Middleware in declaration order, first is outermost",
    )

    @field_validator("method")
    @classmethod
    def normalize_method(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip().upper()
        return v or None


class CheckSuiteConfig(BaseModel):
    """
    A collection of checks that can be loaded from JSON or YAML.
    """
    checks: list[CheckConfigModel] = Field(default_factory=list)

    def get(self, name: str) -> CheckConfigModel:
        for check in self.checks:
            if check.name == name:
                return check
        raise KeyError(name)
