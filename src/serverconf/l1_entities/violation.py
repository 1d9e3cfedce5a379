"""L1 entity: a single failed validation rule."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str  # dotted file-key path, e.g. 'server.secret'
    rule: str
    message: str

    def __str__(self) -> str:
        return f'{self.location}: {self.message} [{self.rule}]'
