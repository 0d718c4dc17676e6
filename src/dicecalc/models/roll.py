from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DieKind(str, Enum):
    STANDARD = "standard"
    FUDGE = "fudge"


class DieSpec(BaseModel):
    """A parsed dice expression such as ``2d6+3`` or ``4dF``."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    kind: DieKind = DieKind.STANDARD
    sides: Optional[int] = Field(default=None, ge=1)
    modifier: int = 0

    @property
    def is_fudge(self) -> bool:
        return self.kind == DieKind.FUDGE

    @property
    def max_face(self) -> int:
        return 1 if self.is_fudge else self.sides

    @property
    def notation(self) -> str:
        faces = "F" if self.is_fudge else str(self.sides)
        mod = f"{self.modifier:+d}" if self.modifier else ""
        return f"{self.count}d{faces}{mod}"


class RollOptions(BaseModel):
    quiet: bool = False
    exploding: bool = False
    average: bool = False
    repeat: Optional[int] = Field(default=None, ge=1)
    highest: Optional[int] = Field(default=None, ge=0)
    lowest: Optional[int] = Field(default=None, ge=0)
    drop_highest: Optional[int] = Field(default=None, ge=0)
    drop_lowest: Optional[int] = Field(default=None, ge=0)

    @property
    def times(self) -> int:
        return self.repeat or 1


class KeepPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    highest: bool = True


class RollResult(BaseModel):
    spec: DieSpec
    pool: list[int] = Field(default_factory=list)
    kept: list[int] = Field(default_factory=list)
    policy: KeepPolicy
    total: int = 0

    @property
    def filtered(self) -> bool:
        return len(self.kept) < len(self.pool)
