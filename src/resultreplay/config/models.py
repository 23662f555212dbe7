from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReplayOptions(BaseModel):
    no_color: bool = False
    delay_ms: int = Field(0, ge=0)
    divider_width: int = Field(80, ge=1)

    model_config = ConfigDict(extra="forbid")
