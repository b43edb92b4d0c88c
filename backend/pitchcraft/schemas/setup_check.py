from typing import Literal

from pydantic import BaseModel

CheckStatus = Literal["success", "warning", "error"]


class ConfigCheck(BaseModel):
    status: CheckStatus
    message: str
    details: dict = {}


class SetupCheckRead(BaseModel):
    status: CheckStatus
    message: str
    demo_mode: bool
    checks: dict[str, ConfigCheck]
    recommendations: dict[str, list[str]]
