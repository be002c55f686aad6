from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class ControllerRecord(BaseModel):
    """A controller as collected by the application layer."""
    id: str
    name: Optional[str] = None
    kind: Optional[str] = None  # human, software, organisation, ...
    actions: List[str] = Field(default_factory=list)  # authorized control action ids


class ControlActionRecord(BaseModel):
    id: str
    verb: Optional[str] = None
    object: Optional[str] = None
    discrete: bool = True


class EnumerateRequest(BaseModel):
    controllers: List[ControllerRecord]
    control_actions: List[ControlActionRecord]
    interchangeable: List[List[str]] = []  # groups of substitutable controller ids
    split_teams: bool = False
    limit: Optional[int] = Field(default=None, ge=0)  # 0 = unlimited


class ValidateRequest(BaseModel):
    controllers: List[ControllerRecord]
    control_actions: List[ControlActionRecord]


class TeamResult(BaseModel):
    controllers: List[str]
    uccas: List[dict]
    counts: dict
    truncated: bool = False


class EnumerateResponse(BaseModel):
    status: str
    teams: List[TeamResult]
    labels: Dict[str, str] = {}  # action id -> "verb object"
