"""
Pydantic schemas for Slack oauth.access responses
"""
import re
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


_SCOPE_SEPARATOR = re.compile(r"[,\s]+")


class ResponseEnvelope(BaseModel):
    """Common envelope of every Slack Web API response"""
    ok: StrictBool = Field(True, description="Success flag; a missing flag counts as success")

    model_config = ConfigDict(extra="allow")


class AccessResponse(BaseModel):
    """Token issued in exchange for an authorization code"""
    access_token: StrictStr = Field(..., description="Bearer token for subsequent API calls")
    scope: StrictStr = Field(..., description="Permissions granted to the token")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def scopes(self) -> Tuple[str, ...]:
        """Individual permission names from the comma/space delimited scope"""
        return tuple(part for part in _SCOPE_SEPARATOR.split(self.scope) if part)
