from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """OAuth2 credential record persisted to a provider's token file."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    access_token: str = Field("", description="Bearer credential sent with API calls")
    refresh_token: str = Field("", description="Credential exchanged for a new access token")
    expires_in: int = Field(0, description="Access token lifetime in seconds")
    scope: str = Field("", description="Space or comma separated permission scopes")
    token_type: str = Field("", description="Token type reported by the provider")
    user_id: str = Field("", description="Provider-assigned subject id")
    create_date: int = Field(
        0, description="Epoch seconds at issuance; 0 means the token was never issued"
    )

    @property
    def is_unset(self) -> bool:
        return self.create_date == 0

    @property
    def expires_at(self) -> int:
        return self.create_date + self.expires_in
