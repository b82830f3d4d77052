from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

# Refresh a little before PayPal would reject the token
EXPIRY_MARGIN = timedelta(seconds=60)


@dataclass(frozen=True)
class Token:
    """OAuth2 access token for the PayPal REST API."""

    token: str
    expires_at: datetime

    @classmethod
    def from_response(cls, data: dict) -> "Token":
        expires_in = int(data.get("expires_in", 0))
        return cls(
            token=data["access_token"],
            expires_at=datetime.now(UTC) + timedelta(seconds=expires_in),
        )

    def is_valid(self) -> bool:
        return self.expires_at - EXPIRY_MARGIN > datetime.now(UTC)
