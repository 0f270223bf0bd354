"""Normalized HumanAPI user profile."""

from dataclasses import dataclass
from typing import Any, Optional

PROVIDER = "humanapi"


@dataclass
class Profile:
    id: Optional[str]
    email: Optional[str]
    default_time_zone: Optional[str]
    raw: str
    json: Any
    provider: str = PROVIDER

    @classmethod
    def parse(cls, body: str, data: Any) -> "Profile":
        """Map the /human/profile JSON fields; missing fields become None."""
        fields = data if isinstance(data, dict) else {}
        return cls(
            id=fields.get("userId"),
            email=fields.get("email"),
            default_time_zone=fields.get("defaultTimeZone"),
            raw=body,
            json=data,
        )

    def to_dict(self, include_raw: bool = True) -> dict:
        rv = {
            "provider": self.provider,
            "id": self.id,
            "email": self.email,
            "defaultTimeZone": self.default_time_zone,
            "_json": self.json,
        }
        if include_raw:
            rv["_raw"] = self.raw
        return rv
