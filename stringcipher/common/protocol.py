"""Configuration model using Pydantic."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

# Key of the legacy AESUtility. Only used when nothing else is configured.
LEGACY_KEY = "panda&beta#12345"

CipherMode = Literal["gcm", "ecb"]


class CipherConfig(BaseModel):
    model_config = {"frozen": True}

    key: str = Field(LEGACY_KEY, min_length=1, description="Symmetric secret, UTF-8 text")
    mode: CipherMode = Field("gcm", description="gcm (AES-GCM) or ecb (legacy AES-128-ECB)")

    @field_validator('mode', mode='before')
    @classmethod
    def mode_lowercase(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def uses_legacy_key(self) -> bool:
        return self.key == LEGACY_KEY


def parse_config(data: dict, key: Optional[str] = None, mode: Optional[str] = None) -> CipherConfig:
    """Build a CipherConfig from a dict, letting explicit arguments win."""
    values = {k: v for k, v in data.items() if v is not None}
    if key is not None:
        values['key'] = key
    if mode is not None:
        values['mode'] = mode
    return CipherConfig(**values)
