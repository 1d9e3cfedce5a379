"""Configuration Pydantic models — pure schema, no baseline defaults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class ServerConfig(BaseModel):
    """Listener settings.

    ``port`` is assumed to lie in 1-65535 but no range is enforced.
    ``secret_key_path`` and ``certificate_path`` are required only when TLS is enabled;
    that rule lives in the validator, not here, so a TLS-enabled config without paths
    still decodes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    port: StrictInt
    enable_tls: StrictBool
    secret_key_path: StrictStr = Field(alias='secret')
    certificate_path: StrictStr = Field(alias='certificate')


class Config(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    server: ServerConfig
