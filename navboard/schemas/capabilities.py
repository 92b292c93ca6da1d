from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool


class AccessFlags(BaseModel):
    work_pools: StrictBool = False
    artifacts: StrictBool = False


class ReadFlags(BaseModel):
    work_pool: StrictBool = False


class Capabilities(BaseModel):
    access: AccessFlags = Field(default_factory=AccessFlags)
    read: ReadFlags = Field(default_factory=ReadFlags)

    @classmethod
    def allow_all(cls) -> "Capabilities":
        """Every flag on, as on a single-user dashboard with no auth layer."""
        return cls(
            access=AccessFlags(work_pools=True, artifacts=True),
            read=ReadFlags(work_pool=True),
        )
