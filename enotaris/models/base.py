from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Backend-owned JSON record. Unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")


class Body(BaseModel):
    """Request body. Only the fields a caller sets are sent."""

    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
