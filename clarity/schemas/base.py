from typing import Any, ClassVar, FrozenSet

from pydantic import BaseModel


class InputModel(BaseModel):
    """Request body with an explicit field allow-list."""

    NULLABLE: ClassVar[FrozenSet[str]] = frozenset()
    JSON_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    class Config:
        extra = "forbid"

    def to_row(self, partial: bool = False) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=partial, exclude={"user_id"})
        json_keys = set(self.JSON_FIELDS) & set(data)
        if json_keys:
            data.update(self.model_dump(mode="json", include=json_keys))
        return {k: v for k, v in data.items() if v is not None or (partial and k in self.NULLABLE)}
