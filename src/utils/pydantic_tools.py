from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseModelWithMethods(BaseModel):
    """Base model for upstream payloads and response bodies.

    Upstream APIs add fields freely, so unknown keys are ignored, and numeric
    identifiers are accepted where a string is declared.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_json(self, **kwargs: Any) -> str:
        """Serialize using wire (alias) names."""
        kwargs.setdefault("by_alias", True)
        return self.model_dump_json(**kwargs)

    def to_dict(self, **kwargs: Any) -> dict[str, Any]:
        """Dump using wire (alias) names."""
        kwargs.setdefault("by_alias", True)
        return self.model_dump(**kwargs)
