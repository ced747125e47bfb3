"""Base classes for panel resources and request bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PanelModel(BaseModel):
    """A resource as returned by the panel.

    Unknown fields are kept rather than dropped so that attributes added by newer
    panel versions stay reachable through ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestOptions(BaseModel):
    """A JSON request body. Fields left as None are not sent."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
