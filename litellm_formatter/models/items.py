from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class BatchItem(BaseModel):
    """
    A single record flowing through a batch.

    Mirrors the workflow engine item shape: a ``json`` payload, optional
    binary attachments and optional item-lineage metadata. Unknown keys are
    kept so pass-through items come back exactly as they went in.
    """
    payload: Dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: Optional[Dict[str, Any]] = None
    paired_item: Optional[Any] = Field(None, alias="pairedItem")

    class Config:
        populate_by_name = True
        extra = "allow"

    def with_output(self, field_name: str, value: Any) -> "BatchItem":
        """
        Build the output item for a processed record.

        The payload is shallow-copied with ``field_name`` set to ``value``;
        attachments and lineage are carried over when present.
        """
        payload = dict(self.payload)
        payload[field_name] = value
        return BatchItem(
            payload=payload,
            binary=self.binary,
            paired_item=self.paired_item
        )

    def to_host(self) -> Dict[str, Any]:
        """Serialize back to the host item shape.

        Built by hand rather than with ``exclude_none`` so that ``null``
        values inside the payload survive untouched.
        """
        data: Dict[str, Any] = {"json": self.payload}
        if self.binary is not None:
            data["binary"] = self.binary
        if self.paired_item is not None:
            data["pairedItem"] = self.paired_item
        if self.model_extra:
            data.update(self.model_extra)
        return data
