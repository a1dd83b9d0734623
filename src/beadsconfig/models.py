"""Pydantic model for the metadata.json configuration record."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONFIG_FILE_NAME = "metadata.json"
LEGACY_CONFIG_FILE_NAME = "config.json"

DEFAULT_DATABASE = "beads.db"
DEFAULT_JSONL_EXPORT = "issues.jsonl"
DEFAULT_DELETIONS_RETENTION_DAYS = 3

# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

LAYOUT_V1 = "v1"  # flat: files directly under the base directory (or "")
LAYOUT_V2 = "v2"  # nested: files under var/

# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------

BACKEND_SQLITE = "sqlite"
BACKEND_DOLT = "dolt"


class Config(BaseModel):
    """Contents of metadata.json.

    Fields hold exactly what was stored, so empty strings and zero mean
    "unset". Use the ``get_*`` accessors to read values with defaults
    applied.
    """

    model_config = ConfigDict(extra="ignore")

    database: str = ""
    jsonl_export: str = ""
    backend: str = ""
    layout: str = ""
    deletions_retention_days: int = Field(default=0, strict=True)

    # Deprecated: no longer used for version tracking. Kept so metadata.json
    # files written by older releases still load and save unchanged.
    last_bd_version: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_means_unset(cls, data: Any) -> Any:
        # A JSON null leaves the field (or the whole record) unset.
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @classmethod
    def default(cls) -> "Config":
        return cls(database=DEFAULT_DATABASE, jsonl_export=DEFAULT_JSONL_EXPORT)

    def get_backend(self) -> str:
        """Return the configured backend, ``"sqlite"`` when unset."""
        if not self.backend:
            return BACKEND_SQLITE
        return self.backend

    def get_deletions_retention_days(self) -> int:
        """Return the retention period for deletion records, in days."""
        if self.deletions_retention_days <= 0:
            return DEFAULT_DELETIONS_RETENTION_DAYS
        return self.deletions_retention_days

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the on-disk mapping: ``database`` always, the rest only when set."""
        data: Dict[str, Any] = {"database": self.database}
        data.update(
            self.model_dump(exclude={"database"}, exclude_defaults=True)
        )
        return data
