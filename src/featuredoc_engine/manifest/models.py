"""Feature records read from the manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from featuredoc_engine.manifest.dates import normalize_date


def _raw_date(value: Any) -> str | None:
    """Keep a manifest date as text; YAML may hand us date objects."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


@dataclass
class Feature:
    """One manifest entry plus its normalized dates."""

    slug: str
    name: str
    doc_url: str | None = None
    purpose: str = ""
    current_status: str = ""
    lifecycle_stage: str = ""
    planned_ga: str | None = None
    decision_needed_by: str | None = None
    preview_start: str | None = None
    last_update: str | None = None
    policies: dict[str, Any] = field(default_factory=dict)

    planned_date: datetime | None = field(default=None, init=False)
    decision_date: datetime | None = field(default=None, init=False)
    preview_date: datetime | None = field(default=None, init=False)
    last_update_date: datetime | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.planned_date = normalize_date(self.planned_ga)
        self.decision_date = normalize_date(self.decision_needed_by)
        self.preview_date = normalize_date(self.preview_start)
        self.last_update_date = normalize_date(self.last_update)

    @classmethod
    def from_dict(cls, data: dict) -> Feature:
        name = str(data.get("name") or "")
        return cls(
            slug=str(data.get("slug") or name),
            name=name,
            doc_url=data.get("docUrl") or None,
            purpose=str(data.get("purpose") or ""),
            current_status=str(data.get("currentStatus") or ""),
            lifecycle_stage=str(data.get("lifecycleStage") or ""),
            planned_ga=_raw_date(data.get("plannedGA")),
            decision_needed_by=_raw_date(data.get("decisionNeededBy")),
            preview_start=_raw_date(data.get("previewStart")),
            last_update=_raw_date(data.get("lastUpdate")),
            policies={str(k): v for k, v in (data.get("policies") or {}).items()},
        )

    @property
    def display_name(self) -> str:
        """Markdown link to the docs when a URL is known, else the bare name."""
        if self.doc_url:
            return f"[{self.name}]({self.doc_url})"
        return self.name

    def covers(self, policy_key: str) -> bool:
        return bool(self.policies.get(policy_key))
