from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

# (value, label) in the order the status picker shows them
STATUSES: List[Tuple[str, str]] = [
    ("assigned", "Assigned"),
    ("under-investigation", "Under Investigation"),
    ("closed", "Closed"),
]

EDITABLE_FIELDS = ("caseHeading", "query", "applicableArticle", "description", "status")
REQUIRED_FIELDS = ("caseHeading", "query", "status")

# wire key -> attribute name
_ATTRS = {
    "caseHeading": "case_heading",
    "query": "query",
    "applicableArticle": "applicable_article",
    "description": "description",
    "status": "status",
}

_TONES = {
    "assigned": "affirmative",
    "closed": "negative",
    "under-investigation": "caution",
}


def status_tone(status: str) -> str:
    return _TONES.get(status, "neutral")


def status_label(status: str) -> str:
    for value, label in STATUSES:
        if value == status:
            return label
    return status or "unknown"


def status_from_label(label: str) -> str:
    """Inverse of status_label for the picker; unknown labels pass through."""
    for value, known in STATUSES:
        if known == label:
            return value
    return label


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Case:
    id: Any
    case_heading: str = ""
    query: str = ""
    applicable_article: str = ""
    description: str = ""
    status: str = ""
    tags: Any = ""  # read-only, string or list of strings

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Case":
        """Decode one case object as the backend returns it."""
        if not isinstance(data, dict):
            raise ValueError(f"Case must be a JSON object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Case object has no 'id'")
        values = {attr: _text(data.get(key)) for key, attr in _ATTRS.items()}
        tags = data.get("tags")
        return cls(id=data["id"], tags="" if tags is None else tags, **values)

    def editable_values(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for key, attr in _ATTRS.items()}

    @property
    def tags_text(self) -> str:
        if isinstance(self.tags, (list, tuple)):
            return ", ".join(str(t) for t in self.tags)
        return _text(self.tags)
