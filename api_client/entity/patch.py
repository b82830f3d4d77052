from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Patch:
    """One JSON Patch operation against a PayPal order."""

    op: str
    path: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        patch = {"op": self.op, "path": self.path}
        if self.op != "remove":
            patch["value"] = self.value
        return patch


@dataclass(frozen=True)
class PatchCollection:
    patches: tuple[Patch, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.patches)

    def to_list(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.patches]
