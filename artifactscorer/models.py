"""
Data models for ArtifactScorer.

These models are the records passed from the substat parser to the
scoring engine, plus the artifact record the application stores.
All of them are immutable; a fresh set is built for every OCR text block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SubstatType(Enum):
    """Which statistic a substat line describes."""

    ATK_ACT = "atk_act"
    ATK_PER = "atk_per"
    DEF_ACT = "def_act"
    DEF_PER = "def_per"
    HP_ACT = "hp_act"
    HP_PER = "hp_per"
    CRIT_RATE = "crit_rate"
    CRIT_DAMAGE = "crit_damage"
    ENERGY_RECHARGE = "energy_recharge"
    ELEMENTAL_MASTERY = "elemental_mastery"
    UNDETECTED = "undetected"


class ParamKind(Enum):
    """Whether a substat value is an absolute amount or a percentage."""

    ACTUAL = "actual"
    PERCENT = "percent"


class ArtifactType(Enum):
    """Equipment slot of an artifact."""

    FLOWER = "flower"
    PLUME = "plume"
    SANDS = "sands"
    GOBLET = "goblet"
    CIRCLET = "circlet"

    @property
    def display_name(self) -> str:
        return ARTIFACT_TYPE_NAMES[self]


ARTIFACT_TYPE_NAMES: dict[ArtifactType, str] = {
    ArtifactType.FLOWER: "生の花",
    ArtifactType.PLUME: "死の羽",
    ArtifactType.SANDS: "時の砂",
    ArtifactType.GOBLET: "空の杯",
    ArtifactType.CIRCLET: "理の冠",
}

MAX_ARTIFACT_LEVEL = 20


@dataclass(frozen=True)
class SubstatParam:
    """
    The value half of a substat line.

    Attributes:
        label: Normalized value text as displayed, e.g. "5.8%" or "4780".
        kind: ACTUAL for absolute amounts, PERCENT when the text carried "%".
        value: Parsed magnitude with the percent sign stripped ("5.8%" -> 5.8).
    """

    label: str
    kind: ParamKind
    value: float

    @property
    def is_percent(self) -> bool:
        return self.kind is ParamKind.PERCENT


@dataclass(frozen=True)
class Substat:
    """
    One classified substat line.

    The type is derived from the status name and the parameter kind only.
    UNDETECTED is a normal outcome for text that names no known statistic.

    Example:
        >>> sub = Substat(
        ...     type=SubstatType.ATK_PER,
        ...     status_name="攻撃力",
        ...     param=SubstatParam(label="5.8%", kind=ParamKind.PERCENT, value=5.8),
        ... )
        >>> sub.label
        '攻撃力+5.8%'
    """

    type: SubstatType
    status_name: str
    param: SubstatParam

    @property
    def label(self) -> str:
        """Human-readable reconstruction of the line."""
        return f"{self.status_name}+{self.param.label}"

    @property
    def value(self) -> float:
        return self.param.value

    @property
    def is_detected(self) -> bool:
        return self.type is not SubstatType.UNDETECTED

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the substat
        """
        return {
            "label": self.label,
            "type": self.type.value,
            "status_name": self.status_name,
            "param": {
                "label": self.param.label,
                "kind": self.param.kind.value,
                "value": self.param.value,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Substat:
        """Rebuild a substat from the output of to_dict()."""
        param = data["param"]
        return cls(
            type=SubstatType(data["type"]),
            status_name=data["status_name"],
            param=SubstatParam(
                label=param["label"],
                kind=ParamKind(param["kind"]),
                value=float(param["value"]),
            ),
        )


@dataclass(frozen=True)
class Artifact:
    """
    A stored artifact: slot, set, level and its substats.

    The id is generated by the caller (see collection.new_artifact_id);
    set_id is an opaque set identifier chosen by the UI.
    """

    id: str
    type: ArtifactType
    set_id: str
    level: int = 0
    substats: tuple[Substat, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate level range."""
        if self.level < 0 or self.level > MAX_ARTIFACT_LEVEL:
            raise ValueError(
                f"level must be between 0 and {MAX_ARTIFACT_LEVEL}, got {self.level}"
            )
        # Lists coming from callers are frozen into a tuple
        if not isinstance(self.substats, tuple):
            object.__setattr__(self, "substats", tuple(self.substats))

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the artifact
        """
        return {
            "id": self.id,
            "type": self.type.value,
            "set_id": self.set_id,
            "level": self.level,
            "substats": [s.to_dict() for s in self.substats],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Artifact:
        """Rebuild an artifact from the output of to_dict()."""
        return cls(
            id=data["id"],
            type=ArtifactType(data["type"]),
            set_id=data["set_id"],
            level=int(data.get("level", 0)),
            substats=tuple(Substat.from_dict(s) for s in data.get("substats", [])),
        )
