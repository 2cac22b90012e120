"""Data model definitions shared by the compute and render layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Body:
    """A planet orbiting the star. Input to the alignment classifier."""

    name: str  # Display name ("Mercuria")
    distance: float  # Orbital distance (AU-like units, used only for ordering)
    size: float  # Diameter (km)
    color: str | None = None  # Fill colour for renderers ("#8ecae6")


@dataclass(frozen=True)
class Star:
    """A light source with a drawing position."""

    name: str
    x: float  # Drawing x coordinate
    y: float  # Drawing y coordinate
    radius: float
    luminosity: float


@dataclass(frozen=True)
class StarSystem:
    """Named group of stars and the bodies orbiting them."""

    name: str
    stars: tuple[Star, ...]  # stars[0] is the primary
    bodies: tuple[Body, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Light intensity of a single body after distance sorting."""

    name: str
    light: str  # "Full" | "Partial" | "None" | "None (Multiple Shadows)"
    shadow_count: int = 0  # Closer bodies strictly larger than this one


@dataclass(frozen=True)
class PlanetPosition:
    """One body in one animation frame."""

    name: str
    px: float
    py: float
    shadow: float  # Shadow length at this position


@dataclass(frozen=True)
class TimeOfDay:
    """Parsed "H:MM" / "HH:MM" clock reading."""

    hour: int  # 0-23
    minute: int  # 0-59

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0-23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0-59, got {self.minute}")

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class ClockResult:
    """Outcome for one town clock. Exactly one of diff/error is set."""

    index: int  # 1-based position in the input list
    reading: str  # Raw input string
    diff: int | None = None  # Minutes relative to the reference; + = ahead
    error: str | None = None  # Format error message for unparseable readings

    @property
    def status(self) -> str:
        if self.diff is None:
            return "invalid"
        if self.diff > 0:
            return "ahead"
        if self.diff < 0:
            return "behind"
        return "synchronized"


@dataclass(frozen=True)
class SyncReport:
    """The sole input to the clock report renderer. Fully computed state."""

    reference: str  # Grand clock time string
    results: tuple[ClockResult, ...]

    @property
    def adjustment_count(self) -> int:
        """Parsed readings whose difference is non-zero."""
        return sum(1 for r in self.results if r.diff is not None and r.diff != 0)

    @property
    def diffs(self) -> list[int | None]:
        return [r.diff for r in self.results]
