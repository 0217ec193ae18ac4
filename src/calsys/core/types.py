from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Upper bound of every calendar's convertible range (signed 32-bit day count)
JD_MAX = 2**31 - 1

@dataclass(frozen=True)
class CivilDate:
    calendar: str
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.calendar}:{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class DateInfo:
    jd: int
    date: CivilDate
    weekday: int  # 0=Sun..6=Sat
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar system."""
    kind: str
    name: str
    jd_start: int
    jd_end: int
    months: int
    month_names: Tuple[str, ...]
    # system-specific knobs (e.g. French max_year), stored as sorted (key, value) pairs
    options: Union[Tuple[Tuple[str, Any], ...], Mapping[str, Any]] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "month_names", tuple(self.month_names))
        object.__setattr__(self, "options", tuple(sorted(dict(self.options).items())))
        if self.months <= 0:
            raise ValueError("months must be positive")
        if self.jd_start > self.jd_end:
            raise ValueError("Require jd_start <= jd_end")
        if self.jd_end > JD_MAX:
            raise ValueError(f"jd_end must not exceed {JD_MAX}")
        if len(self.month_names) != self.months:
            raise ValueError(
                f"month_names has {len(self.month_names)} entries, expected {self.months}"
            )

    @staticmethod
    def like(name: str) -> "CalendarSpec":
        from calsys.engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalendarSpec":
        """Copy with top-level fields replaced; unknown keys go into options."""
        top = {k: v for k, v in kwargs.items() if k in self.__dataclass_fields__}
        opts = {k: v for k, v in kwargs.items() if k not in self.__dataclass_fields__}
        if opts:
            top["options"] = {**dict(self.options), **opts}
        return replace(self, **top)

    def option(self, key: str, default: Any = None) -> Any:
        return dict(self.options).get(key, default)
