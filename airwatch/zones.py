"""Urban zones with their pollutant history, predictions and alerts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from statistics import fmean

MAX_ZONES = 5
MAX_DAYS = 30
MAX_NAME = 49
PREDICTION_WINDOW = 5
_FIELDS_PER_DAY = 7

RISK_ADVICE = (
    "Reducir tráfico vehicular",
    "Evitar actividades al aire libre",
    "Usar mascarilla si es necesario",
)
NORMAL_ADVICE = ("Niveles dentro de lo normal.",)


class Pollutant(Enum):
    """A monitored pollutant with its display label, unit and WHO limit."""

    CO2 = ("CO2", "ppm", 1000.0)
    SO2 = ("SO2", "ppb", 20.0)
    NO2 = ("NO2", "ppb", 40.0)
    PM25 = ("PM2.5", "ug/m3", 25.0)

    def __init__(self, label: str, unit: str, limit: float) -> None:
        self.label = label
        self.unit = unit
        self.limit = limit


def _no_readings() -> dict[Pollutant, float]:
    return {pollutant: 0.0 for pollutant in Pollutant}


def _no_alerts() -> dict[Pollutant, bool]:
    return {pollutant: False for pollutant in Pollutant}


@dataclass
class UrbanZone:
    """Daily pollutant and weather history of one urban zone, oldest day first."""

    name: str
    history: list[dict[Pollutant, float]]
    temperature: list[float]
    wind: list[float]
    humidity: list[float]
    prediction: dict[Pollutant, float] = field(default_factory=_no_readings)
    alerts: dict[Pollutant, bool] = field(default_factory=_no_alerts)

    def __post_init__(self) -> None:
        if not self.history:
            raise ValueError(f"zone {self.name!r} has no history")
        days = len(self.history)
        if any(len(series) != days for series in (self.temperature, self.wind, self.humidity)):
            raise ValueError(f"zone {self.name!r}: weather series must cover {days} days")
        expected = set(Pollutant)
        if any(set(day) != expected for day in self.history):
            raise ValueError(f"zone {self.name!r}: every day needs a reading for each pollutant")

    @property
    def current(self) -> dict[Pollutant, float]:
        """Readings of the most recent day."""
        return dict(self.history[-1])

    def current_weather(self) -> tuple[float, float, float]:
        """Temperature, wind and humidity of the most recent day."""
        return self.temperature[-1], self.wind[-1], self.humidity[-1]


def sample_zones(count: int = MAX_ZONES) -> list[UrbanZone]:
    """Build deterministic example data for ``count`` zones."""
    zones = []
    for i in range(count):
        history = [
            {
                Pollutant.CO2: float(800 + i * 10 + j),
                Pollutant.SO2: float(15 + i + j % 3),
                Pollutant.NO2: float(30 + i * 2 + j % 4),
                Pollutant.PM25: float(20 + i + j % 2),
            }
            for j in range(MAX_DAYS)
        ]
        zones.append(
            UrbanZone(
                name=f"Zona {i + 1}",
                history=history,
                temperature=[float(22 + i + j % 5) for j in range(MAX_DAYS)],
                wind=[float(5 + i + j % 2) for j in range(MAX_DAYS)],
                humidity=[float(60 + i * 2 + j % 10) for j in range(MAX_DAYS)],
            )
        )
    return zones


def parse_zones(text: str, count: int = MAX_ZONES) -> list[UrbanZone]:
    """Parse comma separated zone data.

    Each zone is its name followed by, for every one of the days, the four
    pollutant readings, temperature, wind and humidity, each ending in a comma.
    """
    tokens = text.split(",")
    per_zone = 1 + MAX_DAYS * _FIELDS_PER_DAY
    needed = count * per_zone
    if len(tokens) < needed:
        raise ValueError(f"expected data for {count} zones of {MAX_DAYS} days each")
    zones = []
    for start in range(0, needed, per_zone):
        name = tokens[start].strip()
        if not name:
            raise ValueError("zone name is empty")
        if len(name) > MAX_NAME:
            raise ValueError(f"zone name longer than {MAX_NAME} characters: {name!r}")
        try:
            values = [float(token) for token in tokens[start + 1 : start + per_zone]]
        except ValueError as exc:
            raise ValueError(f"invalid number in data for zone {name!r}") from exc
        days = [values[k : k + _FIELDS_PER_DAY] for k in range(0, len(values), _FIELDS_PER_DAY)]
        zones.append(
            UrbanZone(
                name=name,
                history=[dict(zip(Pollutant, day[:4])) for day in days],
                temperature=[day[4] for day in days],
                wind=[day[5] for day in days],
                humidity=[day[6] for day in days],
            )
        )
    return zones


def load_zones(path: str | Path, count: int = MAX_ZONES) -> list[UrbanZone]:
    """Read zone data from ``path``; raises OSError if it cannot be read."""
    return parse_zones(Path(path).read_text(encoding="utf-8"), count)


def predict(zone: UrbanZone) -> dict[Pollutant, float]:
    """Weighted average of the last five days, stored on the zone and returned.

    The oldest day of the window carries weight 5, the newest weight 1.
    """
    window = zone.history[-PREDICTION_WINDOW:]
    if len(window) < PREDICTION_WINDOW:
        raise ValueError(f"prediction needs at least {PREDICTION_WINDOW} days of history")
    weights = range(PREDICTION_WINDOW, 0, -1)
    total = sum(weights)
    zone.prediction = {
        pollutant: sum(day[pollutant] * weight for day, weight in zip(window, weights)) / total
        for pollutant in Pollutant
    }
    return dict(zone.prediction)


def exceeds_limit(pollutant: Pollutant, value: float) -> bool:
    """Whether ``value`` is strictly above the pollutant's limit."""
    return value > pollutant.limit


def compute_alerts(zone: UrbanZone) -> dict[Pollutant, bool]:
    """Flag every pollutant whose prediction exceeds its limit."""
    zone.alerts = {
        pollutant: exceeds_limit(pollutant, zone.prediction[pollutant]) for pollutant in Pollutant
    }
    return dict(zone.alerts)


def historical_averages(zone: UrbanZone) -> dict[Pollutant, float]:
    """Mean reading of every pollutant over the whole history."""
    return {pollutant: fmean(day[pollutant] for day in zone.history) for pollutant in Pollutant}


def recommendations(zone: UrbanZone) -> list[str]:
    """Advice for the zone according to its current alerts."""
    if any(zone.alerts.values()):
        return list(RISK_ADVICE)
    return list(NORMAL_ADVICE)