"""Text and file reports over a collection of urban zones."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

from airwatch.zones import (
    Pollutant,
    UrbanZone,
    exceeds_limit,
    historical_averages,
    recommendations,
)

SEPARATOR = "---------------------------------------------"
WIDE_SEPARATOR = "--------------------------------------------------------------------------------"
CSV_HEADER = [
    "Zona",
    "CO2 (ppm)",
    "SO2 (ppb)",
    "NO2 (ppb)",
    "PM2.5 (ug/m3)",
    "Temp (C)",
    "Viento (km/h)",
    "Humedad (%)",
    "Pred_CO2",
    "Pred_SO2",
    "Pred_NO2",
    "Pred_PM2.5",
    "Alerta_CO2",
    "Alerta_SO2",
    "Alerta_NO2",
    "Alerta_PM2.5",
]


def _label(pollutant: Pollutant) -> str:
    return f"{pollutant.label + ':':<7}"


def _block(title: str, zones: Iterable[UrbanZone], body) -> str:
    lines = ["", title]
    for zone in zones:
        lines.append(f"Zona: {zone.name}")
        lines.extend(body(zone))
        lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def current_levels_text(zones: Iterable[UrbanZone]) -> str:
    """Current readings and weather for every zone."""

    def body(zone):
        current = zone.current
        for p in Pollutant:
            mark = "(ALTO)" if exceeds_limit(p, current[p]) else ""
            yield f"  {_label(p)}{current[p]:.2f} {p.unit} {mark}"
        temperature, wind, humidity = zone.current_weather()
        yield f"  Temperatura: {temperature:.1f}°C"
        yield f"  Viento:      {wind:.1f} km/h"
        yield f"  Humedad:     {humidity:.1f}%"

    return _block("--- Niveles actuales de contaminación por zona ---", zones, body)


def predictions_text(zones: Iterable[UrbanZone]) -> str:
    """The stored prediction of every zone."""

    def body(zone):
        for p in Pollutant:
            yield f"  Predicción {_label(p)}{zone.prediction[p]:.2f} {p.unit}"

    return _block("--- Predicción de niveles futuros (promedio últimos 5 días) ---", zones, body)


def alerts_text(zones: Iterable[UrbanZone]) -> str:
    """The stored alerts of every zone."""

    def body(zone):
        raised = [p for p in Pollutant if zone.alerts[p]]
        for p in raised:
            yield f"  ALERTA: {p.label} excede el límite OMS!"
        if not raised:
            yield "  Sin alertas."

    return _block("--- Alertas por predicción de contaminación ---", zones, body)


def alert_file_lines(zones: Iterable[UrbanZone]) -> list[str]:
    """One line per raised alert, as stored in the alerts file."""
    return [
        f"Zona {zone.name}: ALERTA {p.label}"
        for zone in zones
        for p in Pollutant
        if zone.alerts[p]
    ]


def write_alerts(zones: Iterable[UrbanZone], path: str | Path) -> None:
    """Write the alert lines to ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.writelines(f"{line}\n" for line in alert_file_lines(zones))


def averages_text(zones: Iterable[UrbanZone]) -> str:
    """Historical average of every pollutant, flagging those above the limit."""

    def body(zone):
        for p, average in historical_averages(zone).items():
            yield f"  Promedio {p.label}: {average:.2f} {p.unit}"
            if exceeds_limit(p, average):
                yield "    (ALTO)"

    return _block("--- Promedios históricos (últimos 30 días) ---", zones, body)


def recommendations_text(zones: Iterable[UrbanZone]) -> str:
    """Advice for every zone according to its alerts."""

    def body(zone):
        for advice in recommendations(zone):
            yield f"  - {advice}"

    return _block("--- Recomendaciones automáticas por zona ---", zones, body)


def report_csv_rows(zones: Iterable[UrbanZone]) -> list[list[str]]:
    """Header and one row per zone for the CSV report."""
    rows = [list(CSV_HEADER)]
    for zone in zones:
        current = zone.current
        row = [zone.name]
        row += [f"{current[p]:.2f}" for p in Pollutant]
        row += [f"{value:.2f}" for value in zone.current_weather()]
        row += [f"{zone.prediction[p]:.2f}" for p in Pollutant]
        row += ["1" if zone.alerts[p] else "0" for p in Pollutant]
        rows.append(row)
    return rows


def write_report_csv(zones: Iterable[UrbanZone], path: str | Path) -> None:
    """Write the CSV report to ``path``."""
    with open(path, "w", encoding="utf-8", newline="") as stream:
        csv.writer(stream, lineterminator="\n").writerows(report_csv_rows(zones))


def report_console_text(zones: Iterable[UrbanZone]) -> str:
    """Tabular report of current values, predictions and alerts."""
    lines = [
        "",
        "================= REPORTE DE ZONAS =================",
        f"{'Zona':<10} {'CO2':<10} {'SO2':<10} {'NO2':<10} {'PM2.5':<12} "
        f"{'Temp':<8} {'Viento':<10} {'Humedad':<10}",
        WIDE_SEPARATOR,
    ]
    for zone in zones:
        current = zone.current
        temperature, wind, humidity = zone.current_weather()
        lines.append(
            f"{zone.name:<10} {current[Pollutant.CO2]:<10.2f} {current[Pollutant.SO2]:<10.2f} "
            f"{current[Pollutant.NO2]:<10.2f} {current[Pollutant.PM25]:<12.2f} "
            f"{temperature:<8.1f} {wind:<10.1f} {humidity:<10.1f}"
        )
        predicted = ", ".join(f"{p.label}={zone.prediction[p]:.2f}" for p in Pollutant)
        lines.append(f"  Predicción: {predicted}")
        flags = ", ".join(f"{p.label}={'SI' if zone.alerts[p] else 'NO'}" for p in Pollutant)
        lines.append(f"  Alertas: {flags}")
        lines.append(WIDE_SEPARATOR)
    return "\n".join(lines) + "\n"