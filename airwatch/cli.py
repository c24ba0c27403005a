"""Interactive menu for the air pollution management and prediction system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Callable, TextIO

from airwatch.reports import (
    alerts_text,
    averages_text,
    current_levels_text,
    predictions_text,
    recommendations_text,
    report_console_text,
    write_alerts,
    write_report_csv,
)
from airwatch.zones import MAX_ZONES, UrbanZone, compute_alerts, load_zones, predict, sample_zones

DATA_FILE = "datos_zonas.csv"
ALERTS_FILE = "alertas.txt"
REPORT_FILE = "reporte_zonas.csv"

MENU = (
    "\n==== SISTEMA DE GESTIÓN Y PREDICCIÓN DE CONTAMINACIÓN DEL AIRE ===="
    "\n1. Calcular niveles actuales"
    "\n2. Predecir niveles futuros"
    "\n3. Emitir alertas"
    "\n4. Calcular promedios históricos"
    "\n5. Generar recomendaciones"
    "\n6. Guardar reporte"
    "\n0. Salir\n"
    "Seleccione una opción: "
)
INVALID = "Opción no válida. Intente de nuevo.\n"
FAREWELL = "\nGracias por usar el sistema.\n"


def _predict(zones: list[UrbanZone]) -> str:
    for zone in zones:
        predict(zone)
    return predictions_text(zones)


def _alerts(zones: list[UrbanZone]) -> str:
    for zone in zones:
        compute_alerts(zone)
    try:
        write_alerts(zones, ALERTS_FILE)
    except OSError:
        pass
    return alerts_text(zones)


def _report(zones: list[UrbanZone]) -> str:
    try:
        write_report_csv(zones, REPORT_FILE)
    except OSError:
        return "No se pudo crear el archivo de reporte.\n"
    return report_console_text(zones) + f"\nReporte guardado en {REPORT_FILE}\n"


_ACTIONS: dict[int, Callable[[list[UrbanZone]], str]] = {
    1: current_levels_text,
    2: _predict,
    3: _alerts,
    4: averages_text,
    5: recommendations_text,
    6: _report,
}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_menu(zones: list[UrbanZone], input_stream: TextIO, output_stream: TextIO) -> None:
    """Show the menu and run chosen options until 0 or end of input."""
    tokens = _tokens(input_stream)
    while True:
        output_stream.write(MENU)
        output_stream.flush()
        token = next(tokens, None)
        if token is None:
            break
        try:
            choice = int(token)
        except ValueError:
            choice = None
        if choice == 0:
            break
        action = _ACTIONS.get(choice)
        output_stream.write(INVALID if action is None else action(zones))
    output_stream.write(FAREWELL)
    output_stream.flush()


def main(argv: list[str] | None = None) -> int:
    """Load zone data and start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="airwatch", description="Air pollution management and prediction system."
    )
    parser.parse_args(argv)
    try:
        zones = load_zones(DATA_FILE, MAX_ZONES)
    except OSError:
        zones = sample_zones(MAX_ZONES)
        print("Datos de ejemplo inicializados.")
    except ValueError as exc:
        print(f"airwatch: {DATA_FILE}: {exc}", file=sys.stderr)
        return 1
    else:
        print("Datos cargados desde archivo.")
    run_menu(zones, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())