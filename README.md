# airwatch

A small interactive tool for following air pollution across urban zones. It
tracks four pollutants per zone (CO2, SO2, NO2 and PM2.5) over 30 days of
history, together with temperature, wind and humidity, and offers:

- current pollutant levels (the most recent day), marked `(ALTO)` when above
  the limit;
- predictions from a weighted average of the last five days of history, where
  the oldest day of that window weighs 5 and the most recent day weighs 1;
- alerts when a prediction is strictly above its limit, also written to
  `alertas.txt`;
- historical averages over the whole history, marked `(ALTO)` when above the
  limit;
- automatic recommendations for zones with at least one alert;
- a report printed to the console and saved to `reporte_zonas.csv`.

Limits (`airwatch.zones.Pollutant`): CO2 1000 ppm, SO2 20 ppb, NO2 40 ppb,
PM2.5 25 ug/m3.

## Installation

```
pip install .
```

## Usage

Start the menu from the directory that holds your data:

```
airwatch
```

At start-up the tool reads `datos_zonas.csv` from the current directory and
expects five zones. Each zone is a name followed by 30 days of
`CO2,SO2,NO2,PM2.5,temperature,wind,humidity` values, every field ending in a
comma. If the file cannot be read, five sample zones are generated instead. If
it can be read but does not hold valid data (too few values, a bad number, an
empty name or one longer than 49 characters), an error is printed and the
command exits with status 1.

Menu options:

```
1. Calcular niveles actuales
2. Predecir niveles futuros
3. Emitir alertas
4. Calcular promedios históricos
5. Generar recomendaciones
6. Guardar reporte
0. Salir
```

The menu ends on `0` or at the end of input. Alerts use the most recently
computed predictions (all zero until option 2 has been run), and
recommendations use the most recent alerts. Run option 2 before option 3, and
option 3 before option 5. Files are written to the current directory; if
`reporte_zonas.csv` cannot be created, the menu says so and carries on.

## Library use

```python
from airwatch.zones import sample_zones, predict, compute_alerts, recommendations
from airwatch.reports import write_report_csv

zones = sample_zones(5)
for zone in zones:
    predict(zone)
    compute_alerts(zone)
    print(zone.name, recommendations(zone))

write_report_csv(zones, "reporte_zonas.csv")
```

`airwatch.zones` holds the data model (`Pollutant`, `UrbanZone`) and the
calculations: `sample_zones`, `parse_zones`, `load_zones`, `predict`,
`compute_alerts`, `historical_averages`, `exceeds_limit` and
`recommendations`. Parsing errors raise `ValueError`.

`airwatch.reports` turns zones into text: `current_levels_text`,
`predictions_text`, `alerts_text`, `averages_text`, `recommendations_text`,
`report_console_text`, `alert_file_lines` and `report_csv_rows`, with
`write_alerts` and `write_report_csv` writing the files.

`airwatch.cli.run_menu(zones, input_stream, output_stream)` runs the same menu
over any pair of text streams.

## What it does not do

Data is only read once at start-up, from `datos_zonas.csv` or the built-in
samples; there is no way to enter or edit readings from the menu, and results
are not kept between runs beyond the alert and report files.