import io

from airwatch.cli import main, run_menu
from airwatch.zones import MAX_DAYS, Pollutant, UrbanZone, sample_zones


def make_zone(name="Test", co2=500.0):
    day = {Pollutant.CO2: co2, Pollutant.SO2: 10.0, Pollutant.NO2: 20.0, Pollutant.PM25: 10.0}
    return UrbanZone(
        name, [dict(day) for _ in range(MAX_DAYS)], [20.0] * MAX_DAYS, [3.0] * MAX_DAYS, [50.0] * MAX_DAYS
    )


def dump(zones):
    parts = []
    for zone in zones:
        parts.append(f"{zone.name},")
        for day, t, w, h in zip(zone.history, zone.temperature, zone.wind, zone.humidity):
            parts.append("".join(f"{v}," for v in [day[p] for p in Pollutant] + [t, w, h]))
        parts.append("\n")
    return "".join(parts)


def run(zones, text):
    out = io.StringIO()
    run_menu(zones, io.StringIO(text), out)
    return out.getvalue()


def test_exit_immediately():
    output = run([make_zone()], "0\n")
    assert output.endswith("\nGracias por usar el sistema.\n")
    assert output.count("Seleccione una opción: ") == 1


def test_invalid_options():
    output = run([make_zone()], "7\nabc\n0\n")
    assert output.count("Opción no válida. Intente de nuevo.") == 2


def test_end_of_input_ends_menu():
    output = run([make_zone()], "1\n")
    assert "Zona: Test" in output
    assert output.endswith("Gracias por usar el sistema.\n")


def test_predict_then_alert_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = run([make_zone("Centro", co2=1200.0)], "2 3 0")
    assert "  ALERTA: CO2 excede el límite OMS!" in output
    assert (tmp_path / "alertas.txt").read_text(encoding="utf-8") == "Zona Centro: ALERTA CO2\n"


def test_report_written(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = run([make_zone("Centro")], "6\n0\n")
    assert "Reporte guardado en reporte_zonas.csv" in output
    content = (tmp_path / "reporte_zonas.csv").read_text(encoding="utf-8")
    assert content.splitlines()[1].startswith("Centro,")


def test_report_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "reporte_zonas.csv").mkdir()
    output = run([make_zone()], "6\n0\n")
    assert "No se pudo crear el archivo de reporte." in output
    assert "REPORTE DE ZONAS" not in output


def test_main_with_sample_data(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Datos de ejemplo inicializados.")
    assert "Zona: Zona 5" in out


def test_main_with_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    zones = sample_zones(5)
    zones[0].name = "Norte"
    (tmp_path / "datos_zonas.csv").write_text(dump(zones), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Datos cargados desde archivo.")
    assert "Zona: Norte" in out


def test_main_with_bad_data_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "datos_zonas.csv").write_text("Norte,1,2,\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert "datos_zonas.csv" in capsys.readouterr().err