from tcxkit.commands.laps import HEADERS, lap_rows, run
from tcxkit.models import HeartRate

CONFIG = {"home_timezone": "UTC", "debug": False, "tablefmt": "simple"}


def test_lap_rows(make_activity, make_lap, make_track):
    activity = make_activity(
        make_lap(time=300.5, distance=1000.0, calories=60, cadence=80, average_heart_rate=HeartRate(130)),
        make_lap(time=331.0, distance=1100.0, track=make_track([12.0, 20.0], [150, 156])),
    )

    rows = lap_rows(activity)

    assert len(rows) == 2
    assert all(len(row) == len(HEADERS) for row in rows)
    assert rows[0] == [1, "—", "1.00", "00:05:00", "5:00 min/km", 130, 0, 60, 80, "0.0", "0.0"]
    assert rows[1] == [2, "—", "1.10", "00:05:31", "5:00 min/km", 153, 156, "—", "—", "8.0", "0.0"]


def test_laps_prints_table(sample_tcx_path, capsys):
    assert run(["--input", sample_tcx_path], config=CONFIG) == 0

    out = capsys.readouterr().out
    assert out.startswith("Running (2024-05-27 12:00:00 UTC)")
    assert "Distance (km)" in out
    assert "2024-05-27 12:05:01 UTC" in out
    assert "5:00 min/km" in out


def test_laps_table_format_from_config(sample_tcx_path, capsys):
    run(["--input", sample_tcx_path], config={**CONFIG, "tablefmt": "github"})
    out = capsys.readouterr().out
    assert "| Lap" in out or "|   Lap" in out


def test_laps_activity_without_laps(tmp_path, capsys):
    path = tmp_path / "nolaps.tcx"
    path.write_text(
        "<TrainingCenterDatabase><Activities><Activity Sport='Biking'>"
        "<Id>2024-05-27T12:00:00Z</Id></Activity></Activities></TrainingCenterDatabase>"
    )

    assert run(["-i", str(path)], config=CONFIG) == 0
    assert "No laps recorded." in capsys.readouterr().out


def test_laps_reports_decode_error(tmp_path, capsys):
    path = tmp_path / "broken.tcx"
    path.write_text("<TrainingCenterDatabase><Activities>")

    assert run(["--input", str(path)], config=CONFIG) == 1
    assert "Error:" in capsys.readouterr().err


def test_laps_rejects_unknown_home_timezone(sample_tcx_path, capsys):
    assert run(["-i", sample_tcx_path], config={**CONFIG, "home_timezone": "Mars/Base"}) == 1
    assert "Error: unknown home_timezone 'Mars/Base'" in capsys.readouterr().err
