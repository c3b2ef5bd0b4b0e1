from pathlib import Path

import pytest

from batstats import cli
from tests.factories import CSV_HEADER, csv_line


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("BATSTATS_DATA_PATH", "BATSTATS_TOP_K", "BATSTATS_MAX_DIAGNOSTICS"):
        monkeypatch.delenv(name, raising=False)


def _write_dataset(path: Path) -> Path:
    lines = [CSV_HEADER]
    for idx in range(12):
        lines.append(
            csv_line(
                player_link=f"player-{idx % 4}",
                last_name=f"Player{idx % 4}",
                season=str(1990 + idx),
                homeruns=str(10 + idx),
                hits=str(100 + idx),
            )
        )
    lines.append(csv_line(player_link="broken", rbi="abc"))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_no_command_prints_usage(capsys, tmp_path: Path):
    code = cli.main(["--data", str(tmp_path / "missing.csv")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Available commands:" in out
    assert "homeruns" in out and "seasons" in out and "careers" in out


def test_missing_data_file_exits_cleanly(capsys, tmp_path: Path):
    missing = tmp_path / "missing.csv"

    code = cli.main(["--data", str(missing), "seasons"])

    out = capsys.readouterr().out
    assert code == 0
    assert f"Error: {missing} not found." in out


def test_seasons_report(capsys, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")

    code = cli.main(["--data", str(data), "seasons"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Successfully loaded 13 raw records" in out
    assert "Skipped 1 malformed rows" in out
    assert "line 14: rbi='abc'" in out
    assert "Successfully cleaned 12 records" in out
    assert "Top 10 hits in a season:" in out


def test_homeruns_report_needs_enough_players(capsys, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")

    code = cli.main(["--data", str(data), "homeruns"])

    out = capsys.readouterr().out
    assert code == 1
    assert "Top 10 home runs in a season:" in out
    assert "4 available, 10 requested" in out


def test_homeruns_report_with_smaller_top(capsys, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")

    code = cli.main(["--data", str(data), "--top", "3", "homeruns"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Top 3 homeruns in a career:" in out


def test_csv_format(capsys, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")

    code = cli.main(["--data", str(data), "--top", "2", "--format", "csv", "careers"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Rank,First Name,Last Name,From,To,Games Played" in out


def test_top_from_environment(capsys, monkeypatch, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")
    monkeypatch.setenv("BATSTATS_DATA_PATH", str(data))
    monkeypatch.setenv("BATSTATS_TOP_K", "4")

    code = cli.main(["careers"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Top 4 games played in a career:" in out


def test_column_mapping_and_profile(capsys, tmp_path: Path):
    data = tmp_path / "renamed.csv"
    original = _write_dataset(tmp_path / "seasons.csv").read_text(encoding="utf-8")
    data.write_text(original.replace("homeruns", "HR", 1), encoding="utf-8")
    profile = tmp_path / "profile.json"

    code = cli.main(
        ["--data", str(data), "--top", "2", "--column", "homeruns=HR", "--save-profile", str(profile), "homeruns"]
    )
    assert code == 0
    assert '"homeruns": "HR"' in profile.read_text(encoding="utf-8")

    capsys.readouterr()
    code = cli.main(["--data", str(data), "--top", "2", "--load-profile", str(profile), "homeruns"])
    assert code == 0
    assert "Skipped 1 malformed rows" in capsys.readouterr().out


def test_invalid_column_entry_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--column", "homeruns", "seasons"])
    assert excinfo.value.code == 2

    with pytest.raises(SystemExit):
        cli.main(["--column", "bogus=x", "seasons"])


def test_invalid_utf8_row_does_not_abort_report(capsys, tmp_path: Path):
    data = _write_dataset(tmp_path / "seasons.csv")
    with data.open("ab") as f:
        f.write(csv_line(player_link="jose-x", first_name="JOSE").replace("JOSE", "Jos\xe9").encode("latin-1") + b"\n")

    code = cli.main(["--data", str(data), "seasons"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Skipped 2 malformed rows" in out
    assert "line 15: first_name=" in out
    assert "Top 10 hits in a season:" in out


def test_missing_profile_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--load-profile", str(tmp_path / "absent.json"), "seasons"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "payload",
    ["{not json", '{"columns": {"bogus": "x"}}', '{"columns": ["homeruns"]}'],
)
def test_invalid_profile_is_usage_error(tmp_path: Path, payload):
    profile = tmp_path / "profile.json"
    profile.write_text(payload, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--load-profile", str(profile), "seasons"])
    assert excinfo.value.code == 2


def test_save_profile_without_command(capsys, tmp_path: Path):
    profile = tmp_path / "profile.json"

    code = cli.main(["--column", "player_link=playerID", "--save-profile", str(profile)])

    assert code == 0
    assert '"player_link": "playerID"' in profile.read_text(encoding="utf-8")
    assert "Available commands:" in capsys.readouterr().out
