import json

import pytest

import main


def test_headless_prints_path(capsys):
    status = main.main(["--headless", "--rows", "3", "--cols", "3"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Expanded 9 nodes" in out
    assert "(0,0) -> (1,0) -> (2,0) -> (2,1) -> (2,2)" in out


def test_headless_custom_endpoints(capsys):
    status = main.main(["--headless", "--rows", "2", "--cols", "4", "--start", "3", "1", "--goal", "3", "0"])
    assert status == 0
    assert "(3,1) -> (3,0)" in capsys.readouterr().out


def test_headless_map_without_path(tmp_path, capsys):
    path = tmp_path / "blocked.json"
    path.write_text(json.dumps({"map": [[0, 1, 0]]}))
    status = main.main(["--headless", "--map", str(path)])
    assert status == 1
    assert "No path" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--headless", "--rows", "0"],
        ["--headless", "--rows", "3", "--cols", "3", "--goal", "5", "5"],
        ["--headless", "--map", "does-not-exist.json"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as excinfo:
        main.main(argv)
    assert excinfo.value.code == 2


def test_windowed_mode_runs_visualizer(monkeypatch):
    import gridsearch.app

    created = {}

    class FakeVisualizer:
        def __init__(self, **kwargs):
            created.update(kwargs)

        def run(self):
            created["ran"] = True

    monkeypatch.setattr(gridsearch.app, "Visualizer", FakeVisualizer)
    status = main.main(["--rows", "4", "--cols", "5", "--max-fps", "10", "--paused"])
    assert status == 0
    assert created["ran"]
    assert created["max_fps"] == 10
    assert created["paused"] is True
    assert created["goal"] == (4, 3)
    assert created["grid"].rows == 4 and created["grid"].cols == 5


def test_max_fps_must_be_an_integer():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--max-fps", "fast"])
    assert excinfo.value.code == 2
