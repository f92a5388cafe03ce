import pytest

from memorygame import app


@pytest.mark.parametrize("size", ["1", "11"])
def test_main_rejects_out_of_range_size(size, monkeypatch):
    started: list[int] = []
    monkeypatch.setattr(app, "MemoryWindow", lambda **kwargs: started.append(kwargs))
    monkeypatch.setattr(app, "run", lambda: None)

    with pytest.raises(SystemExit):
        app.main(["--size", size])
    assert started == []


def test_main_builds_window_and_runs(monkeypatch):
    started: list[dict] = []
    ran: list[bool] = []
    monkeypatch.setattr(app, "MemoryWindow", lambda **kwargs: started.append(kwargs))
    monkeypatch.setattr(app, "run", lambda: ran.append(True))
    monkeypatch.setattr(app, "setup_logging", lambda level: None)

    assert app.main(["--size", "6", "--seed", "3"]) == 0
    assert started == [{"size": 6, "seed": 3}]
    assert ran == [True]
