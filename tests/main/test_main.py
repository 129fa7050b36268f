import pytest

import main


def test_main_returns_run_demos_exit_code(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[None] = []

    def fake_run_demos() -> int:
        calls.append(None)
        return 3

    monkeypatch.setattr(main, "run_demos", fake_run_demos)

    assert main.main() == 3
    assert len(calls) == 1


def test_main_runs_configured_demos(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(main.config.app, "DEMOS", ["singleton"])

    assert main.main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Singleton works, both variables contain the same instance."
    ]
