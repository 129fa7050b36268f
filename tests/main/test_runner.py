import pytest

from src.core.errors.exceptions import DemoNotFoundException
from src.main import runner


@pytest.fixture
def collected_errors(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    from src.core.errors import handlers

    collected: list[str] = []

    def fake_error(message: str, *args: object, **kwargs: object) -> None:
        collected.append(message % args if args else message)

    monkeypatch.setattr(handlers.error_logger, "error", fake_error)
    return collected


def test_registry_lists_all_demos_in_order() -> None:
    assert list(runner.DEMOS) == ["singleton", "factory_method", "prototype"]


def test_run_demo_unknown_name_raises() -> None:
    with pytest.raises(DemoNotFoundException) as exc_info:
        runner.run_demo("builder")

    assert exc_info.value.additional_info == {
        "available": ["factory_method", "prototype", "singleton"]
    }


def test_run_demo_runs_registered_callable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[str] = []
    monkeypatch.setitem(runner.DEMOS, "singleton", lambda: calls.append("singleton"))

    runner.run_demo("singleton")

    assert calls == ["singleton"]


def test_run_demos_separates_demos_with_blank_line(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = runner.run_demos(["singleton", "prototype"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "Singleton works, both variables contain the same instance."
    assert lines[1] == ""
    assert len(lines) == 6


def test_run_demos_uses_configured_demos(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[str] = []
    for name in runner.DEMOS:
        monkeypatch.setitem(runner.DEMOS, name, lambda name=name: calls.append(name))
    monkeypatch.setattr(runner.config.app, "DEMOS", ["prototype", "singleton"])

    exit_code = runner.run_demos()

    assert exit_code == 0
    assert calls == ["prototype", "singleton"]


def test_run_demos_runs_every_registered_demo(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = runner.run_demos(list(runner.DEMOS))

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Singleton works" in out
    assert "{Result of the ConcreteProduct2}" in out
    assert "linked to the clone. Yay!" in out


def test_run_demos_returns_error_code_for_unknown_demo(
    capsys: pytest.CaptureFixture[str], collected_errors: list[str]
) -> None:
    exit_code = runner.run_demos(["singleton", "builder"])

    assert exit_code == 1
    assert "Singleton works" in capsys.readouterr().out
    assert len(collected_errors) == 1
    assert collected_errors[0].startswith("[Demo not found] Unknown demo: builder")
