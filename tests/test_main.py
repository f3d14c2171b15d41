import pytest

from minifour import config
from minifour import main as main_mod


@pytest.fixture
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main_mod, "setup_logging", lambda level, style: None)


def _feed(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_quit_at_first_prompt(monkeypatch, capsys, no_logging_setup):
    _feed(monkeypatch, "q")
    assert main_mod.main(["--no-color", "--think-delay", "0", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Welcome to Connect 4!" in out
    assert out.rstrip().endswith("Thanks for playing!")


def test_end_of_input_exits_cleanly(monkeypatch, capsys, no_logging_setup):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main_mod.main(["--think-delay", "0"]) == 0
    assert "Thanks for playing!" in capsys.readouterr().out


def test_flags_update_config(monkeypatch, no_logging_setup):
    _feed(monkeypatch, "quit")
    monkeypatch.setattr(config, "USE_COLOR", True)
    main_mod.main(["--no-color", "--clear", "--think-delay", "0.25"])
    assert config.USE_COLOR is False
    assert config.CLEAR_SCREEN is True
    assert config.AI_THINK_DELAY_SEC == 0.25


def test_bad_flag_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        main_mod.main(["--think-delay", "soon"])
    assert exc.value.code == 2
