import pytest

from durcalc import cli


def test_parse_args_eval_mode():
    args = cli.parse_args(["eval", "1h", "30m", "-", "5m", "+", "10s"])
    assert args.command == "eval"
    assert args.tokens == ["1h", "30m", "-", "5m", "+", "10s"]

    args = cli.parse_args(["seconds", "1w"])
    assert args.command == "seconds"
    assert args.tokens == ["1w"]

    args = cli.parse_args(["eval"])
    assert args.tokens == []


def test_parse_args_keeps_option_like_tokens_in_order():
    args = cli.parse_args(["eval", "-1d", "+", "2d"])
    assert args.command == "eval"
    assert args.tokens == ["-1d", "+", "2d"]

    args = cli.parse_args(["seconds", "-5m"])
    assert args.tokens == ["-5m"]


def test_parse_args_rejects_unknown_serve_options(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_args(["serve", "--bogus"])
    assert excinfo.value.code == 2
    assert "unrecognized arguments: --bogus" in capsys.readouterr().err


def test_parse_args_serve_defaults():
    args = cli.parse_args(["serve"])
    assert args.command == "serve"
    assert args.host == cli.DEFAULT_HOST
    assert args.port == cli.DEFAULT_PORT
    assert args.log_level == "info"

    args = cli.parse_args(["serve", "--port", "9000", "--log-level", "debug"])
    assert args.port == 9000
    assert args.log_level == "debug"
