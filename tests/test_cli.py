"""CLI-level smoke tests for the deal and moves commands."""
import pytest

from klondike.cli import build_parser, main


def test_deal_prints_seven_piles(capsys):
    main(["deal", "--seed", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    for i, line in enumerate(lines):
        assert line.startswith(f"{i + 1}: ")
        cells = line.split(": ", 1)[1].split(" ")
        assert len(cells) == i + 1
        assert cells[:-1] == ["##"] * i
        assert cells[-1] != "##"


def test_deal_reveal_shows_every_card(capsys):
    main(["deal", "--seed", "3", "--reveal"])
    out = capsys.readouterr().out
    assert "##" not in out
    assert out.count("(") == 21


def test_same_seed_same_deal(capsys):
    main(["deal", "--seed", "12", "--reveal"])
    first = capsys.readouterr().out
    main(["deal", "--seed", "12", "--reveal"])
    assert capsys.readouterr().out == first


def test_moves_command_runs(capsys):
    main(["moves", "--seed", "1"])
    out = capsys.readouterr().out
    assert out.splitlines()[0].startswith("1: ")
    assert "legal move" in out or "No legal tableau moves." in out


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
