"""Tests for the command line entry point."""

import pytest

from chip8.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["game.ch8"])
    assert args.rom == "game.ch8"
    assert args.ipf == 10
    assert args.headless is None
    assert not args.normalize_shift_flag


def test_headless_run_prints_screen(tmp_path, capsys):
    rom = tmp_path / "zero.ch8"
    # LD V0, 0; LD F, V0; DRW V0, V0, 5; JP 0x206
    rom.write_bytes(bytes([0x60, 0x00, 0xF0, 0x29, 0xD0, 0x05, 0x12, 0x06]))

    assert main([str(rom), "--headless", "2", "--log-level", "ERROR"]) == 0

    lines = capsys.readouterr().out.splitlines()[-32:]
    assert lines[0].startswith("####.")
    assert lines[1].startswith("#..#.")


def test_headless_fault_exit_code(tmp_path, capsys):
    rom = tmp_path / "bad.ch8"
    rom.write_bytes(bytes([0xFF, 0xFF]))
    assert main([str(rom), "--headless", "1", "--log-level", "CRITICAL"]) == 1


def test_missing_rom(tmp_path):
    assert main([str(tmp_path / "missing.ch8"), "--headless", "1", "--log-level", "CRITICAL"]) == 1


def test_color_scheme_choices():
    assert build_parser().parse_args(["game.ch8", "--color-scheme", "amber"]).color_scheme == "amber"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["game.ch8", "--color-scheme", "purple"])
