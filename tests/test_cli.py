"""Tests for CLI argument parsing."""

import pytest

from cli import RTUI_VERSION, ParsedArgs, build_session, create_parser, parse_args
from model import Mode, Panel


class TestParseArgs:
    """Test parse_args()."""

    def test_no_arguments(self):
        args = parse_args([])
        assert args == ParsedArgs(source="", destination="", excludes=[], program="rsync")

    def test_source_only(self):
        assert parse_args(["src/"]).source == "src/"

    def test_source_and_destination(self):
        args = parse_args(["src/", "host:/backup/"])
        assert (args.source, args.destination) == ("src/", "host:/backup/")

    def test_excludes_repeatable(self):
        args = parse_args(["--exclude", "*.tmp", "--exclude", ".cache", "a", "b"])
        assert args.excludes == ["*.tmp", ".cache"]

    def test_rsync_override(self):
        assert parse_args(["--rsync", "/opt/rsync/bin/rsync"]).program == "/opt/rsync/bin/rsync"

    def test_too_many_paths(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["a", "b", "c"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert RTUI_VERSION in capsys.readouterr().out

    def test_help_is_structured(self):
        text = create_parser().format_help()
        assert f"Version: {RTUI_VERSION}" in text
        assert "--exclude <pattern>" in text


class TestBuildSession:
    """Test build_session()."""

    def test_prefills_paths(self):
        session = build_session(parse_args(["src/", "dst/"]))
        assert (session.source, session.destination) == ("src/", "dst/")
        assert session.active_panel is Panel.SOURCE
        assert session.mode is Mode.NORMAL

    def test_excludes_reach_command(self):
        session = build_session(parse_args(["--exclude", "*.o", "s", "d"]))
        assert session.command_preview() == "rsync -a -v --progress -h --exclude *.o s d"

    def test_program_reaches_command(self):
        session = build_session(parse_args(["--rsync", "rsync3", "s", "d"]))
        assert session.command_preview().startswith("rsync3 ")

    def test_defaults(self):
        session = build_session(ParsedArgs())
        assert session.logs == []
        assert session.running is False
