"""Tests for the operator CLI."""

import json
import sys

import pytest

from supaclaw.__main__ import _run_config, _run_memory, main
from supaclaw.settings import Settings


class TestMain:
    def test_usage_without_args(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["supaclaw"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_unknown_group(self, monkeypatch, capsys, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", ["supaclaw", "bogus", "cmd"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1


class TestRunConfig:
    @pytest.mark.asyncio
    async def test_show(self, settings: Settings, fake, capsys):
        fake.configs["main_config"] = {"gateway": {"mode": "local"}}
        assert await _run_config(settings, "show", []) == 0
        assert "• mode: `local`" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unknown_command(self, settings: Settings, capsys):
        assert await _run_config(settings, "explode", []) == 1


class TestRunMemory:
    @pytest.mark.asyncio
    async def test_add_then_search(self, settings: Settings, fake, capsys):
        assert await _run_memory(settings, "add", ["buy", "milk"]) == 0
        assert fake.memories[0]["content"] == "buy milk"
        capsys.readouterr()

        assert await _run_memory(settings, "search", ["milk"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert records[0]["content"] == "buy milk"
        assert records[0]["agentId"] == "main"

    @pytest.mark.asyncio
    async def test_get_missing(self, settings: Settings, fake, capsys):
        assert await _run_memory(settings, "get", ["42"]) == 0
        assert json.loads(capsys.readouterr().out) is None

    @pytest.mark.asyncio
    async def test_disabled(self, capsys):
        assert await _run_memory(Settings(), "add", ["x"]) == 0
        assert "disabled" in capsys.readouterr().out
