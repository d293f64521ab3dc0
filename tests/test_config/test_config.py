from __future__ import annotations

import pytest

from selectorkit.config import SelectorkitConfig


class TestSelectorkitConfig:
    def test_default_values(self) -> None:
        cfg = SelectorkitConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.json_indent is None

    def test_custom_values(self) -> None:
        cfg = SelectorkitConfig(log_level="DEBUG", json_indent=2)
        assert cfg.log_level == "DEBUG"
        assert cfg.json_indent == 2

    def test_frozen_immutability(self) -> None:
        cfg = SelectorkitConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "INFO"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert SelectorkitConfig() == SelectorkitConfig()
        assert SelectorkitConfig(json_indent=2) != SelectorkitConfig(json_indent=4)

    def test_hashable(self) -> None:
        cfg = SelectorkitConfig()
        assert cfg in {cfg}
