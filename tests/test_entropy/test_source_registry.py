"""Tests for EntropySourceRegistry."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from fair_range.config import FairRangeConfig
from fair_range.entropy.base import EntropySource
from fair_range.entropy.device import DeviceEntropySource
from fair_range.entropy.mock import MockUniformSource
from fair_range.entropy.registry import EntropySourceRegistry
from fair_range.entropy.system import SystemEntropySource


class _DummySource(EntropySource):
    """Minimal concrete source for registry tests."""

    @property
    def name(self) -> str:
        return "dummy"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        return b"\x00" * n

    def close(self) -> None:
        pass


class _ConfigSource(_DummySource):
    """Source whose constructor takes the config."""

    def __init__(self, config: FairRangeConfig) -> None:
        self.config = config


class TestEntropySourceRegistry:
    """Tests for the decorator-based registry with entry-point discovery."""

    def setup_method(self) -> None:
        self._saved_registry = dict(EntropySourceRegistry._registry)
        self._saved_loaded = EntropySourceRegistry._entry_points_loaded

    def teardown_method(self) -> None:
        EntropySourceRegistry._registry = self._saved_registry
        EntropySourceRegistry._entry_points_loaded = self._saved_loaded

    def test_builtins_registered(self) -> None:
        assert EntropySourceRegistry.get("system") is SystemEntropySource
        assert EntropySourceRegistry.get("device") is DeviceEntropySource
        assert EntropySourceRegistry.get("mock_uniform") is MockUniformSource

    def test_register_and_get(self) -> None:
        @EntropySourceRegistry.register("test_source")
        class TestSource(_DummySource):
            pass

        assert EntropySourceRegistry.get("test_source") is TestSource

    def test_get_unknown_raises_key_error(self) -> None:
        EntropySourceRegistry._entry_points_loaded = True
        with pytest.raises(KeyError, match="no_such_source"):
            EntropySourceRegistry.get("no_such_source")

    def test_list_available_is_sorted(self) -> None:
        EntropySourceRegistry.register("zzz_source")(_DummySource)
        EntropySourceRegistry.register("aaa_source")(_DummySource)
        available = EntropySourceRegistry.list_available()
        assert available == sorted(available)
        assert "aaa_source" in available

    def test_create_without_config(self, default_config: FairRangeConfig) -> None:
        assert isinstance(EntropySourceRegistry.create("system", default_config), SystemEntropySource)

    def test_create_passes_config(self, default_config: FairRangeConfig) -> None:
        EntropySourceRegistry.register("cfg_source")(_ConfigSource)
        source = EntropySourceRegistry.create("cfg_source", default_config)
        assert isinstance(source, _ConfigSource)
        assert source.config is default_config

    def test_create_prefers_from_config(self) -> None:
        config = FairRangeConfig(_env_file=None, mock_seed=3)  # type: ignore[call-arg]
        source = EntropySourceRegistry.create("mock_uniform", config)
        assert isinstance(source, MockUniformSource)
        assert source.seed == 3

    def test_entry_point_discovery(self) -> None:
        EntropySourceRegistry._entry_points_loaded = False
        EntropySourceRegistry._registry.pop("ep_source", None)

        mock_ep = MagicMock()
        mock_ep.name = "ep_source"
        mock_ep.value = "some.module:SomeClass"
        mock_ep.load.return_value = _DummySource

        with patch("importlib.metadata.entry_points", return_value=[mock_ep]):
            cls = EntropySourceRegistry.get("ep_source")

        assert cls is _DummySource
        mock_ep.load.assert_called_once()

    def test_builtin_takes_precedence_over_entry_point(self) -> None:
        EntropySourceRegistry._entry_points_loaded = False

        mock_ep = MagicMock()
        mock_ep.name = "system"
        mock_ep.value = "other.module:OtherClass"

        with patch("importlib.metadata.entry_points", return_value=[mock_ep]):
            EntropySourceRegistry.list_available()

        assert EntropySourceRegistry.get("system") is SystemEntropySource
        mock_ep.load.assert_not_called()

    def test_broken_entry_point_does_not_crash(self) -> None:
        EntropySourceRegistry._entry_points_loaded = False

        mock_ep = MagicMock()
        mock_ep.name = "broken_source"
        mock_ep.value = "broken.module:BrokenClass"
        mock_ep.load.side_effect = ImportError("module not found")

        with patch("importlib.metadata.entry_points", return_value=[mock_ep]):
            available = EntropySourceRegistry.list_available()

        assert "broken_source" not in available

    def test_entry_points_loaded_only_once(self) -> None:
        EntropySourceRegistry._entry_points_loaded = False

        with patch("importlib.metadata.entry_points", return_value=[]) as mock_eps:
            EntropySourceRegistry.list_available()
            EntropySourceRegistry.list_available()

        mock_eps.assert_called_once()

    def test_reset_clears_state(self) -> None:
        EntropySourceRegistry.register("reset_test")(_DummySource)
        EntropySourceRegistry._reset()
        assert "reset_test" not in EntropySourceRegistry._registry
        assert EntropySourceRegistry._entry_points_loaded is False
