"""
Tests for the config resolver — node name fallback and derived values.
"""

import logging

import pydantic
import pytest

from pubnode.core.config.loader import Settings
from pubnode.core.config.resolver import node_name, resolve


def _failing_hostname() -> str:
    raise OSError("no hostname")


class TestNodeName:
    def test_explicit_name_wins(self):
        s = Settings(name="node-a", port="8000")
        assert node_name(s, hostname=_failing_hostname) == "node-a"

    def test_hostname_and_port_fallback(self):
        s = Settings(port="8001")
        assert node_name(s, hostname=lambda: "box") == "box_8001"

    def test_failed_lookup_uses_placeholder(self, caplog):
        s = Settings(name="", port="8000")
        with caplog.at_level(logging.ERROR):
            assert node_name(s, hostname=_failing_hostname) == "?_8000"
        assert "no hostname" in caplog.text


class TestResolve:
    def test_passthrough_values(self):
        s = Settings(
            name="n",
            password="pw",
            secret="sec",
            presence_ping_interval=3,
            presence_expire_interval=9,
            expired_connection_close_delay=4,
            private_channel_prefix="!",
            namespace_channel_boundary="/",
            user_channel_boundary="@",
            user_channel_separator=";",
            insecure=True,
        )
        cfg = resolve(s)
        assert cfg.name == "n"
        assert cfg.password == "pw"
        assert cfg.secret == "sec"
        assert cfg.presence_ping_interval == 3
        assert cfg.presence_expire_interval == 9
        assert cfg.expired_connection_close_delay == 4
        assert cfg.private_channel_prefix == "!"
        assert cfg.namespace_channel_boundary == "/"
        assert cfg.user_channel_boundary == "@"
        assert cfg.user_channel_separator == ";"
        assert cfg.insecure is True

    @pytest.mark.parametrize("prefix", ["pubnode", "x", "a.b"])
    def test_channel_names_derived_from_prefix(self, prefix: str):
        cfg = resolve(Settings(name="n", channel_prefix=prefix))
        assert cfg.admin_channel == prefix + ".admin"
        assert cfg.control_channel == prefix + ".control"

    @pytest.mark.parametrize("ping", [0, 1, 5, 60, 3600])
    def test_node_info_timings(self, ping: int):
        cfg = resolve(Settings(name="n", node_ping_interval=ping))
        assert cfg.node_info_clean_interval == 3 * ping
        assert cfg.node_info_max_delay == 2 * ping + 1
        assert cfg.node_info_max_delay > 2 * cfg.node_ping_interval

    def test_presence_order_not_enforced(self):
        cfg = resolve(Settings(name="n", presence_ping_interval=60, presence_expire_interval=5))
        assert cfg.presence_expire_interval < cfg.presence_ping_interval

    def test_empty_name_failed_lookup(self):
        cfg = resolve(Settings(name="", port="8000"), hostname=_failing_hostname)
        assert cfg.name == "?_8000"

    def test_resolved_config_is_frozen(self):
        cfg = resolve(Settings(name="n"))
        with pytest.raises(pydantic.ValidationError):
            cfg.channel_prefix = "other"

    def test_derived_fields_not_settable(self):
        cfg = resolve(Settings(name="n"))
        with pytest.raises((AttributeError, pydantic.ValidationError)):
            cfg.admin_channel = "elsewhere"

    def test_dump_includes_derived_fields(self):
        data = resolve(Settings(name="n", channel_prefix="p", node_ping_interval=2)).model_dump()
        assert data["control_channel"] == "p.control"
        assert data["node_info_clean_interval"] == 6
        assert data["node_info_max_delay"] == 5
