"""
Resolved node configuration — what the running node actually uses.

Built once at startup from Settings by ``pubnode.core.config.resolver``.
Channel names and node-info timings are derived, never stored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field


class ResolvedConfig(BaseModel):
    """Immutable runtime configuration of one node."""

    model_config = ConfigDict(frozen=True)

    # name of this node, explicit or "<hostname>_<port>"
    name: str
    # admin password
    password: str = ""
    # key used to sign admin auth tokens
    secret: str = ""

    # prefix of every internal channel name
    channel_prefix: str

    # seconds between node ping control messages
    node_ping_interval: int

    # seconds between client presence updates
    presence_ping_interval: int
    # seconds presence info stays valid after a presence ping
    presence_expire_interval: int

    # seconds a client gets to refresh an expiring connection
    expired_connection_close_delay: int

    private_channel_prefix: str
    namespace_channel_boundary: str
    user_channel_boundary: str
    user_channel_separator: str

    # no auth on connect, anonymous access and publish everywhere
    insecure: bool = False

    @computed_field
    @property
    def admin_channel(self) -> str:
        return self.channel_prefix + "." + "admin"

    @computed_field
    @property
    def control_channel(self) -> str:
        return self.channel_prefix + "." + "control"

    @computed_field
    @property
    def node_info_clean_interval(self) -> int:
        """Seconds between sweeps of stale info about other nodes."""
        return self.node_ping_interval * 3

    @computed_field
    @property
    def node_info_max_delay(self) -> int:
        """Seconds node info stays current. Must exceed two ping intervals."""
        return self.node_ping_interval * 2 + 1
