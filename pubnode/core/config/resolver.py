"""
Config resolver — turns raw Settings into the node's ResolvedConfig.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable

from pubnode.core.config.loader import Settings
from pubnode.core.models.node import ResolvedConfig

logger = logging.getLogger(__name__)

# Used in place of the hostname when it cannot be looked up
UNKNOWN_HOST = "?"


def node_name(settings: Settings, hostname: Callable[[], str] = socket.gethostname) -> str:
    """Return the configured node name, or ``<hostname>_<port>``.

    A failed hostname lookup is logged and replaced by ``"?"``.
    """
    if settings.name:
        return settings.name

    try:
        host = hostname()
    except OSError as e:
        logger.error("Cannot determine hostname: %s", e)
        host = UNKNOWN_HOST
    return host + "_" + settings.port


def resolve(settings: Settings, hostname: Callable[[], str] = socket.gethostname) -> ResolvedConfig:
    """Build the runtime configuration from *settings*."""
    config = ResolvedConfig(
        name=node_name(settings, hostname),
        password=settings.password,
        secret=settings.secret,
        channel_prefix=settings.channel_prefix,
        node_ping_interval=settings.node_ping_interval,
        presence_ping_interval=settings.presence_ping_interval,
        presence_expire_interval=settings.presence_expire_interval,
        expired_connection_close_delay=settings.expired_connection_close_delay,
        private_channel_prefix=settings.private_channel_prefix,
        namespace_channel_boundary=settings.namespace_channel_boundary,
        user_channel_boundary=settings.user_channel_boundary,
        user_channel_separator=settings.user_channel_separator,
        insecure=settings.insecure,
    )
    logger.info("Resolved config for node '%s'", config.name)
    return config
