"""Kinds of connection between the host and a camera."""

from __future__ import annotations

import enum


class ConnectionType(enum.Enum):
    """How the camera is reached."""

    ON_TARGET = 0
    """On the target itself, with direct sysfs access."""
    USB = 1
    """Connected to the target over USB."""
    NETWORK = 2
    """Connected to the target over the network."""
    OFFLINE = 3
    """A software module; no hardware involved."""