"""Transports a DiffProvider can use to reach GitHub."""

from __future__ import annotations

from enum import Enum


class ProviderKind(Enum):
    """Transport behind a DiffProvider.

    CLI shells out to gh and relies on its login. API calls GitHub over
    HTTPS and needs a token.
    """

    CLI = "cli"
    API = "api"
