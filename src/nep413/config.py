"""YAML configuration loading for NEP-413 verification."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import yaml

from nep413.log import setup_logging

logger = logging.getLogger(__name__)

PAYLOAD_LOGGER = "nep413.crypto"


@dataclass
class VerifierConfig:
    log_level: str = "INFO"
    json_log: bool = False
    log_payloads: bool = False  # debug aid: log serialized messages as hex


def load_config(path: Path) -> VerifierConfig:
    """Load configuration from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = VerifierConfig(
        log_level=raw.get("log_level", "INFO"),
        json_log=bool(raw.get("json_log", False)),
        log_payloads=bool(raw.get("log_payloads", False)),
    )
    logger.debug("Loaded verifier config from %s", path)
    return config


def payload_hook(config: VerifierConfig) -> Optional[Callable[[bytes], None]]:
    """Build the ``on_payload`` hook for crypto.verify, or None when disabled."""
    if not config.log_payloads:
        return None

    payload_logger = logging.getLogger(PAYLOAD_LOGGER)

    def _log_payload(payload: bytes) -> None:
        payload_logger.debug("Serialized payload (%d bytes): %s", len(payload), payload.hex())

    return _log_payload


def configure(config: VerifierConfig) -> Optional[Callable[[bytes], None]]:
    """Apply logging settings and return the payload hook to pass to verify."""
    setup_logging(config.log_level, json_log=config.json_log)
    return payload_hook(config)
