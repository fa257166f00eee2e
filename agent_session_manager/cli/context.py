"""Shared helpers for building config, logging and the store from CLI context."""

import logging

import click

from ..config import ManagerConfig
from ..sessions import SessionStore
from ..utils.logging import setup_logging


def load_config(ctx: click.Context) -> ManagerConfig:
    """Load the config file chosen by the root command, applying CLI overrides."""
    obj = ctx.find_root().obj or {}
    config_path = obj.get("config")
    config = ManagerConfig.load(config_path) if config_path else ManagerConfig()

    if obj.get("data_dir"):
        config.data_dir = obj["data_dir"]
    if obj.get("log_level") is not None:
        config.log_level = logging.getLevelName(obj["log_level"])
    return config


def build_store(ctx: click.Context) -> tuple[SessionStore, ManagerConfig]:
    """Configure logging and build a store rooted at the configured data dir."""
    config = load_config(ctx)
    setup_logging(config)
    return SessionStore.from_config(config), config
