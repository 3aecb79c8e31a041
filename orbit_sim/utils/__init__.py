"""Utility functions for configuration."""

from orbit_sim.utils.config import load_config, save_config, Config

__all__ = ["load_config", "save_config", "Config"]
