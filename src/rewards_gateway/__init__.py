"""Rewards gateway: REST endpoints for withdrawing staking rewards."""

__version__ = "0.1.0"
