"""Utility helpers for sprite_rotation."""
