"""Localization key extraction and reconciliation for Lua addons."""
