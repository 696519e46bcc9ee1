"""Helpers for template tooling: colors, regex groups, substitutions, lists, lorem ipsum, files, scripts and YAML."""

__version__ = "0.1.0"
__all__ = ["colors", "regex", "substitute", "lists", "lorem", "files", "scripts", "yamldata"]