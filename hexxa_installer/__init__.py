"""Hexxa Xcode theme installer.

Core design goals:
- Single-shot and idempotent (re-runs overwrite, satisfied checks skip)
- Dry-run previews every filesystem action
- Fira Code provisioned only when missing
- Centralized logging
"""

__all__ = []
