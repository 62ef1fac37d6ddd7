"""Textual chat window for sitechat."""

from sitechat.tui.app import ChatApp, run_tui

__all__ = ["ChatApp", "run_tui"]
