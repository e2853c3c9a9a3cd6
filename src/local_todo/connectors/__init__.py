"""Adapters that drive the presenter (console REPL)."""
