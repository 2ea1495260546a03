"""Adapters for the runtime and declarative backing stores."""
