"""Builders for controller state and provider clients."""
