"""Watcher module - host filesystem watcher forwarding writes to the guest."""
