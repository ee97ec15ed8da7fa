"""In-memory storage shared by the simulated contracts."""

from lending_sim.store.storage import Storage

__all__ = ["Storage"]
