"""An underwater arcade game on pygame: the mermaid, fish, collectibles, world rules and window."""

__version__ = "0.1.0"