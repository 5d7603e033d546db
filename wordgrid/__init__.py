"""Word grid solving, string hashing, an open-addressing hash table and MT19937."""

__version__ = "0.1.0"