"""
orderhash

Deterministic order hashing, signature compaction and gas accounting for
verifier-compatible marketplace orders.
"""
__version__ = "0.1.0"
