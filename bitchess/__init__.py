"""Chess bitboard primitives: geometry, PRNG, magic tables, attacks, KPK bitbase and material imbalance."""

__version__ = "0.1.0"
__all__ = ["geometry", "prng", "magic", "attacks", "bitbase", "material"]