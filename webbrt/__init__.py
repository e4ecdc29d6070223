"""Runtime building blocks: decoding, ordered sets, data providers, prices, transactional storage and chain configuration."""

__version__ = "3.0.0"