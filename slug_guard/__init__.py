"""slug-guard: keeps record slugs populated before calendar plugins read them."""

__version__ = "1.0.0"
