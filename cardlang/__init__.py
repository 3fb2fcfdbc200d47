"""Card trees for a card-based language: cards, child access, card indices, errors and stdlib."""

__version__ = "0.1.0"