"""Mapping between node identities and resource URIs."""

from .translator import DefaultIdentifierTranslator, IdentifierTranslator

__all__ = ["DefaultIdentifierTranslator", "IdentifierTranslator"]
