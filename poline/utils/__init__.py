from .default import value_or_default

__all__ = ['value_or_default']
