"""Core value objects."""

from .outcome import Ok, Err, Outcome, ok, err

__all__ = ["Ok", "Err", "Outcome", "ok", "err"]
