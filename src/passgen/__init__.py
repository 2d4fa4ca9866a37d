"""Policy-driven random password generation."""

from __future__ import annotations

from .core.config import Alphabet, PasswordConfig
from .core.password_generator import PasswordGenerator

__all__ = ['Alphabet', 'PasswordConfig', 'PasswordGenerator']
__version__ = '1.0.0'
