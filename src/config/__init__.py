"""
Módulo de configuración de la calculadora.
Contiene el tema visual (claro / oscuro).
"""

from .theme import ThemeConfig

__all__ = ['ThemeConfig']
