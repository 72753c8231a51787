"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y la disposición del teclado.
"""

from .layout import ButtonGrid, ButtonSpec, KEYPAD
from .renderer import UIRenderer

__all__ = ['ButtonGrid', 'ButtonSpec', 'KEYPAD', 'UIRenderer']
