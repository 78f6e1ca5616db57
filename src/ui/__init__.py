"""
Módulo de interfaz de usuario.
Contiene el teclado en pantalla, el sink del display y el renderizador.
"""

from .keypad import Keypad
from .renderer import DisplayPanel, UIRenderer

__all__ = ['Keypad', 'DisplayPanel', 'UIRenderer']
