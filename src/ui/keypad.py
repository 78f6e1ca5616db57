"""
Teclado en pantalla de la calculadora.

Define la disposición de los botones y traduce coordenadas de ratón
a la etiqueta del botón pulsado.
"""

# Disposición por filas; "0" ocupa dos columnas
LAYOUT = [
    ['C', '/', '*', '-'],
    ['7', '8', '9', '+'],
    ['4', '5', '6', '='],
    ['1', '2', '3', '.'],
    ['0'],
]

COLUMNS = 4


def button_kind(label):
    """Clasifica una etiqueta: 'digit', 'operator', 'equals' o 'clear'."""
    if len(label) == 1 and label in '0123456789.':
        return 'digit'
    if label in ('+', '-', '*', '/'):
        return 'operator'
    if label == '=':
        return 'equals'
    return 'clear'


class Button:
    """Botón rectangular del teclado."""

    def __init__(self, label, x, y, w, h):
        self.label = label
        self.kind = button_kind(label)
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def contains(self, px, py):
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    def __repr__(self):
        return f"Button({self.label!r}, x={self.x}, y={self.y}, w={self.w}, h={self.h})"


# ============================================================================
# CLASE: Keypad
# Propósito: Geometría del teclado y detección de pulsaciones
# ============================================================================
class Keypad:
    """
    Teclado en pantalla colocado bajo el display.

    La geometría depende de la configuración: en modo botones grandes
    cada botón crece y la ventana se amplía en consecuencia.
    """

    def __init__(self, config, origin_x, origin_y):
        """
        Args:
            config (AccessibilityConfig): Configuración activa
            origin_x (int): Esquina superior izquierda del teclado (x)
            origin_y (int): Esquina superior izquierda del teclado (y)
        """
        self.config = config
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.buttons = []
        self.layout()

    def layout(self):
        """Recalcula la posición de los botones (tras cambiar de modo)."""
        size = self.config.get_button_size()
        gap = self.config.button_gap
        self.buttons = []

        for row, labels in enumerate(LAYOUT):
            y = self.origin_y + row * (size + gap)
            for col, label in enumerate(labels):
                x = self.origin_x + col * (size + gap)
                # Una fila con un único botón se extiende a lo ancho de dos columnas
                w = size if len(labels) > 1 else 2 * size + gap
                self.buttons.append(Button(label, x, y, w, size))

    @property
    def width(self):
        size = self.config.get_button_size()
        return COLUMNS * size + (COLUMNS - 1) * self.config.button_gap

    @property
    def height(self):
        size = self.config.get_button_size()
        return len(LAYOUT) * size + (len(LAYOUT) - 1) * self.config.button_gap

    def hit_test(self, x, y):
        """
        Busca el botón bajo unas coordenadas.

        Returns:
            str | None: Etiqueta del botón o None si no hay ninguno
        """
        for button in self.buttons:
            if button.contains(x, y):
                return button.label
        return None

    def get(self, label):
        for button in self.buttons:
            if button.label == label:
                return button
        return None
