"""
Interfaz de usuario y renderizado.

Este módulo contiene el sink del display (DisplayPanel) y la clase
UIRenderer que dibuja todos los elementos visuales con OpenCV.
"""

import cv2
import numpy as np

from config.accessibility import AccessibilityConfig
from core.results import ERROR_TEXT
from .keypad import Keypad


# Paletas BGR
PALETTE = {
    'background': (30, 30, 30),
    'display_bg': (35, 35, 35),
    'display_border': (100, 200, 255),
    'number': (255, 255, 255),
    'result': (100, 255, 100),
    'error': (100, 100, 255),
    'expression': (180, 180, 180),
    'digit': (70, 70, 70),
    'operator': (0, 140, 255),
    'equals': (80, 170, 60),
    'clear': (60, 60, 200),
    'label': (255, 255, 255),
    'hover': (255, 255, 255),
}

HIGH_CONTRAST_PALETTE = dict(
    PALETTE,
    background=(0, 0, 0),
    display_bg=(0, 0, 0),
    display_border=(255, 255, 255),
    result=(0, 255, 255),
    error=(0, 0, 255),
    expression=(255, 255, 255),
    digit=(0, 0, 0),
    hover=(0, 255, 255),
)

FOOTER_HEIGHT = 50


# ============================================================================
# CLASE: DisplayPanel
# Propósito: Sink del display; recibe el texto publicado por la calculadora
# ============================================================================
class DisplayPanel:
    """Guarda el último texto recibido para que el renderer lo dibuje."""

    def __init__(self):
        self.text = ""
        self.updates = 0

    def __call__(self, text):
        self.text = text
        self.updates += 1

    @property
    def is_error(self):
        return self.text == ERROR_TEXT


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: número actual o resultado, con línea de expresión
        2. Teclado en pantalla con resaltado al pasar el ratón y al pulsar
        3. Feedback: Mensajes temporales de confirmación/error
        4. Indicador de voz y ayuda de salida
    """

    def __init__(self, config=None):
        """
        Inicializa el renderizador y calcula la geometría de la ventana.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad (opcional)
        """
        self.config = config if config else AccessibilityConfig()
        margin = self.config.window_margin
        self.keypad = Keypad(self.config, margin, margin * 2 + self.config.display_height)

        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)   # Color del feedback

        self.hover_label = None              # Botón bajo el ratón
        self.pressed_label = None            # Último botón pulsado
        self.pressed_timer = 0               # Frames de resaltado tras pulsar

    @property
    def palette(self):
        return HIGH_CONTRAST_PALETTE if self.config.high_contrast else PALETTE

    @property
    def width(self):
        return self.keypad.width + 2 * self.config.window_margin

    @property
    def height(self):
        return self.keypad.origin_y + self.keypad.height + FOOTER_HEIGHT

    def relayout(self):
        """Recalcula el teclado tras cambiar el tamaño de los botones."""
        self.keypad.layout()

    def new_canvas(self):
        """Lienzo BGR vacío del tamaño de la ventana."""
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        canvas[:] = self.palette['background']
        return canvas

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la configurada)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = self.config.feedback_duration if duration is None else duration

    def press(self, label, duration=6):
        """Resalta un botón durante unos frames tras pulsarlo."""
        self.pressed_label = label
        self.pressed_timer = duration

    def draw_display(self, img, panel, expression="", is_result=False):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            panel (DisplayPanel): Sink con el texto actual
            expression (str): Línea secundaria ("6 +")
            is_result (bool): True si el texto es el resultado de "="

        Colores del display:
            - Blanco: Número normal
            - Verde: Resultado de cálculo
            - Rojo: Error
        """
        colors = self.palette
        x, y = self.config.window_margin, self.config.window_margin
        w, h = self.keypad.width, self.config.display_height

        cv2.rectangle(img, (x, y), (x + w, y + h), colors['display_bg'], -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), colors['display_border'], 3)

        if self.config.show_expression and expression:
            cv2.putText(img, expression, (x + 15, y + 40),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.9, colors['expression'], 2)

        text = panel.text
        if panel.is_error:
            color = colors['error']
        elif is_result:
            color = colors['result']
        else:
            color = colors['number']

        if not text:
            return

        # Reducir la fuente hasta que el número quepa en el display
        font_scale = 2.5
        text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 3)[0][0]
        while text_w > w - 30 and font_scale > 0.6:
            font_scale -= 0.2
            text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 3)[0][0]

        # Alineado a la derecha como en una calculadora de bolsillo
        cv2.putText(img, text, (x + w - 15 - text_w, y + h - 30),
                    cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 3)

    def draw_keypad(self, img):
        """Dibuja los botones del teclado con resaltado de hover y pulsación."""
        colors = self.palette
        for button in self.keypad.buttons:
            top_left = (button.x, button.y)
            bottom_right = (button.x + button.w, button.y + button.h)
            cv2.rectangle(img, top_left, bottom_right, colors[button.kind], -1)

            if self.pressed_timer > 0 and button.label == self.pressed_label:
                overlay = img.copy()
                cv2.rectangle(overlay, top_left, bottom_right, (255, 255, 255), -1)
                cv2.addWeighted(overlay, 0.35, img, 0.65, 0, img)
            if button.label == self.hover_label:
                cv2.rectangle(img, top_left, bottom_right, colors['hover'], 2)

            scale = button.h / 70.0
            (tw, th), _ = cv2.getTextSize(button.label, cv2.FONT_HERSHEY_DUPLEX, scale, 2)
            cv2.putText(img, button.label,
                        (button.x + (button.w - tw) // 2, button.y + (button.h + th) // 2),
                        cv2.FONT_HERSHEY_DUPLEX, scale, colors['label'], 2)

        if self.pressed_timer > 0:
            self.pressed_timer -= 1

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior de la ventana.

        Efecto:
            - Fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if not self.config.show_feedback_overlay or self.feedback_timer <= 0:
            return

        self.feedback_timer -= 1
        # Calcular alpha para fade-out suave
        alpha = min(self.feedback_timer / 20.0, 1.0)

        x, y = self.config.window_margin, self.height - 15
        color = tuple(int(c * alpha) for c in self.feedback_color)
        cv2.putText(img, self.feedback_msg, (x, y),
                    cv2.FONT_HERSHEY_DUPLEX, 0.8, color, 2)

    def draw_status(self, img):
        """Indicador de voz y ayuda de salida en la esquina superior."""
        status = "VOZ: ON" if self.config.voice_enabled else "VOZ: OFF"
        color = (0, 255, 0) if self.config.voice_enabled else (120, 120, 120)
        cv2.putText(img, status, (self.width - 120, 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, color, 1)
        cv2.putText(img, "ESC/q: salir", (self.config.window_margin, 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, (200, 200, 200), 1)

    def render(self, panel, expression="", is_result=False):
        """
        Dibuja un frame completo.

        Returns:
            np.array: Lienzo listo para cv2.imshow
        """
        img = self.new_canvas()
        self.draw_display(img, panel, expression, is_result)
        self.draw_keypad(img)
        self.draw_feedback(img)
        self.draw_status(img)
        return img
