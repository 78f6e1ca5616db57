"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from config.accessibility import AccessibilityConfig
from core.calculator import Calculator
from ui.keypad import button_kind
from ui.renderer import DisplayPanel, UIRenderer
from voice.feedback import VoiceFeedback


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Máquina de estados y aritmética
        - DisplayPanel: Sink que recibe el texto del display
        - UIRenderer: Renderizado de display y teclado con OpenCV
        - VoiceFeedback: Anuncios por voz
        - CalculatorApp: Coordinador, ratón y loop principal
    """

    def __init__(self, config=None, calculator=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad (opcional)
            calculator (Calculator): Máquina de estados (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional)

        Raises:
            ValueError: Si la configuración no es válida
        """
        self.config = config if config else AccessibilityConfig()
        self.config.validate()

        self.panel = DisplayPanel()
        self.calc = calculator if calculator else Calculator()
        self.calc.add_display_sink(self.panel)
        self.ui = UIRenderer(self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)

        # True mientras el display muestre el resultado de "="
        self.showing_result = False

        if self.config.large_buttons:
            print("✓ Modo Botones Grandes ACTIVADO (para movilidad reducida)")
        if self.config.voice_enabled:
            print("✓ Feedback por voz ACTIVADO")

    def process(self, label):
        """
        Procesa la pulsación de un botón y actualiza la calculadora.

        Args:
            label (str): Etiqueta del botón ("7", ".", "+", "=", "C")

        Returns:
            bool: True si la etiqueta correspondía a una acción

        Feedback:
            - Verde: Números
            - Naranja: Operaciones
            - Cian: Resultado de cálculo
            - Rojo: Error o borrado
        """
        if not label:
            return False
        kind = button_kind(label)

        # ====================================================================
        # NÚMEROS Y PUNTO DECIMAL
        # ====================================================================
        if kind == 'digit':
            self.calc.enter_symbol(label)
            self.showing_result = False
            self.ui.show_feedback(f"OK {label}", (100, 255, 100))
            self.voice.speak_symbol(label)

        # ====================================================================
        # OPERACIONES (+ - * /)
        # ====================================================================
        elif kind == 'operator':
            self.calc.select_operator(label)
            self.showing_result = False
            if self.calc.has_error:
                self.ui.show_feedback("Error", (255, 50, 50))
                self.voice.speak_result(self.panel.text)
            else:
                self.ui.show_feedback(f"{label} OPERACION", (0, 165, 255))
                self.voice.speak_operation(label)

        # ====================================================================
        # IGUAL (=): Calcular resultado
        # ====================================================================
        elif kind == 'equals':
            updates = self.panel.updates
            self.calc.evaluate()
            if self.panel.updates == updates:
                # Nada que evaluar
                return True
            self.showing_result = not self.calc.has_error
            if self.calc.has_error:
                self.ui.show_feedback("Error", (255, 50, 50))
            else:
                self.ui.show_feedback(f"= {self.panel.text}", (0, 255, 255), 60)
            self.voice.speak_result(self.panel.text)

        # ====================================================================
        # BORRAR TODO (C)
        # ====================================================================
        elif kind == 'clear':
            if label != 'C':
                return False
            self.calc.clear()
            self.showing_result = False
            self.ui.show_feedback("TODO BORRADO", (255, 50, 50))
            self.voice.speak_clear()

        self.ui.press(label)
        return True

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: hover y clic izquierdo."""
        if event == cv2.EVENT_MOUSEMOVE:
            self.ui.hover_label = self.ui.keypad.hit_test(x, y)
        elif event == cv2.EVENT_LBUTTONDOWN:
            self.process(self.ui.keypad.hit_test(x, y))

    def render(self):
        """Dibuja el frame actual."""
        return self.ui.render(self.panel, self.calc.get_expression(), self.showing_result)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar display y teclado
            2. Mostrar frame y atender eventos de ratón (callback)
            3. Repetir hasta ESC, 'q' o cierre de la ventana
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nHaz clic en los botones para operar")
        if self.config.voice_enabled:
            print("🔊 FEEDBACK POR VOZ: Activado")
        print("\nPresiona ESC o 'q' para salir")
        print("=" * 50 + "\n")

        window = self.config.window_name
        cv2.namedWindow(window, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(window, self.on_mouse)

        try:
            while True:
                cv2.imshow(window, self.render())

                # ~30 FPS
                key = cv2.waitKey(33) & 0xFF
                if key == 27 or key == ord('q'):
                    break
                if cv2.getWindowProperty(window, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")
