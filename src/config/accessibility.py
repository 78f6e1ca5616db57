"""
Configuración de opciones de accesibilidad para usuarios.

Este módulo contiene la configuración centralizada para adaptar la calculadora
a diferentes necesidades de accesibilidad.
"""


# ============================================================================
# CLASE: AccessibilityConfig
# Propósito: Configuración de opciones de accesibilidad para usuarios
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Gestionar modo de botones grandes (para movilidad reducida)
#   - Configurar ayudas visuales y geometría de la ventana
# ============================================================================
class AccessibilityConfig:
    """
    Configuración de accesibilidad para adaptar la calculadora a diferentes necesidades.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Modo botones grandes (teclado en pantalla más amplio)
        - Ayudas visuales (línea de expresión, mensajes, alto contraste)
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # MODO BOTONES GRANDES (para usuarios con movilidad reducida)
        # ====================================================================
        self.large_buttons = False          # Activar modo botones grandes
        self.button_size = 90               # Lado del botón en píxeles (normal)
        self.large_button_size = 130        # Lado del botón en modo grande
        self.button_gap = 12                # Separación entre botones

        # ====================================================================
        # AYUDAS VISUALES
        # ====================================================================
        self.show_expression = True         # Mostrar línea "6 +" sobre el número
        self.show_feedback_overlay = True   # Mostrar mensajes temporales
        self.feedback_duration = 40         # Frames (~1.3 segundos @ 30fps)
        self.high_contrast = False          # Colores de alto contraste

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_name = 'Calculadora'
        self.window_margin = 30             # Margen exterior en píxeles
        self.display_height = 160           # Alto del display

    def get_button_size(self):
        """Retorna el lado del botón según el modo activo."""
        return self.large_button_size if self.large_buttons else self.button_size

    def validate(self):
        """
        Comprueba que los valores estén dentro de rango.

        Raises:
            ValueError: Si algún valor es incoherente
        """
        if not 0.0 <= self.voice_volume <= 1.0:
            raise ValueError(f"voice_volume fuera de rango (0.0-1.0): {self.voice_volume}")
        if self.voice_rate <= 0:
            raise ValueError(f"voice_rate debe ser positivo: {self.voice_rate}")
        if self.get_button_size() <= 0 or self.button_gap < 0:
            raise ValueError("Tamaño de botón o separación no válidos")
        if self.feedback_duration < 0:
            raise ValueError(f"feedback_duration negativo: {self.feedback_duration}")
        if self.window_margin < 0 or self.display_height <= 0:
            raise ValueError("Geometría de ventana no válida")
