"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para feedback auditivo,
ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import threading
import pyttsx3
from collections import deque

from core.results import ERROR_TEXT


SYMBOLS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
    ".": "punto",
}

OPERATIONS_ES = {
    "+": "más",
    "-": "menos",
    "*": "por",
    "/": "dividido entre",
}


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Anunciar cada pulsación y cada resultado
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (máximo 5, se descartan los más antiguos)
        - Configuración de volumen y velocidad
    """

    def __init__(self, config, engine=None):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad
            engine: Motor ya creado (por defecto pyttsx3.init())
        """
        self.config = config
        self.engine = engine
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()
        self._thread = None

        if self.engine is None:
            try:
                self.engine = pyttsx3.init()
            except Exception as e:
                print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
                self.config.voice_enabled = False
                return

        self._configure_engine()
        print("✓ Sistema de voz inicializado correctamente")

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Selecciona la primera voz cuyo id contenga el idioma configurado.
        """
        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            language = self.config.voice_language.lower()
            for voice in self.engine.getProperty('voices') or []:
                languages = [str(lang).lower() for lang in getattr(voice, 'languages', [])]
                if language in voice.id.lower() or any(language in lang for lang in languages):
                    self.engine.setProperty('voice', voice.id)
                    print(f"✓ Voz seleccionada: {voice.name}")
                    break
            else:
                print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    @property
    def available(self):
        return self.engine is not None and self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.available:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        self._thread = threading.Thread(target=self._process_queue, daemon=True)
        self._thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def wait(self, timeout=None):
        """Espera a que termine el hilo de voz actual."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def speak_symbol(self, symbol):
        """Pronuncia un dígito o el punto decimal."""
        self.speak(SYMBOLS_ES.get(symbol, symbol))

    def speak_operation(self, operation):
        """Pronuncia el nombre de una operación matemática."""
        self.speak(OPERATIONS_ES.get(operation, operation))

    def speak_result(self, display_text):
        """
        Pronuncia el resultado mostrado en el display.

        Args:
            display_text (str): Texto del display ("20", "Error")
        """
        if display_text == ERROR_TEXT:
            self.speak("error de cálculo")
        else:
            self.speak(f"igual a {display_text}")

    def speak_clear(self):
        self.speak("todo borrado")
