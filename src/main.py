"""
Punto de entrada de la calculadora.

Ejecución:
    python3 src/main.py
    calculadora            (tras pip install -e .)

Requisitos:
    - Python 3.9+
    - opencv-python
    - numpy
    - pyttsx3 (opcional en la práctica: sin motor de voz se desactiva el feedback)
"""

import traceback

from app.calculator_app import CalculatorApp
from config.accessibility import AccessibilityConfig


def main():
    """
    Crea la aplicación y ejecuta el bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Returns:
        int: Código de salida (0 correcto, 1 error inesperado)
    """
    try:
        app = CalculatorApp(config=AccessibilityConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
