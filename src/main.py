"""
Punto de entrada de la calculadora.

Ejecución:
    python src/main.py            # Tema oscuro (por defecto)
    python src/main.py --light    # Tema claro

Requisitos:
    - Python 3.9+
    - opencv-python
    - numpy
"""

import sys
import traceback

from app.calculator_app import CalculatorApp
from config.theme import ThemeConfig


def main(argv=None):
    """
    Crea la aplicación y ejecuta el bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y su traceback

    Returns:
        int: Código de salida del proceso
    """
    argv = sys.argv[1:] if argv is None else argv
    theme = ThemeConfig(dark_mode="--light" not in argv)
    try:
        CalculatorApp(theme=theme).run()
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
    sys.exit(main())
