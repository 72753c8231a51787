"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp: ventana de OpenCV, ratón y
teclado como entrada, motor de la calculadora como estado.
"""

import cv2

from config.theme import ThemeConfig
from core.engine import CalculatorEngine
from ui.renderer import UIRenderer


WINDOW_NAME = "Calculadora"

# Tecla → etiqueta de botón del motor
KEY_BINDINGS = {ch: ch for ch in "0123456789.+-*/="}
KEY_BINDINGS.update({
    "\r": "=",      # Enter
    "\n": "=",
    "c": "C",
    "a": "AC",
})

KEY_ESC = 27


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora.

    Arquitectura:
        - CalculatorEngine: Estado y lógica aritmética
        - UIRenderer: Renderizado de interfaz gráfica
        - ThemeConfig: Tema claro/oscuro (solo presentación)
        - CalculatorApp: Coordinador y loop principal

    Entradas:
        - Clic izquierdo sobre un botón del teclado
        - Teclado: dígitos, ".", + - * /, = o Enter, c (C), a (AC),
          t (cambiar tema), ESC o q (salir)
    """

    def __init__(self, width=420, height=720, theme=None):
        """
        Inicializa la aplicación (sin abrir ventana todavía).

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            theme (ThemeConfig): Configuración de tema (opcional)
        """
        self.theme = theme if theme else ThemeConfig()
        self.engine = CalculatorEngine()
        self.ui = UIRenderer(width, height, self.theme)
        self.running = False

    def handle_click(self, x, y):
        """
        Procesa un clic en coordenadas de ventana.

        Returns:
            bool: True si el clic cayó sobre un botón
        """
        button = self.ui.grid.button_at(x, y)
        if button is None:
            return False
        self.engine.press(button.label)
        self.ui.flash(button.label)
        return True

    def handle_key(self, key):
        """
        Procesa una tecla devuelta por cv2.waitKey.

        Args:
            key (int): Código de la tecla (ya enmascarado con 0xFF)

        Returns:
            bool: True si la tecla tuvo efecto
        """
        if key == KEY_ESC or key == ord("q"):
            self.running = False
            return True

        if key < 0 or key > 255:
            return False
        ch = chr(key)

        if ch == "t":
            self.theme.toggle()
            print(f"✓ Tema {self.theme.name}")
            return True

        label = KEY_BINDINGS.get(ch)
        if label is None:
            return False
        self.engine.press(label)
        self.ui.flash(label)
        return True

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar el estado actual del motor
            2. Mostrar frame y esperar tecla (~30 FPS)
            3. Despachar tecla; los clics llegan por el callback del ratón
            4. Repetir hasta ESC, 'q' o cierre de la ventana
        """
        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nRaton: pulsar botones")
        print("Teclado: 0-9 . + - * / = Enter | c: C | a: AC | t: tema")
        print("\nPresiona ESC o 'q' para salir\n")

        cv2.namedWindow(WINDOW_NAME)
        cv2.setMouseCallback(WINDOW_NAME, self._on_mouse)
        print(f"OK Ventana: {self.ui.width}x{self.ui.height}, tema {self.theme.name}")

        self.running = True
        try:
            while self.running:
                cv2.imshow(WINDOW_NAME, self.ui.render(self.engine))

                key = cv2.waitKey(33) & 0xFF
                if key != 0xFF:
                    self.handle_key(key)

                # Ventana cerrada con el botón del sistema
                if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.running = False
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")
