"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales
de la calculadora sobre una imagen numpy usando primitivas de OpenCV.
"""

import cv2
import numpy as np

from config.theme import ThemeConfig
from ui.layout import ButtonGrid


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Panel central con sombra sobre el fondo del tema
        2. Cabecera: título "CALCULADORA" e indicador del tema activo
        3. Display principal: valor actual, alineado a la derecha
        4. Línea secundaria: mensaje de error u operador pendiente ("Op: +")
        5. Teclado de 4 columnas (C, AC, dígitos, operadores, =)

    Colores del display:
        - Verde del tema: valor normal
        - Rojo: estado de error
    """

    def __init__(self, width, height, theme=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            theme (ThemeConfig): Configuración de tema (opcional)
        """
        self.width = width
        self.height = height
        self.theme = theme if theme else ThemeConfig()

        # Geometría fija del panel
        self.margin = 18
        self.padding = 18
        self.panel = (self.margin, self.margin, width - self.margin, height - self.margin)

        px1, py1, px2, _ = self.panel
        self.header_y = py1 + self.padding + 22
        self.display_rect = (px1 + self.padding, py1 + self.padding + 44,
                             px2 - self.padding, py1 + self.padding + 44 + 130)

        keypad_top = self.display_rect[3] + 18
        self.grid = ButtonGrid(px1 + self.padding, keypad_top,
                               px2 - px1 - 2 * self.padding,
                               self.panel[3] - self.padding - keypad_top)

        self.flash_label = None             # Botón resaltado actualmente
        self.flash_timer = 0                # Frames restantes de resaltado

    def flash(self, label):
        """
        Resalta un botón durante unos frames (confirmación visual del toque).

        Args:
            label (str): Etiqueta del botón pulsado
        """
        self.flash_label = label
        self.flash_timer = self.theme.highlight_frames

    def render(self, engine):
        """
        Genera un frame completo.

        Args:
            engine (CalculatorEngine): Motor cuyo estado se muestra

        Returns:
            np.ndarray: Imagen BGR uint8 de tamaño (height, width, 3)
        """
        colors = self.theme.palette()
        img = np.full((self.height, self.width, 3), colors["background"], dtype=np.uint8)

        self.draw_panel(img, colors)
        self.draw_header(img, colors)
        self.draw_display(img, engine, colors)
        self.draw_keypad(img, colors)

        if self.flash_timer > 0:
            self.flash_timer -= 1
            if self.flash_timer == 0:
                self.flash_label = None
        return img

    def draw_panel(self, img, colors):
        """Panel con sombra semi-transparente desplazada hacia abajo."""
        x1, y1, x2, y2 = self.panel
        overlay = img.copy()
        cv2.rectangle(overlay, (x1 + 4, y1 + 12), (x2 + 4, y2 + 12), (0, 0, 0), -1)
        cv2.addWeighted(overlay, 0.38, img, 0.62, 0, img)
        self._rounded_rect(img, (x1, y1, x2, y2), colors["panel"], 28)

    def draw_header(self, img, colors):
        x1 = self.panel[0] + self.padding
        cv2.putText(img, "CALCULADORA", (x1, self.header_y),
                    cv2.FONT_HERSHEY_DUPLEX, 0.6, colors["text"], 1, cv2.LINE_AA)

        # Indicador de tema: luna rellena (oscuro) o sol con rayos (claro)
        cx, cy = self.panel[2] - self.padding - 12, self.header_y - 6
        if self.theme.dark_mode:
            cv2.circle(img, (cx, cy), 9, colors["text"], -1, cv2.LINE_AA)
            cv2.circle(img, (cx + 5, cy - 4), 8, colors["panel"], -1, cv2.LINE_AA)
        else:
            cv2.circle(img, (cx, cy), 5, colors["text"], -1, cv2.LINE_AA)
            for angle in range(0, 360, 45):
                dx, dy = np.cos(np.radians(angle)), np.sin(np.radians(angle))
                cv2.line(img, (int(cx + 7 * dx), int(cy + 7 * dy)),
                         (int(cx + 10 * dx), int(cy + 10 * dy)), colors["text"], 1, cv2.LINE_AA)

    def draw_display(self, img, engine, colors):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            engine (CalculatorEngine): Motor con el estado actual
            colors (dict): Paleta activa

        Tamaños dinámicos:
            - Valores cortos (<10 caracteres): Fuente 1.6
            - Valores largos: se reduce hasta que quepan en el display
        """
        x1, y1, x2, y2 = self.display_rect
        self._rounded_rect(img, self.display_rect, colors["display_bg"], 18)

        text = engine.display_text
        color = colors["display_error"] if engine.has_error else colors["display_text"]

        available = (x2 - x1) - 36
        font_scale = 1.6
        text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)[0][0]
        while text_w > available and font_scale > 0.5:
            font_scale -= 0.1
            text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)[0][0]
        cv2.putText(img, text, (x2 - 18 - text_w, y1 + 70),
                    cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 2, cv2.LINE_AA)

        hint = engine.hint_text
        if hint:
            hint_w = cv2.getTextSize(hint, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1)[0][0]
            hint_color = tuple(int(c * 0.7 + b * 0.3) for c, b in zip(colors["text"], colors["display_bg"]))
            cv2.putText(img, hint, (x2 - 18 - hint_w, y2 - 20),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, hint_color, 1, cv2.LINE_AA)

    def draw_keypad(self, img, colors):
        for button, rect in self.grid.cells:
            if button.kind == "number":
                bg, fg = colors["number_button"], colors["text"]
            else:
                bg, fg = colors["operator_button"], colors["operator_text"]

            # Botón pulsado: mezcla con blanco
            if button.label == self.flash_label and self.flash_timer > 0:
                bg = tuple(int(c * 0.6 + 255 * 0.4) for c in bg)

            self._rounded_rect(img, rect, bg, 18)
            x1, y1, x2, y2 = rect
            (tw, th), _ = cv2.getTextSize(button.label, cv2.FONT_HERSHEY_DUPLEX, 0.8, 2)
            cv2.putText(img, button.label, ((x1 + x2 - tw) // 2, (y1 + y2 + th) // 2),
                        cv2.FONT_HERSHEY_DUPLEX, 0.8, fg, 2, cv2.LINE_AA)

    @staticmethod
    def _rounded_rect(img, rect, color, radius):
        """Rectángulo relleno con esquinas redondeadas (rectángulos + círculos)."""
        x1, y1, x2, y2 = rect
        r = max(0, min(radius, (x2 - x1) // 2, (y2 - y1) // 2))
        cv2.rectangle(img, (x1 + r, y1), (x2 - r, y2), color, -1)
        cv2.rectangle(img, (x1, y1 + r), (x2, y2 - r), color, -1)
        for cx, cy in ((x1 + r, y1 + r), (x2 - r, y1 + r), (x1 + r, y2 - r), (x2 - r, y2 - r)):
            cv2.circle(img, (cx, cy), r, color, -1, cv2.LINE_AA)
