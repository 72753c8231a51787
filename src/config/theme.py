"""
Configuración del tema visual (claro / oscuro).

El tema es puramente de presentación: no lee ni modifica el estado del motor
de la calculadora.
"""


# Paletas en BGR (orden de canales de OpenCV)
DARK_PALETTE = {
    "background": (42, 23, 15),         # #0F172A
    "panel": (39, 24, 17),              # #111827
    "display_bg": (32, 18, 11),         # #0B1220
    "number_button": (55, 41, 31),      # #1F2937
    "operator_button": (206, 75, 91),   # #5B4BCE
    "text": (235, 231, 229),            # #E5E7EB
    "display_text": (153, 211, 52),     # #34D399
    "display_error": (113, 113, 248),   # #F87171
    "operator_text": (255, 255, 255),
}

LIGHT_PALETTE = {
    "background": (249, 245, 241),      # #F1F5F9
    "panel": (255, 255, 255),           # #FFFFFF
    "display_bg": (240, 232, 226),      # #E2E8F0
    "number_button": (235, 231, 229),   # #E5E7EB
    "operator_button": (235, 99, 37),   # #2563EB
    "text": (42, 23, 15),               # #0F172A
    "display_text": (74, 163, 22),      # #16A34A
    "display_error": (113, 113, 248),   # #F87171
    "operator_text": (255, 255, 255),
}


# ============================================================================
# CLASE: ThemeConfig
# Propósito: Preferencias visuales de la calculadora
# Responsabilidades:
#   - Recordar el modo activo (oscuro por defecto)
#   - Alternar entre claro y oscuro
#   - Entregar la paleta de colores activa al renderizador
# ============================================================================
class ThemeConfig:
    """
    Configuración de tema de la calculadora.

    Opciones disponibles:
        - dark_mode: True = paleta oscura, False = paleta clara
        - highlight_frames: Frames que un botón pulsado permanece resaltado
    """

    def __init__(self, dark_mode=True):
        """Inicializa configuración con valores por defecto."""
        self.dark_mode = dark_mode          # Empieza en modo oscuro
        self.highlight_frames = 6           # ~0.2s @ 30fps

    def toggle(self):
        """Alterna claro/oscuro y devuelve el nuevo valor de dark_mode."""
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    @property
    def name(self):
        return "oscuro" if self.dark_mode else "claro"

    def palette(self):
        """
        Retorna la paleta activa.

        Returns:
            dict: Nombre de rol → color BGR
        """
        return DARK_PALETTE if self.dark_mode else LIGHT_PALETTE
