"""
Disposición del teclado de la calculadora.

Rejilla de 4 columnas con botones que pueden ocupar varias columnas (C, AC,
0 e =). La rejilla calcula los rectángulos en píxeles y resuelve qué botón
hay bajo un punto (clic del ratón).
"""

COLUMNS = 4


class ButtonSpec:
    """
    Botón del teclado.

    Args:
        label (str): Etiqueta que se despacha al motor ("7", "+", "AC", ...)
        kind (str): "number", "operator" o "control" (elige colores)
        span (int): Columnas que ocupa (se limita a 1..4)
    """

    def __init__(self, label, kind="number", span=1):
        self.label = label
        self.kind = kind
        self.span = span

    def __repr__(self):
        return f"ButtonSpec({self.label!r}, {self.kind!r}, span={self.span})"


# Orden de izquierda a derecha, de arriba abajo
KEYPAD = [
    ButtonSpec("C", "control", 2), ButtonSpec("AC", "control", 2),
    ButtonSpec("7"), ButtonSpec("8"), ButtonSpec("9"), ButtonSpec("/", "operator"),
    ButtonSpec("4"), ButtonSpec("5"), ButtonSpec("6"), ButtonSpec("*", "operator"),
    ButtonSpec("1"), ButtonSpec("2"), ButtonSpec("3"), ButtonSpec("-", "operator"),
    ButtonSpec("0", span=2), ButtonSpec("."), ButtonSpec("+", "operator"),
    ButtonSpec("=", "operator", 4),
]


def build_rows(buttons, columns=COLUMNS):
    """
    Agrupa botones en filas respetando su span.

    Un botón que no cabe en la fila actual empieza una fila nueva; una fila
    se cierra en cuanto se completan las columnas.

    Returns:
        list: Lista de filas, cada una lista de (ButtonSpec, span_efectivo)
    """
    rows = []
    current = []
    used = 0
    for button in buttons:
        span = max(1, min(button.span, columns))
        if used + span > columns:
            rows.append(current)
            current = []
            used = 0
        current.append((button, span))
        used += span
        if used == columns:
            rows.append(current)
            current = []
            used = 0
    if current:
        rows.append(current)
    return rows


# ============================================================================
# CLASE: ButtonGrid
# Propósito: Geometría en píxeles del teclado
# Responsabilidades:
#   - Calcular el rectángulo de cada botón dentro del área asignada
#   - Resolver clics (x, y) al botón correspondiente
# ============================================================================
class ButtonGrid:
    """
    Rejilla de botones posicionada en pantalla.

    Args:
        x, y (int): Esquina superior izquierda del área del teclado
        width, height (int): Tamaño del área
        gap (int): Separación en píxeles entre botones
        buttons (list): ButtonSpec a colocar (KEYPAD por defecto)
    """

    def __init__(self, x, y, width, height, gap=12, buttons=None, columns=COLUMNS):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.gap = gap
        self.columns = columns
        self.rows = build_rows(buttons if buttons is not None else KEYPAD, columns)
        self.cells = self._layout()

    def _layout(self):
        """Lista de (ButtonSpec, (x1, y1, x2, y2)) con coordenadas absolutas."""
        n_rows = len(self.rows)
        if n_rows == 0:
            return []
        col_w = (self.width - self.gap * (self.columns - 1)) / self.columns
        row_h = (self.height - self.gap * (n_rows - 1)) / n_rows

        cells = []
        for r, row in enumerate(self.rows):
            y1 = self.y + r * (row_h + self.gap)
            col = 0
            for button, span in row:
                x1 = self.x + col * (col_w + self.gap)
                x2 = x1 + span * col_w + (span - 1) * self.gap
                cells.append((button, (int(x1), int(y1), int(x2), int(y1 + row_h))))
                col += span
        return cells

    def button_at(self, px, py):
        """
        Busca el botón bajo un punto.

        Returns:
            ButtonSpec | None: Botón pulsado, None si el punto cae en un hueco
                               o fuera del teclado
        """
        for button, (x1, y1, x2, y2) in self.cells:
            if x1 <= px < x2 and y1 <= py < y2:
                return button
        return None

    def rect_of(self, label):
        """Rectángulo del botón con esa etiqueta (None si no existe)."""
        for button, rect in self.cells:
            if button.label == label:
                return rect
        return None
