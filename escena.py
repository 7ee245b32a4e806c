# escena.py
import pygame
import constantes


class Nodo(pygame.sprite.Sprite):
    """Objeto de escena con posición de mundo (y hacia arriba, z = profundidad)."""

    def __init__(self, name: str = "", position=(0.0, 0.0, 0.0), tag: str = ""):
        super().__init__()
        self.name = name
        self.tag = tag
        self.position = pygame.math.Vector3(position)
        self.children: list["Nodo"] = []

    def add_child(self, nodo: "Nodo") -> "Nodo":
        self.children.append(nodo)
        return nodo

    def find_first_child(self, kind):
        """Primer descendiente (en profundidad) que sea instancia de `kind`."""
        for child in self.children:
            if isinstance(child, kind):
                return child
            found = child.find_first_child(kind)
            if found is not None:
                return found
        return None

    def __repr__(self):
        p = self.position
        return f"<{type(self).__name__} {self.name!r} ({p.x:.2f}, {p.y:.2f}, {p.z:.2f})>"


def find_with_tag(nodos, tag: str):
    """Busca por tag; devuelve None si no hay ninguno."""
    for nodo in nodos:
        if getattr(nodo, "tag", None) == tag:
            return nodo
    return None


class SpriteFondo(Nodo):
    def __init__(self, image: pygame.Surface | None = None, name: str = "Fondo",
                 position=(0.0, 0.0, 0.0), pixels_per_unit: float = constantes.PIXELS_PER_UNIT):
        super().__init__(name, position)
        self.image = image
        self.pixels_per_unit = float(pixels_per_unit)
        self.scale = 1.0
        self.visible = True
        self.sorting_order = 0

    def set_image(self, image: pygame.Surface | None):
        self.image = image

    def native_size(self) -> tuple[float, float]:
        """Tamaño de la imagen en unidades de mundo (sin escala)."""
        if self.image is None:
            return 0.0, 0.0
        w, h = self.image.get_size()
        return w / self.pixels_per_unit, h / self.pixels_per_unit

    def world_size(self) -> tuple[float, float]:
        w, h = self.native_size()
        return w * self.scale, h * self.scale
