# parallax.py
import pygame
from pathlib import Path

import constantes
from ajustes import BackdropSettings
from escena import SpriteFondo

BACKDROP_ROOT = constantes.IMG_DIR / "backdrops"


# ==========================================================
#                 CÁLCULOS (sin estado)
# ==========================================================

def compute_backdrop_scale(camera, native_size, multiplier: float = 1.2) -> float | None:
    """Escala uniforme para que el fondo cubra todo lo que ve la cámara.

    Devuelve None si el sprite no tiene tamaño (no hay nada que escalar).
    """
    w, h = native_size
    if w <= 0 or h <= 0:
        return None
    scale_x = camera.viewport_width() / w * multiplier
    scale_y = camera.viewport_height() / h * multiplier
    return max(scale_x, scale_y)


def _axis(follow: bool, factor: float, cam: float, cam0: float, fondo0: float) -> float:
    if not follow:
        return fondo0
    if factor == 0:
        return cam
    return fondo0 + (cam - cam0) * factor


def backdrop_position(camera_pos, initial_camera, initial_backdrop,
                      settings: BackdropSettings) -> pygame.math.Vector3:
    """Posición del fondo para el frame actual.

    factor 0 = pegado a la cámara; otro valor = desplazamiento de la cámara
    (desde el inicio) multiplicado por el factor.
    """
    x = _axis(settings.follow_x, settings.parallax_x,
              camera_pos[0], initial_camera[0], initial_backdrop[0])
    y = _axis(settings.follow_y, settings.parallax_y,
              camera_pos[1], initial_camera[1], initial_backdrop[1])
    z = camera_pos[2] - constantes.FONDO_Z_OFFSET

    pos = pygame.math.Vector3(x, y, z) + pygame.math.Vector3(settings.offset)
    # Que no quede demasiado atrás en 2D
    if pos.z < constantes.FONDO_Z_MIN:
        pos.z = constantes.FONDO_Z_RESPALDO
    return pos


# ==========================================================
#                     COMPONENTE
# ==========================================================

class ParallaxBackdrop:
    def __init__(self, camera, backdrop: SpriteFondo | None = None,
                 settings: BackdropSettings | None = None):
        self.camera = camera
        self.backdrop = backdrop
        self.settings = settings or BackdropSettings()

        self.started = False
        self.enabled = False
        self.initial_camera_position = None
        self.initial_backdrop_position = None

    def start(self) -> bool:
        self.started = True
        if self.camera is None:
            print("[ERROR] ParallaxBackdrop: necesita una cámara")
            return False

        if self.backdrop is None:
            self.backdrop = self.camera.find_first_child(SpriteFondo)
        if self.backdrop is None or self.backdrop.image is None:
            print("[ERROR] ParallaxBackdrop: no hay sprite de fondo como hijo de la cámara")
            return False

        self.initial_camera_position = pygame.math.Vector3(self.camera.position)
        self.initial_backdrop_position = pygame.math.Vector3(self.backdrop.position)
        self.enabled = True
        self._setup()
        return True

    def _setup(self):
        self.backdrop.visible = True
        self.backdrop.sorting_order = constantes.FONDO_ORDEN
        if self.settings.auto_scale:
            self.scale_to_camera()
        self.update()

    def scale_to_camera(self):
        if self.camera is None or self.backdrop is None:
            return
        scale = compute_backdrop_scale(
            self.camera, self.backdrop.native_size(), self.settings.scale_multiplier)
        if scale is not None:
            self.backdrop.scale = scale

    def update(self):
        if not self.started:
            self.start()
        if not self.enabled:
            return
        self.backdrop.position = backdrop_position(
            self.camera.position,
            self.initial_camera_position,
            self.initial_backdrop_position,
            self.settings,
        )

    # ---------------- API ----------------

    def _attach(self, sprite: SpriteFondo):
        """Activa un sprite nuevo después de start(); la referencia de la cámara se conserva."""
        self.initial_backdrop_position = pygame.math.Vector3(sprite.position)
        if self.initial_camera_position is None:
            self.initial_camera_position = pygame.math.Vector3(self.camera.position)
        self.enabled = True
        self._setup()

    def set_backdrop_image(self, image: pygame.Surface):
        if self.backdrop is None:
            return
        self.backdrop.set_image(image)
        if not self.started:
            return
        if not self.enabled and self.camera is not None and image is not None:
            self._attach(self.backdrop)
        elif self.settings.auto_scale:
            self.scale_to_camera()

    def set_backdrop(self, sprite: SpriteFondo | None):
        self.backdrop = sprite
        if not self.started:
            if sprite is not None:
                self.start()
            return
        if sprite is None or sprite.image is None:
            self.enabled = False
            return
        if self.camera is None:
            return
        self._attach(sprite)


# ==========================================================
#                  FÁBRICA DE SPRITES
# ==========================================================

def _load_image(path: Path) -> pygame.Surface:
    img = pygame.image.load(str(path))
    # convert_alpha necesita una ventana abierta
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        img = img.convert_alpha()
    return img


def load_backdrop_sprite(name: str = "nivel1",
                         pixels_per_unit: float = constantes.PIXELS_PER_UNIT) -> SpriteFondo:
    """
    Carga assets/images/backdrops/<name>.png como SpriteFondo.
    Si no existe, devuelve un fondo plano del tamaño de la ventana.
    """
    path = BACKDROP_ROOT / f"{name}.png"
    try:
        img = _load_image(path)
    except (pygame.error, FileNotFoundError) as e:
        print(f"[WARN] No se pudo cargar el fondo {path.name}: {e}")
        img = pygame.Surface((constantes.ANCHO_VENTANA, constantes.ALTO_VENTANA))
        img.fill(constantes.COLOR_FONDO_PLANO)
    return SpriteFondo(img, name=name, pixels_per_unit=pixels_per_unit)
