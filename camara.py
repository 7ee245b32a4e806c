# camara.py
from typing import NamedTuple

import pygame
import constantes
from ajustes import FollowSettings
from escena import Nodo


class Camara(Nodo):
    """Cámara ortográfica 2D. `position` es el centro de la vista en el mundo."""

    def __init__(self, orthographic_size=constantes.ORTHO_SIZE, aspect=constantes.ASPECTO,
                 position=(0.0, 0.0, constantes.CAMARA_Z), name="Main Camera"):
        super().__init__(name, position)
        self.orthographic_size = float(orthographic_size)
        self.aspect = float(aspect)

    def viewport_height(self) -> float:
        return self.orthographic_size * 2.0

    def viewport_width(self) -> float:
        return self.viewport_height() * self.aspect

    def half_extents(self) -> tuple[float, float]:
        return self.orthographic_size * self.aspect, self.orthographic_size

    def world_to_viewport(self, point) -> pygame.math.Vector2:
        """Coordenadas normalizadas: (0,0) abajo-izquierda, (1,1) arriba-derecha."""
        return pygame.math.Vector2(
            (point[0] - self.position.x) / self.viewport_width() + 0.5,
            (point[1] - self.position.y) / self.viewport_height() + 0.5,
        )

    def pixels_per_unit(self, surface_size) -> float:
        return surface_size[1] / self.viewport_height()

    def world_to_screen(self, point, surface_size) -> pygame.math.Vector2:
        sw, sh = surface_size
        ppu = self.pixels_per_unit(surface_size)
        return pygame.math.Vector2(
            sw / 2 + (point[0] - self.position.x) * ppu,
            sh / 2 - (point[1] - self.position.y) * ppu,
        )


class BoundsCheck(NamedTuple):
    update_x: bool
    update_y: bool

    @property
    def any(self) -> bool:
        return self.update_x or self.update_y


def check_bounds(camera: Camara, target_position, settings: FollowSettings) -> BoundsCheck:
    """Indica, por eje, si el objetivo salió de la zona muerta.

    Los márgenes (en unidades de mundo) se pasan a fracciones del viewport con la
    geometría actual de la cámara, así la zona acompaña al zoom y al aspecto.
    Estar justo en el borde cuenta como dentro.
    """
    vp = camera.world_to_viewport(target_position)
    update_x = update_y = False

    if settings.follow_x:
        width = camera.viewport_width()
        left = settings.left_bound / width
        right = 1.0 - settings.right_bound / width
        update_x = vp.x < left or vp.x > right

    if settings.follow_y:
        height = camera.viewport_height()
        bottom = settings.bottom_bound / height
        top = 1.0 - settings.top_bound / height
        update_y = vp.y < bottom or vp.y > top

    return BoundsCheck(update_x, update_y)


def desired_position(camera: Camara, target_position, check: BoundsCheck,
                     settings: FollowSettings) -> pygame.math.Vector3:
    """Posición que deja al objetivo justo en el borde de la zona muerta.

    Solo cambian los ejes marcados en `check`; z nunca se toca.
    """
    half_w, half_h = camera.half_extents()
    desired = pygame.math.Vector3(camera.position)
    tx, ty = target_position[0], target_position[1]

    if check.update_x:
        if tx < camera.position.x:
            desired.x = tx + half_w - settings.left_bound
        else:
            desired.x = tx - half_w + settings.right_bound

    if check.update_y:
        if ty < camera.position.y:
            desired.y = ty + half_h - settings.bottom_bound
        else:
            desired.y = ty - half_h + settings.top_bound

    return desired


class BoundedCameraTracker:
    """Mueve la cámara solo cuando el objetivo sale de la zona muerta.

    Se actualiza después de que el objetivo se haya movido en el frame.
    Sin objetivo no hace nada.
    """

    def __init__(self, camera: Camara, target: Nodo | None = None,
                 settings: FollowSettings | None = None, find_target=None):
        self.camera = camera
        self.target = target
        self.settings = settings or FollowSettings()
        self.find_target = find_target

        self.started = False
        self.target_position = pygame.math.Vector3(camera.position)  # acumulador del suavizado
        self.desired = pygame.math.Vector3(camera.position)
        self.is_following = False
        self.update_camera_x = False
        self.update_camera_y = False

    def start(self):
        if self.target is None and self.find_target is not None:
            self.target = self.find_target()
        self.target_position = pygame.math.Vector3(self.camera.position)
        self.started = True

    def update(self, dt: float):
        if not self.started:
            self.start()
        if self.target is None:
            return

        check = check_bounds(self.camera, self.target.position, self.settings)
        self.update_camera_x, self.update_camera_y = check
        self.is_following = check.any
        if not self.is_following:
            return

        self.desired = desired_position(self.camera, self.target.position, check, self.settings)

        if self.settings.smooth_follow:
            t = max(0.0, min(1.0, self.settings.follow_speed * dt))
            self.target_position = self.target_position.lerp(self.desired, t)
            new_pos = pygame.math.Vector3(self.target_position)
        else:
            new_pos = pygame.math.Vector3(self.desired)
            # el acumulador acompaña a la cámara para poder activar el suavizado luego
            self.target_position = pygame.math.Vector3(new_pos)

        # 2D: la profundidad de la cámara no cambia nunca
        new_pos.z = self.camera.position.z
        self.camera.position = new_pos

    def center_on_target(self):
        """Centra la cámara de golpe en el objetivo (+offset), sin zona muerta."""
        if self.target is None:
            return
        new_pos = self.target.position + pygame.math.Vector3(self.settings.offset)
        new_pos.z = self.camera.position.z
        self.camera.position = new_pos
        self.target_position = pygame.math.Vector3(new_pos)

    def set_target(self, target: Nodo | None):
        self.target = target

    # ---------------- gizmos ----------------

    def draw_gizmos(self, surface: pygame.Surface):
        """Dibuja pantalla, zona muerta y centro de la cámara (solo depuración)."""
        cam = self.camera
        size = surface.get_size()
        ppu = cam.pixels_per_unit(size)
        center = cam.world_to_screen(cam.position, size)

        width = cam.viewport_width()
        height = cam.viewport_height()
        s = self.settings
        inner_w = width - (s.left_bound + s.right_bound)
        inner_h = height - (s.top_bound + s.bottom_bound)

        outer = pygame.Rect(0, 0, round(width * ppu), round(height * ppu))
        outer.center = (round(center.x), round(center.y))
        pygame.draw.rect(surface, constantes.COLOR_GIZMO_PANTALLA, outer, 1)

        if inner_w > 0 and inner_h > 0:
            inner = pygame.Rect(0, 0, round(inner_w * ppu), round(inner_h * ppu))
            inner.center = outer.center
            pygame.draw.rect(surface, constantes.COLOR_GIZMO_ZONA, inner, 1)

        radius = max(1, round(constantes.RADIO_GIZMO_CENTRO * ppu))
        pygame.draw.circle(surface, constantes.COLOR_GIZMO_CENTRO, outer.center, radius, 1)
