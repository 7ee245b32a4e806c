# main.py
import pygame

import constantes
from ajustes import CameraSettings
from camara import Camara, BoundedCameraTracker
from escena import Nodo, find_with_tag
from parallax import ParallaxBackdrop, load_backdrop_sprite

TAM_JUGADOR = 0.5  # unidades de mundo


# -------------------- Dibujo --------------------
_escala_cache = {}


def draw_backdrop(surface, camera, fondo):
    if not fondo.visible or fondo.image is None:
        return
    ppu = camera.pixels_per_unit(surface.get_size())
    w, h = fondo.world_size()
    size = (max(1, int(w * ppu)), max(1, int(h * ppu)))
    key = (id(fondo.image), size)
    if key not in _escala_cache:
        _escala_cache.clear()
        _escala_cache[key] = pygame.transform.smoothscale(fondo.image, size)
    img = _escala_cache[key]
    center = camera.world_to_screen(fondo.position, surface.get_size())
    surface.blit(img, img.get_rect(center=(int(center.x), int(center.y))))


def draw_player(surface, camera, jugador):
    ppu = camera.pixels_per_unit(surface.get_size())
    lado = max(1, int(TAM_JUGADOR * ppu))
    rect = pygame.Rect(0, 0, lado, lado)
    c = camera.world_to_screen(jugador.position, surface.get_size())
    rect.center = (int(c.x), int(c.y))
    pygame.draw.rect(surface, constantes.COLOR_JUGADOR, rect)


def leer_movimiento() -> pygame.math.Vector2:
    keys = pygame.key.get_pressed()
    d = pygame.math.Vector2(
        keys[pygame.K_RIGHT] - keys[pygame.K_LEFT],
        keys[pygame.K_UP] - keys[pygame.K_DOWN],
    )
    if d.length_squared() > 0:
        d.scale_to_length(constantes.VELOCIDAD)
    return d


def main():
    pygame.init()
    ventana = pygame.display.set_mode((constantes.ANCHO_VENTANA, constantes.ALTO_VENTANA))
    pygame.display.set_caption("Cámara con zona muerta")
    reloj = pygame.time.Clock()

    ajustes = CameraSettings.load()

    # === ESCENA ===
    escena = pygame.sprite.Group()
    jugador = Nodo("Jugador", (0.0, 0.0, 0.0), tag=constantes.TAG_JUGADOR)
    escena.add(jugador)

    cam = Camara(aspect=ventana.get_width() / ventana.get_height())
    cam.add_child(load_backdrop_sprite("nivel1"))

    # El objetivo se busca por tag si no se asigna
    tracker = BoundedCameraTracker(cam, settings=ajustes.follow,
                                   find_target=lambda: find_with_tag(escena, constantes.TAG_JUGADOR))
    fondo = ParallaxBackdrop(cam, settings=ajustes.backdrop)
    fondo.start()
    tracker.start()

    ver_gizmos = False
    corriendo = True
    while corriendo:
        dt = reloj.tick(constantes.FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                corriendo = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    corriendo = False
                elif event.key == pygame.K_F1:
                    ver_gizmos = not ver_gizmos
                elif event.key == pygame.K_c:
                    tracker.center_on_target()
                elif event.key == pygame.K_s:
                    ajustes.follow.smooth_follow = not ajustes.follow.smooth_follow
                    print(f"[DEBUG] Suavizado {'ON' if ajustes.follow.smooth_follow else 'OFF'}")

        # Jugador primero, luego cámara, luego fondo
        mov = leer_movimiento() * dt
        jugador.position.x += mov.x
        jugador.position.y += mov.y
        tracker.update(dt)
        fondo.update()

        ventana.fill((0, 0, 0))
        if fondo.enabled:
            draw_backdrop(ventana, cam, fondo.backdrop)
        draw_player(ventana, cam, jugador)
        if ver_gizmos:
            tracker.draw_gizmos(ventana)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
