from pathlib import Path

ANCHO_VENTANA = 800
ALTO_VENTANA = 600
FPS = 60
VELOCIDAD = 6.0        # unidades/s del jugador de la demo

# --- Cámara ortográfica ---
ORTHO_SIZE = 5.0       # media altura visible en unidades de mundo
ASPECTO = ANCHO_VENTANA / ALTO_VENTANA
CAMARA_Z = -10.0
PIXELS_PER_UNIT = 100  # igual que los sprites importados por defecto

# --- Fondo ---
FONDO_Z_OFFSET = 1.0   # detrás de la cámara, pero no muy lejos
FONDO_Z_MIN = -10.0    # por debajo de esto se recorta
FONDO_Z_RESPALDO = -1.0
FONDO_ORDEN = -1       # orden de dibujo: antes que todo lo demás
COLOR_FONDO_PLANO = (8, 12, 28)

# --- Gizmos ---
COLOR_GIZMO_PANTALLA = (255, 255, 255)
COLOR_GIZMO_ZONA = (255, 235, 4)
COLOR_GIZMO_CENTRO = (255, 0, 0)
RADIO_GIZMO_CENTRO = 0.1  # unidades de mundo

COLOR_JUGADOR = (255, 255, 0)
TAG_JUGADOR = "Player"

BASE_DIR = Path(__file__).resolve().parent
IMG_DIR = BASE_DIR / "assets" / "images"
SETTINGS_PATH = BASE_DIR / "settings.json"
