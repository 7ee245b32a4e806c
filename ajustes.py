# ajustes.py
from __future__ import annotations
import json
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path

from constantes import SETTINGS_PATH


def _vec3(value) -> tuple[float, float, float]:
    x, y, z = (list(value) + [0.0, 0.0, 0.0])[:3]
    return float(x), float(y), float(z)


def _from_dict(cls, data: dict):
    """Construye `cls` con las claves conocidas de `data`, convirtiendo tipos."""
    kwargs = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "offset":
            kwargs[f.name] = _vec3(value)
        elif f.type == "bool":
            if isinstance(value, bool) or value in (0, 1):
                kwargs[f.name] = bool(value)
            else:
                print(f"[WARN] {cls.__name__}.{f.name}: se esperaba true/false, no {value!r}")
        else:
            kwargs[f.name] = float(value)
    return cls(**kwargs)


@dataclass
class FollowSettings:
    # distancia (unidades de mundo) a cada borde antes de mover la cámara
    left_bound: float = 2.0
    right_bound: float = 2.0
    top_bound: float = 1.5
    bottom_bound: float = 1.5

    follow_x: bool = True
    follow_y: bool = True
    smooth_follow: bool = False
    follow_speed: float = 2.0

    offset: tuple = (0.0, 0.0, 0.0)

    @classmethod
    def from_dict(cls, data: dict) -> "FollowSettings":
        return _from_dict(cls, data)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["offset"] = list(self.offset)
        return d


@dataclass
class BackdropSettings:
    follow_x: bool = True
    follow_y: bool = True
    offset: tuple = (0.0, 0.0, 0.0)
    parallax_x: float = 0.0
    parallax_y: float = 0.0

    auto_scale: bool = True
    scale_multiplier: float = 1.2

    @classmethod
    def from_dict(cls, data: dict) -> "BackdropSettings":
        return _from_dict(cls, data)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["offset"] = list(self.offset)
        return d


@dataclass
class CameraSettings:
    follow: FollowSettings = field(default_factory=FollowSettings)
    backdrop: BackdropSettings = field(default_factory=BackdropSettings)

    @classmethod
    def load(cls, path: Path = SETTINGS_PATH) -> "CameraSettings":
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("se esperaba un objeto JSON")
            return cls(
                follow=FollowSettings.from_dict(data.get("camera_follow") or {}),
                backdrop=BackdropSettings.from_dict(data.get("fixed_background") or {}),
            )
        except (OSError, ValueError, TypeError) as e:
            print(f"[WARN] No se pudo leer {path.name}, usando valores por defecto:", e)
            return cls()

    def save(self, path: Path = SETTINGS_PATH):
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
        except OSError as e:
            print(f"[WARN] No se pudo guardar {Path(path).name}:", e)

    def to_dict(self) -> dict:
        return {
            "camera_follow": self.follow.to_dict(),
            "fixed_background": self.backdrop.to_dict(),
        }
