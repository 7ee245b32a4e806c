"""Shared fixtures for the camera/backdrop test suite."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from ajustes import BackdropSettings, FollowSettings
from camara import Camara
from escena import Nodo, SpriteFondo


@pytest.fixture
def camera():
    """Camera at the origin: 16 x 8 world units visible (size 4, aspect 2)."""
    return Camara(orthographic_size=4.0, aspect=2.0, position=(0.0, 0.0, -10.0))


@pytest.fixture
def target():
    return Nodo("Jugador", (0.0, 0.0, 0.0), tag="Player")


@pytest.fixture
def follow_settings():
    """Dyadic margins so the boundary checks are exact in floating point."""
    return FollowSettings(left_bound=2.0, right_bound=2.0, top_bound=1.0, bottom_bound=1.0)


@pytest.fixture
def backdrop_settings():
    return BackdropSettings()


@pytest.fixture
def backdrop_sprite():
    """A 400 x 200 px sprite: 4 x 2 world units at 100 px per unit."""
    return SpriteFondo(pygame.Surface((400, 200)), position=(0.0, 0.0, 0.0))


@pytest.fixture
def surface():
    return pygame.Surface((160, 80))
