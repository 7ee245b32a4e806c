"""Tests for scene objects and the discovery helpers."""

import pygame

from escena import Nodo, SpriteFondo, find_with_tag


class TestNodo:

    def test_position_is_vector3(self):
        nodo = Nodo("a", (1, 2, 3))
        assert isinstance(nodo.position, pygame.math.Vector3)
        assert (nodo.position.x, nodo.position.y, nodo.position.z) == (1.0, 2.0, 3.0)

    def test_find_first_child_direct(self):
        padre = Nodo("padre")
        padre.add_child(Nodo("otro"))
        fondo = padre.add_child(SpriteFondo(None))
        assert padre.find_first_child(SpriteFondo) is fondo

    def test_find_first_child_nested(self):
        padre = Nodo("padre")
        hijo = padre.add_child(Nodo("hijo"))
        nieto = hijo.add_child(SpriteFondo(None))
        assert padre.find_first_child(SpriteFondo) is nieto

    def test_find_first_child_missing(self):
        assert Nodo("solo").find_first_child(SpriteFondo) is None


class TestFindWithTag:

    def test_finds_tagged(self):
        a = Nodo("a", tag="Enemy")
        b = Nodo("b", tag="Player")
        assert find_with_tag([a, b], "Player") is b

    def test_works_on_sprite_group(self):
        grupo = pygame.sprite.Group()
        jugador = Nodo("j", tag="Player")
        grupo.add(jugador)
        assert find_with_tag(grupo, "Player") is jugador

    def test_missing_returns_none(self):
        assert find_with_tag([Nodo("a")], "Player") is None


class TestSpriteFondo:

    def test_native_size_uses_pixels_per_unit(self):
        fondo = SpriteFondo(pygame.Surface((300, 150)), pixels_per_unit=50)
        assert fondo.native_size() == (6.0, 3.0)

    def test_native_size_without_image(self):
        assert SpriteFondo(None).native_size() == (0.0, 0.0)

    def test_world_size_applies_scale(self):
        fondo = SpriteFondo(pygame.Surface((200, 100)))
        fondo.scale = 2.5
        assert fondo.world_size() == (5.0, 2.5)
