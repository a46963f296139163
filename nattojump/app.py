"""The program window: device polling, the fixed-rate frame loop and pygame rendering."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pygame

from nattojump.constants import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_CAPTION, Color
from nattojump.game_object import GameContext
from nattojump.input import (
    DEADZONE,
    GAMEPAD_MAX,
    Key,
    MouseButton,
    PadButton,
    read_pad,
)
from nattojump.scenes import Scene, SceneManager
from nattojump.sprite import Canvas, Quad
from nattojump.texture import TextureError, TextureRegistry

FRAME_RATE = 60
CLEAR_COLOR = (77, 77, 77)
_PAD_BUTTONS = 10
_AXIS_DEADZONE = DEADZONE / 10000.0

_KEY_MAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_UP: Key.UP,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


def _channel(value: float) -> int:
    return round(max(0.0, min(1.0, value)) * 255)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (_channel(color.r), _channel(color.g), _channel(color.b), _channel(color.a))


def load_image(name: str) -> Any:
    """Load an image file for use as a texture; a missing or unreadable file gives ``None``."""
    path = Path(name)
    if not path.is_file():
        return None
    try:
        image = pygame.image.load(str(path))
    except pygame.error:
        return None
    return image.convert_alpha() if pygame.display.get_surface() is not None else image


class PygameCanvas(Canvas):
    """Renders quads onto a pygame surface, wrapping texture coordinates like a repeat sampler."""

    def __init__(self, surface: pygame.Surface, textures: TextureRegistry) -> None:
        self.surface = surface
        self.textures = textures
        self._tiled: dict[int, tuple[Any, pygame.Surface]] = {}

    def clear(self) -> None:
        """Fill the surface with the background colour."""
        self.surface.fill(CLEAR_COLOR)

    def draw_quad(self, texture: Any, vertices: Quad) -> None:
        image = self._lookup(texture)
        if image is None:
            self._draw_flat(vertices)
        else:
            self._draw_textured(image, vertices)

    def _lookup(self, texture: Any) -> Any:
        if texture is None:
            return None
        try:
            return self.textures.get(texture)
        except TextureError:
            return None

    def _draw_flat(self, vertices: Quad) -> None:
        xs = [vx.x for vx in vertices]
        ys = [vx.y for vx in vertices]
        left, top = math.floor(min(xs)), math.floor(min(ys))
        width = math.ceil(max(xs)) - left
        height = math.ceil(max(ys)) - top
        if width < 1 or height < 1:
            return
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        outline = [(vertices[i].x - left, vertices[i].y - top) for i in (0, 1, 3, 2)]
        pygame.draw.polygon(layer, _rgba(vertices[0].color), outline)
        self.surface.blit(layer, (left, top))

    def _tile(self, image: pygame.Surface) -> pygame.Surface:
        cached = self._tiled.get(id(image))
        if cached is not None and cached[0] is image:
            return cached[1]
        tw, th = image.get_size()
        tiled = pygame.Surface((tw * 2, th * 2), pygame.SRCALPHA)
        for ox in (0, tw):
            for oy in (0, th):
                tiled.blit(image, (ox, oy))
        self._tiled[id(image)] = (image, tiled)
        return tiled

    def _draw_textured(self, image: pygame.Surface, vertices: Quad) -> None:
        top_left, top_right, bottom_left, bottom_right = vertices
        width = round(math.hypot(top_right.x - top_left.x, top_right.y - top_left.y))
        height = round(math.hypot(bottom_left.x - top_left.x, bottom_left.y - top_left.y))
        if width < 1 or height < 1:
            return

        tw, th = image.get_size()
        src_x = int((top_left.u % 1.0) * tw)
        src_y = int((top_left.v % 1.0) * th)
        src_w = max(1, round(min(abs(bottom_right.u - top_left.u), 1.0) * tw))
        src_h = max(1, round(min(abs(bottom_right.v - top_left.v), 1.0) * th))
        region = self._tile(image).subsurface((src_x, src_y, src_w, src_h))

        layer = pygame.Surface((src_w, src_h), pygame.SRCALPHA)
        layer.blit(region, (0, 0))
        layer = pygame.transform.scale(layer, (width, height))

        color = top_left.color
        if tuple(color) != (1.0, 1.0, 1.0, 1.0):
            layer.fill(_rgba(color), special_flags=pygame.BLEND_RGBA_MULT)

        angle = math.degrees(
            math.atan2(top_right.y - top_left.y, top_right.x - top_left.x)
        )
        if abs(angle) > 1e-6:
            layer = pygame.transform.rotate(layer, -angle)

        cx = sum(vx.x for vx in vertices) / 4.0
        cy = sum(vx.y for vx in vertices) / 4.0
        self.surface.blit(layer, layer.get_rect(center=(round(cx), round(cy))))


class App:
    """Drives the screens frame by frame; ``run`` adds the window, devices and frame timing."""

    def __init__(
        self,
        context: GameContext | None = None,
        scenes: SceneManager | None = None,
        window: pygame.Surface | None = None,
        max_frames: int | None = None,
    ) -> None:
        self.context = context if context is not None else GameContext()
        self.scenes = scenes if scenes is not None else SceneManager(self.context)
        self.window = window
        self.max_frames = max_frames
        self.frames = 0
        self.running = True
        self._wheel = 0
        self._joysticks: list[Any] = []

        fade = self.scenes.fade
        fade.initialize()
        # The program opens on the title screen, revealed from black.
        fade.set_color(0.0, 0.0, 0.0)
        fade.fade_in(Scene.TITLE)

    def step(self) -> None:
        """Run one frame: update, draw, then switch screens if one was requested."""
        self.scenes.update()
        clear = getattr(self.context.canvas, "clear", None)
        if clear is not None:
            clear()
        self.scenes.draw()
        self.scenes.check_scene()
        self.frames += 1

    def run(self) -> None:
        """Run the frame loop at a fixed rate until the window closes or Escape is pressed."""
        if self.window is None:
            raise RuntimeError("the application needs a window to run")
        clock = pygame.time.Clock()
        pygame.joystick.init()
        self._joysticks = [
            pygame.joystick.Joystick(i)
            for i in range(min(pygame.joystick.get_count(), GAMEPAD_MAX))
        ]
        pygame.mouse.get_rel()
        try:
            while self.running:
                for event in pygame.event.get():
                    self._handle_event(event)
                if not self.running:
                    break
                self._poll_input()
                self.step()
                self._present()
                if self.max_frames is not None and self.frames >= self.max_frames:
                    break
                clock.tick(FRAME_RATE)
        finally:
            self.context.textures.release()

    def _handle_event(self, event: Any) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            x, y = self._to_screen(event.pos)
            self.context.input.set_mouse_position(x, y)
        elif event.type == pygame.MOUSEWHEEL:
            self._wheel += event.y

    def _to_screen(self, pos: tuple[int, int]) -> tuple[int, int]:
        ww, wh = self.window.get_size()
        return (int(pos[0] * SCREEN_WIDTH / ww), int(pos[1] * SCREEN_HEIGHT / wh))

    def _poll_input(self) -> None:
        pressed = pygame.key.get_pressed()
        keys = [code for pg_key, code in _KEY_MAP.items() if pressed[pg_key]]
        left, middle, right = pygame.mouse.get_pressed(3)
        buttons = [
            button
            for button, down in (
                (MouseButton.LEFT, left),
                (MouseButton.RIGHT, right),
                (MouseButton.CENTER, middle),
            )
            if down
        ]
        dx, dy = pygame.mouse.get_rel()
        delta = (dx, dy, self._wheel)
        self._wheel = 0
        pads = [self._read_joystick(stick) for stick in self._joysticks]
        self.context.input.update(keys, buttons, delta, pads)

    @staticmethod
    def _read_joystick(stick: Any) -> PadButton:
        def axis(index: int) -> float:
            if stick.get_numaxes() <= index:
                return 0.0
            value = stick.get_axis(index)
            return 0.0 if abs(value) < _AXIS_DEADZONE else value

        count = min(stick.get_numbuttons(), _PAD_BUTTONS)
        return read_pad(axis(0), axis(1), [bool(stick.get_button(b)) for b in range(count)])

    def _present(self) -> None:
        canvas = self.context.canvas
        if not isinstance(canvas, PygameCanvas):
            return
        if canvas.surface.get_size() == self.window.get_size():
            self.window.blit(canvas.surface, (0, 0))
        else:
            pygame.transform.scale(canvas.surface, self.window.get_size(), self.window)
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="nattojump", description="Play the game.")
    parser.add_argument(
        "--scale", type=float, default=1.0, help="window size relative to 1920x1080"
    )
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")

    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    pygame.display.init()
    try:
        size = (max(1, round(SCREEN_WIDTH * args.scale)), max(1, round(SCREEN_HEIGHT * args.scale)))
        window = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_CAPTION)
        textures = TextureRegistry(loader=load_image)
        canvas = PygameCanvas(pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)), textures)
        context = GameContext(textures=textures, canvas=canvas)
        App(context, window=window, max_frames=args.frames).run()
    finally:
        pygame.quit()
    return 0