"""
core/scene.py — Scene base class

A scene is one screen: the welcome screen or the play field.  The app
keeps a stack and only talks to the top one, once per frame, in this
order:

    handle_event(event, app)   for every pending pygame event
    update(app)                one tick; there is no dt, speeds are per tick
    draw(surface, app)         onto the fixed-size virtual canvas

``on_enter`` / ``on_exit`` fire when the scene becomes / stops being the
top of the stack.  Every hook is optional.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        pass

    def on_exit(self, app: App):
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def update(self, app: App):
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass
