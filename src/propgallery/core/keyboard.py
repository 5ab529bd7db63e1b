"""Keyboard bindings for an open gallery.

Bindings live in a Qt event filter that is installed on open/mount and
removed on close/unmount, so no handler survives its session.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Optional, Union

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from typing_extensions import override

from ..utils.logging_config import logger


class GalleryAction(Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    CLOSE = "close"
    TOGGLE_AUTOPLAY = "toggle_autoplay"


Keymap = Mapping[Qt.Key, GalleryAction]

INLINE_KEYMAP: Keymap = {
    Qt.Key.Key_Left: GalleryAction.PREVIOUS,
    Qt.Key.Key_Right: GalleryAction.NEXT,
    Qt.Key.Key_Space: GalleryAction.TOGGLE_AUTOPLAY,
}

MODAL_KEYMAP: Keymap = {
    **INLINE_KEYMAP,
    Qt.Key.Key_Escape: GalleryAction.CLOSE,
}


class KeyboardBindings(QObject):
    """Maps key presses on an attached target to gallery actions."""

    def __init__(
        self,
        handlers: Mapping[GalleryAction, Callable[[], object]],
        keymap: Keymap = INLINE_KEYMAP,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._handlers: dict[GalleryAction, Callable[[], object]] = dict(handlers)
        self._keymap: dict[Qt.Key, GalleryAction] = dict(keymap)
        self._target: Optional[QObject] = None

    @property
    def attached(self) -> bool:
        return self._target is not None

    @property
    def target(self) -> Optional[QObject]:
        return self._target

    def attach(self, target: QObject) -> None:
        if self._target is target:
            return
        self.detach()
        target.installEventFilter(self)
        self._target = target
        logger.debug(f"Keyboard bindings attached to {type(target).__name__}")

    def detach(self) -> None:
        if self._target is None:
            return
        target = self._target
        self._target = None
        try:
            target.removeEventFilter(self)
        except RuntimeError:
            # Underlying C++ object already deleted; nothing left to unhook.
            pass
        logger.debug("Keyboard bindings detached")

    def action_for(self, key: Union[int, Qt.Key]) -> Optional[GalleryAction]:
        try:
            qt_key = Qt.Key(key)
        except ValueError:
            return None
        action = self._keymap.get(qt_key)
        if action is None or action not in self._handlers:
            return None
        return action

    def handle_key(self, key: Union[int, Qt.Key]) -> bool:
        """Run the action bound to ``key``. Returns True if one ran."""
        action = self.action_for(key)
        if action is None:
            return False
        _ = self._handlers[action]()
        return True

    @override
    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if (
            self._target is not None
            and event.type() == QEvent.Type.KeyPress
            and isinstance(event, QKeyEvent)
            and self.handle_key(event.key())
        ):
            # Consumed, so Space never scrolls or clicks a focused button
            event.accept()
            return True
        return super().eventFilter(watched, event)
