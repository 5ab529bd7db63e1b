"""Tests for gallery keyboard bindings."""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from propgallery.core.keyboard import INLINE_KEYMAP, MODAL_KEYMAP, GalleryAction, KeyboardBindings


class TestKeyboardBindings:
    """Keys only reach handlers while the bindings are attached."""

    @pytest.fixture
    def pressed(self):
        return []

    @pytest.fixture
    def bindings(self, pressed):
        handlers = {action: (lambda a=action: pressed.append(a)) for action in GalleryAction}
        return KeyboardBindings(handlers, MODAL_KEYMAP)

    @pytest.fixture
    def target(self, qtbot):
        widget = QWidget()
        qtbot.addWidget(widget)
        widget.show()
        qtbot.waitExposed(widget)
        return widget

    @pytest.mark.parametrize("key,action", [
        (Qt.Key.Key_Left, GalleryAction.PREVIOUS),
        (Qt.Key.Key_Right, GalleryAction.NEXT),
        (Qt.Key.Key_Escape, GalleryAction.CLOSE),
        (Qt.Key.Key_Space, GalleryAction.TOGGLE_AUTOPLAY),
    ])
    def test_handle_key(self, bindings, pressed, key, action):
        assert bindings.handle_key(key)
        assert pressed == [action]

    def test_handle_key_accepts_int(self, bindings, pressed):
        assert bindings.handle_key(int(Qt.Key.Key_Right.value))
        assert pressed == [GalleryAction.NEXT]

    def test_unbound_key_ignored(self, bindings, pressed):
        assert not bindings.handle_key(Qt.Key.Key_A)
        assert pressed == []

    def test_inline_keymap_has_no_close(self):
        bindings = KeyboardBindings({GalleryAction.CLOSE: lambda: None}, INLINE_KEYMAP)
        assert bindings.action_for(Qt.Key.Key_Escape) is None

    def test_action_without_handler_ignored(self):
        bindings = KeyboardBindings({GalleryAction.NEXT: lambda: None}, MODAL_KEYMAP)
        assert bindings.action_for(Qt.Key.Key_Escape) is None
        assert bindings.action_for(Qt.Key.Key_Right) is GalleryAction.NEXT

    def test_key_press_through_event_filter(self, qtbot, bindings, pressed, target):
        bindings.attach(target)
        qtbot.keyClick(target, Qt.Key.Key_Right)
        qtbot.keyClick(target, Qt.Key.Key_Escape)
        assert pressed == [GalleryAction.NEXT, GalleryAction.CLOSE]

    def test_detach_stops_handling(self, qtbot, bindings, pressed, target):
        bindings.attach(target)
        bindings.detach()
        assert not bindings.attached
        qtbot.keyClick(target, Qt.Key.Key_Right)
        assert pressed == []

    def test_attach_twice_installs_once(self, qtbot, bindings, pressed, target):
        bindings.attach(target)
        bindings.attach(target)
        qtbot.keyClick(target, Qt.Key.Key_Left)
        assert pressed == [GalleryAction.PREVIOUS]

    def test_detach_when_not_attached(self, bindings):
        bindings.detach()
        assert bindings.target is None
