"""Gallery session - the single owner of one gallery's mutable state.

A session is created when a gallery mounts (or a lightbox opens) and is
discarded on unmount/close. ``teardown`` synchronously stops autoplay,
detaches keyboard bindings and unbinds the thumbnail strip before returning.
"""

import weakref
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..utils.logging_config import log_function, logger
from ..utils.timers import TimerFactory
from .autoplay import AutoplayScheduler
from .config_manager import SlideshowOptions
from .gesture import GestureRecognizer, GestureState, SwipeDirection
from .images import ImageRecord
from .keyboard import INLINE_KEYMAP, MODAL_KEYMAP, GalleryAction, KeyboardBindings
from .navigation import NavigationController
from .thumbnails import ThumbnailStripProtocol, ThumbnailSynchronizer


class GalleryVariant(Enum):
    """INLINE galleries are always open; MODAL galleries open and close."""

    INLINE = "inline"
    MODAL = "modal"


class GallerySession(QObject):
    index_changed: Signal = Signal(int)  # type: ignore[misc]
    playing_changed: Signal = Signal(bool)  # type: ignore[misc]
    open_changed: Signal = Signal(bool)  # type: ignore[misc]
    loading_changed: Signal = Signal(bool)  # type: ignore[misc]
    images_changed: Signal = Signal()  # type: ignore[misc]
    closed: Signal = Signal()  # type: ignore[misc]

    def __init__(
        self,
        images: Sequence[ImageRecord] = (),
        *,
        variant: GalleryVariant = GalleryVariant.INLINE,
        initial_index: int = 0,
        options: Optional[SlideshowOptions] = None,
        timer_factory: Optional[TimerFactory] = None,
        on_index_change: Optional[Callable[[int], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.variant: GalleryVariant = variant
        self.options: SlideshowOptions = options or SlideshowOptions()
        self.controller = NavigationController()
        self.gesture = GestureRecognizer(self.options.min_swipe_distance, self.options.drag_threshold)
        self.autoplay = AutoplayScheduler(self._on_autoplay_tick, timer_factory, parent=self)
        self.synchronizer = ThumbnailSynchronizer()

        handlers: dict[GalleryAction, Callable[[], object]] = {
            GalleryAction.PREVIOUS: self.previous,
            GalleryAction.NEXT: self.next,
            GalleryAction.TOGGLE_AUTOPLAY: self.toggle_autoplay,
        }
        keymap = INLINE_KEYMAP
        if variant is GalleryVariant.MODAL:
            handlers[GalleryAction.CLOSE] = self.close
            keymap = MODAL_KEYMAP
        self.keyboard = KeyboardBindings(handlers, keymap, parent=self)
        self._keyboard_target: Optional[QObject] = None

        self._images: tuple[ImageRecord, ...] = tuple(images)
        self._current_index: int = 0
        self._is_open: bool = variant is GalleryVariant.INLINE
        self._is_loading: bool = not self._images
        self._disposed: bool = False
        self._resume_on_show: bool = False

        if self._images:
            self._current_index = self.controller.go_to(initial_index, len(self._images))

        if on_index_change is not None:
            _ = self.index_changed.connect(on_index_change)
        if on_close is not None:
            _ = self.closed.connect(on_close)

        _ = self.destroyed.connect(self._release_on_destroy())

        if self._is_open:
            self._maybe_autostart()

    # ----------------------------- State -----------------------------

    @property
    def images(self) -> tuple[ImageRecord, ...]:
        return self._images

    @property
    def length(self) -> int:
        return len(self._images)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_image(self) -> Optional[ImageRecord]:
        if not self._images:
            return None
        return self._images[self._current_index]

    @property
    def is_playing(self) -> bool:
        return self.autoplay.running

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def gesture_state(self) -> GestureState:
        return self.gesture.state

    @property
    def can_navigate(self) -> bool:
        return NavigationController.can_navigate(len(self._images))

    def position_label(self, separator: str = "/") -> str:
        """Counter text such as ``3 / 8`` or ``3 of 8``; empty for no images."""
        if not self._images:
            return ""
        return f"{self._current_index + 1} {separator} {len(self._images)}"

    # ----------------------------- Navigation -----------------------------

    def _navigable(self) -> bool:
        if self._disposed:
            logger.debug("Ignoring navigation on a torn-down gallery session")
            return False
        return self._is_open and self.can_navigate

    def next(self) -> bool:
        """Advance one slide. No-op (returns False) for fewer than two images."""
        if not self._navigable():
            return False
        return self._set_index(self.controller.next(self._current_index, len(self._images)))

    def previous(self) -> bool:
        """Go back one slide. No-op (returns False) for fewer than two images."""
        if not self._navigable():
            return False
        return self._set_index(self.controller.previous(self._current_index, len(self._images)))

    def go_to(self, index: int) -> bool:
        """Jump straight to ``index``.

        A no-op on an empty or torn-down session.

        Raises:
            OutOfRangeError: if ``index`` is outside ``[0, length)``
        """
        if self._disposed or not self._images:
            return False
        return self._set_index(self.controller.go_to(index, len(self._images)))

    def swipe(self, direction: SwipeDirection) -> bool:
        if direction is SwipeDirection.LEFT:
            return self.next()
        return self.previous()

    def _set_index(self, index: int) -> bool:
        changed = index != self._current_index
        self._current_index = index
        _ = self.synchronizer.sync(index)
        if changed:
            logger.debug(f"Gallery index -> {index}")
            self.index_changed.emit(index)
        return changed

    # ----------------------------- Gestures -----------------------------

    def pointer_down(self, x: float, y: float) -> None:
        if self._disposed or not self._is_open:
            return
        self.gesture.on_start(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.gesture.on_move(x, y)

    def pointer_up(self, x: float) -> bool:
        """End a gesture; returns True if it navigated."""
        direction = self.gesture.on_end(x)
        if direction is None:
            return False
        return self.swipe(direction)

    def pointer_cancel(self) -> None:
        self.gesture.cancel()

    # ----------------------------- Autoplay -----------------------------

    def play(self) -> bool:
        """Start autoplay. Only possible while open with two or more images."""
        if not self._navigable():
            return False
        if not self.autoplay.start(self.options.slide_interval_ms):
            return False
        logger.info(f"Autoplay started every {self.options.slide_interval_ms} ms")
        self.playing_changed.emit(True)
        return True

    def pause(self) -> bool:
        if not self.autoplay.stop():
            return False
        logger.info("Autoplay paused")
        self.playing_changed.emit(False)
        return True

    def toggle_autoplay(self) -> bool:
        """Flip play/pause without touching the current index. Returns the new state."""
        if self.autoplay.running:
            _ = self.pause()
        else:
            _ = self.play()
        return self.autoplay.running

    def _maybe_autostart(self) -> None:
        if self.options.auto_slide and self.can_navigate:
            _ = self.play()

    def _on_autoplay_tick(self) -> None:
        if self._disposed or not self._is_open or not self.can_navigate:
            _ = self.pause()
            return
        _ = self.next()

    # ----------------------------- Lifecycle -----------------------------

    def _release_on_destroy(self) -> Callable[..., None]:
        """Cleanup run when Qt deletes this session along with its owning widget.

        No ``closeEvent`` reaches a shell embedded in a page that is deleted, so
        this is the teardown path for that case. It only touches plain Python
        state and the autoplay timer, which is still alive as a child.
        """
        autoplay, gesture, synchronizer = self.autoplay, self.gesture, self.synchronizer
        session_ref = weakref.ref(self)

        def release(*_args: object) -> None:
            _ = autoplay.stop()
            gesture.cancel()
            synchronizer.unbind()
            session = session_ref()
            if session is not None:
                session._keyboard_target = None
                session._disposed = True
            logger.debug("Gallery session destroyed with its widget")

        return release

    def suspend(self) -> None:
        """Pause autoplay while the presenting widget is hidden."""
        if self.pause():
            self._resume_on_show = True

    def resume(self) -> None:
        """Restart autoplay that ``suspend`` paused."""
        if not self._resume_on_show:
            return
        self._resume_on_show = False
        _ = self.play()

    def bind_keyboard(self, target: QObject) -> None:
        """Scope keyboard bindings to ``target``; active only while open."""
        self._keyboard_target = target
        if self._is_open and not self._disposed:
            self.keyboard.attach(target)

    def bind_thumbnails(self, strip: ThumbnailStripProtocol) -> None:
        self.synchronizer.bind(strip)
        if self._images:
            _ = self.synchronizer.sync(self._current_index)

    def set_loading(self, loading: bool) -> None:
        if loading == self._is_loading:
            return
        self._is_loading = loading
        self.loading_changed.emit(loading)

    @log_function
    def set_images(self, images: Sequence[ImageRecord]) -> None:
        """Replace the collection, keeping the index in range.

        Autoplay stops when fewer than two images remain and restarts for
        ``auto_slide`` sessions once there are two or more again.
        """
        if self._disposed:
            return
        previous_index = self._current_index
        self._images = tuple(images)
        self._current_index = min(previous_index, len(self._images) - 1) if self._images else 0
        self.images_changed.emit()

        if self._images:
            _ = self.synchronizer.sync(self._current_index)
        if self._current_index != previous_index:
            self.index_changed.emit(self._current_index)

        self.set_loading(not self._images)

        if not self.can_navigate:
            _ = self.pause()
        elif self._is_open and not self.is_playing:
            self._maybe_autostart()

    @log_function
    def open(self, initial_index: int = 0) -> None:
        """Open a modal session at ``initial_index`` with fresh state.

        Raises:
            OutOfRangeError: if ``initial_index`` is outside a non-empty collection
        """
        if self._disposed:
            return
        if self.variant is GalleryVariant.INLINE:
            logger.debug("Inline galleries are always open")
            return

        if self._is_open:
            self._shutdown_interaction()

        index = self.controller.go_to(initial_index, len(self._images)) if self._images else 0
        self.gesture.cancel()
        self._is_open = True
        if self._keyboard_target is not None:
            self.keyboard.attach(self._keyboard_target)
        logger.info(f"Gallery opened at {index} of {len(self._images)} image(s)")
        self.open_changed.emit(True)
        if self._images:
            _ = self._set_index(index)
        self._maybe_autostart()

    @log_function
    def close(self) -> None:
        """Close a modal session; inline sessions have no closed state."""
        if self._disposed or not self._is_open:
            return
        if self.variant is GalleryVariant.INLINE:
            logger.debug("Ignoring close on an inline gallery")
            return
        self._shutdown_interaction()
        self._is_open = False
        logger.info("Gallery closed")
        self.open_changed.emit(False)
        self.closed.emit()

    @log_function
    def teardown(self) -> None:
        """Dispose the session. Safe to call more than once."""
        if self._disposed:
            return
        was_open_modal = self._is_open and self.variant is GalleryVariant.MODAL
        self._shutdown_interaction()
        self._resume_on_show = False
        self.synchronizer.unbind()
        self._keyboard_target = None
        self._disposed = True
        if was_open_modal:
            self._is_open = False
            self.open_changed.emit(False)
            self.closed.emit()
        logger.info("Gallery session torn down")

    def _shutdown_interaction(self) -> None:
        _ = self.pause()
        self.keyboard.detach()
        self.gesture.cancel()
