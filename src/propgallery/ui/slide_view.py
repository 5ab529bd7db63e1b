"""Main slide area: current image, caption, counter and arrow buttons."""

from typing import Optional

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent, QPixmap, QResizeEvent, QTouchEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget
from typing_extensions import override

from ..core.images import alt_text_for
from ..core.session import GallerySession
from .pixmaps import PixmapCache
from .styles import SLIDE_MIN_HEIGHT, SPACING_MD, SPACING_SM

EMPTY_TEXT = "No images available"


class SlideView(QWidget):
    """Renders a session's current slide and feeds pointer input back to it.

    Mouse drags and touch swipes go through the same session pointer API.
    Leaving the widget mid-drag ends the gesture at the last seen position.
    """

    def __init__(
        self,
        session: GallerySession,
        cache: PixmapCache,
        *,
        alt_prefix: str = "Image",
        counter_separator: str = "/",
        show_counter: bool = True,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.session: GallerySession = session
        self.cache: PixmapCache = cache
        self.alt_prefix: str = alt_prefix
        self.counter_separator: str = counter_separator
        self.show_counter: bool = show_counter
        self._pixmap: Optional[QPixmap] = None
        self._last_pointer_x: float = 0.0

        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setMinimumHeight(SLIDE_MIN_HEIGHT)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING_SM)

        self.counter_label = QLabel("")
        self.counter_label.setObjectName("slideCounter")
        layout.addWidget(self.counter_label, 0, Qt.AlignmentFlag.AlignLeft)

        image_row = QHBoxLayout()
        image_row.setSpacing(SPACING_MD)

        self.btn_previous = QPushButton("‹")
        self.btn_previous.setObjectName("navButton")
        self.btn_previous.setAccessibleName("Previous image")
        self.btn_previous.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        _ = self.btn_previous.clicked.connect(self.session.previous)
        image_row.addWidget(self.btn_previous)

        self.image_label = QLabel("")
        self.image_label.setObjectName("slideImage")
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.image_label.setMinimumSize(1, 1)
        # Mouse input belongs to the slide view, not the label
        self.image_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        image_row.addWidget(self.image_label, 1)

        self.btn_next = QPushButton("›")
        self.btn_next.setObjectName("navButton")
        self.btn_next.setAccessibleName("Next image")
        self.btn_next.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        _ = self.btn_next.clicked.connect(self.session.next)
        image_row.addWidget(self.btn_next)

        layout.addLayout(image_row, 1)

        self.caption_label = QLabel("")
        self.caption_label.setObjectName("slideCaption")
        self.caption_label.setWordWrap(True)
        self.caption_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.caption_label)

        _ = self.session.index_changed.connect(self.refresh)
        _ = self.session.images_changed.connect(self.refresh)
        _ = self.session.open_changed.connect(self.refresh)
        self.refresh()

    def refresh(self, *_args: object) -> None:
        record = self.session.current_image
        navigable = self.session.can_navigate

        self.btn_previous.setVisible(navigable)
        self.btn_next.setVisible(navigable)
        self.counter_label.setVisible(self.show_counter and navigable)
        self.counter_label.setText(self.session.position_label(self.counter_separator))

        if record is None:
            self._pixmap = None
            self.image_label.clear()
            self.image_label.setText(EMPTY_TEXT)
            self.image_label.setAccessibleName(EMPTY_TEXT)
            self.caption_label.setVisible(False)
            return

        self._pixmap = self.cache.full(record)
        self.image_label.setAccessibleName(alt_text_for(record, self.session.current_index, self.alt_prefix))
        self.caption_label.setText(record.caption or "")
        self.caption_label.setVisible(bool(record.caption))
        self._update_scaled_pixmap()
        self.session.set_loading(False)

    def _update_scaled_pixmap(self) -> None:
        if self._pixmap is None or self._pixmap.isNull():
            return
        scaled = self._pixmap.scaled(
            self.image_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.image_label.setPixmap(scaled)

    @override
    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._update_scaled_pixmap()

    # ----------------------------- Mouse -----------------------------

    @override
    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._last_pointer_x = pos.x()
            self.session.pointer_down(pos.x(), pos.y())
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    @override
    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self.session.gesture_state.active:
            pos = event.position()
            self._last_pointer_x = pos.x()
            self.session.pointer_move(pos.x(), pos.y())
            event.accept()
            return
        super().mouseMoveEvent(event)

    @override
    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.session.gesture_state.active:
            _ = self.session.pointer_up(event.position().x())
            self.setCursor(Qt.CursorShape.OpenHandCursor)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    @override
    def leaveEvent(self, event: QEvent) -> None:
        if self.session.gesture_state.active:
            _ = self.session.pointer_up(self._last_pointer_x)
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        super().leaveEvent(event)

    # ----------------------------- Touch -----------------------------

    @staticmethod
    def _first_touch_point(event: QTouchEvent) -> Optional[QPointF]:
        points = event.points()
        if not points:
            return None
        return points[0].position()

    @override
    def event(self, event: QEvent) -> bool:
        event_type = event.type()
        if event_type == QEvent.Type.TouchCancel:
            self.session.pointer_cancel()
            event.accept()
            return True

        if isinstance(event, QTouchEvent) and event_type in (
            QEvent.Type.TouchBegin,
            QEvent.Type.TouchUpdate,
            QEvent.Type.TouchEnd,
        ):
            point = self._first_touch_point(event)
            if point is not None:
                if event_type == QEvent.Type.TouchBegin:
                    self.session.pointer_down(point.x(), point.y())
                elif event_type == QEvent.Type.TouchUpdate:
                    self.session.pointer_move(point.x(), point.y())
                else:
                    _ = self.session.pointer_up(point.x())
            event.accept()
            return True

        return super().event(event)
