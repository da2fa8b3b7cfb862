"""Spectrum viewer with zoom, pan, and file drop."""

import numpy as np
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsOpacityEffect
from PySide6.QtGui import (
    QPixmap, QImage, QColor, QWheelEvent, QDragEnterEvent, QDropEvent,
    QDragMoveEvent, QPainter, QFont
)
from PySide6.QtCore import Qt, Signal, QRectF, QPropertyAnimation, QEasingCurve

IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.tif', '.tiff', '.webp')


class SpectrumView(QGraphicsView):
    """QGraphicsView showing a grayscale spectrum; accepts dropped image files."""
    
    imageDropped = Signal(str)
    
    def __init__(self, parent=None):
        super().__init__(parent)
        
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        
        self._pixmap_item = None
        self._image_array = None
        
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setBackgroundBrush(QColor(40, 40, 40))
        self.setMinimumSize(200, 200)
        
        self.setAcceptDrops(True)
        self.viewport().setAcceptDrops(True)
        
        self._zoom_factor = 1.0
        self._min_zoom = 0.1
        self._max_zoom = 40.0
        
        self._opacity_effect = QGraphicsOpacityEffect(self)
        self._opacity_effect.setOpacity(1.0)
        self.setGraphicsEffect(self._opacity_effect)
        
        self._show_placeholder()
    
    def set_spectrum(self, image: np.ndarray, animate: bool = True):
        """Display a (height, width) uint8 array."""
        self._image_array = np.ascontiguousarray(image)
        h, w = self._image_array.shape
        qimage = QImage(self._image_array.data, w, h, w, QImage.Format.Format_Grayscale8)
        pixmap = QPixmap.fromImage(qimage)
        
        self._scene.clear()
        self._pixmap_item = self._scene.addPixmap(pixmap)
        
        self.setSceneRect(QRectF(pixmap.rect()))
        self.reset_view()
        
        if animate:
            self._fade_in()
    
    def _fade_in(self):
        self._opacity_effect.setOpacity(0.0)
        anim = QPropertyAnimation(self._opacity_effect, b"opacity", self)
        anim.setDuration(200)
        anim.setStartValue(0.0)
        anim.setEndValue(1.0)
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        anim.start(QPropertyAnimation.DeletionPolicy.DeleteWhenStopped)
    
    def _show_placeholder(self):
        self._scene.clear()
        self._pixmap_item = None
        self.setSceneRect(QRectF(-100, -100, 200, 200))
        self.resetTransform()
        self._zoom_factor = 1.0
        self.viewport().update()
    
    def paintEvent(self, event):
        super().paintEvent(event)
        
        if self._pixmap_item is None:
            painter = QPainter(self.viewport())
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            rect = self.viewport().rect()
            cx, cy = rect.width() // 2, rect.height() // 2
            
            painter.setFont(QFont("Segoe UI", 11))
            painter.setPen(QColor(100, 100, 100))
            text = "Drop an image here"
            tw = painter.fontMetrics().horizontalAdvance(text)
            painter.drawText(cx - tw // 2, cy - 5, text)
            
            painter.setFont(QFont("Segoe UI", 9))
            painter.setPen(QColor(80, 80, 80))
            text2 = "Ctrl+O • Demo menu"
            tw2 = painter.fontMetrics().horizontalAdvance(text2)
            painter.drawText(cx - tw2 // 2, cy + 18, text2)
            painter.end()
    
    def reset_view(self):
        if self._pixmap_item:
            self.fitInView(self._pixmap_item, Qt.AspectRatioMode.KeepAspectRatio)
            self._zoom_factor = self.transform().m11()
    
    def wheelEvent(self, event: QWheelEvent):
        if self._image_array is None:
            event.ignore()
            return
        
        factor = 1.15 if event.angleDelta().y() > 0 else 1 / 1.15
        new_zoom = self._zoom_factor * factor
        
        if self._min_zoom <= new_zoom <= self._max_zoom:
            self._zoom_factor = new_zoom
            self.scale(factor, factor)
        event.accept()
    
    def _dropped_path(self, mime_data) -> str | None:
        if mime_data.hasUrls():
            urls = mime_data.urls()
            if urls:
                path = urls[0].toLocalFile()
                if path.lower().endswith(IMAGE_EXTENSIONS):
                    return path
        return None
    
    def dragEnterEvent(self, event: QDragEnterEvent):
        if self._dropped_path(event.mimeData()):
            event.setDropAction(Qt.DropAction.CopyAction)
            event.accept()
        else:
            event.ignore()
    
    def dragMoveEvent(self, event: QDragMoveEvent):
        if self._dropped_path(event.mimeData()):
            event.setDropAction(Qt.DropAction.CopyAction)
            event.accept()
        else:
            event.ignore()
    
    def dropEvent(self, event: QDropEvent):
        path = self._dropped_path(event.mimeData())
        if path:
            self.imageDropped.emit(path)
            event.setDropAction(Qt.DropAction.CopyAction)
            event.accept()
        else:
            event.ignore()
