"""Main application window."""

from pathlib import Path

import numpy as np
from PySide6.QtWidgets import QMainWindow, QStatusBar, QFileDialog, QMessageBox
from PySide6.QtCore import QThread
from PySide6.QtGui import QAction

from gui.widgets.spectrum_view import SpectrumView
from gui.run_queue import RunQueue
from gui.worker import SpectrumWorker
from models.spectrum_params import SpectrumParams
from models.spectrum_result import SpectrumResult
from utils.image_io import load_image, save_spectrum, to_uint8
from utils.test_images import generate_demo_image, DEMO_IMAGES

APP_VERSION = "1.0"
APP_NAME = "FFT Spectrum Studio"


class MainWindow(QMainWindow):
    """
    Single-view window: drop or open an image, see its centered magnitude
    spectrum.
    
    One pipeline run at a time. An image arriving during a run is held and
    processed once the run finishes (newest wins). A failed run leaves the
    current spectrum on screen.
    """
    
    def __init__(self):
        super().__init__()
        
        self.setWindowTitle(f"{APP_NAME}: Image Frequency Spectrum")
        self.setMinimumSize(900, 700)
        
        self._image = None
        self._source_label = "No file currently loaded..."
        self._result = None
        self._queue = RunQueue()
        self._thread = None
        self._worker = None
        
        self._init_ui()
        self._init_menu()
        self._init_statusbar()
        self._apply_dark_theme()
    
    def _init_ui(self):
        self._view = SpectrumView()
        self._view.imageDropped.connect(self._on_image_dropped)
        self.setCentralWidget(self._view)
    
    def _init_menu(self):
        menubar = self.menuBar()
        
        # File menu
        file_menu = menubar.addMenu("&File")
        
        open_action = QAction("&Open Image", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_image)
        file_menu.addAction(open_action)
        
        self._save_action = QAction("&Save Spectrum", self)
        self._save_action.setShortcut("Ctrl+S")
        self._save_action.setEnabled(False)
        self._save_action.triggered.connect(self._on_save_spectrum)
        file_menu.addAction(self._save_action)
        
        file_menu.addSeparator()
        
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)
        
        # Demo menu
        demo_menu = menubar.addMenu("&Demo")
        for label, key in DEMO_IMAGES:
            action = QAction(label, self)
            action.triggered.connect(lambda checked, k=key: self._load_demo_image(k))
            demo_menu.addAction(action)
        
        # View menu
        view_menu = menubar.addMenu("&View")
        
        self._log_action = QAction("&Log Magnitude", self)
        self._log_action.setCheckable(True)
        self._log_action.setShortcut("Ctrl+L")
        self._log_action.toggled.connect(self._on_params_changed)
        view_menu.addAction(self._log_action)
        
        self._center_action = QAction("&Center DC", self)
        self._center_action.setCheckable(True)
        self._center_action.setChecked(True)
        self._center_action.toggled.connect(self._on_params_changed)
        view_menu.addAction(self._center_action)
        
        fit_action = QAction("&Fit to Window", self)
        fit_action.setShortcut("Ctrl+0")
        fit_action.triggered.connect(self._view.reset_view)
        view_menu.addAction(fit_action)
    
    def _init_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage(self._source_label)
    
    def _get_params(self) -> SpectrumParams:
        return SpectrumParams(
            log_scale=self._log_action.isChecked(),
            center=self._center_action.isChecked(),
        )
    
    def _on_open_image(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.tif *.tiff *.webp);;All Files (*)"
        )
        if file_path:
            self._load_path(file_path)
    
    def _on_image_dropped(self, path: str):
        self._load_path(path)
    
    def _load_path(self, path: str):
        try:
            image = load_image(path)
        except Exception as e:
            QMessageBox.critical(self, "Error", f"Failed to load image:\n{e}")
            self._statusbar.showMessage(f"Load failed: {Path(path).name}")
            return
        self._submit(image, str(path))
    
    def _load_demo_image(self, key: str):
        demo_image = generate_demo_image(key)
        if demo_image is None:
            QMessageBox.warning(self, "Demo Error", f"Could not load demo image: {key}")
            return
        self._submit(demo_image, f"Demo: {key}")
    
    def _on_params_changed(self, _checked: bool):
        shown = (self._image, self._source_label) if self._image is not None else None
        request = self._queue.latest(shown)
        if request is not None:
            self._submit(*request)
    
    def _submit(self, image: np.ndarray, label: str):
        if self._queue.submit((image, label)):
            self._start(image, label)
        else:
            self._statusbar.showMessage(f"Queued: {label}")
    
    def _start(self, image: np.ndarray, label: str):
        self._thread = QThread()
        self._worker = SpectrumWorker(image, self._get_params())
        self._worker.moveToThread(self._thread)
        
        self._thread.started.connect(self._worker.run)
        self._worker.progress.connect(self._statusbar.showMessage)
        self._worker.finished.connect(self._on_spectrum_finished)
        self._worker.error.connect(self._on_spectrum_error)
        self._worker.finished.connect(self._thread.quit)
        self._worker.error.connect(self._thread.quit)
        self._thread.finished.connect(self._cleanup_thread)
        
        self._thread.start()
    
    def _on_spectrum_finished(self, result: SpectrumResult):
        image, label = self._queue.running
        self._image = image
        self._source_label = label
        self._result = result
        
        self._view.set_spectrum(to_uint8(result.spectrum))
        self._save_action.setEnabled(True)
        
        note = " (flat spectrum)" if result.degenerate else ""
        self._statusbar.showMessage(
            f"{label}  |  {result.width}×{result.height}  |  "
            f"{result.total_time_ms:.1f} ms{note}"
        )
    
    def _on_spectrum_error(self, message: str):
        _, label = self._queue.running
        QMessageBox.critical(self, "Error", f"Could not compute spectrum for {label}:\n{message}")
        self._statusbar.showMessage(f"Failed: {label}  |  showing {self._source_label}")
    
    def _cleanup_thread(self):
        if self._worker is not None:
            self._worker.deleteLater()
            self._worker = None
        if self._thread is not None:
            self._thread.deleteLater()
            self._thread = None
        
        request = self._queue.finish()
        if request is not None:
            self._start(*request)
    
    def _on_save_spectrum(self):
        if self._result is None:
            return
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Spectrum", "spectrum.png", "PNG (*.png);;All Files (*)"
        )
        if not file_path:
            return
        try:
            save_spectrum(self._result.spectrum, file_path)
            self._statusbar.showMessage(f"Saved: {file_path}")
        except Exception as e:
            QMessageBox.critical(self, "Error", f"Failed to save spectrum:\n{e}")
    
    def _apply_dark_theme(self):
        self.setStyleSheet("""
            QMainWindow { background: #2b2b2b; }
            QMenuBar { background: #323232; color: #e0e0e0; }
            QMenuBar::item:selected { background: #444; }
            QMenu { background: #323232; color: #e0e0e0; border: 1px solid #444; }
            QMenu::item:selected { background: #3d5a80; }
            QStatusBar { background: #252525; color: #bbb; }
        """)
