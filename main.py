"""
FFT Spectrum Studio
Centered magnitude spectrum of an image's luminance
"""

import logging
import os
import sys


def setup_logging():
    level = os.environ.get("SPECTRUM_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_gui():
    """Launch the GUI application."""
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt
    from gui.main_window import MainWindow, APP_NAME, APP_VERSION
    
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setStyle("Fusion")
    
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


def run_cli():
    """Compute a spectrum from the command line and save it as PNG."""
    from models.spectrum_params import SpectrumParams
    from engines.pipeline import compute_spectrum
    from utils.test_images import generate_demo_image, DEMO_IMAGES
    from utils.image_io import load_image, save_spectrum
    
    args = sys.argv[2:]
    
    if not args or args[0] == '--help':
        print("Usage: python main.py --cli <image_path> [output.png] [--log]")
        print("       python main.py --cli --synthetic <key> [output.png] [--log]")
        print("Synthetic keys: " + ", ".join(key for _, key in DEMO_IMAGES))
        sys.exit(0)
    
    log_scale = '--log' in args
    args = [a for a in args if a != '--log']
    
    try:
        if args[0] == '--synthetic':
            key = args[1] if len(args) > 1 else 'checkerboard'
            image = generate_demo_image(key)
            if image is None:
                raise ValueError(f"Unknown synthetic image: {key}")
            print(f"Generating test image: {key}")
            output = args[2] if len(args) > 2 else "spectrum.png"
        else:
            print(f"Loading: {args[0]}")
            image = load_image(args[0])
            output = args[1] if len(args) > 1 else "spectrum.png"
        
        print(f"Image: {image.shape[1]}x{image.shape[0]}, {image.shape[2]} channels")
        result = compute_spectrum(image, SpectrumParams(log_scale=log_scale))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    print("\n=== Spectrum ===")
    print(f"Mean luminance: {result.mean:.4f}")
    print(f"Magnitude:      {result.magnitude_min:.4g} .. {result.magnitude_max:.4g}")
    if result.degenerate:
        print("Flat spectrum: output is all zeros")
    for stage, ms in result.stage_times_ms.items():
        print(f"{stage:<15} {ms:.2f} ms")
    print(f"{'total':<15} {result.total_time_ms:.2f} ms")
    
    save_spectrum(result.spectrum, output)
    print(f"\nSaved: {output}")


def main():
    setup_logging()
    if len(sys.argv) > 1 and sys.argv[1] == '--cli':
        run_cli()
    else:
        run_gui()


if __name__ == '__main__':
    main()
