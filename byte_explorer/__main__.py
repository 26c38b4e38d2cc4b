"""
Entry point for Byte Explorer.

Usage:
    python -m byte_explorer [capture.hex] [--example] [--threshold R]
    python -m byte_explorer capture.hex --summary
"""

import argparse
import importlib.util
import os
import sys
import traceback
from pathlib import Path

from . import APP_NAME, APP_VERSION
from .constants import DEFAULT_CORRELATION_THRESHOLD

_GUI_PACKAGES = ("PySide6", "matplotlib", "numpy")


def _threshold(text: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"threshold must be in [0, 1], got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="byte-explorer",
        description="Find structure in fixed-width binary protocol captures.",
    )
    parser.add_argument('capture', nargs='?', type=Path,
                        help='Text file with one hex record per line')
    parser.add_argument('--example', action='store_true',
                        help='Start with the synthetic example capture loaded')
    parser.add_argument('--threshold', type=_threshold,
                        default=DEFAULT_CORRELATION_THRESHOLD,
                        help='|r| above which a byte pair is significant '
                             f'(default: {DEFAULT_CORRELATION_THRESHOLD})')
    parser.add_argument('--summary', action='store_true',
                        help='Print per-byte statistics and exit without the GUI')
    parser.add_argument('--version', action='version',
                        version=f'{APP_NAME} {APP_VERSION}')
    return parser


def print_summary(text: str, threshold: float, out=None) -> None:
    """Decode *text*, select every byte, and print the analysis."""
    from .data_model import ColumnRef
    from .session import AnalysisSession

    out = out if out is not None else sys.stdout

    session = AnalysisSession(correlation_threshold=threshold)
    for idx in range(session.decode(text).width):
        session.select_byte(idx)
    snap = session.snapshot

    print(f"{snap.matrix.n_records} records x {snap.width} bytes", file=out)
    for idx in snap.selected_bytes:
        st = snap.byte_stats[idx]
        bits = snap.entropy.per_column[ColumnRef.byte(idx)]
        flag = "  constant" if st.is_constant else ""
        print(f"Byte {idx:3d}  {st.range_text:>9}  mean {st.mean:7.2f}  "
              f"std {st.std_dev:7.2f}  H {bits:.3f} bits{flag}", file=out)
    if snap.entropy.joint_entropy is not None:
        print(f"Joint entropy: {snap.entropy.joint_entropy:.3f} bits", file=out)
    for edge in snap.significant_correlations:
        print(edge, file=out)


def _exception_hook(exc_type, exc_value, exc_tb):
    """Print unhandled exceptions and show them in a dialog."""
    msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    print(f"Unhandled exception:\n{msg}", file=sys.stderr)

    from PySide6.QtWidgets import QApplication, QMessageBox
    if QApplication.instance() is not None:
        QMessageBox.critical(None, "Unhandled Error", f"{exc_type.__name__}: {exc_value}")


def _run_gui(args, text):
    missing = [name for name in _GUI_PACKAGES if importlib.util.find_spec(name) is None]
    if missing:
        print(f"Missing required packages: {', '.join(missing)}\n"
              f"Install with: pip install {' '.join(missing)}", file=sys.stderr)
        return 1

    sys.excepthook = _exception_hook
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use('QtAgg')

    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QFont

    from .constants import FONT_FAMILIES
    from .theme import get_dark_stylesheet
    from .gui_main import ExplorerMainWindow

    app = QApplication(sys.argv[:1])
    app.setStyle("Fusion")
    font = QFont()
    font.setFamilies(FONT_FAMILIES)
    font.setPointSize(10)
    app.setFont(font)
    app.setStyleSheet(get_dark_stylesheet())

    window = ExplorerMainWindow(correlation_threshold=args.threshold)
    window.show()
    if text is not None:
        window.load_text(text)
    return app.exec()


def main(argv=None) -> int:
    """Launch Byte Explorer, or print a text summary with ``--summary``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    text = None
    if args.capture is not None:
        try:
            text = args.capture.read_text()
        except OSError as exc:
            parser.error(f"cannot read {args.capture}: {exc.strerror}")

    if args.example and text is None:
        from .example_data import generate_example_text
        text = generate_example_text()

    if args.summary:
        if text is None:
            parser.error("--summary needs a capture file or --example")
        from .errors import ByteExplorerError
        try:
            print_summary(text, args.threshold)
        except ByteExplorerError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    return _run_gui(args, text)


if __name__ == "__main__":
    sys.exit(main())
