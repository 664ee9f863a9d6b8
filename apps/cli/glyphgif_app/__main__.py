from __future__ import annotations

try:
    # Normal package import path.
    from .cli import main
except ImportError:
    # Script/frozen entrypoint path.
    from glyphgif_app.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
