from __future__ import annotations

from pillarcandy.gui import main

if __name__ == "__main__":
    raise SystemExit(main())
