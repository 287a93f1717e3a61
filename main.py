from __future__ import annotations
import sys
from pathlib import Path
BASE_DIR = Path(__file__).parent.resolve()
sys.path.insert(0, str(BASE_DIR))
from pivotpath.cli import main

if __name__ == "__main__":
    sys.exit(main())
