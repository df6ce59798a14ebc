import sys
from pathlib import Path

# Add repo root so "import truckorder...." works without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
