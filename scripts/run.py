# scripts/run.py
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from o365sub.cli import run

if __name__ == "__main__":
    run()
