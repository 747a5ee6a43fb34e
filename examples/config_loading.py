"""config_loading.py"""
from pathlib import Path

from stampede.config import loader

herd = loader(Path(__file__).parent / "herd.yaml")

if __name__ == "__main__":
    herd.run()
